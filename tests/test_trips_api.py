"""Tests for the trip listing endpoints."""

from travel_api.db.schema import client_trip, country, country_trip, trip


class TestListTrips:
    """GET /api/trips"""

    def test_returns_all_trips_with_country(self, api):
        resp = api.get("/api/trips")

        assert resp.status_code == 200
        body = resp.json()
        assert [t["idTrip"] for t in body] == [1, 2, 3]
        berlin = body[2]
        assert berlin == {
            "idTrip": 3,
            "name": "Berlin",
            "description": "Museums and the old wall",
            "dateFrom": "2026-07-03T00:00:00",
            "dateTo": "2026-07-10T00:00:00",
            "maxPeople": 10,
            "countryName": "Germany",
        }

    def test_empty_store_returns_empty_list(self, api, db_engine):
        with db_engine.begin() as conn:
            conn.execute(client_trip.delete())
            conn.execute(country_trip.delete())
            conn.execute(trip.delete())
            conn.execute(country.delete())

        resp = api.get("/api/trips")

        assert resp.status_code == 200
        assert resp.json() == []


class TestListClientTrips:
    """GET /api/clients/{id}/trips"""

    def test_returns_registrations_with_dates(self, api):
        resp = api.get("/api/clients/1/trips")

        assert resp.status_code == 200
        body = resp.json()
        assert [t["idTrip"] for t in body] == [1, 3]
        rome, berlin = body
        assert rome["countryName"] == "Italy"
        assert rome["registeredAt"] == 20260102
        assert rome["paymentDate"] == 20260110
        assert berlin["registeredAt"] == 20260101
        assert berlin["paymentDate"] is None

    def test_client_without_registrations_is_not_found(self, api):
        resp = api.get("/api/clients/12/trips")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "CLIENT_TRIPS_NOT_FOUND"

    def test_unknown_client_is_not_found(self, api):
        resp = api.get("/api/clients/999/trips")

        assert resp.status_code == 404
        assert "999" in resp.json()["error"]["message"]

    def test_non_integer_id_is_rejected(self, api):
        resp = api.get("/api/clients/abc/trips")

        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
