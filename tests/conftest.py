"""Shared fixtures: a seeded SQLite database per test and an API client on top of it."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import and_, func, select

from travel_api.config import get_settings
from travel_api.db.engine import get_engine
from travel_api.db.schema import client, client_trip, country, country_trip, metadata, trip

# Trip 3 is one place short of full: clients 1-6 and 8-10 hold 9 of 10 places.
TRIP_3_REGISTERED = [1, 2, 3, 4, 5, 6, 8, 9, 10]


def _seed(engine):
    with engine.begin() as conn:
        conn.execute(
            country.insert(),
            [
                {"IdCountry": 1, "Name": "Italy"},
                {"IdCountry": 2, "Name": "France"},
                {"IdCountry": 3, "Name": "Germany"},
            ],
        )
        conn.execute(
            trip.insert(),
            [
                {
                    "IdTrip": 1, "Name": "Rome", "Description": "Lorem ipsum",
                    "DateFrom": datetime(2026, 5, 1), "DateTo": datetime(2026, 5, 8),
                    "MaxPeople": 20,
                },
                {
                    "IdTrip": 2, "Name": "Paris", "Description": "A week along the Seine",
                    "DateFrom": datetime(2026, 6, 10), "DateTo": datetime(2026, 6, 17),
                    "MaxPeople": 2,
                },
                {
                    "IdTrip": 3, "Name": "Berlin", "Description": "Museums and the old wall",
                    "DateFrom": datetime(2026, 7, 3), "DateTo": datetime(2026, 7, 10),
                    "MaxPeople": 10,
                },
            ],
        )
        conn.execute(
            country_trip.insert(),
            [
                {"IdCountry": 1, "IdTrip": 1},
                {"IdCountry": 2, "IdTrip": 2},
                {"IdCountry": 3, "IdTrip": 3},
            ],
        )
        conn.execute(
            client.insert(),
            [
                {
                    "IdClient": i,
                    "FirstName": f"First{i}",
                    "LastName": f"Last{i}",
                    "Email": f"client{i}@travelmail.pl",
                    "Telephone": "+48 600 100 200",
                    "Pesel": f"{90010100000 + i}",
                }
                for i in range(1, 13)
            ],
        )
        conn.execute(
            client_trip.insert(),
            [
                {"IdClient": cid, "IdTrip": 3, "RegisteredAt": 20260101, "PaymentDate": None}
                for cid in TRIP_3_REGISTERED
            ]
            + [{"IdClient": 1, "IdTrip": 1, "RegisteredAt": 20260102, "PaymentDate": 20260110}],
        )


@pytest.fixture
def db_engine(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the schema and seed data."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    get_settings.cache_clear()
    get_engine.cache_clear()

    engine = get_engine()
    metadata.create_all(engine)
    _seed(engine)

    yield engine

    engine.dispose()
    get_engine.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def api(db_engine):
    from travel_api import app

    with TestClient(app) as c:
        yield c


def registration_count(engine, trip_id=None, client_id=None) -> int:
    conditions = []
    if trip_id is not None:
        conditions.append(client_trip.c.IdTrip == trip_id)
    if client_id is not None:
        conditions.append(client_trip.c.IdClient == client_id)
    stmt = select(func.count()).select_from(client_trip)
    if conditions:
        stmt = stmt.where(and_(*conditions))
    with engine.connect() as conn:
        return conn.execute(stmt).scalar_one()
