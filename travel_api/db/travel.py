# travel_api/db/travel.py
"""
Queries behind the trips and clients endpoints.

Every function takes a connection from the shared engine for the duration of
the call only. Multi-step writes run inside a single transaction.
"""

import enum
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError

from travel_api.db.engine import get_engine
from travel_api.db.schema import client, client_trip, country, country_trip, trip
from travel_api.models.clients import ClientCreate
from travel_api.models.trips import ClientTripOut, TripOut

logger = logging.getLogger(__name__)


class RegistrationOutcome(enum.Enum):
    SUCCESS = "success"
    CLIENT_NOT_FOUND = "client_not_found"
    TRIP_NOT_FOUND = "trip_not_found"
    CAPACITY_REACHED = "capacity_reached"
    ALREADY_REGISTERED = "already_registered"


class UnregistrationOutcome(enum.Enum):
    SUCCESS = "success"
    REGISTRATION_NOT_FOUND = "registration_not_found"


def registration_stamp(today: Optional[date] = None) -> int:
    """Local date as an 8-digit YYYYMMDD integer."""
    if today is None:
        today = date.today()
    return int(today.strftime("%Y%m%d"))


_trip_countries = trip.join(
    country_trip, trip.c.IdTrip == country_trip.c.IdTrip
).join(
    country, country_trip.c.IdCountry == country.c.IdCountry
)

_trip_columns = (
    trip.c.IdTrip.label("id_trip"),
    trip.c.Name.label("name"),
    trip.c.Description.label("description"),
    trip.c.DateFrom.label("date_from"),
    trip.c.DateTo.label("date_to"),
    trip.c.MaxPeople.label("max_people"),
    country.c.Name.label("country_name"),
)


def list_trips() -> List[TripOut]:
    engine = get_engine()

    with engine.connect() as conn:
        stmt = (
            select(*_trip_columns)
            .select_from(_trip_countries)
            .order_by(trip.c.IdTrip)
        )
        rows = conn.execute(stmt).mappings().all()

    return [TripOut.model_validate(dict(row)) for row in rows]


def list_client_trips(client_id: int) -> List[ClientTripOut]:
    engine = get_engine()

    with engine.connect() as conn:
        stmt = (
            select(
                *_trip_columns,
                client_trip.c.RegisteredAt.label("registered_at"),
                client_trip.c.PaymentDate.label("payment_date"),
            )
            .select_from(
                client_trip
                .join(trip, client_trip.c.IdTrip == trip.c.IdTrip)
                .join(country_trip, trip.c.IdTrip == country_trip.c.IdTrip)
                .join(country, country_trip.c.IdCountry == country.c.IdCountry)
            )
            .where(client_trip.c.IdClient == client_id)
            .order_by(trip.c.IdTrip)
        )
        rows = conn.execute(stmt).mappings().all()

    return [ClientTripOut.model_validate(dict(row)) for row in rows]


def create_client(payload: ClientCreate) -> int:
    """
    Insert a client and return its generated id.
    """
    engine = get_engine()

    with engine.begin() as conn:
        result = conn.execute(
            client.insert().values(
                FirstName=payload.first_name,
                LastName=payload.last_name,
                Email=payload.email,
                Telephone=payload.telephone,
                Pesel=payload.pesel,
            )
        )
        new_id = result.inserted_primary_key[0]

    logger.info("Created client %s", new_id)
    return new_id


def _count(conn, table, *conditions) -> int:
    stmt = select(func.count()).select_from(table).where(and_(*conditions))
    return conn.execute(stmt).scalar_one()


def register_client_for_trip(
    client_id: int,
    trip_id: int,
    today: Optional[date] = None,
) -> RegistrationOutcome:
    """
    Register a client for a trip.

    Checks run in order: client exists, trip exists, trip has a free place,
    client not yet registered. The first failing check decides the outcome.
    All checks and the insert share one transaction. The trip row is read
    FOR UPDATE on backends with row locks; on SQLite the transaction opens
    with BEGIN IMMEDIATE (see db/engine.py). Either way concurrent
    registrations for the last place cannot both succeed.
    """
    engine = get_engine()

    try:
        with engine.begin() as conn:
            if _count(conn, client, client.c.IdClient == client_id) == 0:
                return RegistrationOutcome.CLIENT_NOT_FOUND

            max_people = conn.execute(
                select(trip.c.MaxPeople)
                .where(trip.c.IdTrip == trip_id)
                .with_for_update()
            ).scalar_one_or_none()
            if max_people is None:
                return RegistrationOutcome.TRIP_NOT_FOUND

            current = _count(conn, client_trip, client_trip.c.IdTrip == trip_id)
            if current >= max_people:
                logger.info(
                    "Trip %s is full (%s/%s); client %s rejected",
                    trip_id, current, max_people, client_id,
                )
                return RegistrationOutcome.CAPACITY_REACHED

            already = _count(
                conn,
                client_trip,
                client_trip.c.IdClient == client_id,
                client_trip.c.IdTrip == trip_id,
            )
            if already > 0:
                return RegistrationOutcome.ALREADY_REGISTERED

            conn.execute(
                client_trip.insert().values(
                    IdClient=client_id,
                    IdTrip=trip_id,
                    RegisteredAt=registration_stamp(today),
                    PaymentDate=None,
                )
            )
    except IntegrityError:
        # a concurrent request inserted the same pair first
        logger.warning(
            "Duplicate registration of client %s for trip %s rejected by the database",
            client_id, trip_id,
        )
        return RegistrationOutcome.ALREADY_REGISTERED

    logger.info("Registered client %s for trip %s", client_id, trip_id)
    return RegistrationOutcome.SUCCESS


def unregister_client_from_trip(client_id: int, trip_id: int) -> UnregistrationOutcome:
    """
    Remove a client's registration for a trip.
    """
    engine = get_engine()
    key = and_(
        client_trip.c.IdClient == client_id,
        client_trip.c.IdTrip == trip_id,
    )

    with engine.begin() as conn:
        if _count(conn, client_trip, key) == 0:
            return UnregistrationOutcome.REGISTRATION_NOT_FOUND

        conn.execute(client_trip.delete().where(key))

    logger.info("Unregistered client %s from trip %s", client_id, trip_id)
    return UnregistrationOutcome.SUCCESS


def ping() -> None:
    """Round trip to the database; raises if it is unreachable."""
    engine = get_engine()
    with engine.connect() as conn:
        conn.execute(select(1)).scalar_one()
