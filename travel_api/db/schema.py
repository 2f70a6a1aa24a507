# travel_api/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    DateTime, ForeignKey, CheckConstraint, PrimaryKeyConstraint,
)

metadata = MetaData()

client = Table(
    "Client",
    metadata,
    Column("IdClient", Integer, primary_key=True, autoincrement=True),
    Column("FirstName", String(120), nullable=False),
    Column("LastName", String(120), nullable=False),
    Column("Email", String(120), nullable=False),
    Column("Telephone", String(120), nullable=False),
    Column("Pesel", String(11), nullable=False),
)

trip = Table(
    "Trip",
    metadata,
    Column("IdTrip", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(120), nullable=False),
    Column("Description", String(220), nullable=False),
    Column("DateFrom", DateTime, nullable=False),
    Column("DateTo", DateTime, nullable=False),
    Column("MaxPeople", Integer, nullable=False),
    CheckConstraint("MaxPeople >= 0", name="ck_trip_max_people_nonneg"),
)

country = Table(
    "Country",
    metadata,
    Column("IdCountry", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(120), nullable=False, unique=True),
)

country_trip = Table(
    "Country_Trip",
    metadata,
    Column("IdCountry", Integer, ForeignKey("Country.IdCountry"), nullable=False),
    Column("IdTrip", Integer, ForeignKey("Trip.IdTrip"), nullable=False),
    PrimaryKeyConstraint("IdCountry", "IdTrip", name="pk_country_trip"),
)

client_trip = Table(
    "Client_Trip",
    metadata,
    Column("IdClient", Integer, ForeignKey("Client.IdClient"), nullable=False),
    Column("IdTrip", Integer, ForeignKey("Trip.IdTrip"), nullable=False),
    Column("RegisteredAt", Integer, nullable=False),
    Column("PaymentDate", Integer, nullable=True),
    # one registration per (client, trip)
    PrimaryKeyConstraint("IdClient", "IdTrip", name="pk_client_trip"),
)
