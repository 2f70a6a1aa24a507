# scripts/ingest.py
"""
Load trips and their countries from a CSV file into the database.

Usage:
    python -m scripts.ingest [path/to/trips.csv]
"""

import csv
import logging
import sys
from datetime import datetime

from sqlalchemy import select

from travel_api.db.engine import get_engine
from travel_api.db.schema import country, country_trip, trip

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = "data/trips.csv"


# ---- Helpers ----

def parse_trip_date(value: str) -> datetime:
    value = value.strip()
    if not value:
        raise ValueError("missing date")
    return datetime.strptime(value, "%Y-%m-%d")


def parse_max_people(value: str) -> int:
    n = int(value.strip())
    if n < 0:
        raise ValueError(f"MaxPeople must be >= 0, got {n}")
    return n


def parse_trips_csv(file_path: str = FILE_PATH):
    """
    Returns (trips_list, stats). Rows that fail to parse are counted and a few
    are kept as examples; they never abort the run.
    """
    trips_list = []
    n_rows = 0
    n_errors = 0
    error_examples = []

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                date_from = parse_trip_date(row["DateFrom"])
                date_to = parse_trip_date(row["DateTo"])
                if date_to < date_from:
                    raise ValueError("DateTo is before DateFrom")

                trips_list.append(
                    {
                        "name": row["Name"].strip(),
                        "description": row["Description"].strip(),
                        "date_from": date_from,
                        "date_to": date_to,
                        "max_people": parse_max_people(row["MaxPeople"]),
                        "country": row["Country"].strip(),
                    }
                )
            except (KeyError, ValueError, AttributeError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {"row_number": n_rows, "row": dict(row), "error": repr(e)}
                    )

    stats = {
        "n_rows": n_rows,
        "n_trips": len(trips_list),
        "n_countries": len({t["country"] for t in trips_list}),
        "n_errors": n_errors,
        "error_examples": error_examples,
    }
    return trips_list, stats


def _get_or_create_country(conn, name: str) -> int:
    existing = conn.execute(
        select(country.c.IdCountry).where(country.c.Name == name)
    ).scalar_one_or_none()
    if existing is not None:
        return existing
    return conn.execute(country.insert().values(Name=name)).inserted_primary_key[0]


def upsert_trip(conn, trip_row: dict) -> int:
    """
    Insert or update a trip by Name and link it to its country.
    """
    country_id = _get_or_create_country(conn, trip_row["country"])
    values = {
        "Name": trip_row["name"],
        "Description": trip_row["description"],
        "DateFrom": trip_row["date_from"],
        "DateTo": trip_row["date_to"],
        "MaxPeople": trip_row["max_people"],
    }

    trip_id = conn.execute(
        select(trip.c.IdTrip).where(trip.c.Name == trip_row["name"])
    ).scalar_one_or_none()

    if trip_id is None:
        trip_id = conn.execute(trip.insert().values(**values)).inserted_primary_key[0]
    else:
        conn.execute(trip.update().where(trip.c.IdTrip == trip_id).values(**values))

    # one country per trip
    conn.execute(country_trip.delete().where(country_trip.c.IdTrip == trip_id))
    conn.execute(country_trip.insert().values(IdCountry=country_id, IdTrip=trip_id))
    return trip_id


def load_into_db(trips_list) -> None:
    engine = get_engine()
    with engine.begin() as conn:
        for t in trips_list:
            upsert_trip(conn, t)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    file_path = argv[0] if argv else FILE_PATH

    trips_list, stats = parse_trips_csv(file_path)
    load_into_db(trips_list)

    logger.info("Total CSV rows read:   %s", stats["n_rows"])
    logger.info("Trips loaded:          %s", stats["n_trips"])
    logger.info("Countries referenced:  %s", stats["n_countries"])
    logger.info("Rows with errors:      %s", stats["n_errors"])

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
