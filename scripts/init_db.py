# scripts/init_db.py
"""
Drop and recreate the Client, Trip, Country, Country_Trip and Client_Trip tables.

Usage:
    python -m scripts.init_db
"""

import logging

from travel_api.db.engine import get_engine
from travel_api.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    logger.info("Recreating schema on %s", engine.url.render_as_string(hide_password=True))

    metadata.drop_all(engine)
    metadata.create_all(engine)

    logger.info("Created tables: %s", ", ".join(t.name for t in metadata.sorted_tables))


if __name__ == "__main__":
    main()
