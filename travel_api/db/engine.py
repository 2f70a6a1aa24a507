# travel_api/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from travel_api.config import get_settings


def _is_memory_sqlite(url) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


@lru_cache
def get_engine() -> Engine:
    """
    Return the process-wide engine. Connections come from a bounded pool and
    are handed back when the `with engine.connect()` / `engine.begin()` block exits.
    """
    settings = get_settings()
    url = make_url(settings.database_url)

    kwargs = {"future": True, "echo": settings.database_echo}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
    if not _is_memory_sqlite(url):
        kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
        )

    engine = create_engine(url, **kwargs)

    if url.get_backend_name() == "sqlite":
        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_conn, _record):
            # pysqlite must not open transactions on its own; see _begin_immediate
            dbapi_conn.isolation_level = None
            # SQLite leaves foreign keys off unless asked per connection
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine, "begin")
        def _begin_immediate(conn):
            # take the write lock up front so check-then-insert sequences serialize
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine
