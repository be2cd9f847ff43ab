"""Re-export the singleton engine from gdp.db and register SQLite pragmas."""
from sqlalchemy import event
from gdp.db import engine          # singleton; created once at gdp.db import
import gdp.models  # noqa: F401   # registers all ORM table mappers


def _set_sqlite_pragmas(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.execute("PRAGMA journal_mode=WAL")
    cur.close()


if engine.dialect.name == "sqlite":
    event.listen(engine, "connect", _set_sqlite_pragmas)

__all__ = ["engine"]
