"""Database engine singleton and table creation."""
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine

from gdp.config import settings


def _make_engine(url: str):
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        # FastAPI serves sync endpoints from a threadpool
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine(settings.DATABASE_URL)


def init_db() -> None:
    """Create all tables registered on the SQLModel metadata."""
    import gdp.models  # noqa: F401
    SQLModel.metadata.create_all(engine)
