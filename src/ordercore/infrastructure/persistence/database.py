"""Engine and session factory construction.

The session factory is the transactional handle handed to repositories:
every write runs inside ``session_factory.begin()``, which commits on
success and rolls back on any exception.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ordercore.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


def _is_sqlite_memory(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """Create an engine for *url*.

    In-memory SQLite gets a single shared connection, otherwise every
    new connection would see an empty database.
    """
    kwargs: dict = {}
    if _is_sqlite_memory(url):
        kwargs.update(
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    engine = create_engine(url, echo=echo, **kwargs)
    logger.debug("Created engine for %s", url.split("@")[-1])
    return engine


def create_schema(engine: Engine) -> None:
    """Create any missing tables. Migrations are handled elsewhere."""
    Base.metadata.create_all(engine)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)
