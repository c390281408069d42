"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from the
application settings and provides small helpers used by the application
and tests. Any SQLAlchemy URL works; the default is a local SQLite file
`app.db` next to the package.
"""

import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import URL, make_url
from sqlmodel import SQLModel, create_engine, Session

from . import models  # noqa: F401  (registers the tables on SQLModel.metadata)
from .config import settings, Settings

logger = logging.getLogger("tutorials.db")


def build_url(cfg: Settings) -> URL:
    """Return the connection URL with configured credentials merged in."""
    url = make_url(cfg.DATABASE_URL)
    if cfg.DATABASE_USERNAME:
        url = url.set(username=cfg.DATABASE_USERNAME)
    if cfg.DATABASE_PASSWORD:
        url = url.set(password=cfg.DATABASE_PASSWORD)
    return url


def build_engine(cfg: Settings):
    url = build_url(cfg)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=cfg.DB_ECHO, connect_args=connect_args)


engine = build_engine(settings)


def init_schema(policy: Optional[str] = None, bind=None):
    """Apply the schema policy to the database.

    - `create`: drop and recreate every table (data is lost)
    - `update`: create missing tables, leave existing ones untouched
    - `validate`: require the tables and columns to exist already
    - `none`: do nothing; the schema is managed by `run_migrations.py`
    """
    policy = policy or settings.DB_SCHEMA_POLICY
    bind = bind if bind is not None else engine
    if policy == "create":
        logger.warning("schema policy 'create': dropping and recreating all tables")
        SQLModel.metadata.drop_all(bind)
        SQLModel.metadata.create_all(bind)
    elif policy == "update":
        SQLModel.metadata.create_all(bind)
    elif policy == "validate":
        _validate_schema(bind)
    elif policy != "none":
        raise RuntimeError(f"unknown schema policy {policy!r}")


def _validate_schema(bind):
    """Raise RuntimeError if a mapped table or column is missing."""
    inspector = inspect(bind)
    for table in SQLModel.metadata.sorted_tables:
        if not inspector.has_table(table.name):
            raise RuntimeError(f"table {table.name!r} does not exist; run migrations first")
        existing = {c["name"] for c in inspector.get_columns(table.name)}
        missing = [c.name for c in table.columns if c.name not in existing]
        if missing:
            raise RuntimeError(f"table {table.name!r} is missing columns: {', '.join(missing)}")


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes, including when the handler raises.
    """
    with Session(engine) as session:
        yield session
