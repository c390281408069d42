import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before `tutorials.main` is imported.
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="tutorials-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["DB_SCHEMA_POLICY"] = "create"
os.environ.pop("DATABASE_USERNAME", None)
os.environ.pop("DATABASE_PASSWORD", None)


@pytest.fixture(autouse=True)
def clean_tutorials():
    """Start every test with an empty tutorials table."""
    from sqlalchemy import delete
    from sqlmodel import Session
    from tutorials.database import engine, init_schema
    from tutorials.models import Tutorial

    init_schema("update")
    with Session(engine) as session:
        session.connection().execute(delete(Tutorial))
        session.commit()
    yield
