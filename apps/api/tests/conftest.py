from __future__ import annotations

import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# Settings are read at import time, so the env must be in place before the app import.
# Tests wipe every table: never point them at a real database by accident.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="devevents-tests-")
os.environ["DATABASE_URL"] = os.environ.get(
    "TEST_DATABASE_URL",
    f"sqlite:///{os.path.join(_TEST_DB_DIR, 'devevents.db')}",
)
os.environ.setdefault("ENV", "local")
os.environ["SECURITY_HEADERS_ENABLED"] = "true"
os.environ["HTTPS_REDIRECT_ENABLED"] = "false"
os.environ["DOCS_ENABLED"] = "true"

from devevents.main import app  # noqa: E402
from devevents.db import SessionLocal, engine  # noqa: E402
from devevents.models import Base  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def create_schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def clean_db(create_schema):
    # Ensure a clean slate for each test
    db = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    finally:
        db.close()
    yield
