import os

# Point the app at a private in-memory store before anything imports it.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from tpfoyer.database import create_db_and_tables, drop_db_and_tables, engine
from tpfoyer.main import app


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test an empty set of tables."""
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture
def client():
    """HTTP client against the full app; dependency overrides are undone afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()
