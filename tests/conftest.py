import os
import sys

# Ensure repo root is on sys.path so tests can import the visit_counter package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest
from sqlalchemy import create_engine

from visit_counter import create_app


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'visits.db'}"


@pytest.fixture
def engine(db_url):
    eng = create_engine(db_url)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def sleeps(monkeypatch):
    # record retry waits instead of sleeping
    calls = []
    monkeypatch.setattr("visit_counter.database.time.sleep", calls.append)
    return calls


@pytest.fixture
def app(db_url, sleeps):
    app = create_app({
        "TESTING": True,
        "DATABASE_URL": db_url,
        "DB_CONNECT_RETRIES": 3,
        "DB_RETRY_DELAY": 0.5,
    })
    app.init_db(message="hello", count=5)
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def down_app(tmp_path, sleeps):
    # sqlite cannot open a file inside a directory that does not exist
    missing = tmp_path / "missing" / "visits.db"
    return create_app({
        "TESTING": True,
        "DATABASE_URL": f"sqlite:///{missing}",
        "DB_CONNECT_RETRIES": 4,
        "DB_RETRY_DELAY": 3.0,
    })
