"""Shared fixtures: a throwaway SQLite file stands in for the MySQL server."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from app.main import create_app

USER_ROWS = [
    {"id": 1, "name": "Alice", "email": "alice@example.com", "age": 31},
    {"id": 2, "name": "Bob", "email": "bob@example.com", "age": 27},
    {"id": 3, "name": "Carol", "email": None, "age": 45},
]


@pytest.fixture
def empty_db_url(tmp_path):
    """URL of a reachable database with no tables."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    engine = create_engine(url)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    engine.dispose()
    return url


@pytest.fixture
def db_url(empty_db_url):
    """URL of a database with a populated users table."""
    engine = create_engine(empty_db_url)
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE users ("
                "id INTEGER PRIMARY KEY, name TEXT NOT NULL, email TEXT, age INTEGER)"
            )
        )
        conn.execute(
            text("INSERT INTO users (id, name, email, age) VALUES (:id, :name, :email, :age)"),
            USER_ROWS,
        )
    engine.dispose()
    return empty_db_url


@pytest.fixture
def terminate():
    """Stands in for os._exit so a fatal error does not end the test run."""
    return MagicMock()


@pytest.fixture
def client(db_url, terminate):
    with TestClient(create_app(db_url, terminate=terminate)) as c:
        yield c
