import sqlite3
import pytest
from fastapi.testclient import TestClient

from config import settings

TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "library_test.db")


@pytest.fixture
def client(db_path, monkeypatch):
    # Each test gets its own SQLite file; the lifespan opens the pool on it
    monkeypatch.setattr(settings, "DATABASE_URL", db_path)
    monkeypatch.setattr(settings, "JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setattr(settings, "ALLOW_PLAINTEXT_PASSWORDS", False)

    from main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_admin(client, db_path):
    """Insert an admin row directly, bypassing the API (which never writes admins)"""
    def _add(email, password):
        conn = sqlite3.connect(db_path)
        try:
            cursor = conn.execute(
                "INSERT INTO admin (email, password) VALUES (?, ?)", (email, password)
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()
    return _add
