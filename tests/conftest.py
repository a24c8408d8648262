"""
tests/conftest.py

Purpose:
    Point the app at a throwaway SQLite file (before any leaguehub module is
    imported) and provide fresh-database fixtures for service and API tests.
"""

from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="leaguehub-tests-")
os.environ["LEAGUEHUB_DB_PATH"] = os.path.join(_TMP_DIR, "test.db")
os.environ["LEAGUEHUB_AUTO_SEED"] = "0"
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin123")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from leaguehub_backend import models  # noqa: F401  (registers tables)
from leaguehub_backend.core.database import async_session_maker, sync_engine
from leaguehub_backend.services.league_store import LeagueStore

ADMIN_AUTH = ("admin", "admin123")


def _fresh_tables() -> None:
    SQLModel.metadata.drop_all(sync_engine)
    SQLModel.metadata.create_all(sync_engine)


@pytest.fixture
def client():
    _fresh_tables()
    from leaguehub_backend.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def store():
    _fresh_tables()
    async with async_session_maker() as session:
        yield LeagueStore(session)


@pytest.fixture
def admin_auth():
    return ADMIN_AUTH
