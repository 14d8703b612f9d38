# tests/conftest.py

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

# Settings are read at import time, so the test database must be configured
# before anything from taskdesk is imported.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="taskdesk-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'tasks.sqlite3'}"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_AUTO_CREATE"] = "true"

import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402

from taskdesk.core.config import settings  # noqa: E402
from taskdesk.db import models  # noqa: E402,F401
from taskdesk.db.base import Base  # noqa: E402
from taskdesk.db.database import async_session_maker  # noqa: E402
from taskdesk.main import app  # noqa: E402

# Plain sqlite3 engine for schema resets, independent of any event loop
_schema_engine = create_engine(settings.DATABASE_URL.replace("+aiosqlite", ""))


@pytest.fixture(autouse=True)
def database() -> None:
    """Fresh schema for every test: ids start from 1 again."""
    Base.metadata.drop_all(_schema_engine)
    Base.metadata.create_all(_schema_engine)


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def session():
    async with async_session_maker() as db_session:
        yield db_session
