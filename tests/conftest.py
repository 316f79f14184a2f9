"""Shared pytest fixtures.

The API tests swap the SQL-backed store for an in-memory one through FastAPI's
dependency overrides, so no database file is touched.
"""

from __future__ import annotations

import os

# Must be set before `string_analyzer.database` builds its engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from string_analyzer.api.routes import get_store
from string_analyzer.crud import InMemoryStringStore, SQLAlchemyStringStore
from string_analyzer.database import get_db, init_db
from string_analyzer.main import app


@pytest.fixture
def memory_store() -> InMemoryStringStore:
    return InMemoryStringStore()


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_session_factory(sql_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sql_engine)


@pytest.fixture
def sql_store(sql_session_factory):
    session = sql_session_factory()
    try:
        yield SQLAlchemyStringStore(session)
    finally:
        session.close()


@pytest.fixture
def client(memory_store: InMemoryStringStore):
    app.dependency_overrides[get_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sql_client(sql_session_factory):
    """Client running the real store dependency against an in-memory SQLite database."""

    def _get_db():
        db = sql_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
