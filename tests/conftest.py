"""
pytest configuration and fixtures.
"""

import os
import socket
from pathlib import Path
from typing import Generator

# 测试使用内存数据库，必须在导入 app 之前设置
os.environ["DATABASE_URI"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.db.base import Base, build_engine_options
from app.db.init_db import reset_db
from app.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient bound to a freshly reset in-memory database."""
    reset_db()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(tmp_path: Path) -> Generator[sessionmaker, None, None]:
    """Session factory on a temporary SQLite file, usable from several threads."""
    uri = f"sqlite:///{tmp_path / 'factors.db'}"
    engine = create_engine(uri, **build_engine_options(uri))
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def short_wait(monkeypatch: pytest.MonkeyPatch) -> float:
    """Shorten the slow endpoint delay."""
    monkeypatch.setattr(settings, "GRACEFUL_WAIT_SECONDS", 0.05)
    return 0.05


@pytest.fixture
def free_port() -> int:
    """Get a free port for testing."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
