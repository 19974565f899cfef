# tests/conftest.py

from __future__ import annotations

import os

# 测试中不写日志文件，默认库指向内存
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from tarefas_api.config import Settings
from tarefas_api.main import create_app
from tarefas_api.services.database import create_db_engine, create_session_factory, init_db
from tarefas_api.services.tarefa_repository import TarefaRepository

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture()
def test_settings() -> Settings:
    """In-memory database, no log files, the dev frontend as the only origin."""
    return Settings(
        DATABASE_URL="sqlite://",
        LOG_TO_FILE=False,
        CORS_ALLOWED_ORIGINS=ALLOWED_ORIGIN,
    )


@pytest.fixture()
def client(test_settings: Settings):
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def repository() -> TarefaRepository:
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield TarefaRepository(create_session_factory(engine))
    engine.dispose()
