import os

# Keep the module-level app off the on-disk database during tests.
os.environ.setdefault("TASK_STORE", "memory")

import pytest
from fastapi.testclient import TestClient

from app.database import build_engine, create_tables
from app.main import create_app
from app.repositories import InMemoryTaskRepository, SqlTaskRepository


@pytest.fixture()
def sql_repository(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    create_tables(engine)
    yield SqlTaskRepository(engine)
    engine.dispose()


@pytest.fixture()
def memory_repository():
    return InMemoryTaskRepository()


@pytest.fixture(params=["memory", "sql"])
def repository(request):
    """Run a test once per task store backend."""
    return request.getfixturevalue(f"{request.param}_repository")


@pytest.fixture()
def client(repository):
    return TestClient(create_app(repository))
