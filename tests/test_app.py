from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import build_repository, create_app
from app.repositories import InMemoryTaskRepository, SqlTaskRepository


def test_read_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Study Organizer API running – v2"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_health_database_down(sql_repository):
    sql_repository.engine.dispose()
    sql_repository.engine = Mock()
    sql_repository.engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
    client = TestClient(create_app(sql_repository))

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy"}


def test_cors_allows_any_origin(client):
    response = client.options(
        "/tasks",
        headers={
            "Origin": "http://localhost:5500",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_database_error_is_500():
    repository = Mock(spec=InMemoryTaskRepository)
    repository.find_all.side_effect = OperationalError("SELECT", {}, Exception("locked"))
    client = TestClient(create_app(repository))

    response = client.get("/tasks")

    assert response.status_code == 500
    assert response.json() == {"detail": "Database error"}


def test_build_repository_memory():
    assert isinstance(build_repository("memory"), InMemoryTaskRepository)


def test_build_repository_sql(tmp_path):
    repository = build_repository("sql", f"sqlite:///{tmp_path / 'tasks.db'}")

    assert isinstance(repository, SqlTaskRepository)
    assert repository.find_all() == []
    repository.engine.dispose()


def test_build_repository_unknown():
    with pytest.raises(ValueError):
        build_repository("redis")
