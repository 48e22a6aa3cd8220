# tests/test_tasks_api.py

from __future__ import annotations

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from .fakes import InMemoryTaskRepository, RecordingPublisher


def _create(client: TestClient, **body) -> dict:
    response = client.post("/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def _error_fields(response) -> list[str]:
    return [str(err["loc"][-1]) for err in response.json()["detail"]]


def test_create_task_returns_201_with_pending_status(
    client: TestClient, publisher: RecordingPublisher
) -> None:
    body = _create(client, title="Test Task", description="Test Description")

    assert body["id"] == 1
    assert body["title"] == "Test Task"
    assert body["description"] == "Test Description"
    assert body["status"] == "pending"
    assert body["created_at"] == body["updated_at"]
    assert publisher.events == [("taskCreated", body)]


def test_create_task_ignores_status_in_body(client: TestClient) -> None:
    body = _create(client, title="Eager", status="completed")

    assert body["status"] == "pending"


def test_create_task_without_description_returns_null(client: TestClient) -> None:
    body = _create(client, title="Bare")

    assert body["description"] is None


def test_create_task_requires_title(client: TestClient, repository: InMemoryTaskRepository) -> None:
    response = client.post("/tasks", json={"description": "no title"})

    assert response.status_code == 422
    assert _error_fields(response) == ["title"]
    assert repository.calls == []


def test_create_task_rejects_empty_and_long_values(client: TestClient) -> None:
    assert client.post("/tasks", json={"title": ""}).status_code == 422
    assert client.post("/tasks", json={"title": "x" * 101}).status_code == 422
    assert client.post("/tasks", json={"title": "x" * 100}).status_code == 201

    response = client.post("/tasks", json={"title": "ok", "description": "d" * 501})
    assert response.status_code == 422
    assert _error_fields(response) == ["description"]


def test_create_task_rejects_non_string_title(client: TestClient) -> None:
    response = client.post("/tasks", json={"title": 123})

    assert response.status_code == 422
    assert _error_fields(response) == ["title"]


def test_list_tasks_empty(client: TestClient) -> None:
    response = client.get("/tasks")

    assert response.status_code == 200
    assert response.json() == []


def test_list_tasks_returns_array(client: TestClient) -> None:
    _create(client, title="one")
    _create(client, title="two")

    response = client.get("/tasks")

    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["one", "two"]


def test_get_task(client: TestClient) -> None:
    created = _create(client, title="Find me")

    response = client.get(f"/tasks/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_task_returns_404(client: TestClient) -> None:
    response = client.get("/tasks/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Task with id 999 not found"}


def test_non_numeric_id_is_rejected_before_the_service(
    client: TestClient, repository: InMemoryTaskRepository
) -> None:
    assert client.get("/tasks/abc").status_code == 422
    assert client.put("/tasks/abc", json={"title": "x"}).status_code == 422
    assert client.delete("/tasks/abc").status_code == 422
    assert repository.calls == []


def test_update_task_status_keeps_other_fields(
    client: TestClient, publisher: RecordingPublisher
) -> None:
    created = _create(client, title="Test Task", description="Test Description")

    response = client.put(f"/tasks/{created['id']}", json={"status": "completed"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Test Task"
    assert body["description"] == "Test Description"
    assert body["status"] == "completed"
    assert body["updated_at"] > created["updated_at"]
    assert publisher.events[-1] == ("taskUpdated", body)


def test_update_task_rejects_invalid_status(
    client: TestClient, repository: InMemoryTaskRepository
) -> None:
    created = _create(client, title="Strict")
    repository.calls.clear()

    response = client.put(f"/tasks/{created['id']}", json={"status": "done"})

    assert response.status_code == 422
    assert _error_fields(response) == ["status"]
    assert repository.calls == []


def test_update_task_rejects_null_title(client: TestClient) -> None:
    created = _create(client, title="Keep me")

    response = client.put(f"/tasks/{created['id']}", json={"title": None})

    assert response.status_code == 422
    assert _error_fields(response) == ["title"]


def test_update_unknown_task_returns_404_without_mutation(
    client: TestClient, repository: InMemoryTaskRepository, publisher: RecordingPublisher
) -> None:
    response = client.put("/tasks/5", json={"title": "ghost"})

    assert response.status_code == 404
    assert "update" not in repository.operations()
    assert publisher.events == []


def test_delete_task_returns_deleted_row(client: TestClient, publisher: RecordingPublisher) -> None:
    created = _create(client, title="Remove")

    response = client.delete(f"/tasks/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created
    assert publisher.events[-1] == ("taskDeleted", created)
    assert client.get(f"/tasks/{created['id']}").status_code == 404


def test_delete_unknown_task_returns_404_without_mutation(
    client: TestClient, repository: InMemoryTaskRepository, publisher: RecordingPublisher
) -> None:
    response = client.delete("/tasks/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Task with id 999 not found"}
    assert "delete" not in repository.operations()
    assert publisher.events == []


def test_store_fault_maps_to_500(client: TestClient, repository: InMemoryTaskRepository) -> None:
    async def broken_list():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    repository.list = broken_list  # type: ignore[method-assign]

    response = client.get("/tasks")

    assert response.status_code == 500
    assert response.json() == {"detail": "Database error"}


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "taskhub", "environment": "test"}


def test_metrics_endpoint_exposes_request_counter(client: TestClient) -> None:
    client.get("/tasks")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_requests_total" in response.text
