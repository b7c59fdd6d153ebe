import time
from datetime import datetime
from typing import Any, Callable
import pytest
from fastapi.testclient import TestClient


class TestTasks:
    @pytest.fixture
    def create_task(self, test_client: TestClient) -> Callable[[str], dict[str, Any]]:
        """Helper fixture to create a task."""

        def _create_task(text: str) -> dict[str, Any]:
            response = test_client.post("/api/tasks", json={"text": text})
            assert response.status_code == 201
            return response.json()

        return _create_task

    def test_task_lifecycle(self, test_client: TestClient) -> None:
        response = test_client.post("/api/tasks", json={"text": "buy milk"})
        assert response.status_code == 201
        task = response.json()
        assert task["text"] == "buy milk"
        assert task["completed"] is False
        assert set(task.keys()) == {"id", "text", "completed", "createdAt"}

        response = test_client.patch(f"/api/tasks/{task['id']}/toggle")
        assert response.status_code == 200
        assert response.json()["completed"] is True

        response = test_client.get("/api/tasks")
        assert response.status_code == 200
        tasks = response.json()
        assert len(tasks) == 1
        assert tasks[0]["id"] == task["id"]
        assert tasks[0]["completed"] is True

        response = test_client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 200
        assert "message" in response.json()

        response = test_client.get("/api/tasks")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_then_list_includes_task_once(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        create_task("existing")
        task = create_task("  water plants  ")
        assert task["text"] == "water plants"

        tasks = test_client.get("/api/tasks").json()
        matching = [t for t in tasks if t["id"] == task["id"]]
        assert len(matching) == 1
        assert matching[0]["text"] == "water plants"
        assert matching[0]["completed"] is False

    @pytest.mark.parametrize("text", ["", "   "])
    def test_create_with_empty_text_persists_nothing(
        self, test_client: TestClient, text: str
    ) -> None:
        response = test_client.post("/api/tasks", json={"text": text})
        assert response.status_code == 422

        assert test_client.get("/api/tasks").json() == []

    def test_list_newest_first(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        first = create_task("first")
        time.sleep(0.01)
        second = create_task("second")
        time.sleep(0.01)
        third = create_task("third")

        tasks = test_client.get("/api/tasks").json()

        assert [t["id"] for t in tasks] == [third["id"], second["id"], first["id"]]
        created = [datetime.fromisoformat(t["createdAt"]) for t in tasks]
        assert created == sorted(created, reverse=True)

    def test_toggle_twice_restores_state(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        task = create_task("buy milk")

        test_client.patch(f"/api/tasks/{task['id']}/toggle")
        response = test_client.patch(f"/api/tasks/{task['id']}/toggle")

        assert response.status_code == 200
        assert response.json()["completed"] is False

    def test_update_text_keeps_completion_and_creation_time(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        task = create_task("buy milk")
        test_client.patch(f"/api/tasks/{task['id']}/toggle")

        response = test_client.put(
            f"/api/tasks/{task['id']}", json={"text": " buy oat milk "}
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["id"] == task["id"]
        assert updated["text"] == "buy oat milk"
        assert updated["completed"] is True
        assert updated["createdAt"] == task["createdAt"]

    def test_update_with_empty_text_keeps_original(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        task = create_task("buy milk")

        response = test_client.put(f"/api/tasks/{task['id']}", json={"text": "  "})
        assert response.status_code == 422

        tasks = test_client.get("/api/tasks").json()
        assert tasks[0]["text"] == "buy milk"

    def test_operations_on_missing_task(self, test_client: TestClient) -> None:
        missing = "00000000-0000-0000-0000-000000000000"

        response = test_client.put(f"/api/tasks/{missing}", json={"text": "x"})
        assert response.status_code == 404
        assert response.json() == {"detail": f"Task '{missing}' not found"}

        assert test_client.patch(f"/api/tasks/{missing}/toggle").status_code == 404
        assert test_client.delete(f"/api/tasks/{missing}").status_code == 404

    def test_deleted_task_is_gone(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        task = create_task("buy milk")

        assert test_client.delete(f"/api/tasks/{task['id']}").status_code == 200

        assert test_client.delete(f"/api/tasks/{task['id']}").status_code == 404
        assert test_client.patch(f"/api/tasks/{task['id']}/toggle").status_code == 404
        assert (
            test_client.put(f"/api/tasks/{task['id']}", json={"text": "x"}).status_code
            == 404
        )
        assert test_client.get("/api/tasks").json() == []

    def test_ids_are_unique(
        self,
        test_client: TestClient,
        create_task: Callable[[str], dict[str, Any]],
    ) -> None:
        ids = {create_task(f"task {i}")["id"] for i in range(5)}
        assert len(ids) == 5
