# tests/test_tasks_api.py

from __future__ import annotations

from datetime import datetime

API = "/api/tasks"


def create(client, title: str) -> dict:
    response = client.post(API, json={"title": title})
    assert response.status_code == 201, response.text
    return response.json()


def test_end_to_end_lifecycle(client) -> None:
    response = client.post(API, json={"title": "Buy milk"})
    assert response.status_code == 201
    task = response.json()
    assert task["id"] == 1
    assert task["title"] == "Buy milk"
    assert task["done"] is False

    response = client.patch(f"{API}/1", json={"done": True})
    assert response.status_code == 200
    assert response.json()["done"] is True
    assert response.json()["title"] == "Buy milk"

    response = client.delete(f"{API}/1")
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"{API}/1")
    assert response.status_code == 404
    assert response.json() == {"message": "Task 1 not found.", "error": "TASK_NOT_FOUND"}


def test_read_one_returns_task_verbatim(client) -> None:
    created = create(client, "Read me")

    response = client.get(f"{API}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created
    assert set(created) == {"id", "title", "done", "created_at", "updated_at"}


def test_create_validation_failure_shape(client) -> None:
    response = client.post(API, json={})

    assert response.status_code == 422
    assert response.json() == {
        "message": "The title field is required.",
        "errors": {"title": ["The title field is required."]},
    }


def test_invalid_create_stores_nothing(client) -> None:
    assert client.post(API, json={"title": ""}).status_code == 422
    assert client.post(API, json={"title": "x" * 256}).status_code == 422
    assert client.post(API, content=b"{not json", headers={"Content-Type": "application/json"}).status_code == 422
    assert client.post(API, json=["title"]).status_code == 422

    assert client.get(API).json()["total"] == 0


def test_create_trims_title(client) -> None:
    task = create(client, "  padded  ")

    assert task["title"] == "padded"


def test_update_title_only_keeps_done(client) -> None:
    task = create(client, "Old title")
    client.patch(f"{API}/{task['id']}", json={"done": True})

    response = client.patch(f"{API}/{task['id']}", json={"title": "New title"})

    assert response.status_code == 200
    assert response.json()["title"] == "New title"
    assert response.json()["done"] is True


def test_update_without_fields_returns_current_task(client) -> None:
    task = create(client, "Unchanged")

    response = client.patch(f"{API}/{task['id']}", json={})

    assert response.status_code == 200
    assert response.json()["title"] == "Unchanged"
    assert response.json()["done"] is False


def test_put_is_routed_to_partial_update(client) -> None:
    task = create(client, "Via PUT")

    response = client.put(f"{API}/{task['id']}", json={"done": 1})

    assert response.status_code == 200
    assert response.json()["done"] is True
    assert response.json()["title"] == "Via PUT"


def test_update_validation_errors(client) -> None:
    task = create(client, "Valid")

    response = client.patch(f"{API}/{task['id']}", json={"title": "  ", "done": "maybe"})

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "The title field must be a string. (and 1 more error)"
    assert body["errors"] == {
        "title": ["The title field must be a string."],
        "done": ["The done field must be true or false."],
    }
    assert client.get(f"{API}/{task['id']}").json()["title"] == "Valid"


def test_missing_task_is_404_for_update_and_delete(client) -> None:
    create(client, "Existing")

    assert client.patch(f"{API}/99", json={"done": True}).status_code == 404
    # Lookup happens before validation
    assert client.patch(f"{API}/99", json={"done": "maybe"}).status_code == 404
    assert client.delete(f"{API}/99").status_code == 404

    assert client.get(API).json()["total"] == 1


def test_non_numeric_id_is_not_found(client) -> None:
    response = client.get(f"{API}/abc")

    assert response.status_code == 404
    assert response.json()["error"] == "TASK_NOT_FOUND"


def test_list_is_newest_first(client) -> None:
    for title in ("A", "B", "C"):
        create(client, title)

    data = client.get(API).json()["data"]

    assert [t["title"] for t in data] == ["C", "B", "A"]


def test_list_pagination(client) -> None:
    for n in range(15):
        create(client, f"task {n}")

    first = client.get(API, params={"page": 1}).json()
    second = client.get(API, params={"page": 2}).json()
    third = client.get(API, params={"page": 3})

    assert len(first["data"]) == 10
    assert first["data"][0]["id"] == 15
    assert first["current_page"] == 1
    assert first["last_page"] == 2
    assert first["total"] == 15
    assert first["from"] == 1
    assert first["to"] == 10
    assert first["next_page_url"] == "http://testserver/api/tasks?page=2"

    assert len(second["data"]) == 5
    assert second["prev_page_url"] == "http://testserver/api/tasks?page=1"

    assert third.status_code == 200
    assert third.json()["data"] == []
    assert third.json()["current_page"] == 3


def test_list_bad_page_value_means_first_page(client) -> None:
    create(client, "only")

    for value in ("abc", "0", "-1"):
        body = client.get(API, params={"page": value}).json()
        assert body["current_page"] == 1
        assert len(body["data"]) == 1


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["time"].endswith("Z")
    datetime.fromisoformat(body["time"].replace("Z", "+00:00"))


def test_index_page_and_script_are_served(client) -> None:
    page = client.get("/")
    assert page.status_code == 200
    assert page.headers["content-type"].startswith("text/html")
    assert "/static/tasks.js" in page.text

    script = client.get("/static/tasks.js")
    assert script.status_code == 200
    assert "/api/tasks" in script.text


def test_unknown_route_uses_json_error_shape(client) -> None:
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found", "error": "NOT_FOUND"}


def test_process_time_header(client) -> None:
    assert "x-process-time" in client.get("/health").headers


def test_huge_page_number_is_an_empty_page(client) -> None:
    create(client, "only")

    response = client.get(API, params={"page": "1000000000000000000"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["total"] == 1
    assert body["current_page"] == 1000000000000000000


def test_id_beyond_integer_range_is_not_found(client) -> None:
    create(client, "Existing")
    huge = "99999999999999999999"

    assert client.get(f"{API}/{huge}").status_code == 404
    assert client.patch(f"{API}/{huge}", json={"done": True}).status_code == 404
    assert client.delete(f"{API}/{huge}").status_code == 404

    assert client.get(API).json()["total"] == 1


def test_only_plain_digit_ids_resolve(client) -> None:
    for n in range(10):
        create(client, f"task {n}")

    assert client.get(f"{API}/10").status_code == 200
    for raw in ("1_0", "+5", "%EF%BC%95", " 5", "5.0"):
        response = client.get(f"{API}/{raw}")
        assert response.status_code == 404, raw
        assert response.json()["error"] == "TASK_NOT_FOUND"
