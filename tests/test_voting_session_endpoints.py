"""Tests for voting session endpoints."""

from fastapi.testclient import TestClient

from cafeteria_voting.api.app import create_app
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import UserRecord

LUNCH = {
    "name": "Monday lunch",
    "shift": "morning",
    "startTime": "2026-03-02T09:00:00Z",
    "endTime": "2026-03-02T11:00:00Z",
}


def test_staff_creates_session_with_default_status(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/voting-sessions", json=LUNCH, headers={"X-User-Id": staff_user.id}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "scheduled"
    assert data["shift"] == "morning"
    assert client.get("/api/voting-sessions").json() == [data]
    assert client.get("/api/voting-sessions/active").json() == []


def test_student_cannot_create_session(
    container: AppContainer, student_user: UserRecord
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/voting-sessions", json=LUNCH, headers={"X-User-Id": student_user.id}
    )

    assert response.status_code == 403


def test_session_must_start_before_it_ends(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/voting-sessions",
        json={**LUNCH, "endTime": "2026-03-02T08:00:00Z"},
        headers={"X-User-Id": staff_user.id},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Start time must be before end time"}


def test_unknown_shift_is_rejected(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/voting-sessions",
        json={**LUNCH, "shift": "night"},
        headers={"X-User-Id": staff_user.id},
    )

    assert response.status_code == 400


def test_activating_session_lists_it_as_active(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))
    headers = {"X-User-Id": staff_user.id}
    created = client.post("/api/voting-sessions", json=LUNCH, headers=headers).json()

    response = client.put(
        f"/api/voting-sessions/{created['id']}",
        json={"status": "active"},
        headers=headers,
    )

    assert response.status_code == 200
    active = client.get("/api/voting-sessions/active").json()
    assert [session["id"] for session in active] == [created["id"]]


def test_update_missing_session_is_not_found(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        "/api/voting-sessions/missing",
        json={"status": "active"},
        headers={"X-User-Id": staff_user.id},
    )

    assert response.status_code == 404


def test_session_menu_items(container: AppContainer, staff_user: UserRecord) -> None:
    client = TestClient(create_app(container))
    headers = {"X-User-Id": staff_user.id}
    session = client.post("/api/voting-sessions", json=LUNCH, headers=headers).json()
    rice = client.post(
        "/api/menu-items",
        json={"name": "Rice", "description": "Steamed rice", "category": "side"},
        headers=headers,
    ).json()

    linked = client.post(
        f"/api/voting-sessions/{session['id']}/menu-items",
        json={"menuItemId": rice["id"]},
        headers=headers,
    )

    assert linked.status_code == 201
    assert linked.json()["menuItemId"] == rice["id"]
    menu = client.get(f"/api/voting-sessions/{session['id']}/menu-items").json()
    assert [item["id"] for item in menu] == [rice["id"]]

    client.delete(f"/api/menu-items/{rice['id']}", headers=headers)
    assert client.get(f"/api/voting-sessions/{session['id']}/menu-items").json() == []


def test_unlink_session_menu_item(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))
    headers = {"X-User-Id": staff_user.id}
    session = client.post("/api/voting-sessions", json=LUNCH, headers=headers).json()
    rice = client.post(
        "/api/menu-items",
        json={"name": "Rice", "description": "Steamed rice", "category": "side"},
        headers=headers,
    ).json()
    client.post(
        f"/api/voting-sessions/{session['id']}/menu-items",
        json={"menuItemId": rice["id"]},
        headers=headers,
    )

    response = client.delete(
        f"/api/voting-sessions/{session['id']}/menu-items/{rice['id']}",
        headers=headers,
    )

    assert response.status_code == 204
    assert client.get(f"/api/voting-sessions/{session['id']}/menu-items").json() == []


def test_menu_of_unknown_session_is_not_found(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/voting-sessions/missing/menu-items")

    assert response.status_code == 404


def test_update_with_null_times_is_bad_request(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))
    headers = {"X-User-Id": staff_user.id}
    created = client.post("/api/voting-sessions", json=LUNCH, headers=headers).json()

    response = client.put(
        f"/api/voting-sessions/{created['id']}",
        json={"startTime": None, "endTime": None, "status": None},
        headers=headers,
    )

    assert response.status_code == 400
    assert client.get("/api/voting-sessions").json() == [created]


def test_update_cannot_move_end_before_start(
    container: AppContainer, staff_user: UserRecord
) -> None:
    client = TestClient(create_app(container))
    headers = {"X-User-Id": staff_user.id}
    created = client.post("/api/voting-sessions", json=LUNCH, headers=headers).json()

    response = client.put(
        f"/api/voting-sessions/{created['id']}",
        json={"endTime": "2026-03-02T08:00:00Z"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Start time must be before end time"}
    assert client.get("/api/voting-sessions").json() == [created]
