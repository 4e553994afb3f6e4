"""Project CRUD endpoints."""

from datetime import datetime
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.budget.models import User
from src.budget.repositories import ProjectRepository
from tests.helpers import count_expenses, create_project_with_expenses

pytestmark = pytest.mark.integration


async def test_create_then_get_returns_same_project(
    client: AsyncClient, auth_headers: dict, test_user: User
):
    response = await client.post(
        "/api/v1/project", json={"name": "Launch", "budget": 1000}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    created = body["data"]
    assert created["name"] == "Launch"
    assert created["budget"] == 1000
    assert created["userId"] == str(test_user.id)
    assert created["id"]
    assert "createdAt" in created and "updatedAt" in created

    response = await client.get(f"/api/v1/project/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True, "data": created}


async def test_create_trims_name(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/project", json={"name": "  Launch  ", "budget": 50}, headers=auth_headers
    )
    assert response.json()["data"]["name"] == "Launch"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Launch"},
        {"budget": 1000},
        {"name": "", "budget": 1000},
        {"name": "   ", "budget": 1000},
        {"name": "Launch", "budget": 0},
        {},
    ],
)
async def test_create_rejects_missing_fields(client: AsyncClient, auth_headers: dict, payload):
    response = await client.post("/api/v1/project", json=payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"ok": False, "code": "INVALID_BODY"}


async def test_create_rejects_non_numeric_budget(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/project", json={"name": "Launch", "budget": "lots"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json() == {"ok": False, "code": "INVALID_BODY"}


async def test_create_rejects_name_longer_than_column(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/project", json={"name": "x" * 300, "budget": 5}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json() == {"ok": False, "code": "INVALID_BODY"}


async def test_create_accepts_name_at_column_width(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/project", json={"name": "x" * 200, "budget": 5}, headers=auth_headers
    )
    assert response.status_code == 200
    assert len(response.json()["data"]["name"]) == 200


async def test_negative_budget_is_accepted(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/project", json={"name": "Refund", "budget": -20}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["budget"] == -20


async def test_list_returns_only_own_projects(
    client: AsyncClient,
    db_session: AsyncSession,
    test_user: User,
    other_user: User,
    auth_headers: dict,
):
    mine, _ = await create_project_with_expenses(db_session, test_user, [])
    await create_project_with_expenses(db_session, other_user, [])

    response = await client.get("/api/v1/project", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert [p["id"] for p in data] == [str(mine.id)]


async def test_list_is_newest_first(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    old, _ = await create_project_with_expenses(
        db_session, test_user, [], created_at=datetime(2024, 1, 1)
    )
    new, _ = await create_project_with_expenses(
        db_session, test_user, [], created_at=datetime(2024, 6, 1)
    )

    response = await client.get("/api/v1/project", headers=auth_headers)
    assert [p["id"] for p in response.json()["data"]] == [str(new.id), str(old.id)]


async def test_list_empty(client: AsyncClient, auth_headers: dict):
    response = await client.get("/api/v1/project", headers=auth_headers)
    assert response.json() == {"ok": True, "data": []}


@pytest.mark.parametrize("project_id", [str(uuid4()), "not-a-uuid"])
async def test_get_unknown_project_is_not_found(client: AsyncClient, auth_headers: dict, project_id):
    response = await client.get(f"/api/v1/project/{project_id}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"ok": False, "code": "NOT_FOUND"}


async def test_update_applies_name_and_budget(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [], name="Old")

    response = await client.put(
        f"/api/v1/project/{project.id}",
        json={"name": "New", "budget": 250.5},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "New"
    assert data["budget"] == 250.5
    assert data["userId"] == str(test_user.id)


async def test_update_with_empty_name_keeps_name(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [], name="Keep")

    response = await client.put(
        f"/api/v1/project/{project.id}", json={"name": "", "budget": 10}, headers=auth_headers
    )
    data = response.json()["data"]
    assert data["name"] == "Keep"
    assert data["budget"] == 10


async def test_update_budget_to_zero_is_applied(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [], budget=500)

    response = await client.put(
        f"/api/v1/project/{project.id}", json={"budget": 0}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["budget"] == 0


async def test_update_without_fields_changes_nothing(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(
        db_session, test_user, [], name="Same", budget=42
    )

    response = await client.put(f"/api/v1/project/{project.id}", json={}, headers=auth_headers)
    data = response.json()["data"]
    assert (data["name"], data["budget"]) == ("Same", 42)


async def test_update_null_budget_is_rejected(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [], budget=42)

    response = await client.put(
        f"/api/v1/project/{project.id}", json={"budget": None}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_BODY"

    response = await client.get(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.json()["data"]["budget"] == 42


async def test_update_cannot_change_owner(
    client: AsyncClient,
    db_session: AsyncSession,
    test_user: User,
    other_user: User,
    auth_headers: dict,
):
    project, _ = await create_project_with_expenses(db_session, test_user, [])

    response = await client.put(
        f"/api/v1/project/{project.id}",
        json={"userId": str(other_user.id), "name": "Mine"},
        headers=auth_headers,
    )
    assert response.json()["data"]["userId"] == str(test_user.id)


async def test_delete_removes_project_and_its_expenses(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [10, 20, 30])
    keep, _ = await create_project_with_expenses(db_session, test_user, [5])

    response = await client.delete(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    response = await client.get(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.status_code == 404
    assert await count_expenses(db_session, project.id) == 0
    assert await count_expenses(db_session, keep.id) == 1


async def test_delete_twice_is_not_found(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [])

    await client.delete(f"/api/v1/project/{project.id}", headers=auth_headers)
    response = await client.delete(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"ok": False, "code": "NOT_FOUND"}


async def test_update_rejects_name_longer_than_column(
    client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
):
    project, _ = await create_project_with_expenses(db_session, test_user, [], name="Launch")

    response = await client.put(
        f"/api/v1/project/{project.id}", json={"name": "x" * 201}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json() == {"ok": False, "code": "INVALID_BODY"}

    response = await client.get(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.json()["data"]["name"] == "Launch"


async def test_failed_cascade_delete_keeps_project_and_expenses(
    client: AsyncClient,
    db_session: AsyncSession,
    test_user: User,
    auth_headers: dict,
    captured_errors: list,
    monkeypatch: pytest.MonkeyPatch,
):
    project, _ = await create_project_with_expenses(db_session, test_user, [10, 20, 30])

    async def failing_delete(self, entity):
        raise RuntimeError("project delete failed")

    monkeypatch.setattr(ProjectRepository, "delete", failing_delete)

    response = await client.delete(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {
        "ok": False,
        "code": "SERVER_ERROR",
        "error": "project delete failed",
    }
    [(exc, _)] = captured_errors
    assert isinstance(exc, RuntimeError)

    # The bulk expense delete ran first and was rolled back with the project delete
    assert await count_expenses(db_session, project.id) == 3
    response = await client.get(f"/api/v1/project/{project.id}", headers=auth_headers)
    assert response.status_code == 200
