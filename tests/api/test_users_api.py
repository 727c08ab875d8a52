"""User endpoints over in-memory fakes (sample tree users user1..user3)."""

from httpx import AsyncClient

USER1 = {"X-User-ID": "1"}


def _usernames(response) -> list[str]:
    return [u["username"] for u in response.json()["data"]]


async def test_list_users_requires_caller(api: AsyncClient) -> None:
    response = await api.get("/api/v1/users")
    assert response.status_code == 401


async def test_list_and_search_users(api: AsyncClient, fake_services) -> None:
    fake_services.add_user(20, "ada", "ada@example.com", first_name="Ada", last_name="Lovelace")
    response = await api.get("/api/v1/users", headers=USER1)
    assert response.status_code == 200
    assert _usernames(response) == ["ada", "user1", "user2", "user3"]
    assert response.json()["pagination"]["total_count"] == 4

    response = await api.get("/api/v1/users", params={"search": "lovel"}, headers=USER1)
    assert _usernames(response) == ["ada"]
    response = await api.get(
        "/api/v1/users",
        params={"order_by": "ID", "direction": "DESC", "first": 2},
        headers=USER1,
    )
    assert [u["id"] for u in response.json()["data"]] == [20, 3]
    assert response.json()["pagination"]["has_next"] is True


async def test_create_user_without_caller(api: AsyncClient) -> None:
    response = await api.post(
        "/api/v1/users",
        json={"username": "alan", "email": "alan@example.com", "last_name": "Turing"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "alan"
    assert data["last_name"] == "Turing"
    assert data["created_by"] is None
    fetched = await api.get(f"/api/v1/users/{data['id']}", headers=USER1)
    assert fetched.json()["email"] == "alan@example.com"


async def test_create_user_rejects_bad_email_and_duplicates(api: AsyncClient) -> None:
    response = await api.post(
        "/api/v1/users", json={"username": "x", "email": "not-an-email"}, headers=USER1
    )
    assert response.status_code == 422
    response = await api.post(
        "/api/v1/users", json={"username": "user2", "email": "fresh@example.com"}, headers=USER1
    )
    assert response.status_code == 409
    assert response.json()["error"] == "USER_ALREADY_EXISTS"
    assert response.json()["details"] == {"field": "username"}


async def test_update_user(api: AsyncClient) -> None:
    response = await api.patch(
        "/api/v1/users/2",
        json={"first_name": "Grace", "username": None},
        headers=USER1,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["first_name"] == "Grace"
    assert data["username"] == "user2"
    assert data["updated_by"] == 1

    response = await api.patch(
        "/api/v1/users/2", json={"email": "user3@example.com"}, headers=USER1
    )
    assert response.status_code == 409
    assert (await api.patch("/api/v1/users/999", json={}, headers=USER1)).status_code == 404


async def test_delete_user_revokes_access(api: AsyncClient) -> None:
    before = await api.get("/api/v1/domains/accessible", headers={"X-User-ID": "2"})
    assert before.json()["domain_ids"] == [2, 3]
    assert (await api.delete("/api/v1/users/2", headers=USER1)).status_code == 204
    assert (await api.get("/api/v1/users/2", headers=USER1)).status_code == 404
    after = await api.get("/api/v1/domains/accessible", headers={"X-User-ID": "2"})
    assert after.json()["domain_ids"] == []
    assert (await api.delete("/api/v1/users/2", headers=USER1)).status_code == 404
