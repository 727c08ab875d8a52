"""Domain endpoints over in-memory fakes."""

from httpx import AsyncClient

USER1 = {"X-User-ID": "1"}
USER2 = {"X-User-ID": "2"}
USER3 = {"X-User-ID": "3"}


async def test_accessible_domain_ids(api: AsyncClient) -> None:
    response = await api.get("/api/v1/domains/accessible", headers=USER2)
    assert response.status_code == 200
    assert response.json() == {"user_id": 2, "domain_ids": [2, 3]}


async def test_list_domains(api: AsyncClient) -> None:
    response = await api.get("/api/v1/domains", headers=USER1)
    assert [d["name"] for d in response.json()["data"]] == ["Child", "Grandchild", "Root"]
    response = await api.get(
        "/api/v1/domains", params={"order_by": "ID", "direction": "DESC", "first": 2}, headers=USER1
    )
    assert [d["id"] for d in response.json()["data"]] == [3, 2]
    assert response.json()["pagination"]["has_next"] is True


async def test_get_domain(api: AsyncClient) -> None:
    response = await api.get("/api/v1/domains/3", headers=USER2)
    assert response.json()["parent_id"] == 2
    assert (await api.get("/api/v1/domains/1", headers=USER2)).status_code == 404


async def test_create_root_domain_grants_creator(api: AsyncClient) -> None:
    response = await api.post("/api/v1/domains", json={"name": "Mine"}, headers=USER3)
    assert response.status_code == 201
    domain_id = response.json()["id"]
    assert response.json()["parent_id"] is None
    accessible = await api.get("/api/v1/domains/accessible", headers=USER3)
    assert accessible.json()["domain_ids"] == [domain_id]


async def test_create_child_domain_under_inaccessible_parent_is_403(api: AsyncClient) -> None:
    response = await api.post(
        "/api/v1/domains", json={"name": "Sneaky", "parent_id": 1}, headers=USER2
    )
    assert response.status_code == 403


async def test_move_domain_under_descendant_is_400(api: AsyncClient) -> None:
    response = await api.patch("/api/v1/domains/1", json={"parent_id": 3}, headers=USER1)
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "parent_id"}


async def test_move_domain_to_root(api: AsyncClient) -> None:
    response = await api.patch("/api/v1/domains/3", json={"parent_id": None}, headers=USER1)
    assert response.status_code == 200
    assert response.json()["parent_id"] is None
    accessible = await api.get("/api/v1/domains/accessible", headers=USER1)
    assert accessible.json()["domain_ids"] == [1, 2]


async def test_rename_keeps_parent(api: AsyncClient) -> None:
    response = await api.patch("/api/v1/domains/2", json={"name": "Branch"}, headers=USER2)
    assert response.status_code == 200
    assert response.json()["name"] == "Branch"
    assert response.json()["parent_id"] == 1


async def test_delete_domain(api: AsyncClient) -> None:
    assert (await api.delete("/api/v1/domains/2", headers=USER1)).status_code == 400
    assert (await api.delete("/api/v1/domains/3", headers=USER1)).status_code == 204
    assert (await api.get("/api/v1/domains/3", headers=USER1)).status_code == 404


async def test_inaccessible_domain_writes_are_404(api: AsyncClient) -> None:
    response = await api.patch("/api/v1/domains/1", json={"name": "Taken"}, headers=USER2)
    assert response.status_code == 404
    assert (await api.delete("/api/v1/domains/1", headers=USER2)).status_code == 404
    assert (await api.delete("/api/v1/domains/999", headers=USER2)).status_code == 404
