import pytest


@pytest.mark.asyncio
async def test_favorites_require_login(client, make_property):
    p = await make_property()
    assert (await client.get("/api/favorites")).status_code == 401
    assert (await client.post(f"/api/favorites/{p['id']}")).status_code == 401


@pytest.mark.asyncio
async def test_add_status_list_remove(client, make_client, make_property, login_user):
    p = await make_property()
    pid = p["id"]
    user = make_client()
    await login_user(user, "fav@example.com")

    assert (await user.get(f"/api/favorites/{pid}/status")).json() == {"property_id": pid, "is_favorite": False}

    r = await user.post(f"/api/favorites/{pid}")
    assert r.status_code == 201
    assert (await user.get(f"/api/favorites/{pid}/status")).json()["is_favorite"] is True

    dup = await user.post(f"/api/favorites/{pid}")
    assert dup.status_code == 409

    favs = (await user.get("/api/favorites")).json()
    assert [f["id"] for f in favs] == [pid]

    assert (await user.delete(f"/api/favorites/{pid}")).status_code == 200
    assert (await user.delete(f"/api/favorites/{pid}")).status_code == 404
    assert (await user.get("/api/favorites")).json() == []


@pytest.mark.asyncio
async def test_favorite_missing_property(make_client, login_user):
    user = make_client()
    await login_user(user, "nofav@example.com")
    assert (await user.post("/api/favorites/12345")).status_code == 404


@pytest.mark.asyncio
async def test_trashed_property_leaves_favorites(client, make_client, make_property, login_user, admin_headers):
    p = await make_property()
    user = make_client()
    await login_user(user, "trashfav@example.com")
    await user.post(f"/api/favorites/{p['id']}")

    await client.delete(f"/api/properties/{p['id']}", headers=admin_headers)
    assert (await user.get("/api/favorites")).json() == []

    await client.post(f"/api/trash/{p['id']}/restore", headers=admin_headers)
    assert [f["id"] for f in (await user.get("/api/favorites")).json()] == [p["id"]]


@pytest.mark.asyncio
async def test_favorites_are_per_user(make_client, make_property, login_user):
    p = await make_property()
    a, b = make_client(), make_client()
    await login_user(a, "a@example.com")
    await login_user(b, "b@example.com")
    await a.post(f"/api/favorites/{p['id']}")
    assert (await b.get(f"/api/favorites/{p['id']}/status")).json()["is_favorite"] is False
