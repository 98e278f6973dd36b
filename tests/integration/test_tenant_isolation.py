"""Cross-tenant access must never succeed, even with a known note id."""

import pytest

pytestmark = pytest.mark.asyncio


async def test_other_tenant_cannot_see_or_change_note(
    async_client, acme_admin, globex_admin, make_note, auth_headers
):
    note = await make_note(acme_admin, "Acme secret")
    headers = auth_headers(globex_admin)

    listed = (await async_client.get("/api/notes", headers=headers)).json()
    assert listed["notes"] == []

    resp = await async_client.get(f"/api/notes/{note.id}", headers=headers)
    assert resp.status_code == 404

    resp = await async_client.put(
        f"/api/notes/{note.id}", json={"title": "pwned", "content": "pwned"}, headers=headers
    )
    assert resp.status_code == 404

    resp = await async_client.delete(f"/api/notes/{note.id}", headers=headers)
    assert resp.status_code == 404

    # untouched for its owner
    resp = await async_client.get(f"/api/notes/{note.id}", headers=auth_headers(acme_admin))
    assert resp.json()["note"]["title"] == "Acme secret"


async def test_search_does_not_cross_tenants(async_client, acme_member, globex_member, make_note, auth_headers):
    await make_note(acme_member, "Roadmap", "acme only")
    await make_note(globex_member, "Roadmap", "globex only")

    resp = await async_client.get("/api/notes?search=roadmap", headers=auth_headers(globex_member))

    notes = resp.json()["notes"]
    assert [n["content"] for n in notes] == ["globex only"]


async def test_end_to_end_login_create_and_isolation(async_client, acme_admin, globex_admin):
    acme_login = await async_client.post(
        "/api/auth/login", json={"email": "admin@acme.test", "password": "password"}
    )
    acme_headers = {"Authorization": f"Bearer {acme_login.json()['token']}"}

    created = await async_client.post(
        "/api/notes", json={"title": "Acme plan", "content": "Q4"}, headers=acme_headers
    )
    assert created.status_code == 201
    note = created.json()["note"]
    assert note["tenantId"] == acme_login.json()["user"]["tenant"]["id"]

    globex_login = await async_client.post(
        "/api/auth/login", json={"email": "admin@globex.test", "password": "password"}
    )
    globex_headers = {"Authorization": f"Bearer {globex_login.json()['token']}"}

    listed = (await async_client.get("/api/notes", headers=globex_headers)).json()
    assert note["id"] not in [n["id"] for n in listed["notes"]]
