"""Integration tests for account registration, update and deregistration."""

from __future__ import annotations

import pytest


def _profile(username="alice01", password="pw", email="a@b.com", **extra):
    body = {"Username": username, "Password": password, "Email": email}
    body.update(extra)
    return body


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_then_duplicate(self, client):
        first = await client.post("/users", json=_profile())
        second = await client.post("/users", json=_profile(email="other@b.com"))

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["detail"] == "alice01 already exists"

    @pytest.mark.asyncio
    async def test_register_response_shape(self, client):
        resp = await client.post("/users", json=_profile(Birthday="1990-05-17"))

        data = resp.json()
        assert data["_id"]
        assert data["Username"] == "alice01"
        assert data["Email"] == "a@b.com"
        assert data["Birthday"] == "1990-05-17"
        assert data["FavoriteMovies"] == []
        assert "Password" not in data

    @pytest.mark.asyncio
    async def test_register_invalid_fields(self, client):
        resp = await client.post("/users", json=_profile(username="ab!", password="", email="x"))

        assert resp.status_code == 422
        fields = {e["field"] for e in resp.json()["errors"]}
        assert fields == {"username", "password", "email"}

    @pytest.mark.asyncio
    async def test_register_username_with_trailing_newline(self, client):
        await client.post("/users", json=_profile())

        resp = await client.post("/users", json=_profile(username="alice01\n"))

        assert resp.status_code == 422
        assert resp.json()["errors"] == [{
            "field": "username",
            "msg": "Username contains non alphanumeric characters - not allowed",
        }]

    @pytest.mark.asyncio
    async def test_register_missing_field(self, client):
        resp = await client.post("/users", json={"Username": "alice01", "Password": "pw"})

        assert resp.status_code == 422
        assert resp.json()["errors"][0]["field"] == "Email"

    @pytest.mark.asyncio
    async def test_register_bad_birthday(self, client):
        resp = await client.post("/users", json=_profile(Birthday="not-a-date"))

        assert resp.status_code == 422


class TestRead:

    @pytest.mark.asyncio
    async def test_list_users_hides_hashes(self, client, auth_headers):
        await client.post("/users", json=_profile(username="bobby01"))

        resp = await client.get("/users", headers=auth_headers)

        assert resp.status_code == 200
        users = resp.json()
        assert {u["Username"] for u in users} == {"alice01", "bobby01"}
        for user in users:
            assert "Password" not in user
            assert "password_hash" not in user

    @pytest.mark.asyncio
    async def test_get_user(self, client, auth_headers):
        resp = await client.get("/users/alice01", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.json()["Email"] == "a@b.com"

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, client, auth_headers):
        resp = await client.get("/users/ghost01", headers=auth_headers)

        assert resp.status_code == 404
        assert resp.json()["detail"] == "User ghost01 was not found"

    @pytest.mark.asyncio
    async def test_list_requires_token(self, client):
        assert (await client.get("/users")).status_code == 401


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_keeping_own_username(self, client, auth_headers):
        resp = await client.put(
            "/users/alice01",
            json=_profile(email="new@b.com"),
            headers=auth_headers,
        )

        assert resp.status_code == 200
        assert resp.json()["Email"] == "new@b.com"

    @pytest.mark.asyncio
    async def test_update_changes_password(self, client, auth_headers):
        await client.put("/users/alice01", json=_profile(password="newpw"), headers=auth_headers)

        old = await client.post("/login", json={"Username": "alice01", "Password": "pw"})
        new = await client.post("/login", json={"Username": "alice01", "Password": "newpw"})

        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_rename_keeps_favorites(self, client, auth_headers, movie):
        await client.post(f"/users/alice01/movies/{movie.id}", headers=auth_headers)

        resp = await client.put(
            "/users/alice01", json=_profile(username="alice02"), headers=auth_headers
        )

        assert resp.status_code == 200
        assert resp.json()["Username"] == "alice02"
        assert resp.json()["FavoriteMovies"] == [movie.id]
        gone = await client.get("/users/alice01", headers=auth_headers)
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_rename_onto_taken_username(self, client, auth_headers):
        await client.post("/users", json=_profile(username="bobby01"))

        resp = await client.put(
            "/users/alice01", json=_profile(username="bobby01"), headers=auth_headers
        )

        assert resp.status_code == 409

    @pytest.mark.asyncio
    async def test_update_unknown_user(self, client, auth_headers):
        resp = await client.put(
            "/users/ghost01", json=_profile(username="ghost02"), headers=auth_headers
        )

        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_update_invalid_fields(self, client, auth_headers):
        resp = await client.put(
            "/users/alice01", json=_profile(email="nope"), headers=auth_headers
        )

        assert resp.status_code == 422
        assert resp.json()["errors"] == [
            {"field": "email", "msg": "Email does not appear to be valid"}
        ]


class TestDeregister:

    @pytest.mark.asyncio
    async def test_deregister(self, client, auth_headers):
        resp = await client.delete("/users/alice01", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.text == "User alice01 was deleted."
        login = await client.post("/login", json={"Username": "alice01", "Password": "pw"})
        assert login.status_code == 401

    @pytest.mark.asyncio
    async def test_deregister_unknown(self, client, auth_headers):
        resp = await client.delete("/users/ghost01", headers=auth_headers)

        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_username_reusable_after_deregister(self, client, auth_headers):
        await client.delete("/users/alice01", headers=auth_headers)

        resp = await client.post("/users", json=_profile())

        assert resp.status_code == 201
