"""Integration tests for /api/blog endpoints."""

from datetime import datetime

from httpx import AsyncClient


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def _create(client: AsyncClient, token: str, title: str, **extra) -> dict:
    response = await client.post(
        "/api/blog",
        json={"title": title, "content": extra.pop("content", "Body"), **extra},
        headers=_auth(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestEndToEnd:
    async def test_register_create_forbid_update(self, client: AsyncClient, register):
        owner = await register("a@x.com", password="Secret123!", full_name="Ahmet Kaya")
        other = await register("b@x.com")

        post = await _create(client, owner, "Ben Ahmet - Kaya")
        assert post["slug"] == "ben-ahmet-kaya"
        assert post["authorEmail"] == "a@x.com"
        assert post["authorFullName"] == "Ahmet Kaya"
        assert post["isPublished"] is True
        assert post["updatedAt"] is None

        forbidden = await client.put(
            f"/api/blog/{post['id']}",
            json={"title": "Hijack", "content": "Nope"},
            headers=_auth(other),
        )
        assert forbidden.status_code == 403
        assert forbidden.json()["error"]["code"] == "AUTHORIZATION_ERROR"

        updated = await client.put(
            f"/api/blog/{post['id']}",
            json={"title": "Ben Ahmet - Kaya (v2)", "content": "Edited"},
            headers=_auth(owner),
        )
        assert updated.status_code == 200
        body = updated.json()
        assert body["content"] == "Edited"
        assert body["slug"] == "ben-ahmet-kaya"
        assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(body["createdAt"])


class TestCreate:
    async def test_missing_token_returns_401(self, client: AsyncClient):
        response = await client.post("/api/blog", json={"title": "T", "content": "C"})

        assert response.status_code == 401

    async def test_colliding_titles(self, client: AsyncClient, register):
        token = await register("a@x.com")

        first = await _create(client, token, "Ben Ahmet")
        second = await _create(client, token, "ben ahmet!")

        assert first["slug"] == "ben-ahmet"
        assert second["slug"] == "ben-ahmet-2"

    async def test_blank_title_returns_field_error(self, client: AsyncClient, register):
        token = await register("a@x.com")

        response = await client.post(
            "/api/blog",
            json={"title": "  ", "content": "Body"},
            headers=_auth(token),
        )

        assert response.status_code == 400
        assert "title" in response.json()["error"]["details"]["errors"]

    async def test_missing_content_returns_400(self, client: AsyncClient, register):
        token = await register("a@x.com")

        response = await client.post("/api/blog", json={"title": "T"}, headers=_auth(token))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestRead:
    async def test_get_by_slug_and_id(self, client: AsyncClient, register):
        token = await register("a@x.com")
        post = await _create(client, token, "Hello World")

        by_slug = await client.get("/api/blog/hello-world", headers=_auth(token))
        by_id = await client.get(f"/api/blog/id/{post['id']}", headers=_auth(token))

        assert by_slug.status_code == 200
        assert by_id.status_code == 200
        assert by_slug.json() == by_id.json()

    async def test_unknown_slug_returns_404(self, client: AsyncClient, register):
        token = await register("a@x.com")

        response = await client.get("/api/blog/nothing-here", headers=_auth(token))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_drafts_are_private(self, client: AsyncClient, register):
        owner = await register("a@x.com")
        reader = await register("b@x.com")
        await _create(client, owner, "Public post")
        draft = await _create(client, owner, "Secret draft", isPublished=False)

        reader_list = await client.get("/api/blog", headers=_auth(reader))
        owner_list = await client.get("/api/blog", headers=_auth(owner))
        reader_fetch = await client.get(f"/api/blog/{draft['slug']}", headers=_auth(reader))
        reader_fetch_by_id = await client.get(f"/api/blog/id/{draft['id']}", headers=_auth(reader))

        assert [p["title"] for p in reader_list.json()] == ["Public post"]
        assert {p["title"] for p in owner_list.json()} == {"Public post", "Secret draft"}
        assert reader_fetch.status_code == 404
        assert reader_fetch_by_id.status_code == 404

    async def test_mine_lists_only_my_posts(self, client: AsyncClient, register):
        owner = await register("a@x.com")
        reader = await register("b@x.com")
        await _create(client, owner, "Owner draft", isPublished=False)
        await _create(client, reader, "Reader post")

        response = await client.get("/api/blog/mine", headers=_auth(owner))

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Owner draft"]

    async def test_post_titled_mine_is_reachable_by_slug(self, client: AsyncClient, register):
        token = await register("a@x.com")
        post = await _create(client, token, "Mine")

        by_slug = await client.get(f"/api/blog/{post['slug']}", headers=_auth(token))
        mine = await client.get("/api/blog/mine", headers=_auth(token))

        assert post["slug"] == "mine-2"
        assert by_slug.status_code == 200
        assert by_slug.json()["id"] == post["id"]
        assert [p["id"] for p in mine.json()] == [post["id"]]

    async def test_unknown_slug_message_names_the_slug(self, client: AsyncClient, register):
        token = await register("a@x.com")

        response = await client.get("/api/blog/ben-ahmet", headers=_auth(token))

        assert response.json()["error"]["message"] == "Post with slug 'ben-ahmet' not found"

    async def test_list_requires_token(self, client: AsyncClient):
        response = await client.get("/api/blog")

        assert response.status_code == 401


class TestUpdate:
    async def test_regenerate_slug(self, client: AsyncClient, register):
        token = await register("a@x.com")
        post = await _create(client, token, "Old title")

        response = await client.put(
            f"/api/blog/{post['id']}",
            json={"title": "New title", "content": "Body", "regenerateSlug": True},
            headers=_auth(token),
        )

        assert response.status_code == 200
        assert response.json()["slug"] == "new-title"

    async def test_regenerated_slug_collision_gets_numbered(self, client: AsyncClient, register):
        token = await register("a@x.com")
        await _create(client, token, "Fresh Name")
        post = await _create(client, token, "Old Name")

        response = await client.put(
            f"/api/blog/{post['id']}",
            json={"title": "Fresh Name", "content": "Body", "regenerateSlug": True},
            headers=_auth(token),
        )
        fetched = await client.get("/api/blog/fresh-name-2", headers=_auth(token))

        assert response.status_code == 200, response.text
        assert response.json()["slug"] == "fresh-name-2"
        assert fetched.json()["id"] == post["id"]

    async def test_update_missing_post_returns_404(self, client: AsyncClient, register):
        token = await register("a@x.com")

        response = await client.put(
            "/api/blog/12345",
            json={"title": "T", "content": "C"},
            headers=_auth(token),
        )

        assert response.status_code == 404

    async def test_forbidden_update_leaves_post_unchanged(self, client: AsyncClient, register):
        owner = await register("a@x.com")
        other = await register("b@x.com")
        post = await _create(client, owner, "Original", content="Original body")

        await client.put(
            f"/api/blog/{post['id']}",
            json={"title": "Changed", "content": "Changed body"},
            headers=_auth(other),
        )
        current = await client.get(f"/api/blog/id/{post['id']}", headers=_auth(owner))

        assert current.json()["title"] == "Original"
        assert current.json()["content"] == "Original body"


class TestDelete:
    async def test_delete_twice(self, client: AsyncClient, register):
        token = await register("a@x.com")
        post = await _create(client, token, "Temporary")

        first = await client.delete(f"/api/blog/{post['id']}", headers=_auth(token))
        second = await client.delete(f"/api/blog/{post['id']}", headers=_auth(token))

        assert first.status_code == 204
        assert second.status_code == 404

    async def test_non_owner_cannot_delete(self, client: AsyncClient, register):
        owner = await register("a@x.com")
        other = await register("b@x.com")
        post = await _create(client, owner, "Keep")

        response = await client.delete(f"/api/blog/{post['id']}", headers=_auth(other))
        still_there = await client.get(f"/api/blog/id/{post['id']}", headers=_auth(owner))

        assert response.status_code == 403
        assert still_there.status_code == 200
