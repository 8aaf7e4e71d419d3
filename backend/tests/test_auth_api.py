"""Integration tests for /api/auth endpoints."""

from httpx import AsyncClient


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestRegister:
    """POST /api/auth/register"""

    async def test_register_returns_token_and_profile(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"email": "a@x.com", "password": "Secret123!", "fullName": "Ahmet Kaya"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "a@x.com"
        assert body["fullName"] == "Ahmet Kaya"
        assert body["token"]
        assert body["expiresAt"]

    async def test_snake_case_body_is_accepted(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"email": "a@x.com", "password": "Secret123!", "full_name": "Ahmet Kaya"},
        )

        assert response.status_code == 201
        assert response.json()["fullName"] == "Ahmet Kaya"

    async def test_duplicate_email_returns_409(self, client: AsyncClient, register):
        await register("a@x.com")

        response = await client.post(
            "/api/auth/register",
            json={"email": "A@X.com", "password": "Secret123!"},
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_weak_password_returns_every_violation(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"email": "a@x.com", "password": "abc"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert len(error["details"]["errors"]) == 4

    async def test_malformed_email_returns_400(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": "Secret123!"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_rejected_password_is_not_echoed(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": "Hunter2!secret"},
        )

        assert "Hunter2!secret" not in response.text


class TestLogin:
    """POST /api/auth/login"""

    async def test_login_returns_token(self, client: AsyncClient, register):
        await register("a@x.com", full_name="Ahmet Kaya")

        response = await client.post(
            "/api/auth/login",
            json={"email": "a@x.com", "password": "Secret123!"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "a@x.com"
        assert body["fullName"] == "Ahmet Kaya"
        assert body["token"]

    async def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, client: AsyncClient, register
    ):
        await register("a@x.com")

        wrong_password = await client.post(
            "/api/auth/login",
            json={"email": "a@x.com", "password": "Wrong123!"},
        )
        unknown_email = await client.post(
            "/api/auth/login",
            json={"email": "ghost@x.com", "password": "Secret123!"},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()


class TestMe:
    """GET /api/auth/me"""

    async def test_me_returns_token_identity(self, client: AsyncClient, register):
        token = await register("a@x.com", full_name="Ahmet Kaya")

        response = await client.get("/api/auth/me", headers=_auth(token))

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "a@x.com"
        assert body["fullName"] == "Ahmet Kaya"
        assert body["userId"]

    async def test_missing_token_returns_401(self, client: AsyncClient):
        response = await client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_invalid_token_returns_401(self, client: AsyncClient):
        response = await client.get("/api/auth/me", headers=_auth("not.a.token"))

        assert response.status_code == 401
