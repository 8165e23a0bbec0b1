"""
Unit tests for authentication endpoints.

Tests:
- User registration
- Duplicate email handling
- Login success and failure (no user-existence leak)
"""

from unittest.mock import patch

import pytest

from sitecms.crud import user as user_crud
from sitecms.models.user import User
from sitecms.schemas.user import UserPublic


class TestUserRegistration:
    """Test user registration endpoint"""

    def test_register_success(self, client):
        response = client.post(
            "/api/register",
            json={"email": "Admin@Example.com ", "password": "secret123"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["user"]["email"] == "admin@example.com"
        assert "id" in data["user"]
        assert "password" not in data["user"]
        assert "hashed_password" not in data["user"]

    def test_password_stored_hashed(self, client, db_session):
        client.post("/api/register", json={"email": "a@example.com", "password": "secret123"})

        user = db_session.query(User).filter(User.email == "a@example.com").one()
        assert user.hashed_password != "secret123"
        assert user.hashed_password.startswith("$2")

    def test_register_duplicate_email(self, client, db_session):
        first = client.post("/api/register", json={"email": "a@example.com", "password": "secret123"})
        second = client.post("/api/register", json={"email": "A@example.com", "password": "other456"})

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["error"] == "User with this email already exists"
        assert db_session.query(User).filter(User.email == "a@example.com").count() == 1

    def test_register_missing_fields(self, client):
        assert client.post("/api/register", json={"email": "a@example.com"}).status_code == 400
        assert client.post("/api/register", json={"password": "secret123"}).status_code == 400

    def test_register_invalid_email(self, client):
        response = client.post("/api/register", json={"email": "not-an-email", "password": "secret123"})

        assert response.status_code == 400
        assert "email" in response.json()["error"]

    @pytest.mark.parametrize("email", ["a@b@c.com", "x@y..com", "<script>@evil.io", "no-domain@"])
    def test_register_rejects_malformed_addresses(self, client, db_session, email):
        response = client.post("/api/register", json={"email": email, "password": "secret123"})

        assert response.status_code == 400
        assert "email" in response.json()["error"]
        assert db_session.query(User).count() == 0

    def test_register_race_on_unique_email(self, client, db_session):
        client.post("/api/register", json={"email": "a@example.com", "password": "secret123"})

        # Second request passes the existence check, then hits the unique constraint
        with patch("sitecms.api.endpoints.auth.user_crud.get_by_email", return_value=None):
            response = client.post("/api/register", json={"email": "a@example.com", "password": "other456"})

        assert response.status_code == 400
        assert response.json()["error"] == "User with this email already exists"
        assert db_session.query(User).count() == 1

    def test_register_short_password(self, client):
        response = client.post("/api/register", json={"email": "a@example.com", "password": "12345"})

        assert response.status_code == 400
        assert "password" in response.json()["error"]


class TestUserLogin:
    """Test login endpoint"""

    def _register(self, client):
        client.post("/api/register", json={"email": "admin@example.com", "password": "secret123"})

    def test_login_success(self, client):
        self._register(client)

        response = client.post("/api/login", json={"email": "ADMIN@example.com", "password": "secret123"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == "admin@example.com"
        assert "token" not in data
        assert "set-cookie" not in response.headers

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        self._register(client)

        wrong_password = client.post("/api/login", json={"email": "admin@example.com", "password": "nope123"})
        unknown_email = client.post("/api/login", json={"email": "ghost@example.com", "password": "secret123"})

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}

    def test_login_missing_fields(self, client):
        assert client.post("/api/login", json={"email": "admin@example.com"}).status_code == 400
        assert client.post("/api/login", json={"email": "", "password": "x"}).status_code == 400


class TestUserPublicSchema:

    def test_built_from_orm_user_without_deprecation_warnings(self, db_session, recwarn):
        user = user_crud.create(db_session, "editor@example.com", "secret123")
        public = UserPublic.model_validate(user)

        assert public.email == "editor@example.com"
        assert UserPublic.model_config["from_attributes"] is True
        assert not [w for w in recwarn if "Pydantic" in w.category.__name__]
