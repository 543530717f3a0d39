"""Registration, login and session resolution."""

import pytest

from jobboard.errors import DuplicateEmail, InvalidCredentials, InvalidToken, UserNotFound, ValidationError
from jobboard.extensions import bcrypt, db
from jobboard.models import User
from jobboard.services.auth import AuthService
from tests.helpers import auth_header, register


class TestRegister:
    def test_register_returns_user_and_token(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Acme HR",
            "email": "Acme@X.com ",
            "password": "secret123",
            "role": "employer",
            "company": "Acme",
        })

        assert response.status_code == 201
        body = response.get_json()
        assert body["success"] is True
        user = body["data"]["user"]
        assert user["email"] == "acme@x.com"
        assert user["role"] == "employer"
        assert user["company"] == "Acme"
        assert "password" not in user
        assert body["data"]["token"]

    def test_password_is_stored_hashed(self, app, client):
        register(client, "bob@x.com", "jobseeker", password="hunter22")

        stored = User.query.filter_by(email="bob@x.com").first()
        assert stored.password != "hunter22"
        assert bcrypt.check_password_hash(stored.password, "hunter22")

    def test_company_is_ignored_for_jobseekers(self, client):
        _, user = register(client, "bob@x.com", "jobseeker", company="Should Not Stick")
        assert user["company"] is None

    def test_duplicate_email_rejected(self, client):
        register(client, "bob@x.com", "jobseeker")

        response = client.post("/api/auth/register", json={
            "name": "Bob Again", "email": "BOB@x.com", "password": "secret123", "role": "jobseeker",
        })

        assert response.status_code == 400
        assert response.get_json() == {"success": False, "message": "Email already registered"}

    @pytest.mark.parametrize("payload", [
        {"email": "a@x.com", "password": "secret123", "role": "jobseeker"},
        {"name": "A", "password": "secret123", "role": "jobseeker"},
        {"name": "A", "email": "a@x.com", "role": "jobseeker"},
        {"name": "A", "email": "a@x.com", "password": "secret123"},
        {"name": "A", "email": "a@x.com", "password": "secret123", "role": "admin"},
        {"name": "A", "email": "a@x.com", "password": "123", "role": "jobseeker"},
        {"name": "A", "email": "not-an-email", "password": "secret123", "role": "jobseeker"},
    ])
    def test_invalid_registration(self, client, payload):
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_non_json_body(self, client):
        response = client.post("/api/auth/register", data="name=bob", content_type="text/plain")
        assert response.status_code == 400
        assert response.get_json()["message"] == "No JSON data provided"

    def test_service_raises_duplicate_email(self, app):
        AuthService.register("Bob", "bob@x.com", "secret123", "jobseeker")
        with pytest.raises(DuplicateEmail):
            AuthService.register("Bob", "bob@x.com", "secret123", "jobseeker")

    def test_service_rejects_unknown_role(self, app):
        with pytest.raises(ValidationError):
            AuthService.register("Root", "root@x.com", "secret123", "admin")


class TestLogin:
    def test_login_success(self, client):
        register(client, "bob@x.com", "jobseeker", password="secret123")

        response = client.post("/api/auth/login", json={"email": "bob@x.com", "password": "secret123"})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["user"]["email"] == "bob@x.com"
        assert data["token"]

    def test_unknown_email_and_wrong_password_look_the_same(self, client):
        register(client, "bob@x.com", "jobseeker", password="secret123")

        wrong_password = client.post("/api/auth/login", json={"email": "bob@x.com", "password": "nope-nope"})
        unknown_email = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "secret123"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.get_json() == unknown_email.get_json()

    def test_login_requires_fields(self, client):
        response = client.post("/api/auth/login", json={"email": "bob@x.com"})
        assert response.status_code == 400

    def test_service_raises_invalid_credentials(self, app):
        AuthService.register("Bob", "bob@x.com", "secret123", "jobseeker")
        with pytest.raises(InvalidCredentials):
            AuthService.login("bob@x.com", "wrong-password")


class TestSession:
    def test_me_returns_caller(self, client, seeker):
        response = client.get("/api/auth/me", headers=auth_header(seeker["token"]))

        assert response.status_code == 200
        assert response.get_json()["data"]["_id"] == seeker["user"]["_id"]

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.get_json()["message"] == "No authentication token provided"

    def test_resolve_session_round_trip(self, app, seeker):
        user = AuthService.resolve_session(seeker["token"])
        assert user.id == seeker["user"]["_id"]

    def test_resolve_session_rejects_garbage(self, app):
        with pytest.raises(InvalidToken):
            AuthService.resolve_session("not.a.token")

    def test_resolve_session_for_deleted_user(self, app, seeker):
        db.session.delete(db.session.get(User, seeker["user"]["_id"]))
        db.session.commit()

        with pytest.raises(UserNotFound):
            AuthService.resolve_session(seeker["token"])
