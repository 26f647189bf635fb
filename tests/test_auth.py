"""
Tests for authentication endpoints.

Tests:
- Registration (conflict, mismatch, password policy)
- Login
- Current account profile
"""

import pytest

from applytrack.core.security import decode_token, verify_password
from applytrack.models.account import Account, Role


class TestRegistration:
    """Test account registration endpoint"""

    def test_register_success(self, client, db_session):
        response = client.post("/api/v1/auth/register", json={
            "email": "test@example.com",
            "password": "SecurePass123!",
            "confirmPassword": "SecurePass123!",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["role"] == "USER"
        assert "id" in data
        assert "password" not in data and "hashedPassword" not in data

        account = db_session.query(Account).filter(Account.email == "test@example.com").first()
        assert account.role == Role.USER
        assert account.hashed_password != "SecurePass123!"
        assert verify_password("SecurePass123!", account.hashed_password)

    @pytest.mark.parametrize("password, confirm", [
        ("DifferentPass123!", "DifferentPass123!"),
        ("weak", "weak"),
        ("Mismatch123!", "Other123!"),
        ("", ""),
    ])
    def test_duplicate_email_conflicts_regardless_of_password(self, client, make_account, password, confirm):
        make_account("existing@example.com")

        response = client.post("/api/v1/auth/register", json={
            "email": "existing@example.com",
            "password": password,
            "confirmPassword": confirm,
        })

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "Conflict"
        assert "already registered" in body["message"].lower()

    def test_concurrent_duplicate_registration_conflicts(self, client, db_session, make_account, monkeypatch):
        from applytrack.crud import account as account_crud

        make_account("existing@example.com")
        # The other request inserted the row after this one checked for it
        monkeypatch.setattr(account_crud, "exists_by_email", lambda db, email: False)

        response = client.post("/api/v1/auth/register", json={
            "email": "existing@example.com",
            "password": "SecurePass123!",
            "confirmPassword": "SecurePass123!",
        })

        assert response.status_code == 409
        assert response.json()["error"] == "Conflict"
        assert db_session.query(Account).count() == 1

    def test_mismatched_passwords_rejected_without_persisting(self, client, db_session):
        response = client.post("/api/v1/auth/register", json={
            "email": "test@example.com",
            "password": "SecurePass123!",
            "confirmPassword": "SecurePass123?",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"
        assert "do not match" in response.json()["message"]
        assert db_session.query(Account).count() == 0

    @pytest.mark.parametrize("password", [
        "Sh0rt!",               # too short
        "nouppercase123!",      # no uppercase
        "NOLOWERCASE123!",      # no lowercase
        "NoDigitsHere!",        # no digit
        "NoSpecial12345",       # no special character
    ])
    def test_weak_password_rejected(self, client, db_session, password):
        response = client.post("/api/v1/auth/register", json={
            "email": "test@example.com",
            "password": password,
            "confirmPassword": password,
        })

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"
        assert db_session.query(Account).count() == 0

    def test_register_invalid_email(self, client):
        response = client.post("/api/v1/auth/register", json={
            "email": "not-an-email",
            "password": "SecurePass123!",
            "confirmPassword": "SecurePass123!",
        })

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation Error"
        assert body["path"] == "/api/v1/auth/register"

    def test_register_missing_confirmation(self, client):
        response = client.post("/api/v1/auth/register", json={
            "email": "test@example.com",
            "password": "SecurePass123!",
        })

        assert response.status_code == 400


class TestLogin:
    """Test login endpoint"""

    def test_login_success_returns_identity_and_token(self, client, make_account):
        account = make_account("test@example.com", "TestPass123!")

        response = client.post("/api/v1/auth/login", json={
            "email": "test@example.com",
            "password": "TestPass123!",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["accountId"] == account.id
        assert data["email"] == "test@example.com"
        assert data["role"] == "USER"
        assert data["type"] == "Bearer"

        claims = decode_token(data["token"])
        assert claims["sub"] == str(account.id)
        assert claims["email"] == "test@example.com"
        assert claims["role"] == "USER"
        assert "exp" in claims

    def test_login_unknown_email(self, client):
        response = client.post("/api/v1/auth/login", json={
            "email": "nobody@example.com",
            "password": "TestPass123!",
        })

        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    def test_login_wrong_password(self, client, make_account):
        make_account("test@example.com", "CorrectPass123!")

        response = client.post("/api/v1/auth/login", json={
            "email": "test@example.com",
            "password": "WrongPass123!",
        })

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "Unauthorized"
        assert body["message"] == "Invalid credentials"


class TestCurrentAccount:
    """Test /auth/me"""

    def test_me_returns_profile(self, client, owner):
        account_id, headers = owner

        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == account_id
        assert data["email"] == "owner@example.com"
        assert "createdAt" in data

    def test_me_requires_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"
