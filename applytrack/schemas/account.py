"""
Pydantic schemas for account registration, login and identity.
"""

from pydantic import EmailStr
from datetime import datetime

from applytrack.models.account import Role
from applytrack.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """
    Request schema for account registration.

    Password strength and confirmation are checked by the auth service so
    that a duplicate email is always reported as a conflict first.
    """
    email: EmailStr
    password: str
    confirm_password: str


class LoginRequest(CamelModel):
    """Request schema for login."""
    email: EmailStr
    password: str


class Identity(CamelModel):
    """
    Resolved identity of the caller.

    Produced by a successful login and by decoding a bearer token; passed
    explicitly into every service call that needs an owner.
    """
    account_id: int
    email: str
    role: Role


class AuthResponse(CamelModel):
    """Login response: signed token plus the identity it carries."""
    token: str
    type: str = "Bearer"
    account_id: int
    email: str
    role: Role


class AccountResponse(CamelModel):
    """Account profile response (no credentials)."""
    id: int
    email: str
    role: Role
    created_at: datetime
