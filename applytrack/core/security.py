"""
Security utilities for JWT authentication and password hashing.

Tokens are signed with a shared secret (HS512 by default) and carry the
account id, email and role. Passwords are hashed using bcrypt.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from applytrack.core.config import settings

# Password hashing context (bcrypt)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72  # bcrypt limit
PASSWORD_SPECIAL_CHARACTERS = r'[!@#$%^&*(),.?":{}|<>_\-+=~`\[\]\\/;\']'


def password_policy_violations(password: str) -> List[str]:
    """
    Check a password against the strength policy.

    Returns a list of human-readable violations; an empty list means the
    password is acceptable.
    """
    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(password.encode('utf-8')) > PASSWORD_MAX_LENGTH:
        problems.append(f"Password cannot exceed {PASSWORD_MAX_LENGTH} bytes")
    if not re.search(r'[a-z]', password):
        problems.append("Password must contain at least one lowercase letter")
    if not re.search(r'[A-Z]', password):
        problems.append("Password must contain at least one uppercase letter")
    if not re.search(r'\d', password):
        problems.append("Password must contain at least one number")
    if not re.search(PASSWORD_SPECIAL_CHARACTERS, password):
        problems.append("Password must contain at least one special character")
    return problems


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are truncated to comply with this limitation.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode (typically {"sub": account_id, "email": ..., "role": ...})
        expires_delta: Optional expiration time delta (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire, "iat": now})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


__all__ = [
    "JWTError",
    "create_access_token",
    "decode_token",
    "get_password_hash",
    "password_policy_violations",
    "verify_password",
]
