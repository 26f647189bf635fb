"""
Authentication endpoints for registration and login.

- POST /register: Create a new account
- POST /login: Verify credentials and receive a JWT
- GET /me: Current account profile
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from applytrack.core.database import get_db
from applytrack.core.deps import get_account_id
from applytrack.core.security import create_access_token
from applytrack.schemas.account import AccountResponse, AuthResponse, LoginRequest, RegisterRequest
from applytrack.services import auth_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new account.

    Returns 409 if the email is taken, 400 if the passwords differ or the
    password is too weak (8-72 characters with upper, lower, digit and
    special character).
    """
    return auth_service.register(db, request)


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate and return a bearer token.

    The token carries the account id (`sub`), email and role; send it as
    `Authorization: Bearer <token>` on every other endpoint.
    """
    identity = auth_service.login(db, request)

    token = create_access_token(
        data={"sub": str(identity.account_id), "email": identity.email, "role": identity.role.value}
    )

    return AuthResponse(
        token=token,
        account_id=identity.account_id,
        email=identity.email,
        role=identity.role,
    )


@router.get("/me", response_model=AccountResponse)
def read_current_account(
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """Get the profile of the authenticated account."""
    return auth_service.get_account(db, account_id)
