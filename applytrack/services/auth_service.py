"""
Account registration and credential verification.

Token issuance stays at the HTTP boundary; login only proves the
credentials and returns the resolved identity.
"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from applytrack.core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from applytrack.core.security import get_password_hash, password_policy_violations, verify_password
from applytrack.crud import account as account_crud
from applytrack.models.account import Account, Role
from applytrack.schemas.account import Identity, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def register(db: Session, request: RegisterRequest) -> Account:
    """
    Register a new account with role USER.

    Checks run in a fixed order and nothing is written unless all pass:
    1. email not already registered (ConflictError)
    2. password == confirm_password (ValidationError)
    3. password meets the strength policy (ValidationError)
    """
    if account_crud.exists_by_email(db, request.email):
        raise ConflictError("Email already registered")

    if request.password != request.confirm_password:
        raise ValidationError("Passwords do not match")

    problems = password_policy_violations(request.password)
    if problems:
        raise ValidationError(problems[0])

    try:
        account = account_crud.create(
            db,
            email=request.email,
            hashed_password=get_password_hash(request.password),
            role=Role.USER,
        )
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictError("Email already registered")

    logger.info(f"New account registered: {account.email} (id: {account.id})")
    return account


def login(db: Session, request: LoginRequest) -> Identity:
    """
    Verify credentials and return the caller's identity.

    Raises:
        NotFoundError: no account with this email
        UnauthorizedError: password does not match
    """
    account = account_crud.get_by_email(db, request.email)
    if account is None:
        raise NotFoundError("User not found")

    if not verify_password(request.password, account.hashed_password):
        logger.warning(f"Failed login for {request.email}")
        raise UnauthorizedError("Invalid credentials")

    logger.info(f"Account logged in: {account.email}")
    return Identity(account_id=account.id, email=account.email, role=account.role)


def get_account(db: Session, account_id: int) -> Account:
    account = account_crud.get_by_id(db, account_id)
    if account is None:
        raise NotFoundError("User not found")
    return account
