"""
FastAPI dependencies for authentication.

The bearer token is decoded into an Identity; endpoints hand
identity.account_id to the services explicitly. No request-global security
context exists.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from applytrack.core.database import MAX_ROW_ID
from applytrack.core.exceptions import UnauthorizedError
from applytrack.core.security import JWTError, decode_token
from applytrack.models.account import Role
from applytrack.schemas.account import Identity

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is reported as our own 401 payload
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """
    Extract and validate the caller's identity from the JWT.

    The account id is taken from the `sub` claim; email and role come from
    their own claims. The role must be a known Role.

    Raises:
        UnauthorizedError: header missing, token invalid/expired, or claims malformed
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    subject = payload.get("sub")
    email = payload.get("email")
    role = payload.get("role")
    if subject is None or email is None or role is None:
        raise UnauthorizedError("Could not validate credentials")

    try:
        identity = Identity(account_id=int(subject), email=email, role=Role(role))
    except ValueError:
        raise UnauthorizedError("Could not validate credentials")

    if not 1 <= identity.account_id <= MAX_ROW_ID:
        raise UnauthorizedError("Could not validate credentials")
    return identity


def get_account_id(identity: Identity = Depends(get_current_identity)) -> int:
    """
    Account id of the authenticated caller.

    Usage:
        @router.get("/applications")
        def list_applications(account_id: int = Depends(get_account_id), db: Session = Depends(get_db)):
            return application_service.list_for_owner(db, account_id)
    """
    return identity.account_id
