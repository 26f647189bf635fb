"""
CRUD operations for Account model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from applytrack.models.account import Account, Role


def create(db: Session, email: str, hashed_password: str, role: Role = Role.USER) -> Account:
    """
    Create a new account.

    Args:
        db: Database session
        email: Unique login email
        hashed_password: bcrypt hash, never the plain password
        role: Account role (default USER)

    Returns:
        Created Account instance with id
    """
    account = Account(email=email, hashed_password=hashed_password, role=role)

    db.add(account)
    db.commit()
    db.refresh(account)

    return account


def get_by_id(db: Session, account_id: int) -> Optional[Account]:
    return db.query(Account).filter(Account.id == account_id).first()


def get_by_email(db: Session, email: str) -> Optional[Account]:
    return db.query(Account).filter(Account.email == email).first()


def exists_by_email(db: Session, email: str) -> bool:
    return db.query(Account.id).filter(Account.email == email).first() is not None
