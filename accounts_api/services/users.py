"""Credential store: read/write calls against the users table."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_api.core.errors import ConflictError, PersistenceError
from accounts_api.models.user import User, UserRole

logger = logging.getLogger(__name__)


def insert_user(
    db: Session,
    *,
    name: str,
    email: str,
    password_hash: str,
    role: UserRole = UserRole.USER,
) -> User:
    """
    Add a user and flush so the id is assigned. The caller commits.

    Raises ConflictError when the email is already registered (unique index)
    and PersistenceError when the store is unavailable.
    """
    user = User(
        name=name,
        email=email.strip().lower(),
        password_hash=password_hash,
        role=role.value,
    )
    db.add(user)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email already registered", details={"email": user.email}) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("User insert failed: %s", type(e).__name__)
        raise PersistenceError() from e
    return user


def commit_user(db: Session, user: User) -> User:
    """Commit the pending user and reload server-generated columns."""
    try:
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email already registered", details={"email": user.email}) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("User commit failed: %s", type(e).__name__)
        raise PersistenceError() from e
    return user
