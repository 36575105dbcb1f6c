"""ORM model for user accounts."""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, func

from accounts_api.models.base import Base


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    """
    User account created by sign-up (role 'user') or by the operator CLI.

    email is stored lower-cased; uniqueness is enforced by the index.
    password_hash is a bcrypt digest and never leaves the server.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=UserRole.USER.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
