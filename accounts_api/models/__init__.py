"""SQLAlchemy ORM models."""

from accounts_api.models.base import Base
from accounts_api.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole"]
