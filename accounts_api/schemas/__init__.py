"""Pydantic request/response schemas."""

from accounts_api.schemas.auth import SignUpRequest, UserPublic
from accounts_api.schemas.errors import ErrorResponse
from accounts_api.schemas.health import ApiInfoResponse, HealthResponse

__all__ = [
    "ApiInfoResponse",
    "ErrorResponse",
    "HealthResponse",
    "SignUpRequest",
    "UserPublic",
]
