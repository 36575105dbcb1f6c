"""Structured error body returned for every failed request."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")
    details: Any | None = Field(default=None, description="Optional structured details")
