"""Sign-up, sign-in and sign-out endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from accounts_api.api.deps import get_auth_controller
from accounts_api.core.database import get_db
from accounts_api.schemas.auth import SignUpRequest, UserPublic
from accounts_api.schemas.errors import ErrorResponse
from accounts_api.services.auth import AuthController

router = APIRouter()

PLACEHOLDER_RESPONSES = {501: {"model": ErrorResponse, "description": "Not implemented yet"}}


@router.post(
    "/sign-up",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
def sign_up(
    body: SignUpRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    controller: Annotated[AuthController, Depends(get_auth_controller)],
) -> UserPublic:
    """
    Create an account and start a session.

    The signed token is set as an httpOnly `access_token` cookie (15 minutes);
    the token itself is valid for 1 day.
    """
    return controller.sign_up(db, body, response)


@router.post("/sign-in", status_code=status.HTTP_501_NOT_IMPLEMENTED, responses=PLACEHOLDER_RESPONSES)
def sign_in(controller: Annotated[AuthController, Depends(get_auth_controller)]) -> None:
    """Placeholder: always 501 until credential verification is implemented."""
    controller.sign_in()


@router.post("/sign-out", status_code=status.HTTP_501_NOT_IMPLEMENTED, responses=PLACEHOLDER_RESPONSES)
def sign_out(controller: Annotated[AuthController, Depends(get_auth_controller)]) -> None:
    """Placeholder: always 501. Does not clear the cookie."""
    controller.sign_out()
