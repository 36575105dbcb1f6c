"""Auth controller: sign-up orchestration and the sign-in/sign-out placeholders."""

import logging
from enum import Enum

from sqlalchemy.orm import Session
from starlette.responses import Response

from accounts_api.core.cookies import SessionCookieManager
from accounts_api.core.errors import FeatureNotImplementedError, RequestValidationFailed
from accounts_api.core.security import PasswordHasher, TokenIssuer
from accounts_api.models.user import UserRole
from accounts_api.schemas.auth import SignUpRequest, UserPublic
from accounts_api.services import users

logger = logging.getLogger(__name__)


class SignUpStage(str, Enum):
    """Stages of the sign-up flow, in order. Failures are logged with the last stage reached."""

    RECEIVED = "received"
    VALIDATED = "validated"
    HASHED_PASSWORD = "hashed_password"
    PERSISTED = "persisted"
    TOKEN_ISSUED = "token_issued"
    COOKIE_SET = "cookie_set"
    RESPONDED = "responded"


class AuthController:
    """Orchestrates password hashing, persistence, token issuance and the session cookie."""

    def __init__(
        self,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        cookies: SessionCookieManager,
    ) -> None:
        self.hasher = hasher
        self.issuer = issuer
        self.cookies = cookies

    def sign_up(self, db: Session, payload: SignUpRequest, response: Response) -> UserPublic:
        """
        Create an account, issue a session token and set it as a cookie on `response`.

        The user row is only committed once the token has been signed, so a
        signing failure leaves no account behind.
        """
        stage = SignUpStage.RECEIVED
        try:
            if payload.role != UserRole.USER:
                raise RequestValidationFailed(
                    "Role cannot be self-assigned",
                    details={"role": payload.role.value},
                )
            stage = SignUpStage.VALIDATED

            password_hash = self.hasher.hash(payload.password)
            stage = SignUpStage.HASHED_PASSWORD

            user = users.insert_user(
                db,
                name=payload.name,
                email=payload.email,
                password_hash=password_hash,
            )
            stage = SignUpStage.PERSISTED

            token = self.issuer.issue({"id": user.id, "email": user.email, "role": user.role})
            stage = SignUpStage.TOKEN_ISSUED

            users.commit_user(db, user)
            self.cookies.set(response, token)
            stage = SignUpStage.COOKIE_SET
        except Exception as e:
            db.rollback()
            logger.warning(
                "Sign-up failed at stage=%s: %s",
                stage.value,
                type(e).__name__,
                extra={"stage": stage.value, "error_type": type(e).__name__},
            )
            raise

        stage = SignUpStage.RESPONDED
        logger.info("User signed up: user_id=%s", user.id, extra={"user_id": user.id, "stage": stage.value})
        return UserPublic.model_validate(user)

    def sign_in(self) -> None:
        """Not implemented yet: always raises FeatureNotImplementedError (501)."""
        # TODO: verify credentials with PasswordHasher.verify and issue the cookie.
        raise FeatureNotImplementedError(details={"endpoint": "sign-in"})

    def sign_out(self) -> None:
        """Not implemented yet: always raises FeatureNotImplementedError (501)."""
        # TODO: clear the session cookie with SessionCookieManager.clear.
        raise FeatureNotImplementedError(details={"endpoint": "sign-out"})
