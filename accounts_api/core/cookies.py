"""Session cookie that transports the signed token."""

from starlette.responses import Response

from accounts_api.core.config import Settings

COOKIE_NAME = "access_token"
# The cookie expires long before the token it carries (15 minutes vs 1 day).
COOKIE_MAX_AGE_SECONDS = 15 * 60


class SessionCookieManager:
    """
    Writes and clears the access_token cookie.

    httpOnly and SameSite=Strict always; Secure only in production.
    There is no server-side session store behind the cookie.
    """

    def __init__(self, settings: Settings) -> None:
        self.secure = settings.is_production

    def set(self, response: Response, token: str) -> None:
        response.set_cookie(
            COOKIE_NAME,
            value=token,
            max_age=COOKIE_MAX_AGE_SECONDS,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            COOKIE_NAME,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )
