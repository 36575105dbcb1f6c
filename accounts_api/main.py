"""FastAPI application factory. No business logic; only wiring and middleware."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from accounts_api import __version__
from accounts_api.api.errors import register_exception_handlers
from accounts_api.api.routes import health, info
from accounts_api.api.routes import router as api_router
from accounts_api.core.config import Settings, get_settings
from accounts_api.core.cookies import SessionCookieManager
from accounts_api.core.database import build_engine, build_session_factory
from accounts_api.core.logging_config import configure_logging
from accounts_api.core.security import PasswordHasher, TokenIssuer
from accounts_api.services.auth import AuthController

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    """Log one entry per request outcome."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.error(
            "%s %s -> 500",
            request.method,
            request.url.path,
            extra={"method": request.method, "path": request.url.path, "status_code": 500},
        )
        raise
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        "%s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application from one Settings instance.

    Components (engine, hasher, token issuer, cookie manager, auth controller)
    are constructed here and stored on app.state; nothing reads config ad hoc.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    engine = build_engine(settings)
    app = FastAPI(
        title="Accounts API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.auth_controller = AuthController(
        hasher=PasswordHasher(),
        issuer=TokenIssuer(settings),
        cookies=SessionCookieManager(settings),
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(info.router, prefix=settings.API_PREFIX, tags=["status"])
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Accounts API"}

    logger.info("Application configured (env=%s)", settings.APP_ENV)
    return app
