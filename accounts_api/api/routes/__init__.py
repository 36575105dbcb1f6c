"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from accounts_api.api.routes import auth

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
