"""Request-scoped dependencies that read the components stored on app.state."""

from fastapi import Request

from accounts_api.core.config import Settings
from accounts_api.services.auth import AuthController


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_controller(request: Request) -> AuthController:
    return request.app.state.auth_controller
