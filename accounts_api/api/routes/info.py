"""GET {API_PREFIX}: API name, version and the routes it serves."""

from fastapi import APIRouter, Request

from accounts_api import __version__
from accounts_api.schemas.health import ApiInfoResponse

router = APIRouter()

HTTP_METHODS = frozenset({"get", "post", "put", "patch", "delete", "head", "options"})


@router.get("", response_model=ApiInfoResponse)
def get_api_info(request: Request) -> ApiInfoResponse:
    settings = request.app.state.settings
    prefix = settings.API_PREFIX
    paths = request.app.openapi().get("paths", {})
    endpoints = sorted(
        f"{method.upper()} {path}"
        for path, operations in paths.items()
        if path.startswith(prefix + "/")
        for method in operations
        if method in HTTP_METHODS
    )
    return ApiInfoResponse(name=settings.SERVICE_NAME, version=__version__, endpoints=endpoints)
