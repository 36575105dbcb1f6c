"""
Run the API server:

  python -m accounts_api
"""

import sys

import uvicorn
from dotenv import load_dotenv

from accounts_api.core.config import get_settings


def main() -> int:
    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        "accounts_api.asgi:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
