"""
ASGI entrypoint. Run with:

  uvicorn accounts_api.asgi:app --reload
"""

from dotenv import load_dotenv

load_dotenv()

from accounts_api.main import create_app  # noqa: E402

app = create_app()
