"""
Create a user from the command line. This is the only way to create an admin
(sign-up always creates role 'user'). Run from project root:
  python -m accounts_api.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m accounts_api.scripts.create_user "Ada Admin" ada@example.com your-secure-password admin
"""
import argparse
import sys

from dotenv import load_dotenv

from accounts_api.core.config import get_settings
from accounts_api.core.database import build_engine, build_session_factory
from accounts_api.core.errors import AppError
from accounts_api.core.security import (
    NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    PasswordHasher,
)
from accounts_api.models.user import UserRole
from accounts_api.services import users


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create an account (admins cannot sign up).")
    parser.add_argument("name", help=f"Display name (1-{NAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.USER.value,
        choices=[r.value for r in UserRole],
    )
    return parser


def main(argv: list[str] | None = None, session_factory=None) -> int:
    args = build_parser().parse_args(argv)

    name = args.name.strip()
    email = args.email.strip().lower()
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    if session_factory is None:
        session_factory = build_session_factory(build_engine(get_settings()))
    db = session_factory()
    try:
        user = users.insert_user(
            db,
            name=name,
            email=email,
            password_hash=PasswordHasher().hash(args.password),
            role=UserRole(args.role),
        )
        users.commit_user(db, user)
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    except AppError as e:
        print(f"{e.message}: {email}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    load_dotenv()
    sys.exit(main())
