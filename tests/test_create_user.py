"""Operator CLI: the only path to an admin account."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from sqlalchemy import create_engine, select
from sqlalchemy.pool import StaticPool

from accounts_api.core.database import build_session_factory
from accounts_api.core.security import PasswordHasher
from accounts_api.models import Base, User
from accounts_api.scripts.create_user import main


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.session_factory = build_session_factory(self.engine)

    def tearDown(self) -> None:
        self.engine.dispose()

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv), session_factory=self.session_factory)
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self.run_cli("Root", "Root@Example.com", "super-secret-pw", "admin")
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out)
        with self.session_factory() as db:
            user = db.execute(select(User)).scalar_one()
        self.assertEqual(user.email, "root@example.com")
        self.assertEqual(user.role, "admin")
        self.assertTrue(PasswordHasher().verify("super-secret-pw", user.password_hash))

    def test_defaults_to_user_role(self) -> None:
        code, _, _ = self.run_cli("Ada", "ada@example.com", "analytical-engine")
        self.assertEqual(code, 0)
        with self.session_factory() as db:
            self.assertEqual(db.execute(select(User.role)).scalar_one(), "user")

    def test_duplicate_email_fails(self) -> None:
        self.run_cli("Ada", "ada@example.com", "analytical-engine")
        code, _, err = self.run_cli("Ada Again", "ADA@example.com", "analytical-engine")
        self.assertEqual(code, 1)
        self.assertIn("Email already registered", err)

    def test_short_password_fails(self) -> None:
        code, _, err = self.run_cli("Ada", "ada@example.com", "short")
        self.assertEqual(code, 1)
        self.assertIn("Password must be", err)


if __name__ == "__main__":
    unittest.main()
