"""Alembic migrations applied to a temporary SQLite file match the ORM models."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from accounts_api.core.config import get_settings
from accounts_api.models import Base

ROOT = Path(__file__).resolve().parent.parent


class TestUsersMigration(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.url = f"sqlite:///{Path(self.tmpdir.name) / 'migrations.db'}"
        self.env = patch.dict(os.environ, {"DATABASE_URL": self.url})
        self.env.start()
        get_settings.cache_clear()
        self.config = Config(str(ROOT / "alembic.ini"))
        self.config.set_main_option("script_location", str(ROOT / "alembic"))

    def tearDown(self) -> None:
        self.env.stop()
        get_settings.cache_clear()
        self.tmpdir.cleanup()

    def _inspect(self):
        engine = create_engine(self.url)
        self.addCleanup(engine.dispose)
        return inspect(engine)

    def test_upgrade_matches_models(self) -> None:
        command.upgrade(self.config, "head")
        inspector = self._inspect()

        self.assertIn("users", inspector.get_table_names())
        columns = {c["name"]: c for c in inspector.get_columns("users")}
        expected = Base.metadata.tables["users"]
        self.assertEqual(set(columns), {c.name for c in expected.columns})
        for column in expected.columns:
            self.assertEqual(
                columns[column.name]["nullable"],
                column.nullable,
                f"nullable mismatch on {column.name}",
            )

        email_indexes = [i for i in inspector.get_indexes("users") if i["column_names"] == ["email"]]
        self.assertEqual(len(email_indexes), 1)
        self.assertTrue(email_indexes[0]["unique"])

    def test_downgrade_removes_table(self) -> None:
        command.upgrade(self.config, "head")
        command.downgrade(self.config, "base")
        self.assertNotIn("users", self._inspect().get_table_names())


if __name__ == "__main__":
    unittest.main()
