"""Settings validation and log formatting."""

import json
import logging
import unittest

from pydantic import ValidationError

from accounts_api.core.config import Settings
from accounts_api.core.logging_config import (
    HANDLER_NAME,
    JsonFormatter,
    ServiceFilter,
    configure_logging,
)


def _settings(**overrides: object) -> Settings:
    values = {"DATABASE_URL": "sqlite://"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = _settings()
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertFalse(settings.ALLOW_INSECURE_DEFAULT_SECRET)
        self.assertFalse(settings.is_production)
        self.assertEqual(settings.cors_origins, [])

    def test_rejects_non_sql_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://root@localhost/db")

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")

    def test_port_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(PORT=0)

    def test_jwt_algorithm_must_be_hmac(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_jwt_algorithm_must_be_supported(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="HS999")
        for algorithm in ("HS256", "HS384", "HS512"):
            self.assertEqual(_settings(JWT_ALGORITHM=algorithm).JWT_ALGORITHM, algorithm)

    def test_cors_origins_are_split(self) -> None:
        settings = _settings(CORS_ORIGINS="http://a.test, http://b.test,")
        self.assertEqual(settings.cors_origins, ["http://a.test", "http://b.test"])


class TestJsonFormatter(unittest.TestCase):
    def test_structured_entry(self) -> None:
        record = logging.LogRecord(
            "accounts_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        ServiceFilter("accounts-api").filter(record)
        record.status_code = 201
        entry = json.loads(JsonFormatter().format(record))
        self.assertEqual(entry["service"], "accounts-api")
        self.assertEqual(entry["level"], "info")
        self.assertEqual(entry["message"], "hello world")
        self.assertEqual(entry["logger"], "accounts_api.test")
        self.assertEqual(entry["status_code"], 201)
        self.assertIn("timestamp", entry)


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler.get_name() == HANDLER_NAME:
                root.removeHandler(handler)

    def test_prod_uses_json_and_replaces_previous_handler(self) -> None:
        configure_logging(_settings())
        handler = configure_logging(_settings(APP_ENV="prod", LOG_LEVEL="WARNING"))
        ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
        self.assertEqual(ours, [handler])
        self.assertIsInstance(handler.formatter, JsonFormatter)
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_dev_uses_plain_format(self) -> None:
        handler = configure_logging(_settings())
        self.assertNotIsInstance(handler.formatter, JsonFormatter)
        self.assertIn("%(service)s", handler.formatter._fmt)


if __name__ == "__main__":
    unittest.main()
