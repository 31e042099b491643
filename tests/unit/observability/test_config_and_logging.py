"""
Settings and logging setup tests
"""

import logging

import pytest
from pydantic import ValidationError

from ppmodel.config import Settings
from ppmodel.observability import get_logger, setup_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.source_encoding == "utf-8"
        assert settings.strict_parse is True
        assert settings.parse_workers == 1
        assert settings.include_static_blocks is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PPMODEL_PARSE_WORKERS", "4")
        monkeypatch.setenv("PPMODEL_STRICT_PARSE", "false")

        settings = Settings()

        assert settings.parse_workers == 4
        assert settings.strict_parse is False

    def test_parse_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(parse_workers=0)

    def test_log_format_is_validated(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")


class TestLogging:
    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_setup_logging(self, fmt, caplog):
        caplog.set_level(logging.DEBUG)
        setup_logging(level="DEBUG", format=fmt)

        get_logger("ppmodel.test").info("logging_configured", format=fmt)

        assert any("logging_configured" in record.getMessage() for record in caplog.records)
