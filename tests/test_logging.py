"""Tests for logging helpers."""

import logging

import pytest
from svcspec.logging import resolve_log_level, spec_file_logger


class TestResolveLogLevel:
    def test_defaults_to_settings(self):
        assert resolve_log_level() == logging.INFO

    def test_reads_environment(self, monkeypatch):
        from svcspec.config.settings import get_settings

        monkeypatch.setenv("SVCSPEC_LOG_LEVEL", "debug")
        get_settings.cache_clear()

        assert resolve_log_level() == logging.DEBUG

    def test_explicit_level_wins(self):
        assert resolve_log_level("warning") == logging.WARNING
        assert resolve_log_level(logging.ERROR) == logging.ERROR

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="LOUD"):
            resolve_log_level("LOUD")


def test_spec_file_logger_binds_file(tmp_path):
    logger = spec_file_logger(tmp_path / "redis.spec", ident="core/redis")

    context = logger._context
    assert context["spec_file"] == "redis.spec"
    assert context["spec_dir"] == str(tmp_path)
    assert context["ident"] == "core/redis"
