import logging

from failfast.logging import get_logger


class TestGetLogger:
    def test_handler_added_once(self):
        first = get_logger("failfast.tests.once")
        second = get_logger("failfast.tests.once")
        assert first is second
        assert len(first.handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("FAILFAST_LOG_LEVEL", "debug")
        logger = get_logger("failfast.tests.env_level")
        assert logger.level == logging.DEBUG

    def test_invalid_level_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("FAILFAST_LOG_LEVEL", "not-a-level")
        logger = get_logger("failfast.tests.invalid_level")
        assert logger.level == logging.WARNING

    def test_cli_logger_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv("FAILFAST_LOG_LEVEL", raising=False)
        logger = get_logger("failfast.tests.cli")
        assert logger.level == logging.INFO

    def test_library_logger_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv("FAILFAST_LOG_LEVEL", raising=False)
        logger = get_logger("failfast.tests.library")
        assert logger.level == logging.WARNING

    def test_empty_level_uses_default(self, monkeypatch):
        monkeypatch.setenv("FAILFAST_LOG_LEVEL", "")
        logger = get_logger("failfast.tests.empty_level.cli")
        assert logger.level == logging.INFO
