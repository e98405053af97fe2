"""Unit tests for logging setup."""

import logging

from tiltsim.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_namespace(self):
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("tiltsim")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_calls_do_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("tiltsim").handlers) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(level=logging.INFO, log_file=str(path))
        logging.getLogger("tiltsim.core.cycle").info("hello")
        for handler in logging.getLogger("tiltsim").handlers:
            handler.flush()
        assert "hello" in path.read_text(encoding="utf-8")
        for handler in logging.getLogger("tiltsim").handlers:
            handler.close()
