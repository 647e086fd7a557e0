"""
Tests for logging configuration module.
"""

import logging

from kubeversion.logging_config import ConsoleFormatter, get_logger, setup_logging


def _console_handlers(logger):
    return [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]


class TestSetupLogging:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup prints INFO to stdout."""
        logger = setup_logging()
        assert logger.name == "kubeversion"
        assert logger.level == logging.INFO
        assert not logger.propagate
        [console] = _console_handlers(logger)
        assert console.level == logging.INFO

    def test_setup_logging_verbose(self):
        """Test verbose logging enables DEBUG level."""
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG
        assert _console_handlers(logger)[0].level == logging.DEBUG

    def test_setup_logging_quiet(self):
        """Test quiet mode keeps only warnings on the console."""
        logger = setup_logging(quiet=True)
        [console] = _console_handlers(logger)
        assert console.level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self):
        """Test calling setup twice does not duplicate output."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_setup_logging_with_file(self, tmp_path):
        """Test file gets DEBUG records from child loggers even when quiet."""
        log_file = tmp_path / "logs" / "kubeversion.log"
        logger = setup_logging(log_file=str(log_file), quiet=True)
        assert logger.level == logging.DEBUG

        logging.getLogger("kubeversion.activator").debug("Child message")
        logger.warning("Test message")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "[WARNING] kubeversion: Test message" in content
        assert "kubeversion.activator: Child message" in content

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_console_is_plain_output(self, capsys):
        """Test non-TTY console lines carry no level name."""
        logger = setup_logging()
        logger.info("Successfully switched to kubectl v1.29.0")
        logger.warning("bin is not in your PATH.")
        out = capsys.readouterr().out
        assert out == "Successfully switched to kubectl v1.29.0\nbin is not in your PATH.\n"


class TestGetLogger:
    """Test logger retrieval."""

    def test_get_logger_singleton(self):
        """Test get_logger returns same instance."""
        assert get_logger() is get_logger()


class TestConsoleFormatter:
    """Test console formatter."""

    def _record(self, level=logging.INFO):
        return logging.LogRecord(
            name="kubeversion",
            level=level,
            pathname="",
            lineno=0,
            msg="Test %s",
            args=("message",),
            exc_info=None,
        )

    def test_with_colors(self):
        """Test a colored marker precedes the message on a terminal."""
        formatted = ConsoleFormatter(use_colors=True).format(self._record(logging.WARNING))
        assert formatted.startswith("\033[33m")
        assert formatted.endswith(" Test message")
        assert "WARNING" not in formatted

    def test_without_colors(self):
        """Test the bare message without colors."""
        formatter = ConsoleFormatter(use_colors=False)
        assert formatter.format(self._record(logging.WARNING)) == "Test message"
        assert formatter.format(self._record(logging.INFO)) == "Test message"
