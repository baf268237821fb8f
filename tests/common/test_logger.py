"""Tests for logging utilities."""

import logging

from common.logger import get_logger, setup_logging, success


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self):
        logger = get_logger("test")
        assert isinstance(logger, logging.Logger)

    def test_logger_name(self):
        logger = get_logger("test.module")
        assert logger.name == "test.module"

    def test_default_level_is_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logger = get_logger("test.default")
        assert logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        logger = get_logger("test.env_level")
        assert logger.level == logging.DEBUG

    def test_custom_level(self):
        logger = get_logger("test.custom", level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_reuses_existing_logger(self):
        """Test that get_logger does not stack handlers."""
        logger1 = get_logger("test.reuse")
        logger2 = get_logger("test.reuse")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_logging_output(self, caplog):
        logger = get_logger("test.output")

        with caplog.at_level(logging.INFO):
            logger.info("Linked 2 commit ranges")

        assert "Linked 2 commit ranges" in caplog.text

    def test_info_level_filters_debug(self, caplog):
        logger = get_logger("test.filter", level="INFO")

        with caplog.at_level(logging.DEBUG):
            logger.debug("This should not appear")
            logger.info("This should appear")

        assert "This should not appear" not in caplog.text
        assert "This should appear" in caplog.text


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_file = tmp_path / "git-refs.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("test.setup").info("written to file")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert "written to file" in log_file.read_text()


def test_success_prints_message(capsys):
    success("Rendered notes.md")
    assert "Rendered notes.md" in capsys.readouterr().out
