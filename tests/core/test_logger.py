"""Tests for logger configuration."""

import sys
from pathlib import Path

from loguru import logger

from liftbook.config.settings import Settings, settings
from liftbook.core.logger import build_handlers, setup_logger


def _file_settings(log_file: Path, level: str = "INFO") -> Settings:
    return Settings(_env_file=None, LIFTBOOK_LOG_LEVEL=level, LIFTBOOK_LOG_FILE=str(log_file))


class TestBuildHandlers:
    """Tests for translating settings into sinks."""

    def test_console_only_by_default(self) -> None:
        """Test that no file sink exists without a log file."""
        config = Settings(_env_file=None, LIFTBOOK_LOG_LEVEL="warning", LIFTBOOK_LOG_FILE=None)

        handlers = build_handlers(config)

        assert len(handlers) == 1
        assert handlers[0]["sink"] is sys.stderr
        assert handlers[0]["level"] == "WARNING"

    def test_file_sink_uses_rotation_settings(self, tmp_path: Path) -> None:
        """Test that rotation and retention come from settings."""
        config = Settings(
            _env_file=None,
            LIFTBOOK_LOG_FILE=str(tmp_path / "logs" / "liftbook.log"),
            LIFTBOOK_LOG_ROTATION="1 day",
            LIFTBOOK_LOG_RETENTION="2 weeks",
        )

        file_handler = build_handlers(config)[1]

        assert file_handler["sink"] == tmp_path / "logs" / "liftbook.log"
        assert (file_handler["rotation"], file_handler["retention"]) == ("1 day", "2 weeks")
        assert (tmp_path / "logs").is_dir()


class TestSetupLogger:
    """Tests for installing the configured sinks."""

    def test_file_sink_receives_messages(self, tmp_path: Path) -> None:
        """Test that a log file is created and written."""
        log_file = tmp_path / "logs" / "liftbook.log"
        try:
            setup_logger(_file_settings(log_file))
            logger.info("Workout finished")
            logger.complete()
        finally:
            setup_logger(settings)

        assert "Workout finished" in log_file.read_text()

    def test_level_filters_file_output(self, tmp_path: Path) -> None:
        """Test that messages below the level are dropped."""
        log_file = tmp_path / "liftbook.log"
        try:
            setup_logger(_file_settings(log_file, level="WARNING"))
            logger.info("Set completed")
            logger.warning("Duplicate exercise names")
        finally:
            setup_logger(settings)

        content = log_file.read_text()
        assert "Set completed" not in content
        assert "Duplicate exercise names" in content
