"""Tests for the logging setup."""

from pathlib import Path

import pytest
from loguru import logger

from dcgen import logging_utils
from dcgen.main import main


class TestConsoleLevel:
    """Test choosing the console log level."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_known_level(self, level: str) -> None:
        """Test loguru levels are used as given."""
        assert logging_utils.console_level(level) == level

    @pytest.mark.parametrize("level", ["BOGUS", "", "10"])
    def test_unknown_level_falls_back_to_info(self, level: str) -> None:
        """Test names loguru does not know fall back to INFO."""
        assert logging_utils.console_level(level) == "INFO"


class TestSetupLogging:
    """Test the configured sinks."""

    def test_invalid_env_level(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an invalid level warns instead of failing."""
        monkeypatch.setattr(logging_utils, "LOG_LEVEL", "BOGUS")
        logging_utils.setup_logging()

        logger.debug("hidden")
        logger.info("shown")

        err = capsys.readouterr().err
        assert "Unknown log level 'BOGUS', using INFO." in err
        assert "INFO: shown" in err
        assert "hidden" not in err

    def test_level_filters_console(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the configured level hides lower records."""
        monkeypatch.setattr(logging_utils, "LOG_LEVEL", "ERROR")
        logging_utils.setup_logging()

        logger.warning("quiet")
        logger.error("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "ERROR: loud" in err
        assert "Unknown log level" not in err

    def test_cli_runs_with_invalid_level(
        self, work_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the CLI still generates a Dockerfile with an invalid level."""
        monkeypatch.setattr(logging_utils, "LOG_LEVEL", "BOGUS")
        with pytest.raises(SystemExit) as exc_info:
            main(["--profile", "test", "--dry-run"])
        assert exc_info.value.code == 0

        captured = capsys.readouterr()
        assert captured.out.startswith("FROM alpine:3.18\n")
        assert "Unknown log level 'BOGUS'" in captured.err
