"""
Unit Tests for the Entry Point
==============================
"""

import logging
import os
from unittest.mock import patch

import pytest
import yaml

from awarebot import main as entry
from awarebot.config import Settings
from awarebot.error_handling import ConfigurationError


def write_settings(tmp_path, **overrides):
    data = {
        "chatbot": {"random_seed": 5},
        "console": {"typing_delay": 0, "banner_delay": 0, "use_color": False},
        "voice": {"enabled": False},
        "observability": {"log_file": str(tmp_path / "awarebot.log")},
    }
    data.update(overrides)
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.safe_dump(data))
    return str(path)


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestMain:
    """Test settings wiring and exit status."""

    def test_runs_console_session(self, tmp_path):
        path = write_settings(tmp_path)

        with patch.object(entry, "configure_logging"), \
                patch.object(entry.ConsoleChannel, "run", return_value=0) as run:
            assert entry.main(path) == 0

        run.assert_called_once()

    def test_invalid_settings_exit_status(self, tmp_path, capsys):
        path = write_settings(tmp_path, console={"typing_delay": -1})

        with patch.object(entry, "configure_logging"):
            assert entry.main(path) == 1

        assert "Configuration error" in capsys.readouterr().err

    def test_build_channel_uses_seed(self, tmp_path):
        settings = entry.ConfigManager(write_settings(tmp_path)).settings

        first = entry.build_channel(settings)
        second = entry.build_channel(settings)
        replies = [
            (first.router.respond("password", first.memory, "Sam"),
             second.router.respond("password", second.memory, "Sam"))
            for _ in range(5)
        ]

        assert all(a == b for a, b in replies)
        assert first.greeting.enabled is False

    def test_non_text_log_level_exit_status(self, tmp_path, capsys):
        path = write_settings(tmp_path, observability={"log_level": 10})

        assert entry.main(path) == 1
        assert "observability.log_level" in capsys.readouterr().err

    def test_log_file_in_missing_directory_exit_status(self, tmp_path, capsys):
        path = write_settings(tmp_path, observability={"log_file": str(tmp_path / "nope" / "bot.log")})

        with patch.object(entry.ConsoleChannel, "run") as run:
            assert entry.main(path) == 1

        run.assert_not_called()
        assert "observability.log_file" in capsys.readouterr().err

    def test_log_file_override_in_missing_directory(self, tmp_path, monkeypatch, capsys):
        path = write_settings(tmp_path)
        monkeypatch.setenv("AWAREBOT_LOG_FILE", str(tmp_path / "nope" / "bot.log"))

        assert entry.main(path) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_bundled_settings_write_no_files(self, tmp_path, monkeypatch, root_logger):
        for env_var in ["AWAREBOT_CONFIG", "AWAREBOT_LOG_FILE", "ENVIRONMENT"]:
            monkeypatch.delenv(env_var, raising=False)
        monkeypatch.chdir(tmp_path)

        with patch.object(entry.ConsoleChannel, "run", return_value=0):
            assert entry.main() == 0

        assert os.listdir(tmp_path) == []


class TestConfigureLogging:
    """Test log handler selection."""

    def test_file_handler_for_configured_path(self, tmp_path, root_logger):
        settings = Settings()
        settings.observability.log_file = str(tmp_path / "bot.log")

        entry.configure_logging(settings)

        handler, = root_logger.handlers
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(tmp_path / "bot.log")
        assert root_logger.level == logging.INFO

    def test_stderr_warnings_without_log_file(self, root_logger):
        entry.configure_logging(Settings())

        handler, = root_logger.handlers
        assert type(handler) is logging.StreamHandler
        assert handler.level == logging.WARNING

    def test_debug_mode_overrides_level(self, root_logger):
        settings = Settings(debug_mode=True)
        settings.observability.log_level = "ERROR"

        entry.configure_logging(settings)

        assert root_logger.level == logging.DEBUG

    def test_configured_level(self, root_logger):
        settings = Settings()
        settings.observability.log_level = "error"

        entry.configure_logging(settings)

        assert root_logger.level == logging.ERROR
        assert root_logger.handlers[0].level == logging.ERROR

    def test_unopenable_log_file(self, tmp_path, root_logger):
        settings = Settings()
        settings.observability.log_file = str(tmp_path / "nope" / "bot.log")

        with pytest.raises(ConfigurationError) as exc_info:
            entry.configure_logging(settings)

        assert isinstance(exc_info.value.original_error, OSError)
