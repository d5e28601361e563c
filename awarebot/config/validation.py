"""
Configuration Validation
========================

Checks loaded settings and reports errors and warnings.
"""

from typing import Any, List, Optional
from dataclasses import dataclass
from pathlib import Path
import logging

from .config_manager import Settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ValidationError:
    """Validation error details."""
    field_path: str
    message: str
    severity: str = "error"  # error, warning
    suggested_value: Optional[Any] = None


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self):
        self.errors: List[ValidationError] = []
        self.warnings: List[ValidationError] = []
        self.is_valid = True

    def add_error(self, field_path: str, message: str, suggested_value: Optional[Any] = None):
        """Add validation error."""
        self.errors.append(ValidationError(field_path, message, "error", suggested_value))
        self.is_valid = False

    def add_warning(self, field_path: str, message: str):
        """Add validation warning."""
        self.warnings.append(ValidationError(field_path, message, "warning"))

    def get_summary(self) -> str:
        """Get validation summary."""
        if self.is_valid:
            return f"Configuration valid. {len(self.warnings)} warnings."
        return f"Configuration invalid. {len(self.errors)} errors, {len(self.warnings)} warnings."


class ConfigValidator:
    """Field-level validators for settings."""

    @staticmethod
    def validate_log_level(level: Any, field_path: str, result: ValidationResult):
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            result.add_error(field_path, f"Invalid log level: {level}", suggested_value="INFO")

    @staticmethod
    def validate_delay(value: Any, field_path: str, result: ValidationResult):
        """Validate a delay in seconds."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            result.add_error(field_path, f"Delay must be a number of seconds: {value!r}")
        elif value < 0:
            result.add_error(field_path, f"Delay cannot be negative: {value}", suggested_value=0.0)
        elif value > 5:
            result.add_warning(field_path, f"Delay of {value}s will make the console sluggish")

    @staticmethod
    def validate_log_file(path: Any, field_path: str, result: ValidationResult):
        """Validate a log file path; empty means no log file."""
        if not isinstance(path, str):
            result.add_error(field_path, f"Log file must be a path: {path!r}")
            return
        if not path:
            return
        log_path = Path(path)
        if log_path.is_dir():
            result.add_error(field_path, f"Log file is a directory: {path}")
        elif not log_path.parent.is_dir():
            result.add_error(field_path, f"Log directory does not exist: {log_path.parent}")


def validate_settings(settings: Settings) -> ValidationResult:
    """
    Validate application settings.

    Args:
        settings: Loaded settings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    ConfigValidator.validate_log_level(settings.observability.log_level, "observability.log_level", result)
    ConfigValidator.validate_delay(settings.console.typing_delay, "console.typing_delay", result)
    ConfigValidator.validate_delay(settings.console.banner_delay, "console.banner_delay", result)

    if not settings.console.prompt:
        result.add_error("console.prompt", "Prompt cannot be empty", suggested_value="> ")

    seed = settings.chatbot.random_seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        result.add_error("chatbot.random_seed", f"Random seed must be an integer: {seed!r}")

    ConfigValidator.validate_log_file(settings.observability.log_file, "observability.log_file", result)

    if settings.voice.enabled and not settings.voice.greeting_path:
        result.add_error("voice.greeting_path", "Greeting path cannot be empty")

    if settings.is_production() and settings.debug_mode:
        result.add_warning("debug_mode", "Debug mode enabled in production")

    logger.debug(result.get_summary())
    return result


def get_validation_errors(settings: Settings) -> List[str]:
    """Get validation error messages as strings."""
    return [f"{e.field_path}: {e.message}" for e in validate_settings(settings).errors]
