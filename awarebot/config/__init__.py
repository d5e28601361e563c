"""
Configuration Management Module
===============================

YAML settings, environment overrides and validation.
"""

from .config_manager import (
    Settings, ConfigManager, Environment,
    ChatbotConfig, ConsoleConfig, VoiceConfig, ObservabilityConfig
)

from .validation import (
    ConfigValidator, ValidationError, ValidationResult,
    validate_settings, get_validation_errors
)

__all__ = [
    # Configuration Management
    "Settings", "ConfigManager", "Environment",
    "ChatbotConfig", "ConsoleConfig", "VoiceConfig", "ObservabilityConfig",

    # Validation
    "ConfigValidator", "ValidationError", "ValidationResult",
    "validate_settings", "get_validation_errors"
]
