"""
Configuration Manager
=====================

YAML-based settings with environment-specific files and environment
variable overrides, loaded into typed dataclasses.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, fields
from enum import Enum
import logging

from ..error_handling import ConfigurationError

logger = logging.getLogger(__name__)


class Environment(Enum):
    """Environment types for configuration."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


@dataclass
class ChatbotConfig:
    """Response engine settings."""
    random_seed: Optional[int] = None


@dataclass
class ConsoleConfig:
    """Console presentation settings."""
    typing_delay: float = 0.02
    banner_delay: float = 0.8
    use_color: bool = True
    prompt: str = "> "


@dataclass
class VoiceConfig:
    """Greeting audio settings."""
    enabled: bool = True
    greeting_path: str = "Welcome.wav"


@dataclass
class ObservabilityConfig:
    """Logging configuration."""
    log_level: str = "INFO"
    log_file: str = ""
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    """Application settings."""
    environment: Environment = Environment.DEVELOPMENT
    app_name: str = "AwareBot"
    version: str = "1.0.0"
    debug_mode: bool = False

    chatbot: ChatbotConfig = field(default_factory=ChatbotConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    voice: VoiceConfig = field(default_factory=VoiceConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


ENV_OVERRIDES = {
    'observability.log_level': 'AWAREBOT_LOG_LEVEL',
    'observability.log_file': 'AWAREBOT_LOG_FILE',
    'chatbot.random_seed': 'AWAREBOT_SEED',
    'console.typing_delay': 'AWAREBOT_TYPING_DELAY',
    'voice.greeting_path': 'AWAREBOT_GREETING_PATH',
    'voice.enabled': 'AWAREBOT_VOICE_ENABLED',
}

_SECTIONS = {
    'chatbot': ChatbotConfig,
    'console': ConsoleConfig,
    'voice': VoiceConfig,
    'observability': ObservabilityConfig,
}


def _coerce(value: str, current: Any) -> Any:
    """Convert an environment variable string to the type of the current value."""
    if isinstance(current, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if current is None:
        try:
            return int(value)
        except ValueError:
            return value
    return value


class ConfigManager:
    """Loads settings from YAML and applies environment overrides."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_config_path()
        self._settings: Optional[Settings] = None

        self.load_config()

    def _find_config_path(self) -> str:
        """Find configuration file path based on environment."""
        explicit = os.environ.get("AWAREBOT_CONFIG")
        if explicit:
            return explicit

        env = os.environ.get("ENVIRONMENT", "development")
        config_dir = Path(__file__).parent

        # Try environment-specific config first
        env_config = config_dir / f"settings.{env}.yaml"
        if env_config.exists():
            return str(env_config)

        default_config = config_dir / "settings.yaml"
        if default_config.exists():
            return str(default_config)

        raise ConfigurationError("No configuration file found")

    def load_config(self) -> Settings:
        """Load configuration from file."""
        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError(
                f"Cannot read configuration {self.config_path}", original_error=e
            ) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration {self.config_path} must be a mapping")

        settings = self._create_settings_from_dict(config_data)
        self._settings = self._merge_environment_variables(settings)

        logger.info(f"Configuration loaded from {self.config_path}")
        return self._settings

    def _merge_environment_variables(self, settings: Settings) -> Settings:
        """Apply environment variable overrides to loaded settings."""
        for config_path, env_var in ENV_OVERRIDES.items():
            env_value = os.environ.get(env_var)
            if env_value is None or env_value == "":
                continue

            section_name, key = config_path.split('.')
            section = getattr(settings, section_name)
            try:
                setattr(section, key, _coerce(env_value, getattr(section, key)))
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {env_var}: {env_value!r}", original_error=e
                ) from e

        return settings

    def _create_settings_from_dict(self, config_data: Dict[str, Any]) -> Settings:
        """Create Settings object from configuration dictionary."""
        settings_dict: Dict[str, Any] = {}

        try:
            settings_dict['environment'] = Environment(config_data.get('environment', 'development'))
        except ValueError as e:
            raise ConfigurationError(str(e), original_error=e) from e
        settings_dict['app_name'] = config_data.get('app_name', 'AwareBot')
        settings_dict['version'] = str(config_data.get('version', '1.0.0'))
        settings_dict['debug_mode'] = bool(config_data.get('debug_mode', False))

        for name, section_cls in _SECTIONS.items():
            section_data = config_data.get(name)
            if section_data is None:
                continue
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Section '{name}' must be a mapping")

            known = {f.name for f in fields(section_cls)}
            unknown = set(section_data) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in section '{name}': {', '.join(sorted(unknown))}"
                )
            settings_dict[name] = section_cls(**section_data)

        return Settings(**settings_dict)

    @property
    def settings(self) -> Settings:
        """Get current settings."""
        if self._settings is None:
            return self.load_config()
        return self._settings
