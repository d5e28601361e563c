import logging
import random
import sys
from typing import Optional

from awarebot.channels import ConsoleChannel, VoiceGreeting
from awarebot.chatbot import KnowledgeBase, ResponseRouter
from awarebot.config import ConfigManager, Settings, ValidationResult, validate_settings
from awarebot.error_handling import AwareBotError, ConfigurationError

logger = logging.getLogger("awarebot")


# Log to the configured file, or only warnings to stderr when there is none
def configure_logging(settings: Settings):
    obs = settings.observability
    level = logging.DEBUG if settings.debug_mode else getattr(logging, obs.log_level.upper(), logging.INFO)

    if obs.log_file:
        try:
            handler = logging.FileHandler(obs.log_file)
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {obs.log_file}: {e}", original_error=e) from e
    else:
        handler = logging.StreamHandler()
        handler.setLevel(max(level, logging.WARNING))

    logging.basicConfig(level=level, format=obs.log_format, handlers=[handler], force=True)


# Raise ConfigurationError on invalid settings
def check_settings(settings: Settings) -> ValidationResult:
    result = validate_settings(settings)
    if not result.is_valid:
        details = "; ".join(f"{e.field_path}: {e.message}" for e in result.errors)
        raise ConfigurationError(f"{result.get_summary()} {details}")
    return result


# Wire the router and console channel for one session
def build_channel(settings: Settings) -> ConsoleChannel:
    rng = random.Random(settings.chatbot.random_seed)
    router = ResponseRouter(KnowledgeBase.default(), rng=rng)
    greeting = VoiceGreeting(settings.voice.greeting_path, enabled=settings.voice.enabled)
    return ConsoleChannel(router, settings.console, greeting=greeting)


def main(config_path: Optional[str] = None) -> int:
    try:
        settings = ConfigManager(config_path).settings
        result = check_settings(settings)
        configure_logging(settings)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        logger.warning(f"{warning.field_path}: {warning.message}")
    logger.info(f"Starting {settings.app_name} {settings.version} ({settings.environment.value})")

    try:
        return build_channel(settings).run()
    except AwareBotError as e:
        logger.error(f"Session aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
