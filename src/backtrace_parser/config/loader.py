"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from backtrace_parser.errors import ConfigurationError
from backtrace_parser.utils.logging import LogEventNames, configure_logging, get_logger

from .schema import ParserSettings

log = get_logger(__name__)


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ConfigurationError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigurationError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> ParserSettings:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated ParserSettings instance

    Raises:
        ConfigurationError: If the file is missing, malformed, or invalid
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    try:
        config_dict = yaml.safe_load(yaml_with_env) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")

    try:
        settings = ParserSettings.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    log.debug(LogEventNames.CONFIG_LOADED, path=str(path))
    return settings


def apply_logging(settings: ParserSettings) -> None:
    """Configure logging from loaded settings."""
    configure_logging(level=settings.logging.level, log_format=settings.logging.format)
