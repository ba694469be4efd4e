"""Configuration loading and validation."""

from .loader import apply_logging, load_config
from .schema import LoggingConfig, ParserSettings

__all__ = [
    # Loader
    "apply_logging",
    "load_config",
    # Schema
    "LoggingConfig",
    "ParserSettings",
]
