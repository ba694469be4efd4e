"""Pydantic models for configuration schema."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from backtrace_parser.core.backtrace import UnmatchedLinePolicy


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"


class ParserSettings(BaseSettings):
    """Root configuration for backtrace-parser."""

    unmatched_line_policy: UnmatchedLinePolicy = UnmatchedLinePolicy.SKIP
    host_vm: Literal["auto", "disabled"] = "auto"
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="BACKTRACE_PARSER_",
        env_nested_delimiter="__",
    )
