"""Settings and logging configuration for taskpilot.

Settings are read from environment variables (and a local .env file) via
pydantic-settings, and can be overlaid with a YAML or JSON configuration
file.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskpilot.core.errors.errors import ConfigurationError, ErrorContext
from taskpilot.core.errors.models import ConfigurationErrorContext

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TaskpilotSettings(BaseSettings):
    """Settings for the AI flow layer."""

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("TASKPILOT_LOG_LEVEL", "log_level"))

    # Provider settings
    llm_provider: str = Field(default="googleai", validation_alias=AliasChoices("TASKPILOT_LLM_PROVIDER", "llm_provider"))
    model_name: str = Field(default="gemini-2.0-flash", validation_alias=AliasChoices("TASKPILOT_MODEL", "model_name"))
    api_key: str = Field(default="", validation_alias=AliasChoices("GOOGLE_API_KEY", "GEMINI_API_KEY", "api_key"))

    # Generation settings
    temperature: float = Field(default=0.2, validation_alias=AliasChoices("TASKPILOT_TEMPERATURE", "temperature"))
    max_output_tokens: int = Field(default=2048, validation_alias=AliasChoices("TASKPILOT_MAX_OUTPUT_TOKENS", "max_output_tokens"))
    request_timeout: float = Field(default=60.0, validation_alias=AliasChoices("TASKPILOT_REQUEST_TIMEOUT", "request_timeout"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        """Validate temperature range."""
        if not (0.0 <= v <= 2.0):
            raise ValueError("Temperature must be between 0.0 and 2.0")
        return v

    @field_validator("max_output_tokens")
    @classmethod
    def validate_max_output_tokens(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_output_tokens must be positive")
        return v

    def provider_settings(self) -> dict[str, Any]:
        """Settings dictionary handed to the LLM provider factory."""
        return {
            "api_key": self.api_key,
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
            "timeout": self.request_timeout,
        }


def load_settings(config_file: Path | str | None = None, **overrides: Any) -> TaskpilotSettings:
    """Load settings from the environment, optionally overlaid by a file.

    Args:
        config_file: Optional YAML (.yml/.yaml) or JSON configuration file
        **overrides: Explicit values that win over both file and environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    file_values: dict[str, Any] = {}
    if config_file is not None:
        path = Path(config_file)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in [".yml", ".yaml"]:
                    file_values = yaml.safe_load(f) or {}
                else:
                    file_values = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                message=f"Failed to load configuration from file {path}: {e}",
                context=ErrorContext.create(
                    flow_name="settings",
                    error_type="ConfigurationError",
                    error_location="load_settings",
                    component="TaskpilotSettings",
                    operation="read_config_file",
                ),
                config_context=ConfigurationErrorContext(
                    config_key="config_file",
                    config_section="taskpilot",
                    expected_type="yaml or json mapping",
                    actual_value=str(path),
                ),
                cause=e,
            ) from e
        if not isinstance(file_values, dict):
            raise ConfigurationError(
                message=f"Configuration file {path} must contain a mapping",
                context=ErrorContext.create(
                    flow_name="settings",
                    error_type="ConfigurationError",
                    error_location="load_settings",
                    component="TaskpilotSettings",
                    operation="parse_config_file",
                ),
                config_context=ConfigurationErrorContext(
                    config_key="config_file",
                    config_section="taskpilot",
                    expected_type="mapping",
                    actual_value=type(file_values).__name__,
                ),
            )

    values = {**file_values, **overrides}
    try:
        settings = TaskpilotSettings(**values)
    except ValueError as e:
        raise ConfigurationError(
            message=f"Invalid taskpilot settings: {e}",
            context=ErrorContext.create(
                flow_name="settings",
                error_type="ConfigurationError",
                error_location="load_settings",
                component="TaskpilotSettings",
                operation="validate_settings",
            ),
            config_context=ConfigurationErrorContext(
                config_key=",".join(sorted(values)) or "<environment>",
                config_section="taskpilot",
                expected_type="TaskpilotSettings",
                actual_value=str(sorted(values)),
            ),
            cause=e,
        ) from e

    logger.debug(f"Loaded settings: provider={settings.llm_provider} model={settings.model_name}")
    return settings


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for applications embedding taskpilot."""
    level = level.upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
    logging.getLogger("taskpilot").setLevel(getattr(logging, level))
