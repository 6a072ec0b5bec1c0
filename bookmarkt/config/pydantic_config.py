"""
Pydantic-based configuration system for bookmarkt.

Settings come from a TOML or JSON file, then from the environment, then
from command-line arguments, each layer overriding the previous one.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Literal, Optional
from pydantic import (
    BaseModel,
    Field,
    field_validator,
    ValidationError,
)
import codecs
import json
import toml

DEFAULT_CONFIG_NAMES = ("bookmarkt.toml", "bookmarkt.json")
LOG_LEVEL_ENV = "BOOKMARKT_LOG_LEVEL"


class ParserConfig(BaseModel):
    """How bookmark files are read."""

    encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode bookmark files",
    )
    require_doctype: bool = Field(
        default=False,
        description="Reject files without the NETSCAPE-Bookmark-file-1 DOCTYPE",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Make sure the encoding is one Python knows."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v


class OutputConfig(BaseModel):
    """Output format settings."""

    format: Literal["json", "html", "tree"] = Field(
        default="json",
        description="Output format",
    )
    json_indent: Optional[int] = Field(
        default=None,
        ge=0,
        le=8,
        description="JSON indentation, unset for compact output",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON output",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Also write the log to this file",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class BookmarktConfig(BaseModel):
    """Main configuration model."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[BookmarktConfig] = None
        self._load_configuration(Path(config_path) if config_path else None)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        return [Path.cwd() / name for name in DEFAULT_CONFIG_NAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data = {}

        if config_path:
            config_data = self._load_config_file(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_overrides_from_env(config_data)

        try:
            self._config = BookmarktConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ValueError(f"Unsupported configuration file format: {suffix}")

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

    def _load_overrides_from_env(self, config_data: Dict) -> None:
        """Apply settings taken from environment variables."""
        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            config_data.setdefault("logging", {})["level"] = level

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("format"):
            config_dict["output"]["format"] = args["format"]

        if args.get("indent") is not None:
            config_dict["output"]["json_indent"] = args["indent"]

        if args.get("encoding"):
            config_dict["parser"]["encoding"] = args["encoding"]

        if args.get("verbose"):
            current = getattr(logging, config_dict["logging"]["level"])
            if current > logging.INFO:
                config_dict["logging"]["level"] = "INFO"

        try:
            self._config = BookmarktConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    @property
    def config(self) -> BookmarktConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "parser": {"encoding": "utf-8", "require_doctype": False},
            "output": {"format": "json", "json_indent": 2, "ensure_ascii": False},
            "logging": {"level": "WARNING"},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            formatted_msg = ConfigurationErrorFormatter._format_by_error_type(
                location,
                error_detail["type"],
                error_detail,
                error_detail.get("input", "N/A"),
            )
            error_messages.append(formatted_msg)

        header = "Configuration Validation Failed:\n"
        separator = "-" * 60 + "\n"

        return header + separator + "\n".join(error_messages)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " -> ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""

        if error_type == "missing":
            return f"* {location}: Required field is missing"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }[error_type]
            return f"* {location}: Value must be {operator} {limit} (got: {input_value})"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"* {location}: Must be one of {expected} (got: {input_value})"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"* {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found:\n"
            f"Could not find configuration file: {error.filename or error}\n"
            f"Create one with: bookmarkt --create-config bookmarkt.toml"
        )

    else:
        return f"Configuration Error:\n{str(error)}"
