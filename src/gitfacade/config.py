# src/gitfacade/config.py: Pydantic models for configuration.
# This module defines the schema for the optional 'config.yaml' file using
# Pydantic models. The configuration supplies the default git binary location
# handed to new repository handles and the logging settings. Loading it is
# always explicit; nothing here is cached process-wide.

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .util.errors import ConfigError
from .util.paths import get_default_config_path

DEFAULT_TOOL_PATH = "/usr/bin/git"


class GitSettings(BaseModel):
    tool_path: str = DEFAULT_TOOL_PATH

    @field_validator("tool_path")
    @classmethod
    def _expand_tool_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("tool_path must not be empty")
        return os.path.expandvars(os.path.expanduser(value.strip()))


class LoggingConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    level: str = "WARNING"
    json_format: bool = Field(False, alias="json")


class Config(BaseModel):
    version: int = 1
    git: GitSettings = Field(default_factory=GitSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load, parse and validate the configuration file.

    Args:
        path: The path to the configuration file. If None, the XDG default
            location is used and a missing file yields the defaults.

    Returns:
        A validated Config instance.

    Raises:
        ConfigError: If an explicit file is missing, or any file cannot be
            read, parsed or validated.
    """
    config_path = Path(path) if path is not None else get_default_config_path()
    if not config_path.is_file():
        if path is None:
            return Config()
        raise ConfigError(f"Configuration file not found at '{config_path}'.")

    try:
        data = yaml.safe_load(config_path.read_text())
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file '{config_path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse configuration file '{config_path}': {e}") from e

    try:
        return Config.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed:\n{e}") from e
