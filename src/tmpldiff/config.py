"""Application configuration: settings schema and tmpldiff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from tmpldiff.core.models import TemplateDescription


CONFIG_FILE = "tmpldiff.yaml"
ENV_PREFIX = "TMPLDIFF_"


class Settings(BaseModel):
    context_lines: int = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    color:         bool = Field(default=True, description="Color removed/added lines in diff output")
    log_level:     str = Field(default="WARNING", pattern="(?i)^(trace|debug|info|success|warning|error|critical)$")
    variables:     dict[str, Any] = Field(default_factory=dict, description="Bindings available to every template")
    templates:     list[TemplateDescription] = Field(default_factory=list)


# Structured fields are only read from the config file
_ENV_FIELDS = ("context_lines", "color", "log_level")


def load_config(overrides: dict[str, Any] = None, path: Path = None) -> Settings:
    """Load Settings from the config file, then TMPLDIFF_<FIELD> env vars, then non-None CLI overrides.

    Without an explicit path a missing tmpldiff.yaml is fine and defaults apply;
    an explicit path that does not exist is an error.
    """
    config_path = Path(path) if path else Path(CONFIG_FILE)
    data: dict[str, Any] = {}
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {config_path}: expected a mapping, got {type(data).__name__}")
    elif path:
        raise ValueError(f"Config file not found: {config_path}")

    for name in _ENV_FIELDS:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid {config_path}: {e}") from e
