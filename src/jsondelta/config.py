"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "JSONDELTA_"


class Settings(BaseModel):
    large_file_threshold: int = Field(default=1000, ge=1, description="Line count above which the positional diff is used")
    max_lines:     int = Field(default=0, ge=0, description="Truncate inputs before line diffing; 0 = no limit")
    base_path:     str = Field(default="",     description="Path prefix for structural diff entries")
    output_format: str = Field(default="text", pattern="^(text|json|yaml)$", description="text, json or yaml")
    indent:        int = Field(default=2, ge=0, description="JSON indent for rendered values and reports")
    log_level:     str = Field(default="WARNING", description="Logging level name for the CLI")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then JSONDELTA_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
