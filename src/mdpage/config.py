"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from mdpage.core.render import make_parser


CONFIG_FILE = "config.yaml"
LIST_FIELDS = {"required_fields", "extensions"}


class Settings(BaseModel):
    app_name:        str = "mdpage"
    marker:          str = Field(default="---", min_length=1, description="Front matter delimiter line")
    required_fields: list[str] = Field(default=["title"], description="Metadata keys every page must supply")
    extensions:      list[str] = Field(default=[".md", ".markdown"], description="Content file suffixes")
    parser_config:   str = Field(default="commonmark", description="MarkdownIt parser preset name")
    output_dir:      str = Field(default="_site", description="Directory for rendered HTML + JSON files")
    log_json:        bool = Field(default=False, description="Emit JSON log lines instead of console output")
    verbose:         bool = Field(default=False, description="Enable DEBUG logging")

    @field_validator("parser_config")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        try:
            make_parser(value)
        except KeyError:
            raise ValueError(f"Unknown markdown-it preset '{value}'") from None
        return value


def _from_env(name: str, val: str) -> Any:
    """Split comma-separated env values for list fields."""
    if name in LIST_FIELDS:
        return [v.strip() for v in val.split(",") if v.strip()]
    return val


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPAGE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPAGE_{name.upper()}"):
            data[name] = _from_env(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
