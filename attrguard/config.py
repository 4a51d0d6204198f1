"""Guard settings loaded from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from attrguard.messages import DEFAULT_SERVICE_NAME


class GuardSettings(BaseModel):
    """Paths guarded on every run and the account named in warnings."""

    watch: list[Path] = Field(default_factory=list)
    service_name: str = DEFAULT_SERVICE_NAME


def default_config_path() -> Path:
    """Return the default settings file location."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home).expanduser() / "attrguard" / "config.yml"
    return Path.home() / ".config" / "attrguard" / "config.yml"


def load_settings(path: Path) -> GuardSettings:
    """Load and validate a YAML settings file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Unable to read settings file: {path}: {exc}") from exc

    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ValueError(f"Unable to parse settings YAML: {path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError(f"Settings must be a YAML object: {path}")

    try:
        return GuardSettings.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Settings validation failed: {path}: {exc}") from exc


def resolve_settings(path: Path | None) -> GuardSettings:
    """Load `path`, else the default settings file if present, else defaults."""
    if path is not None:
        return load_settings(path)

    default_path = default_config_path()
    if default_path.is_file():
        return load_settings(default_path)
    return GuardSettings()
