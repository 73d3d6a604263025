from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fastq_check.usecases.config_models import AppConfig

_TOP_LEVEL_KEYS = {"version", "quality", "input", "output", "parallel", "logging"}

# Packaged defaults used when no --config is given.
DEFAULT_CONFIG = "default_config.yml"


# ConfigError is raised for invalid configuration (fail fast, exit code 2).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    return parse_config(text, origin=str(path))


def load_default_config() -> AppConfig:
    text = resources.files("fastq_check").joinpath(DEFAULT_CONFIG).read_text(encoding="utf-8")
    return parse_config(text, origin=DEFAULT_CONFIG)


def parse_config(text: str, *, origin: str) -> AppConfig:
    # YAML loader; the raw mapping is checked before typed validation.
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {origin}: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    _validate_top_level(raw)
    return config_from_mapping(raw)


def config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")
    if raw.get("version", 1) != 1:
        raise ConfigError(f"Unsupported config version: {raw['version']}")
