"""Typed configuration schema and loader for the command line tool."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from ..rules.catalog import CATALOG
from ..utils.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Log level for the package logger and the variable that overrides it."""

    level: LogLevel
    level_env: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class InputSettings(BaseModel):
    """How values read from files are cleaned before checking."""

    strip_whitespace: bool
    skip_blank: bool

    model_config = ConfigDict(extra="forbid")


class IdentifySettings(BaseModel):
    """Categories considered by ``identify``; empty means all."""

    categories: list[str]

    model_config = ConfigDict(extra="forbid")

    @field_validator("categories")
    @classmethod
    def _known(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in CATALOG]
        if unknown:
            raise ValueError(f"unknown categories: {', '.join(unknown)}")
        return value


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    logging: LoggingSettings
    input: InputSettings
    identify: IdentifySettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < the
    environment variable named by ``logging.level_env``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ConfigError
        If a file is not valid YAML or not a mapping.
    pydantic.ValidationError
        If the merged document does not satisfy :class:`ConfigModel`.
    """

    with (
        importlib_resources.files("regex_collection.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        merged = deep_merge_dicts(defaults, _read_yaml(Path(path)))
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    section = merged.get("logging")
    level_env = section.get("level_env") if isinstance(section, dict) else None
    if isinstance(level_env, str) and environ.get(level_env):
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "LoggingSettings",
    "InputSettings",
    "IdentifySettings",
    "deep_merge_dicts",
    "load_config",
]
