"""Configuration management for localerr."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from localerr.codes import CONFIG_001, CONFIG_002, CONFIG_003

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "localerr.yaml"
DEFAULT_DOCS_BASE_URL = "https://docs.maginium.com/errors/"
DOCS_BASE_URL_ENV = "LOCALERR_DOCS_BASE_URL"


def _default_docs_base_url() -> str:
    return os.getenv(DOCS_BASE_URL_ENV) or DEFAULT_DOCS_BASE_URL


class ConfigError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class DocsConfig(BaseModel):
    """Where solution payloads point readers for more information."""

    base_url: str = Field(default_factory=_default_docs_base_url)
    link_label: str = "More Info"

    def link_for(self, error_kind: str) -> str:
        return self.base_url + error_kind


class RenderConfig(BaseModel):
    engine: Literal["placeholder", "jinja"] = "placeholder"
    strict: bool = False


class LocalerrConfig(BaseModel):
    docs: DocsConfig = Field(default_factory=DocsConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)


def load_config(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> LocalerrConfig:
    resolved_path = _resolve_config_path(config_path)
    data: dict[str, Any] = {}
    if resolved_path is None:
        logger.info("No config file found, using defaults")
    else:
        data = _load_yaml(resolved_path)
    if overrides:
        data = _deep_update(data, overrides)
    try:
        return LocalerrConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(CONFIG_003, f"Invalid configuration: {exc}") from exc


def serialize_config(config: LocalerrConfig) -> dict[str, Any]:
    return config.model_dump(mode="json")


def _resolve_config_path(config_path: Path | None) -> Path | None:
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(CONFIG_001, f"Config file not found: {config_path}")
        return config_path
    default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default_path if default_path.exists() else None


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(CONFIG_002, f"Failed to read config file: {path}") from exc
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(CONFIG_002, f"Invalid YAML in config file: {path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(CONFIG_002, "Config file must define a mapping.")
    return data


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged


__all__ = [
    "ConfigError",
    "DocsConfig",
    "LocalerrConfig",
    "RenderConfig",
    "load_config",
    "serialize_config",
]
