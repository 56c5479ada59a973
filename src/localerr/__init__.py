"""localerr public API surface."""

from localerr.config import (
    ConfigError,
    DocsConfig,
    LocalerrConfig,
    RenderConfig,
    load_config,
    serialize_config,
)
from localerr.errors import ERROR_KINDS, LocalizedError, RequestTimeoutError, error_class_for
from localerr.lazy import Once
from localerr.message import TemplatedMessage, phrase
from localerr.rendering import (
    JinjaRenderer,
    PlaceholderRenderer,
    RenderError,
    Renderer,
    build_renderer,
)

__all__ = [
    "ConfigError",
    "DocsConfig",
    "LocalerrConfig",
    "RenderConfig",
    "load_config",
    "serialize_config",
    "ERROR_KINDS",
    "LocalizedError",
    "RequestTimeoutError",
    "error_class_for",
    "Once",
    "TemplatedMessage",
    "phrase",
    "JinjaRenderer",
    "PlaceholderRenderer",
    "RenderError",
    "Renderer",
    "build_renderer",
]
