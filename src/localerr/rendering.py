"""Renderers that resolve a template and its arguments into a string."""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol, Sequence, runtime_checkable

import jinja2

from localerr.codes import RENDER_001, RENDER_002, RENDER_003
from localerr.config import RenderConfig

logger = logging.getLogger(__name__)

# {0} is zero-based, %1 is one-based.
_PLACEHOLDER = re.compile(r"\{(\d+)\}|%(\d+)")


class RenderError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


@runtime_checkable
class Renderer(Protocol):
    def render(self, texts: Sequence[str], arguments: Sequence[Any]) -> str: ...


def _select_text(texts: Sequence[str]) -> str:
    if not texts:
        raise RenderError(RENDER_001, "No template text to render")
    return str(texts[-1])


class PlaceholderRenderer:
    """Substitute positional placeholders in a single pass.

    ``{0}`` and ``%1`` both refer to the first argument. Substituted values
    are not scanned again, so an argument containing ``{1}`` stays literal.
    Placeholders with no matching argument are left as written unless
    ``strict`` is set.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def render(self, texts: Sequence[str], arguments: Sequence[Any]) -> str:
        template = _select_text(texts)
        if not arguments and not self.strict:
            return template

        def _substitute(match: re.Match[str]) -> str:
            zero_based, one_based = match.groups()
            index = int(zero_based) if zero_based is not None else int(one_based) - 1
            if 0 <= index < len(arguments):
                return str(arguments[index])
            if self.strict:
                raise RenderError(
                    RENDER_002,
                    f"Placeholder {match.group(0)!r} has no argument ({len(arguments)} supplied)",
                )
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, template)


class JinjaRenderer:
    """Render templates with Jinja2, exposing the arguments as ``args``."""

    def __init__(self, strict: bool = True) -> None:
        self.strict = strict
        self._env = jinja2.Environment(
            undefined=jinja2.StrictUndefined if strict else jinja2.Undefined,
            autoescape=False,
        )

    def render(self, texts: Sequence[str], arguments: Sequence[Any]) -> str:
        template = _select_text(texts)
        try:
            return self._env.from_string(template).render(args=list(arguments))
        except jinja2.TemplateError as exc:
            raise RenderError(RENDER_003, f"Jinja template error: {exc}") from exc
        except (TypeError, ValueError, LookupError, ArithmeticError) as exc:
            raise RenderError(RENDER_003, f"Jinja template failed: {exc}") from exc


def build_renderer(config: RenderConfig | None = None) -> Renderer:
    """Return the renderer named by ``config.engine``."""
    config = config or RenderConfig()
    logger.debug("Building %s renderer (strict=%s)", config.engine, config.strict)
    if config.engine == "jinja":
        return JinjaRenderer(strict=config.strict)
    return PlaceholderRenderer(strict=config.strict)


__all__ = [
    "JinjaRenderer",
    "PlaceholderRenderer",
    "RenderError",
    "Renderer",
    "build_renderer",
]
