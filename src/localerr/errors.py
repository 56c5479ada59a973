"""Typed, chainable errors with lazily rendered log messages."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, ClassVar

from localerr.codes import KIND_001
from localerr.config import DocsConfig
from localerr.lazy import Once
from localerr.message import TemplatedMessage
from localerr.rendering import PlaceholderRenderer, Renderer

logger = logging.getLogger(__name__)


class LocalizedError(Exception):
    """Base error carrying a templated message, status, code, cause and context.

    ``status_code`` and ``code`` are resolved from a single value: ``code``
    when given, else ``status_code``, else the class ``default_status``.

    The human-readable log message is rendered on the first ``log_message()``
    call and cached for the life of the error. ``str(error)`` is always the
    raw template.

    Args:
        message: The message template and its positional arguments.
        cause: The error that led to this one. Stored by reference.
        status_code: HTTP-style status used when ``code`` is not given.
        code: Application-facing identifier, takes precedence over ``status_code``.
        context: Diagnostic metadata. Stored as given.
        renderer: Renderer used by ``log_message()`` when none is passed to it.
    """

    error_kind: ClassVar[str] = "LocalizedError"
    default_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR.value

    def __init__(
        self,
        message: TemplatedMessage | str,
        cause: Any = None,
        status_code: int | None = None,
        code: str | int | None = None,
        context: dict[str, Any] | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> None:
        self.message = TemplatedMessage.coerce(message)
        super().__init__(self.message.template)

        resolved = self._resolve_code(status_code, code)
        self.status_code: str | int = resolved
        self.code: str | int = resolved
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause
        self.context = context
        self._renderer = renderer
        self._log_message: Once[str] = Once()

    @classmethod
    def make(
        cls,
        message: TemplatedMessage | str,
        cause: Any = None,
        status_code: int | None = None,
        code: str | int | None = None,
        context: dict[str, Any] | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> LocalizedError:
        """Build a new error, defaulting ``status_code`` to the class default."""
        return cls(
            message,
            cause,
            status_code if status_code is not None else cls.default_status,
            code,
            context,
            renderer=renderer,
        )

    def _resolve_code(self, status_code: int | None, code: str | int | None) -> str | int:
        if code is not None:
            return code
        if status_code is not None:
            return status_code
        return self.default_status

    def solution(self, docs: DocsConfig | None = None) -> dict[str, Any]:
        return {
            "title": self.error_kind,
            "message": self.message,
            "documentationLinks": self._documentation_links(docs),
        }

    def _documentation_links(self, docs: DocsConfig | None) -> dict[str, str]:
        docs = docs or DocsConfig()
        return {docs.link_label: docs.link_for(self.error_kind)}

    def raw_message(self) -> str:
        """The message template with no placeholders filled in."""
        return str(self.message.template)

    def parameters(self) -> tuple[Any, ...]:
        """Arguments for the placeholders in ``raw_message()``, in order."""
        return self.message.arguments

    def log_message(self, renderer: Renderer | None = None) -> str:
        """The message with its placeholders filled in.

        Rendering happens once; later calls return the cached string and
        ignore ``renderer``. Renderer failures propagate and nothing is cached.
        """
        return self._log_message.get_or_compute(lambda: self._render(renderer))

    def _render(self, renderer: Renderer | None) -> str:
        if renderer is None:
            renderer = self._renderer if self._renderer is not None else PlaceholderRenderer()
        logger.debug("Rendering %s log message with %s", self.error_kind, type(renderer).__name__)
        return renderer.render([self.raw_message()], self.parameters())

    @property
    def log_message_resolved(self) -> bool:
        return self._log_message.resolved

    def to_dict(self, renderer: Renderer | None = None) -> dict[str, Any]:
        """Serialize for structured logs. Renders the log message if needed."""
        return {
            "type": self.error_kind,
            "message": self.raw_message(),
            "parameters": list(self.parameters()),
            "log_message": self.log_message(renderer),
            "status_code": self.status_code,
            "code": self.code,
            "context": self.context,
            "cause": _cause_to_dict(self.cause, renderer),
        }

    def __reduce__(self) -> tuple[Any, ...]:
        cached = self._log_message.value if self._log_message.resolved else None
        return (
            _rebuild,
            (
                type(self),
                self.message,
                self.cause,
                self.status_code,
                self.code,
                self.context,
                cached,
            ),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw_message()!r}, code={self.code!r})"


class RequestTimeoutError(LocalizedError):
    """A request took too long. Defaults to 408 Request Timeout."""

    error_kind: ClassVar[str] = "TimeoutError"
    default_status: ClassVar[int] = HTTPStatus.REQUEST_TIMEOUT.value

    # Keys: title, description, links.
    def solution(self, docs: DocsConfig | None = None) -> dict[str, Any]:
        return {
            "title": self.error_kind,
            "description": self.message,
            "links": self._documentation_links(docs),
        }


ERROR_KINDS: dict[str, type[LocalizedError]] = {
    LocalizedError.error_kind: LocalizedError,
    RequestTimeoutError.error_kind: RequestTimeoutError,
}


def error_class_for(kind: str) -> type[LocalizedError]:
    try:
        return ERROR_KINDS[kind]
    except KeyError as exc:
        known = ", ".join(sorted(ERROR_KINDS))
        raise ValueError(f"{KIND_001}: Unknown error kind {kind!r} (known: {known})") from exc


def _cause_to_dict(cause: Any, renderer: Renderer | None) -> dict[str, Any] | None:
    if cause is None:
        return None
    if isinstance(cause, LocalizedError):
        return cause.to_dict(renderer)
    return {"type": type(cause).__name__, "message": str(cause)}


def _rebuild(
    cls: type[LocalizedError],
    message: TemplatedMessage,
    cause: Any,
    status_code: str | int,
    code: str | int,
    context: dict[str, Any] | None,
    log_message: str | None,
) -> LocalizedError:
    error = cls(message, cause, status_code, code, context)
    if log_message is not None:
        error._log_message = Once.resolved_with(log_message)
    return error


__all__ = [
    "ERROR_KINDS",
    "LocalizedError",
    "RequestTimeoutError",
    "error_class_for",
]
