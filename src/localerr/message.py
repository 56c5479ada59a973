"""Templated messages: a raw template paired with its ordered arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TemplatedMessage:
    """A template string and the positional arguments for its placeholders.

    The message never resolves itself. The error that owns it hands
    ``[template]`` and ``arguments`` to a renderer.
    """

    template: str
    arguments: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @classmethod
    def coerce(cls, value: TemplatedMessage | str) -> TemplatedMessage:
        if isinstance(value, TemplatedMessage):
            return value
        return cls(str(value))

    def to_dict(self) -> dict[str, Any]:
        return {"template": self.template, "arguments": list(self.arguments)}

    def __str__(self) -> str:
        return self.template


def phrase(template: str, *arguments: Any) -> TemplatedMessage:
    """Shorthand for ``TemplatedMessage(template, arguments)``."""
    return TemplatedMessage(template, arguments)


__all__ = ["TemplatedMessage", "phrase"]
