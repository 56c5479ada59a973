from __future__ import annotations

from typing import Any, Sequence


class CountingRenderer:
    """Renderer stub that records every call and returns a fixed string."""

    def __init__(self, result: str = "rendered") -> None:
        self.result = result
        self.calls: list[tuple[Sequence[str], Sequence[Any]]] = []

    def render(self, texts: Sequence[str], arguments: Sequence[Any]) -> str:
        self.calls.append((texts, arguments))
        return self.result


class FailingRenderer:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    def render(self, texts: Sequence[str], arguments: Sequence[Any]) -> str:
        self.calls += 1
        raise self.exc
