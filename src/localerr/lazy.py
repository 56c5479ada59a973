"""Compute-once cell for values that are expensive or side-effecting to build."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Once(Generic[T]):
    """Holds a value that is computed at most once.

    The cell starts unresolved. The first successful ``get_or_compute`` call
    resolves it and every later call returns the stored value. A failing
    compute function leaves the cell unresolved and its exception propagates.
    """

    __slots__ = ("_lock", "_resolved", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._resolved = False
        self._value: T | None = None

    @classmethod
    def resolved_with(cls, value: T) -> Once[T]:
        cell: Once[T] = cls()
        cell._value = value
        cell._resolved = True
        return cell

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def value(self) -> T | None:
        return self._value

    def get_or_compute(self, compute: Callable[[], T]) -> T:
        if self._resolved:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._resolved:
                self._value = compute()
                self._resolved = True
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._resolved:
            return f"Once(resolved={self._value!r})"
        return "Once(<unresolved>)"


__all__ = ["Once"]
