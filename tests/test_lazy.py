from __future__ import annotations

import threading
import time

import pytest

from localerr.lazy import Once


def test_once_computes_a_single_time() -> None:
    calls: list[int] = []
    cell: Once[str] = Once()

    def compute() -> str:
        calls.append(1)
        return "value"

    assert not cell.resolved
    assert cell.get_or_compute(compute) == "value"
    assert cell.get_or_compute(compute) == "value"
    assert cell.resolved
    assert len(calls) == 1


def test_failure_leaves_cell_unresolved() -> None:
    cell: Once[str] = Once()

    def boom() -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        cell.get_or_compute(boom)
    assert not cell.resolved
    assert cell.value is None
    assert cell.get_or_compute(lambda: "recovered") == "recovered"


def test_resolved_with_skips_compute() -> None:
    cell = Once.resolved_with("cached")
    assert cell.resolved
    assert cell.get_or_compute(lambda: "fresh") == "cached"


def test_concurrent_callers_share_one_computation() -> None:
    cell: Once[int] = Once()
    calls: list[int] = []
    results: list[int] = []
    barrier = threading.Barrier(8)

    def compute() -> int:
        calls.append(1)
        time.sleep(0.01)
        return 7

    def worker() -> None:
        barrier.wait()
        results.append(cell.get_or_compute(compute))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert results == [7] * 8
