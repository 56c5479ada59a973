from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import CountingRenderer


@pytest.fixture
def counting_renderer() -> CountingRenderer:
    return CountingRenderer()


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOCALERR_DOCS_BASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)
