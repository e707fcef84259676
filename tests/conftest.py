"""Pytest configuration for test isolation.

The CLI loads a ``.env`` from the working directory and reads
``BID_SORT_LOG_LEVEL``; the logging setup is process-global. Each test gets a
clean environment, its own working directory and an unconfigured package
logger so results never depend on test order or on the developer's shell.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from bid_sort.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("BID_SORT_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_logging()
    yield
    reset_logging()
