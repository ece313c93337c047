"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding the input images."""

    directory = tmp_path / "source"
    directory.mkdir()
    return directory


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Directory receiving the copies; not created up front."""

    return tmp_path / "target"


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep a developer's path overrides out of the test run."""

    monkeypatch.delenv("BARCODE_RENAMER_CONFIG", raising=False)
    monkeypatch.delenv("BARCODE_RENAMER_LOG_DIR", raising=False)
    yield None
