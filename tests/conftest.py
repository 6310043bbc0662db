"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MOCKDRAFT__ env vars and any local mockdraft.yaml out of tests."""
    for key in list(os.environ):
        if key.startswith("MOCKDRAFT__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
