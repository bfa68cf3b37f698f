"""Shared pytest fixtures for fuzzydate tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``FUZZYDATE_*`` variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("FUZZYDATE_"):
            monkeypatch.delenv(name, raising=False)
