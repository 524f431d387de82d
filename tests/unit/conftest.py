"""Shared fixtures for the unit suite."""

from __future__ import annotations

import pytest

from mockable.config import reset_settings


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start from default settings loaded from an env without MOCKABLE_* vars."""
    monkeypatch.delenv("MOCKABLE_MAX_ELEMENTS", raising=False)
    monkeypatch.delenv("MOCKABLE_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
