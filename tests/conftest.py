from __future__ import annotations

import os
from datetime import datetime, timezone

import pytest
from hypothesis import HealthCheck, settings

from skyterm.core.types import Observer

settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile(
    "ci",
    max_examples=300,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def nyc() -> Observer:
    return Observer(40.7128, -74.0060, 10.0, "New York City")


@pytest.fixture
def instant() -> datetime:
    """A fixed instant so every test sees the same sky."""
    return datetime(2025, 1, 1, 3, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    # Never read the developer's real config file.
    monkeypatch.setenv("SKYTERM_CONFIG", str(tmp_path / "missing.yaml"))
