"""Shared fixtures for the picotypes test suite."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from picotypes.core.config import Settings, configure


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    """Every test starts from default settings, untouched by the host env."""
    for key in ("PICOTYPES_MASK_TOKEN", "PICOTYPES_STRICT_TYPES"):
        monkeypatch.delenv(key, raising=False)
    configure(None)
    yield
    configure(None)


@pytest.fixture
def lenient_types():
    """Switch strict type checks off for the duration of a test."""
    configure(Settings(strict_types=False))


# ---------------------------------------------------------------------------
# Sample values
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_uuid() -> uuid.UUID:
    return uuid.UUID("6f1c2a4e-9d3b-4c1a-8e7f-2b5d9a0c3e41")


@pytest.fixture
def bigger_uuid() -> uuid.UUID:
    return uuid.UUID("7f1c2a4e-9d3b-4c1a-8e7f-2b5d9a0c3e41")


@pytest.fixture
def sample_price() -> Decimal:
    return Decimal("67005.50")


@pytest.fixture
def secret_bytes() -> bytearray:
    """A mutable caller-owned buffer."""
    return bytearray(b"correct horse battery staple")
