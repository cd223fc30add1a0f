"""Shared fixtures: a fixed clock and ready-made palettes."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from optics_palette.generator import generate_palette
from optics_palette.optics import generate_optics_palette

FIXED_MOMENT = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def blue_palette(fixed_clock):
    return generate_palette("#3b82f6", "test", 5, clock=fixed_clock)


@pytest.fixture
def optics_palette(fixed_clock):
    return generate_optics_palette("#3b82f6", "test-primary", clock=fixed_clock)
