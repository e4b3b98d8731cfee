"""Shared fixtures for technicals tests."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Sequence

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from technicals.models.bar import Bar


def _make_bars(
    closes: Sequence[float],
    volumes: Sequence[float] | None = None,
    start: date = date(2024, 1, 1),
) -> list[Bar]:
    """Daily bars on consecutive dates with a +/-1 high/low envelope."""
    if volumes is None:
        volumes = [1000.0] * len(closes)
    bars = []
    for i, (close, volume) in enumerate(zip(closes, volumes)):
        bars.append(Bar(
            date=(start + timedelta(days=i)).isoformat(),
            open=close,
            high=close + 1.0,
            low=max(close - 1.0, 0.0),
            close=close,
            volume=volume,
        ))
    return bars


@pytest.fixture
def make_bars():
    """Factory for daily bars from close (and optional volume) lists."""
    return _make_bars


@pytest.fixture
def rising_bars() -> list[Bar]:
    """25 bars with close = 100 + i and flat volume."""
    return _make_bars([100.0 + i for i in range(25)])


@pytest.fixture
def spike_bars() -> list[Bar]:
    """25 flat-price bars, volume 1000 except 10000 on the last day."""
    volumes = [1000.0] * 24 + [10000.0]
    return _make_bars([100.0] * 25, volumes)


@pytest.fixture
def sample_bars() -> list[Bar]:
    """5 contiguous daily bars."""
    bars = []
    for i in range(5):
        bars.append(Bar(
            date=(date(2024, 1, 15) + timedelta(days=i)).isoformat(),
            open=150.0 + i * 0.1,
            high=150.5 + i * 0.1,
            low=149.5 + i * 0.1,
            close=150.2 + i * 0.1,
            volume=10000.0 + i * 500,
        ))
    return bars
