"""Data quality validation for daily bar sequences.

These checks belong to whoever assembles the bar sequence. The indicator
engine does not run them and computes on whatever it is given.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from technicals.models.bar import Bar

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _is_iso_date(value: str) -> bool:
    """``YYYY-MM-DD`` naming a real calendar day."""
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_bars(bars: Sequence[Bar]) -> ValidationResult:
    """Run all quality checks on a sequence of daily bars.

    Checks:
        1. Not empty
        2. Date format (ISO ``YYYY-MM-DD``)
        3. No NaN/Inf in OHLCV
        4. Volume sanity (non-negative)
        5. Price sanity (non-negative)
        6. Date ordering (strictly ascending, no duplicates)
        7. OHLC consistency (high >= low, high >= open/close, low <= open/close)
    """
    result = ValidationResult()

    # 1. Not empty
    if not bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(bars)} bars"))

    # 2. Date format
    bad_dates = [b.date for b in bars if not _is_iso_date(b.date)]
    if bad_dates:
        result.checks.append(ValidationCheck(
            "date_format", False,
            f"{len(bad_dates)} dates not YYYY-MM-DD (first: {bad_dates[0]!r})",
        ))
    else:
        result.checks.append(ValidationCheck("date_format", True))

    # 3. No NaN/Inf
    nan_count = 0
    for b in bars:
        for val in (b.open, b.high, b.low, b.close, b.volume):
            if math.isnan(val) or math.isinf(val):
                nan_count += 1
    if nan_count:
        result.checks.append(ValidationCheck("no_nulls", False, f"{nan_count} NaN/Inf values"))
    else:
        result.checks.append(ValidationCheck("no_nulls", True))

    # 4. Volume sanity
    neg_vol = sum(1 for b in bars if b.volume < 0)
    if neg_vol:
        result.checks.append(
            ValidationCheck("volume_sanity", False, f"{neg_vol} bars with negative volume")
        )
    else:
        result.checks.append(ValidationCheck("volume_sanity", True))

    # 5. Price sanity
    neg_price = sum(1 for b in bars if min(b.open, b.high, b.low, b.close) < 0)
    if neg_price:
        result.checks.append(
            ValidationCheck("price_sanity", False, f"{neg_price} bars with negative prices")
        )
    else:
        result.checks.append(ValidationCheck("price_sanity", True))

    # 6. Date ordering (ISO dates sort lexically)
    out_of_order = 0
    for i in range(1, len(bars)):
        if bars[i].date <= bars[i - 1].date:
            out_of_order += 1
    if out_of_order:
        result.checks.append(
            ValidationCheck("date_order", False, f"{out_of_order} out of order or duplicated")
        )
    else:
        result.checks.append(ValidationCheck("date_order", True))

    # 7. OHLC consistency
    inconsistent = 0
    for b in bars:
        if b.high < b.low:
            inconsistent += 1
        elif b.high < b.open or b.high < b.close:
            inconsistent += 1
        elif b.low > b.open or b.low > b.close:
            inconsistent += 1
    if inconsistent:
        result.checks.append(
            ValidationCheck("ohlc_consistency", False, f"{inconsistent} bars with H<L or H<O/C")
        )
    else:
        result.checks.append(ValidationCheck("ohlc_consistency", True))

    return result
