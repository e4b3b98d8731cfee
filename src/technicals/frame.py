"""DataFrame adapters for DataFrame-oriented callers.

Indicator columns come from :func:`~technicals.indicators.indicator_columns`,
the same rolling-window and RSI path behind ``calculate_indicators``.
"""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from technicals.errors import TechnicalsError, TechnicalsErrorCode
from technicals.indicators import INDICATOR_COLUMNS, indicator_columns
from technicals.models.bar import Bar, IndicatorBar

logger = logging.getLogger(__name__)

BAR_COLUMNS = ["date", "open", "high", "low", "close", "volume"]
_FLOAT_INDICATORS = [c for c in INDICATOR_COLUMNS if c != "Vol_Spike"]


def bars_to_frame(bars: Sequence[Bar]) -> pd.DataFrame:
    """One row per bar with the ``date, open, high, low, close, volume`` columns."""
    if not bars:
        return pd.DataFrame(columns=BAR_COLUMNS)
    return pd.DataFrame([b.to_dict() for b in bars], columns=BAR_COLUMNS)


def frame_to_bars(df: pd.DataFrame) -> list[Bar]:
    """Convert rows to bars, keeping row order.

    Raises:
        TechnicalsError: ``INVALID_RECORD`` if a required column is missing
            or a row holds a non-numeric price.
    """
    missing = [c for c in BAR_COLUMNS if c not in df.columns]
    if missing:
        raise TechnicalsError(
            f"DataFrame missing columns: {', '.join(missing)}",
            code=TechnicalsErrorCode.INVALID_RECORD,
        )
    records = df[BAR_COLUMNS].to_dict("records")
    return [Bar.from_dict(r) for r in records]


def indicators_to_frame(annotated: Sequence[IndicatorBar]) -> pd.DataFrame:
    """Consumer-shaped frame: bar columns plus ``MA20`` ... ``Vol_Spike``.

    Warm-up values become ``NaN`` in the float columns; ``Vol_Spike`` is
    always boolean.
    """
    columns = BAR_COLUMNS + INDICATOR_COLUMNS
    if not annotated:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([b.to_dict() for b in annotated], columns=columns)
    df[_FLOAT_INDICATORS] = df[_FLOAT_INDICATORS].astype("float64")
    df["Vol_Spike"] = df["Vol_Spike"].astype(bool)
    return df


def calculate_indicators_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with the indicator columns appended.

    Rows must already be in ascending date order; the index is preserved.
    """
    bars = frame_to_bars(df)
    indicators = indicator_columns(
        pd.Series([b.close for b in bars], dtype="float64"),
        pd.Series([b.volume for b in bars], dtype="float64"),
    )

    out = df.copy()
    for col in INDICATOR_COLUMNS:
        out[col] = indicators[col].to_numpy()
    logger.debug("Appended %d indicator columns to %d-row frame", len(INDICATOR_COLUMNS), len(out))
    return out
