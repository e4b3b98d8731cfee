"""Technical indicator engine for daily bars.

Computes, for an ascending-date sequence of :class:`~technicals.models.bar.Bar`:

- 20-day Bollinger Bands (mean and population std of close, +/- 2 std)
- 14-day RSI with Wilder smoothing
- 20-day average volume and a volume-spike flag (volume > 2x average)

Windowed statistics run on pandas rolling windows; RSI is a sequential
fold. No I/O, no shared state. Input order is trusted, never re-sorted.
Non-finite inputs propagate through the arithmetic.
"""

from __future__ import annotations

import logging
from itertools import accumulate
from typing import Sequence

import pandas as pd

from technicals.models.bar import Bar, IndicatorBar

logger = logging.getLogger(__name__)

BOLLINGER_WINDOW = 20
BOLLINGER_K = 2.0
RSI_PERIOD = 14
VOLUME_WINDOW = 20
VOLUME_SPIKE_MULTIPLIER = 2.0

INDICATOR_COLUMNS = ["MA20", "STD20", "Upper", "Lower", "RSI", "Vol_MA20", "Vol_Spike"]

Bands = tuple[float, float, float, float]  # (ma, std, upper, lower)
RsiState = tuple[float, float]  # (avg_gain, avg_loss)


# =============================================================================
# ROLLING WINDOWS
# =============================================================================


def bollinger_bands(close: pd.Series) -> pd.DataFrame:
    """``MA20``, ``STD20``, ``Upper``, ``Lower`` columns; NaN during warm-up."""
    rolling = close.rolling(BOLLINGER_WINDOW)
    mid = rolling.mean()
    std = rolling.std(ddof=0)
    return pd.DataFrame({
        "MA20": mid,
        "STD20": std,
        "Upper": mid + BOLLINGER_K * std,
        "Lower": mid - BOLLINGER_K * std,
    })


def volume_spike_flags(volume: pd.Series) -> pd.DataFrame:
    """``Vol_MA20`` (NaN during warm-up) and boolean ``Vol_Spike`` columns."""
    vol_ma = volume.rolling(VOLUME_WINDOW).mean()
    # NaN compares False, so warm-up rows are never spikes
    spike = volume > vol_ma * VOLUME_SPIKE_MULTIPLIER
    return pd.DataFrame({"Vol_MA20": vol_ma, "Vol_Spike": spike.astype(bool)})


def indicator_columns(close: pd.Series, volume: pd.Series) -> pd.DataFrame:
    """All derived columns for aligned close/volume series, positional index."""
    close = close.reset_index(drop=True).astype("float64")
    volume = volume.reset_index(drop=True).astype("float64")
    rsi = pd.Series(wilder_rsi(close.tolist()), index=close.index, dtype="float64")
    columns = pd.concat(
        [bollinger_bands(close), rsi.rename("RSI"), volume_spike_flags(volume)],
        axis=1,
    )
    return columns[INDICATOR_COLUMNS]


def bollinger(closes: Sequence[float]) -> list[Bands | None]:
    """Per-index Bollinger Bands, ``None`` until the 20-day window is full."""
    bands = bollinger_bands(pd.Series(closes, dtype="float64"))
    rows = bands.itertuples(index=False, name=None)
    return [
        None if i < BOLLINGER_WINDOW - 1 else tuple(float(v) for v in row)
        for i, row in enumerate(rows)
    ]


def volume_spikes(volumes: Sequence[float]) -> list[tuple[float | None, bool]]:
    """Per-index ``(vol_ma20, spike)``; ``(None, False)`` during warm-up."""
    flags = volume_spike_flags(pd.Series(volumes, dtype="float64"))
    pairs = zip(flags["Vol_MA20"].tolist(), flags["Vol_Spike"].tolist())
    return [
        (None, False) if i < VOLUME_WINDOW - 1 else (float(vol_ma), bool(spike))
        for i, (vol_ma, spike) in enumerate(pairs)
    ]


# =============================================================================
# RSI (WILDER)
# =============================================================================


def _rsi_seed(diffs: Sequence[float]) -> RsiState:
    gains = 0.0
    losses = 0.0
    for diff in diffs:
        if diff > 0:
            gains += diff
        else:
            losses -= diff
    return gains / RSI_PERIOD, losses / RSI_PERIOD


def _wilder_step(state: RsiState, diff: float) -> RsiState:
    avg_gain, avg_loss = state
    avg_gain = (avg_gain * (RSI_PERIOD - 1) + max(diff, 0.0)) / RSI_PERIOD
    avg_loss = (avg_loss * (RSI_PERIOD - 1) + max(-diff, 0.0)) / RSI_PERIOD
    return avg_gain, avg_loss


def _rsi_value(state: RsiState) -> float:
    avg_gain, avg_loss = state
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def wilder_rsi(closes: Sequence[float]) -> list[float | None]:
    """Relative Strength Index with Wilder smoothing.

    The first value lands at index 14, seeded from the plain average of the
    first 14 close-to-close changes. Every later value folds one more change
    into the running ``(avg_gain, avg_loss)`` pair, so the result depends on
    input order.
    """
    n = len(closes)
    if n <= RSI_PERIOD:
        return [None] * n

    diffs = [closes[i] - closes[i - 1] for i in range(1, n)]
    states = accumulate(
        diffs[RSI_PERIOD:],
        _wilder_step,
        initial=_rsi_seed(diffs[:RSI_PERIOD]),
    )
    return [None] * RSI_PERIOD + [_rsi_value(s) for s in states]


# =============================================================================
# ENGINE
# =============================================================================


def calculate_indicators(bars: Sequence[Bar]) -> list[IndicatorBar]:
    """Annotate each bar with Bollinger, RSI and volume-spike values.

    Args:
        bars: Daily bars in ascending date order.

    Returns:
        One :class:`IndicatorBar` per input bar, same order. An empty input
        gives an empty list.
    """
    if not bars:
        return []

    closes = [b.close for b in bars]
    volumes = [b.volume for b in bars]

    bands = bollinger(closes)
    rsi = wilder_rsi(closes)
    spikes = volume_spikes(volumes)

    result: list[IndicatorBar] = []
    for bar, band, rsi_value, (vol_ma, spike) in zip(bars, bands, rsi, spikes):
        ma, std, upper, lower = band if band is not None else (None, None, None, None)
        result.append(IndicatorBar(
            date=bar.date,
            open=bar.open,
            high=bar.high,
            low=bar.low,
            close=bar.close,
            volume=bar.volume,
            ma20=ma,
            std20=std,
            upper=upper,
            lower=lower,
            rsi=rsi_value,
            vol_ma20=vol_ma,
            vol_spike=spike,
        ))

    logger.debug("Computed indicators for %d bars (%s..%s)", len(bars), bars[0].date, bars[-1].date)
    return result
