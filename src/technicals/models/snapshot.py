"""Indicator snapshot — latest annotated bar plus trailing history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from technicals.models.bar import IndicatorBar


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Point-in-time view of the most recent indicator values.

    This is what chart headers and AI-prompt builders read: the last
    close with its RSI and band levels, and a short tail of bars.

    Attributes:
        date: Date of the latest bar.
        close: Latest closing price.
        rsi: Latest RSI, ``None`` if still warming up.
        upper: Latest upper Bollinger band.
        lower: Latest lower Bollinger band.
        ma20: Latest 20-day moving average.
        vol_spike: Whether the latest bar is a volume spike.
        history: Trailing annotated bars, oldest first, ending at ``date``.
    """

    date: str
    close: float
    rsi: float | None = None
    upper: float | None = None
    lower: float | None = None
    ma20: float | None = None
    vol_spike: bool = False
    history: tuple[IndicatorBar, ...] = ()

    @classmethod
    def from_bars(
        cls,
        bars: Sequence[IndicatorBar],
        history_size: int = 30,
    ) -> IndicatorSnapshot | None:
        """Build a snapshot from an annotated sequence, or ``None`` if empty."""
        if not bars:
            return None
        latest = bars[-1]
        return cls(
            date=latest.date,
            close=latest.close,
            rsi=latest.rsi,
            upper=latest.upper,
            lower=latest.lower,
            ma20=latest.ma20,
            vol_spike=latest.vol_spike,
            history=tuple(bars[-history_size:]) if history_size > 0 else (),
        )

    @property
    def band_position(self) -> str | None:
        """Where the close sits relative to the bands: above, below or inside."""
        if self.upper is None or self.lower is None:
            return None
        if self.close > self.upper:
            return "above"
        if self.close < self.lower:
            return "below"
        return "inside"

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "currentPrice": self.close,
            "rsi": self.rsi,
            "upper": self.upper,
            "lower": self.lower,
            "ma20": self.ma20,
            "volSpike": self.vol_spike,
            "bandPosition": self.band_position,
            "history": [b.to_dict() for b in self.history],
        }
