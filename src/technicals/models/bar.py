"""Daily bar (OHLCV) and indicator-annotated bar models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from technicals.errors import TechnicalsError, TechnicalsErrorCode

_PRICE_FIELDS = ("open", "high", "low", "close", "volume")


@dataclass(frozen=True)
class Bar:
    """Single trading day's OHLCV record.

    Attributes:
        date: Trading date as ISO ``YYYY-MM-DD``.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Traded volume for the day.
    """

    date: str
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Bar:
        """Build a bar from a ``{date, open, high, low, close, volume}`` mapping.

        Raises:
            TechnicalsError: ``INVALID_RECORD`` when a key is missing or a
                value cannot be read as a number.
        """
        missing = [k for k in ("date", *_PRICE_FIELDS) if k not in record]
        if missing:
            raise TechnicalsError(
                f"Bar record missing fields: {', '.join(missing)}",
                code=TechnicalsErrorCode.INVALID_RECORD,
            )

        raw_date = record["date"]
        if isinstance(raw_date, datetime):
            day = raw_date.date().isoformat()
        elif isinstance(raw_date, date):
            day = raw_date.isoformat()
        else:
            day = str(raw_date)

        values: dict[str, float] = {}
        for name in _PRICE_FIELDS:
            try:
                values[name] = float(record[name])
            except (TypeError, ValueError) as e:
                raise TechnicalsError(
                    f"Bar {day}: {name}={record[name]!r} is not numeric",
                    code=TechnicalsErrorCode.INVALID_RECORD,
                ) from e

        return cls(date=day, **values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class IndicatorBar:
    """A :class:`Bar` annotated with its derived indicator values.

    Derived fields stay ``None`` while their lookback window is not full,
    except ``vol_spike`` which is ``False`` during warm-up.

    Attributes:
        ma20: 20-day simple moving average of close.
        std20: 20-day population standard deviation of close.
        upper: Upper Bollinger band (``ma20 + 2 * std20``).
        lower: Lower Bollinger band (``ma20 - 2 * std20``).
        rsi: Wilder 14-day relative strength index, in ``[0, 100]``.
        vol_ma20: 20-day simple moving average of volume.
        vol_spike: Volume above twice ``vol_ma20``.
    """

    date: str
    open: float
    high: float
    low: float
    close: float
    volume: float
    ma20: float | None = None
    std20: float | None = None
    upper: float | None = None
    lower: float | None = None
    rsi: float | None = None
    vol_ma20: float | None = None
    vol_spike: bool = False

    @property
    def bar(self) -> Bar:
        """The plain OHLCV bar this record was derived from."""
        return Bar(
            date=self.date,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            volume=self.volume,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the column names charting/prompt consumers expect."""
        record = self.bar.to_dict()
        record.update({
            "MA20": self.ma20,
            "STD20": self.std20,
            "Upper": self.upper,
            "Lower": self.lower,
            "RSI": self.rsi,
            "Vol_MA20": self.vol_ma20,
            "Vol_Spike": self.vol_spike,
        })
        return record
