"""Tests for data quality validation."""

from technicals.models.bar import Bar
from technicals.quality import validate_bars


def _make_bar(day: str, close: float = 150.0, **kwargs) -> Bar:
    defaults = dict(
        date=day, open=150.0, high=151.0, low=149.0,
        close=close, volume=10000.0,
    )
    defaults.update(kwargs)
    return Bar(**defaults)


def _check(result, name):
    return next(c for c in result.checks if c.name == name)


class TestValidateBars:
    def test_empty(self):
        result = validate_bars([])
        assert not result.passed
        assert result.failed_checks[0].name == "not_empty"

    def test_valid(self, sample_bars):
        result = validate_bars(sample_bars)
        assert result.passed
        assert result.failed_checks == []

    def test_valid_generated(self, rising_bars):
        assert validate_bars(rising_bars).passed

    def test_bad_date_format(self):
        result = validate_bars([_make_bar("2024/01/15")])
        assert not _check(result, "date_format").passed
        assert "2024/01/15" in _check(result, "date_format").message

    def test_impossible_calendar_date(self):
        result = validate_bars([_make_bar("2024-13-45")])
        assert not _check(result, "date_format").passed

    def test_feb_29_non_leap_year(self):
        result = validate_bars([_make_bar("2023-02-29")])
        assert not _check(result, "date_format").passed

    def test_trailing_newline_date(self):
        result = validate_bars([_make_bar("2024-01-01\n")])
        assert not _check(result, "date_format").passed

    def test_compact_iso_date_rejected(self):
        result = validate_bars([_make_bar("20240101")])
        assert not _check(result, "date_format").passed

    def test_nan_detected(self):
        result = validate_bars([_make_bar("2024-01-15", close=float("nan"))])
        assert not _check(result, "no_nulls").passed

    def test_inf_detected(self):
        result = validate_bars([_make_bar("2024-01-15", volume=float("inf"))])
        assert not _check(result, "no_nulls").passed

    def test_negative_volume(self):
        result = validate_bars([_make_bar("2024-01-15", volume=-100.0)])
        assert not _check(result, "volume_sanity").passed

    def test_negative_price(self):
        result = validate_bars([_make_bar("2024-01-15", low=-1.0)])
        assert not _check(result, "price_sanity").passed

    def test_out_of_order(self):
        bars = [_make_bar("2024-01-16"), _make_bar("2024-01-15")]
        result = validate_bars(bars)
        assert not _check(result, "date_order").passed

    def test_duplicate_date(self):
        bars = [_make_bar("2024-01-15"), _make_bar("2024-01-15")]
        result = validate_bars(bars)
        assert not _check(result, "date_order").passed

    def test_ohlc_inconsistency(self):
        bar = Bar(date="2024-01-15", open=150.0, high=149.0, low=151.0, close=150.0, volume=1.0)
        result = validate_bars([bar])
        assert not _check(result, "ohlc_consistency").passed
