"""technicals — Bollinger Bands, Wilder RSI and volume spikes for daily bars.

Pure, deterministic indicator engine over ascending-date OHLCV sequences,
with a DataFrame adapter, input quality checks, and a latest-value
snapshot for chart and prompt consumers.

Quick start::

    from technicals import Bar, calculate_indicators
    bars = [Bar("2024-01-02", 100.0, 101.0, 99.0, 100.5, 1_000_000), ...]
    annotated = calculate_indicators(bars)
    annotated[-1].rsi, annotated[-1].upper, annotated[-1].vol_spike
"""

from __future__ import annotations

from technicals.analyzer import IndicatorAnalyzer
from technicals.config import TechnicalsConfig
from technicals.errors import TechnicalsConfigError, TechnicalsError, TechnicalsErrorCode
from technicals.frame import (
    bars_to_frame,
    calculate_indicators_frame,
    frame_to_bars,
    indicators_to_frame,
)
from technicals.indicators import (
    BOLLINGER_K,
    BOLLINGER_WINDOW,
    RSI_PERIOD,
    VOLUME_SPIKE_MULTIPLIER,
    VOLUME_WINDOW,
    bollinger,
    bollinger_bands,
    calculate_indicators,
    indicator_columns,
    volume_spike_flags,
    volume_spikes,
    wilder_rsi,
)
from technicals.models.bar import Bar, IndicatorBar
from technicals.models.snapshot import IndicatorSnapshot
from technicals.quality import ValidationCheck, ValidationResult, validate_bars

__version__ = "0.1.0"

__all__ = [
    # Engine
    "calculate_indicators",
    "bollinger",
    "wilder_rsi",
    "volume_spikes",
    "bollinger_bands",
    "volume_spike_flags",
    "indicator_columns",
    "BOLLINGER_WINDOW",
    "BOLLINGER_K",
    "RSI_PERIOD",
    "VOLUME_WINDOW",
    "VOLUME_SPIKE_MULTIPLIER",
    # Analyzer
    "IndicatorAnalyzer",
    "create_analyzer_from_env",
    # DataFrame adapters
    "bars_to_frame",
    "frame_to_bars",
    "indicators_to_frame",
    "calculate_indicators_frame",
    # Quality
    "validate_bars",
    "ValidationCheck",
    "ValidationResult",
    # Config
    "TechnicalsConfig",
    # Errors
    "TechnicalsError",
    "TechnicalsErrorCode",
    "TechnicalsConfigError",
    # Models
    "Bar",
    "IndicatorBar",
    "IndicatorSnapshot",
]


def create_analyzer_from_env() -> IndicatorAnalyzer:
    """Zero-config factory — reads analyzer settings from env vars.

    Environment variables:
        TECHNICALS_VALIDATE: Run quality checks before computing (default: true).
        TECHNICALS_STRICT: Raise on bad or empty input instead of logging (default: false).
        TECHNICALS_HISTORY_SIZE: Trailing bars kept in snapshots (default: 30).
    """
    return IndicatorAnalyzer(TechnicalsConfig.from_env())
