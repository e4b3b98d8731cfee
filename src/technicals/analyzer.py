"""IndicatorAnalyzer — validate -> compute -> snapshot."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from technicals.config import TechnicalsConfig
from technicals.errors import TechnicalsError, TechnicalsErrorCode
from technicals.indicators import calculate_indicators
from technicals.models.bar import Bar, IndicatorBar
from technicals.models.snapshot import IndicatorSnapshot
from technicals.quality import validate_bars

logger = logging.getLogger(__name__)


class IndicatorAnalyzer:
    """Front door for callers holding a freshly fetched bar sequence.

    Usage::

        from technicals import create_analyzer_from_env
        analyzer = create_analyzer_from_env()
        annotated = analyzer.annotate(bars)
        snap = analyzer.snapshot(bars)
    """

    def __init__(self, config: TechnicalsConfig | None = None) -> None:
        self.config = config or TechnicalsConfig()

    # ------------------------------------------------------------- annotate

    def annotate(self, bars: Sequence[Bar]) -> list[IndicatorBar]:
        """Check input quality (per config) and compute indicators.

        Raises:
            TechnicalsError: Only in strict mode: ``NO_DATA`` for an empty
                sequence, ``VALIDATION_FAILED`` when a quality check fails.
        """
        if not bars:
            if self.config.strict:
                raise TechnicalsError(
                    "No bars to analyze",
                    code=TechnicalsErrorCode.NO_DATA,
                    retryable=True,
                )
            return []

        if self.config.validate:
            result = validate_bars(bars)
            if not result.passed:
                msgs = "; ".join(f"{c.name}: {c.message}" for c in result.failed_checks)
                if self.config.strict:
                    raise TechnicalsError(
                        f"Validation failed: {msgs}",
                        code=TechnicalsErrorCode.VALIDATION_FAILED,
                        retryable=True,
                    )
                logger.warning("Computing indicators on bars that failed validation: %s", msgs)

        return calculate_indicators(bars)

    def annotate_records(self, records: Iterable[Mapping[str, Any]]) -> list[IndicatorBar]:
        """Parse ``{date, open, high, low, close, volume}`` mappings and annotate."""
        return self.annotate([Bar.from_dict(r) for r in records])

    # ------------------------------------------------------------- snapshot

    def snapshot(self, bars: Sequence[Bar]) -> IndicatorSnapshot | None:
        """Latest indicator values plus ``config.history_size`` trailing bars."""
        return IndicatorSnapshot.from_bars(
            self.annotate(bars), history_size=self.config.history_size,
        )
