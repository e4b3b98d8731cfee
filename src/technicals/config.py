"""Technicals configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from technicals.errors import TechnicalsConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise TechnicalsConfigError(f"{name}={raw!r} is not a boolean")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise TechnicalsConfigError(f"{name}={raw!r} is not an integer") from e


@dataclass(frozen=True)
class TechnicalsConfig:
    """Configuration for IndicatorAnalyzer.

    Indicator windows are fixed (20-day bands and volume, 14-day RSI) and
    are not part of the configuration.

    Attributes:
        validate: Run quality checks on bars before computing indicators.
        strict: Raise on failed checks or empty input instead of logging.
        history_size: Number of trailing bars kept in a snapshot.
    """

    validate: bool = True
    strict: bool = False
    history_size: int = 30

    def __post_init__(self) -> None:
        if self.history_size <= 0:
            raise TechnicalsConfigError(
                f"history_size must be positive, got {self.history_size}"
            )

    @classmethod
    def from_env(cls) -> TechnicalsConfig:
        """Read configuration from environment variables.

        Environment variables:
            TECHNICALS_VALIDATE: Run quality checks (default: true).
            TECHNICALS_STRICT: Raise instead of warn on bad input (default: false).
            TECHNICALS_HISTORY_SIZE: Snapshot tail length (default: 30).
        """
        return cls(
            validate=_env_bool("TECHNICALS_VALIDATE", True),
            strict=_env_bool("TECHNICALS_STRICT", False),
            history_size=_env_int("TECHNICALS_HISTORY_SIZE", 30),
        )
