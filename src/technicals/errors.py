"""Technicals error types."""

from __future__ import annotations

from enum import Enum


class TechnicalsErrorCode(Enum):
    """Error classification codes."""

    INVALID_RECORD = "invalid_record"
    VALIDATION_FAILED = "validation_failed"
    NO_DATA = "no_data"
    CONFIG_ERROR = "config_error"


class TechnicalsError(Exception):
    """Boundary exception with error code and retryable flag.

    The indicator engine itself never raises; this is used where raw
    records, frames, or bar sequences enter the package.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether the same request may succeed with bars from
            another data source (empty or failed-validation input), as
            opposed to a malformed record that will fail again.
    """

    def __init__(
        self,
        message: str,
        code: TechnicalsErrorCode = TechnicalsErrorCode.INVALID_RECORD,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable


class TechnicalsConfigError(ValueError):
    """Invalid configuration value (e.g. an unparsable environment variable)."""

    code = TechnicalsErrorCode.CONFIG_ERROR
