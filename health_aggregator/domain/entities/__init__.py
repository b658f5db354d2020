from .check import CheckUnit, CheckRegistry
from .outcome import (
    CheckStatus,
    CheckResult,
    Ok,
    Error,
    ErrorWithReason,
    ErrorUnspecified,
    RawOutcome,
    UNKNOWN_ERROR,
    TIMEOUT_ERROR,
)

__all__ = [
    "CheckUnit",
    "CheckRegistry",
    "CheckStatus",
    "CheckResult",
    "Ok",
    "Error",
    "ErrorWithReason",
    "ErrorUnspecified",
    "RawOutcome",
    "UNKNOWN_ERROR",
    "TIMEOUT_ERROR",
]
