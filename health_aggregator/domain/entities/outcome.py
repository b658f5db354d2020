from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


UNKNOWN_ERROR = "UNKNOWN ERROR"
TIMEOUT_ERROR = "TIMEOUT"


class CheckStatus(str, Enum):
    """Status reported for a single check."""
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Ok:
    """The check completed and reported success."""


@dataclass(frozen=True)
class ErrorWithReason:
    """The check failed and supplied a descriptive reason."""
    reason: Any


@dataclass(frozen=True)
class ErrorUnspecified:
    """The check failed without a usable reason, e.g. it crashed."""


# Short alias for checks that want to return a failure.
Error = ErrorWithReason

CheckResult = Union[Ok, ErrorWithReason, ErrorUnspecified]


@dataclass(frozen=True)
class RawOutcome:
    """Unformatted result of running one check."""
    name: str
    elapsed_us: int
    result: CheckResult

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_us / 1000
