import math
from typing import Any, Dict

from health_aggregator.domain import (
    IOutcomeFormatter,
    CheckStatus,
    Ok,
    ErrorWithReason,
    RawOutcome,
    UNKNOWN_ERROR,
)


class OutcomeFormatter(IOutcomeFormatter):
    """
    Turns raw outcomes into the wire shape of the report.

    Success::

        {"db": {"status": "ok"}, "time": 1.234}

    Failure::

        {"db": {"status": "error",
                "message": [{"type": "error", "message": "disk full"}]},
         "time": 1.234}

    A failure without a reason is reported with ``unknown_error_message``.
    Anything that does not look like a proper outcome is coerced into a
    failure entry instead of raising.
    """

    def __init__(self, unknown_error_message: str = UNKNOWN_ERROR):
        self._unknown_error_message = unknown_error_message

    def format(self, outcome: RawOutcome) -> Dict[str, Any]:
        name = self._name(outcome)
        time_ms = self._elapsed_ms(outcome)
        result = getattr(outcome, "result", None)

        if isinstance(result, Ok):
            return {name: {"status": CheckStatus.OK.value}, "time": time_ms}

        reason = self._unknown_error_message
        if isinstance(result, ErrorWithReason) and result.reason is not None:
            reason = result.reason

        return {
            name: {
                "status": CheckStatus.ERROR.value,
                "message": [
                    {
                        "type": CheckStatus.ERROR.value,
                        "message": reason,
                    }
                ],
            },
            "time": time_ms,
        }

    @staticmethod
    def _name(outcome: Any) -> str:
        name = getattr(outcome, "name", None)
        if name is None:
            return "unknown"
        if isinstance(name, str):
            return name
        try:
            return str(name)
        except Exception:
            return "unknown"

    @staticmethod
    def _elapsed_ms(outcome: Any) -> float:
        elapsed_us = getattr(outcome, "elapsed_us", 0)
        if isinstance(elapsed_us, bool) or not isinstance(elapsed_us, (int, float)):
            return 0.0
        try:
            if math.isnan(elapsed_us) or math.isinf(elapsed_us) or elapsed_us < 0:
                return 0.0
            return elapsed_us / 1000
        except (OverflowError, ValueError, TypeError):
            return 0.0
