from typing import Any, Optional


class HealthAggregatorError(Exception):
    """Base class for all errors raised by the aggregator."""


class CheckFailure(HealthAggregatorError):
    """
    Raised by a check to signal a structured failure.

    The reason is reported verbatim. Raising it without a reason is treated
    the same as an unspecified failure.
    """

    def __init__(self, reason: Optional[Any] = None):
        super().__init__(reason)
        self.reason = reason


class RegistryError(HealthAggregatorError):
    """Raised when a check registry cannot be built or resolved."""


class ConfigurationError(HealthAggregatorError):
    """Raised for invalid settings, e.g. an unknown encoder name."""


class SerializationError(HealthAggregatorError):
    """Raised when a report document cannot be encoded."""
