from .entities import (
    CheckUnit,
    CheckRegistry,
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
from .exceptions import (
    HealthAggregatorError,
    CheckFailure,
    RegistryError,
    ConfigurationError,
    SerializationError,
)
from .interfaces import (
    ICheckExecutor,
    IOutcomeFormatter,
    IEncoder,
    IEnvironmentCollector,
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
    "HealthAggregatorError",
    "CheckFailure",
    "RegistryError",
    "ConfigurationError",
    "SerializationError",
    "ICheckExecutor",
    "IOutcomeFormatter",
    "IEncoder",
    "IEnvironmentCollector",
]
