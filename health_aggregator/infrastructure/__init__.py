from .config import Settings, get_settings
from .services import (
    SequentialCheckExecutor,
    ConcurrentCheckExecutor,
    OutcomeFormatter,
    StdlibJSONEncoder,
    PydanticJSONEncoder,
    resolve_encoder,
    PlatformEnvironmentCollector,
    load_registry,
    as_registry,
)

__all__ = [
    "Settings",
    "get_settings",
    "SequentialCheckExecutor",
    "ConcurrentCheckExecutor",
    "OutcomeFormatter",
    "StdlibJSONEncoder",
    "PydanticJSONEncoder",
    "resolve_encoder",
    "PlatformEnvironmentCollector",
    "load_registry",
    "as_registry",
]
