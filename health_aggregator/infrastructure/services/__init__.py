from .check_executor import SequentialCheckExecutor, ConcurrentCheckExecutor, run_check, classify_result
from .outcome_formatter import OutcomeFormatter
from .encoders import StdlibJSONEncoder, PydanticJSONEncoder, resolve_encoder
from .environment_collector import PlatformEnvironmentCollector
from .check_loader import load_registry, as_registry, import_string

__all__ = [
    "SequentialCheckExecutor",
    "ConcurrentCheckExecutor",
    "run_check",
    "classify_result",
    "OutcomeFormatter",
    "StdlibJSONEncoder",
    "PydanticJSONEncoder",
    "resolve_encoder",
    "PlatformEnvironmentCollector",
    "load_registry",
    "as_registry",
    "import_string",
]
