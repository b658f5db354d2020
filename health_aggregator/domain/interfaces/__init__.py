from .check_executor import ICheckExecutor
from .outcome_formatter import IOutcomeFormatter
from .encoder import IEncoder
from .environment_collector import IEnvironmentCollector

__all__ = [
    "ICheckExecutor",
    "IOutcomeFormatter",
    "IEncoder",
    "IEnvironmentCollector",
]
