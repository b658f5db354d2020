from abc import ABC, abstractmethod
from typing import List
from health_aggregator.domain.entities import CheckRegistry, RawOutcome


class ICheckExecutor(ABC):
    """Interface for running every check in a registry."""

    @abstractmethod
    def execute(self, registry: CheckRegistry) -> List[RawOutcome]:
        """Run all checks and return one raw outcome per check, in registration order."""
        pass
