from abc import ABC, abstractmethod
from typing import Any, Dict
from health_aggregator.domain.entities import RawOutcome


class IOutcomeFormatter(ABC):
    """Interface for turning raw outcomes into wire-shaped entries."""

    @abstractmethod
    def format(self, outcome: RawOutcome) -> Dict[str, Any]:
        """Format a single raw outcome. Must never raise."""
        pass
