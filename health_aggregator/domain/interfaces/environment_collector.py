from abc import ABC, abstractmethod
from typing import Any, Dict


class IEnvironmentCollector(ABC):
    """Interface for runtime metadata providers."""

    @abstractmethod
    def info(self) -> Dict[str, Any]:
        """Return static metadata about the running service."""
        pass
