from abc import ABC, abstractmethod
from typing import Any


class IEncoder(ABC):
    """Interface for report document serializers."""

    media_type: str = "application/json"

    @abstractmethod
    def encode(self, payload: Any) -> bytes:
        """Serialize a payload, raising SerializationError on failure."""
        pass
