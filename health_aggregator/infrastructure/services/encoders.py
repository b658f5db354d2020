import inspect
import json
from typing import Any, Dict, Type

import pydantic_core

from health_aggregator.domain import IEncoder, ConfigurationError, SerializationError
from health_aggregator.infrastructure.services.check_loader import import_string


class StdlibJSONEncoder(IEncoder):
    """Encodes documents with the standard library ``json`` module."""

    def encode(self, payload: Any) -> bytes:
        try:
            return json.dumps(payload, default=str).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Failed to encode report: {exc}") from exc


class PydanticJSONEncoder(IEncoder):
    """Encodes documents with pydantic-core's JSON serializer."""

    def encode(self, payload: Any) -> bytes:
        try:
            return pydantic_core.to_json(payload, fallback=str)
        except (pydantic_core.PydanticSerializationError, TypeError, ValueError) as exc:
            raise SerializationError(f"Failed to encode report: {exc}") from exc


ENCODERS: Dict[str, Type[IEncoder]] = {
    "json": StdlibJSONEncoder,
    "pydantic": PydanticJSONEncoder,
}


def resolve_encoder(name: str) -> IEncoder:
    """
    Create the encoder named in configuration.

    Args:
        name: A registered encoder name ("json", "pydantic") or a dotted
              path to an IEncoder subclass.
    """
    encoder_cls = ENCODERS.get(name.lower())
    if encoder_cls is None:
        try:
            encoder_cls = import_string(name)
        except ImportError as exc:
            raise ConfigurationError(f"Unknown JSON encoder '{name}'") from exc

    if not inspect.isclass(encoder_cls) or not issubclass(encoder_cls, IEncoder):
        raise ConfigurationError(f"'{name}' is not an IEncoder implementation")
    return encoder_cls()
