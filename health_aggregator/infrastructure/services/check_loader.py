import importlib
import inspect
import logging
from typing import Any, Mapping

from health_aggregator.domain import CheckRegistry, RegistryError


logger = logging.getLogger(__name__)


def import_string(path: str) -> Any:
    """
    Import an object from a dotted path.

    Accepts both ``package.module:attribute`` and ``package.module.attribute``.
    Raises ImportError when the module or the attribute does not exist.
    """
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        raise ImportError(f"'{path}' is not a valid import path")

    module = importlib.import_module(module_name)
    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ImportError(f"'{module_name}' has no attribute '{attribute}'") from exc
    return target


def as_registry(source: Any) -> CheckRegistry:
    """Coerce a registry, a name -> callable mapping or a factory into a CheckRegistry."""
    if isinstance(source, CheckRegistry):
        return source
    if isinstance(source, Mapping):
        return CheckRegistry.from_mapping(source)
    if callable(source) and not inspect.isclass(source):
        return as_registry(source())
    raise RegistryError(
        f"Expected a CheckRegistry, a mapping of checks or a factory, got {type(source).__name__}"
    )


def load_registry(path: str) -> CheckRegistry:
    """
    Resolve a check registry from configuration.

    Args:
        path: Dotted path to a CheckRegistry, a mapping of name -> callable,
              or a zero-argument factory returning either.

    Returns:
        The resolved registry.
    """
    try:
        source = import_string(path)
    except ImportError as exc:
        raise RegistryError(f"Cannot import check registry '{path}': {exc}") from exc

    registry = as_registry(source)
    logger.info(f"Loaded {len(registry)} checks from {path}")
    return registry
