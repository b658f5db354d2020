from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from health_aggregator.domain.exceptions import RegistryError

# Sits next to the check name in every report entry
RESERVED_NAMES = frozenset({"time"})


@dataclass(frozen=True)
class CheckUnit:
    """A named health probe invoked with no arguments."""
    name: str
    check: Callable[[], Any]

    def __call__(self) -> Any:
        return self.check()


class CheckRegistry:
    """
    Ordered collection of named checks.

    Checks are registered at configuration time. Names are unique and the
    registration order is the order in which checks are executed and
    reported. After ``freeze()`` the registry rejects new checks.
    """

    def __init__(self, checks: Optional[Mapping[str, Callable[[], Any]]] = None):
        self._units: Dict[str, CheckUnit] = {}
        self._frozen = False
        for name, check in (checks or {}).items():
            self.register(name, check)

    @classmethod
    def from_mapping(cls, checks: Mapping[str, Callable[[], Any]]) -> "CheckRegistry":
        """Build a registry from a name -> callable mapping, keeping its order."""
        return cls(checks)

    def register(self, name: str, check: Callable[[], Any]) -> CheckUnit:
        """Register a check under a unique name."""
        if self._frozen:
            raise RegistryError(f"Cannot register '{name}': registry is frozen")
        if not callable(check):
            raise RegistryError(f"Check '{name}' is not callable")
        name = str(name)
        if not name:
            raise RegistryError("Check name must not be empty")
        if name in RESERVED_NAMES:
            raise RegistryError(f"Check name '{name}' is reserved")
        if name in self._units:
            raise RegistryError(f"Check '{name}' is already registered")

        unit = CheckUnit(name=name, check=check)
        self._units[name] = unit
        return unit

    def check(self, name: Optional[str] = None) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
        """
        Decorator form of ``register``.

        Uses the function name when no explicit name is given::

            registry = CheckRegistry()

            @registry.check("db")
            def check_db():
                ...
        """
        def decorator(func: Callable[[], Any]) -> Callable[[], Any]:
            self.register(name or func.__name__, func)
            return func
        return decorator

    def freeze(self) -> "CheckRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return list(self._units)

    def get(self, name: str) -> Optional[CheckUnit]:
        return self._units.get(name)

    def __iter__(self) -> Iterator[CheckUnit]:
        return iter(list(self._units.values()))

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __repr__(self) -> str:
        return f"CheckRegistry({self.names()!r})"
