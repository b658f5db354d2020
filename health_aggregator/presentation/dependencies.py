from typing import Generator, Optional

from health_aggregator.application import (
    ReportHealthUseCase,
    LivenessProbeUseCase,
    EnvironmentInfoUseCase,
)
from health_aggregator.container import Container
from health_aggregator.domain import CheckRegistry, IEncoder


_container: Container | None = None


def set_container(container: Container) -> None:
    """Set the global container for dependency injection."""
    global _container
    _container = container


def get_container() -> Container:
    """Get the global container."""
    if _container is None:
        raise RuntimeError("Container not initialized. Call set_container() first.")
    return _container


def get_registry() -> Generator[CheckRegistry, None, None]:
    """Dependency provider for the default check registry."""
    container = get_container()
    yield container.registry


def get_functional_registry() -> Generator[Optional[CheckRegistry], None, None]:
    """Dependency provider for the functional check registry."""
    container = get_container()
    yield container.functional_registry


def get_encoder() -> Generator[IEncoder, None, None]:
    """Dependency provider for the configured encoder."""
    container = get_container()
    yield container.encoder


def get_report_health_use_case() -> Generator[ReportHealthUseCase, None, None]:
    """Dependency provider for ReportHealthUseCase."""
    container = get_container()
    yield container.report_health_use_case


def get_liveness_use_case() -> Generator[LivenessProbeUseCase, None, None]:
    """Dependency provider for LivenessProbeUseCase."""
    container = get_container()
    yield container.liveness_use_case


def get_environment_info_use_case() -> Generator[EnvironmentInfoUseCase, None, None]:
    """Dependency provider for EnvironmentInfoUseCase."""
    container = get_container()
    yield container.environment_info_use_case
