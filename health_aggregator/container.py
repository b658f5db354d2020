"""
Dependency Injection Container

This module provides a simple DI container that wires together the check
registries, the execution pipeline and the reporting use cases.
"""

from typing import Any, Optional

from health_aggregator.domain import (
    CheckRegistry,
    ICheckExecutor,
    IOutcomeFormatter,
    IEncoder,
    IEnvironmentCollector,
)
from health_aggregator.infrastructure import (
    Settings,
    get_settings,
    SequentialCheckExecutor,
    ConcurrentCheckExecutor,
    OutcomeFormatter,
    PlatformEnvironmentCollector,
    resolve_encoder,
    load_registry,
    as_registry,
)
from health_aggregator.application import (
    ReportHealthUseCase,
    LivenessProbeUseCase,
    EnvironmentInfoUseCase,
)


class Container:
    """
    Dependency Injection Container.

    Manages the lifecycle and wiring of all application dependencies.
    Registries passed in explicitly take precedence over the dotted paths
    in the settings. Every registry the container hands out is frozen.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: Any = None,
        functional_registry: Any = None,
        encoder: IEncoder | None = None,
    ):
        self._settings = settings or get_settings()

        # Check registries
        self._registry: CheckRegistry | None = (
            as_registry(registry).freeze() if registry is not None else None
        )
        self._functional_registry: CheckRegistry | None = (
            as_registry(functional_registry).freeze() if functional_registry is not None else None
        )

        # Infrastructure layer - services
        self._executor: ICheckExecutor | None = None
        self._formatter: IOutcomeFormatter | None = None
        self._encoder: IEncoder | None = encoder
        self._environment_collector: IEnvironmentCollector | None = None

        # Application layer - use cases
        self._report_health_use_case: ReportHealthUseCase | None = None
        self._liveness_use_case: LivenessProbeUseCase | None = None
        self._environment_info_use_case: EnvironmentInfoUseCase | None = None

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @property
    def registry(self) -> CheckRegistry:
        """Get or resolve the default check registry (empty when none is configured)."""
        if self._registry is None:
            if self._settings.registry_path:
                self._registry = load_registry(self._settings.registry_path).freeze()
            else:
                self._registry = CheckRegistry().freeze()
        return self._registry

    @property
    def functional_registry(self) -> Optional[CheckRegistry]:
        """Get or resolve the functional check registry, if one is configured."""
        if self._functional_registry is None and self._settings.functional_registry_path:
            self._functional_registry = load_registry(self._settings.functional_registry_path).freeze()
        return self._functional_registry

    @property
    def executor(self) -> ICheckExecutor:
        """Get or create the check executor."""
        if self._executor is None:
            if self._settings.concurrent:
                self._executor = ConcurrentCheckExecutor(
                    max_workers=self._settings.max_workers,
                    timeout_seconds=self._settings.check_timeout_seconds,
                )
            else:
                self._executor = SequentialCheckExecutor()
        return self._executor

    @property
    def formatter(self) -> IOutcomeFormatter:
        """Get or create the outcome formatter."""
        if self._formatter is None:
            self._formatter = OutcomeFormatter(self._settings.unknown_error_message)
        return self._formatter

    @property
    def encoder(self) -> IEncoder:
        """Get or create the configured JSON encoder."""
        if self._encoder is None:
            self._encoder = resolve_encoder(self._settings.json_encoder)
        return self._encoder

    @property
    def environment_collector(self) -> IEnvironmentCollector:
        """Get or create the environment collector."""
        if self._environment_collector is None:
            self._environment_collector = PlatformEnvironmentCollector(
                app_name=self._settings.app_name,
                app_version=self._settings.app_version,
                environment=self._settings.environment,
            )
        return self._environment_collector

    @property
    def report_health_use_case(self) -> ReportHealthUseCase:
        """Get or create ReportHealthUseCase instance."""
        if self._report_health_use_case is None:
            self._report_health_use_case = ReportHealthUseCase(
                executor=self.executor,
                formatter=self.formatter,
                encoder=self.encoder,
            )
        return self._report_health_use_case

    @property
    def liveness_use_case(self) -> LivenessProbeUseCase:
        """Get or create LivenessProbeUseCase instance."""
        if self._liveness_use_case is None:
            self._liveness_use_case = LivenessProbeUseCase(encoder=self.encoder)
        return self._liveness_use_case

    @property
    def environment_info_use_case(self) -> EnvironmentInfoUseCase:
        """Get or create EnvironmentInfoUseCase instance."""
        if self._environment_info_use_case is None:
            self._environment_info_use_case = EnvironmentInfoUseCase(
                collector=self.environment_collector,
                encoder=self.encoder,
            )
        return self._environment_info_use_case


def create_container(
    settings: Settings | None = None,
    registry: Any = None,
    functional_registry: Any = None,
    encoder: IEncoder | None = None,
) -> Container:
    """Factory function to create a new container instance."""
    return Container(settings, registry, functional_registry, encoder)
