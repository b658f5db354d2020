import logging
from typing import Any, Dict, List

from health_aggregator.domain import (
    CheckRegistry,
    CheckStatus,
    Ok,
    ICheckExecutor,
    IOutcomeFormatter,
    IEncoder,
    IEnvironmentCollector,
)


logger = logging.getLogger(__name__)


class ReportHealthUseCase:
    """Use case for running a registry of checks and reporting the results."""

    def __init__(
        self,
        executor: ICheckExecutor,
        formatter: IOutcomeFormatter,
        encoder: IEncoder,
    ):
        self._executor = executor
        self._formatter = formatter
        self._encoder = encoder

    def collect(self, registry: CheckRegistry) -> List[Dict[str, Any]]:
        """
        Run every check and format the outcomes.

        Args:
            registry: The checks to run.

        Returns:
            One formatted entry per check, in registration order.
        """
        outcomes = self._executor.execute(registry)
        document = [self._formatter.format(outcome) for outcome in outcomes]

        failed = sum(1 for outcome in outcomes if not _is_ok(outcome))
        if failed:
            logger.warning(f"{failed} of {len(outcomes)} checks failed")
        return document

    def execute(self, registry: CheckRegistry) -> bytes:
        """Run every check and return the encoded report document."""
        return self._encoder.encode(self.collect(registry))


class LivenessProbeUseCase:
    """Use case for the fixed liveness response."""

    def __init__(self, encoder: IEncoder):
        self._encoder = encoder

    def execute(self) -> bytes:
        return self._encoder.encode({"status": CheckStatus.OK.value})


class EnvironmentInfoUseCase:
    """Use case for reporting runtime environment metadata."""

    def __init__(self, collector: IEnvironmentCollector, encoder: IEncoder):
        self._collector = collector
        self._encoder = encoder

    def execute(self) -> bytes:
        return self._encoder.encode(self._collector.info())


def _is_ok(outcome: Any) -> bool:
    return isinstance(getattr(outcome, "result", None), Ok)
