import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, List, Optional

from health_aggregator.domain import (
    ICheckExecutor,
    CheckRegistry,
    CheckUnit,
    CheckResult,
    CheckFailure,
    ConfigurationError,
    Ok,
    ErrorWithReason,
    ErrorUnspecified,
    RawOutcome,
    TIMEOUT_ERROR,
)


logger = logging.getLogger(__name__)


def _failure(reason: Any) -> CheckResult:
    """A failure with a usable reason, or an unspecified one."""
    if reason is None or (isinstance(reason, str) and not reason):
        return ErrorUnspecified()
    return ErrorWithReason(reason)


def classify_result(name: str, value: Any) -> CheckResult:
    """
    Map whatever a check returned onto a result variant.

    Args:
        name: Check name, used for logging only.
        value: The check's return value.

    Returns:
        Ok, ErrorWithReason or ErrorUnspecified.
    """
    if isinstance(value, Ok) or isinstance(value, ErrorUnspecified):
        return value
    if isinstance(value, ErrorWithReason):
        return _failure(value.reason)

    if value is None or value is True:
        return Ok()
    if value is False:
        return ErrorUnspecified()

    if isinstance(value, str):
        # CheckStatus members are str subclasses and land here as well
        status = value.lower()
        if status == "ok":
            return Ok()
        if status == "error":
            return ErrorUnspecified()

    if isinstance(value, tuple) and len(value) == 2 and str(value[0]).lower() == "error":
        return _failure(value[1])

    logger.warning(
        f"Check '{name}' returned an unrecognised {type(value).__name__} value, reporting it as failed"
    )
    return ErrorUnspecified()


def run_check(unit: CheckUnit) -> RawOutcome:
    """
    Invoke a single check and classify its result inside a
    failure-isolation boundary.

    The elapsed time is measured with a monotonic clock and is recorded
    even when the check raises.
    """
    result: Optional[CheckResult] = None
    value: Any = None

    started = time.perf_counter_ns()
    try:
        value = unit()
    except CheckFailure as exc:
        result = _failure(exc.reason)
    except Exception:
        logger.exception(f"Check '{unit.name}' crashed")
        result = ErrorUnspecified()
    finally:
        elapsed_us = max(0, (time.perf_counter_ns() - started) // 1000)

    if result is None:
        try:
            result = classify_result(unit.name, value)
        except Exception:
            logger.exception(f"Could not classify the result of check '{unit.name}'")
            result = ErrorUnspecified()

    return RawOutcome(name=unit.name, elapsed_us=elapsed_us, result=result)


class SequentialCheckExecutor(ICheckExecutor):
    """Runs checks one after another in registration order."""

    def execute(self, registry: CheckRegistry) -> List[RawOutcome]:
        units = list(registry)
        logger.info(f"Executing {len(units)} checks")
        return [run_check(unit) for unit in units]


class ConcurrentCheckExecutor(ICheckExecutor):
    """
    Runs checks on a thread pool.

    Results are matched back to their checks by name and returned in
    registration order. When ``timeout_seconds`` is set, every check still
    running once the deadline passes is reported as failed with reason
    ``TIMEOUT``. The worker thread itself cannot be stopped and is left to
    finish in the background.
    """

    def __init__(self, max_workers: int = 8, timeout_seconds: Optional[float] = None):
        if max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self._max_workers = max_workers
        self._timeout_seconds = timeout_seconds

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def timeout_seconds(self) -> Optional[float]:
        return self._timeout_seconds

    def execute(self, registry: CheckRegistry) -> List[RawOutcome]:
        units = list(registry)
        logger.info(f"Executing {len(units)} checks concurrently")
        if not units:
            return []

        pool = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(units)),
            thread_name_prefix="healthcheck",
        )
        started = time.perf_counter_ns()
        try:
            futures = {unit.name: pool.submit(run_check, unit) for unit in units}
            done, _ = wait(futures.values(), timeout=self._timeout_seconds)
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        waited_us = max(0, (time.perf_counter_ns() - started) // 1000)

        outcomes = []
        for unit in units:
            future = futures[unit.name]
            if future in done:
                outcomes.append(future.result())
            else:
                logger.warning(f"Check '{unit.name}' timed out after {self._timeout_seconds}s")
                outcomes.append(
                    RawOutcome(
                        name=unit.name,
                        elapsed_us=waited_us,
                        result=ErrorWithReason(TIMEOUT_ERROR),
                    )
                )
        return outcomes
