"""Fork-join helpers over thread pools.

This module maps a fallible function over items on an executor and
collects successes and failures in input order.
"""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, Executor, Future, wait
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from core.errors import AtelierError

ItemT = TypeVar("ItemT")
ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class ParallelOutcome(Generic[ResultT]):
    """Collected results of one parallel map.

    Attributes:
        results: Successful results in input order.
        errors: Raised domain errors in input order.
        cancelled_count: Items never started because of fail-fast.
    """

    results: tuple[ResultT, ...]
    errors: tuple[AtelierError, ...]
    cancelled_count: int

    @property
    def succeeded(self) -> bool:
        """Return whether every item produced a result."""
        return not self.errors and self.cancelled_count == 0


def map_parallel(
    executor: Executor,
    func: Callable[[ItemT], ResultT],
    items: Iterable[ItemT],
    fail_fast: bool = True,
) -> ParallelOutcome[ResultT]:
    """Run ``func`` over ``items`` and wait for every started task.

    With ``fail_fast`` the first domain error cancels tasks that have not
    started yet; tasks already running are always awaited so callers can
    clean up their side effects. Non-domain exceptions propagate as-is.

    Args:
        executor: Executor that runs the tasks.
        func: Task function.
        items: Task inputs.
        fail_fast: Cancel pending tasks after the first failure.

    Returns:
        Successes and domain failures in input order.
    """
    futures = [executor.submit(func, item) for item in items]
    if fail_fast:
        _, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
    wait(futures)
    return _collect(futures)


def _collect(futures: list[Future[ResultT]]) -> ParallelOutcome[ResultT]:
    """Split completed futures into results, errors, and cancellations."""
    results: list[ResultT] = []
    errors: list[AtelierError] = []
    cancelled_count = 0
    unexpected: BaseException | None = None
    for future in futures:
        if future.cancelled():
            cancelled_count += 1
            continue
        error = future.exception()
        if error is None:
            results.append(future.result())
        elif isinstance(error, AtelierError):
            errors.append(error)
        elif unexpected is None:
            unexpected = error
    if unexpected is not None:
        raise unexpected
    return ParallelOutcome(
        results=tuple(results),
        errors=tuple(errors),
        cancelled_count=cancelled_count,
    )
