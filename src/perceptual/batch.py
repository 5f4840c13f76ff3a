"""Index-preserving batch evaluation.

Both contrast metrics expose ``evaluate_batch`` through ``evaluate_pairs``:
result ``i`` is exactly ``evaluate(fgs[i], bgs[i])``. ``evaluate_each`` is the
single-sequence form used for batch token derivation. The batch forms only
exist for throughput.

Parallelism:
 - Disabled by default (``BATCH_MAX_WORKERS`` = 1).
 - With ``max_workers > 1`` and at least ``BATCH_PARALLEL_MIN_SIZE`` items the
   work fans out over a ThreadPoolExecutor. ``Executor.map`` yields results in
   submission order, so index correspondence holds without sorting.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar
import logging

from config.settings import BATCH_MAX_WORKERS, BATCH_PARALLEL_MIN_SIZE

from .errors import LengthMismatchError

_logger = logging.getLogger(__name__)

__all__ = ["evaluate_pairs", "evaluate_each"]

T = TypeVar("T")
R = TypeVar("R")


def _fan_out(
    fn: Callable[..., R], columns: Sequence[list], max_workers: Optional[int]
) -> List[R]:
    size = len(columns[0])
    workers = BATCH_MAX_WORKERS if max_workers is None else max_workers
    if workers > 1 and size >= BATCH_PARALLEL_MIN_SIZE:
        _logger.debug("evaluating %d items on %d worker threads", size, workers)
        with ThreadPoolExecutor(max_workers=workers) as ex:
            return list(ex.map(fn, *columns))
    return [fn(*args) for args in zip(*columns)]


def evaluate_each(
    evaluate: Callable[[T], R],
    items: Iterable[T],
    *,
    max_workers: Optional[int] = None,
) -> List[R]:
    """Apply ``evaluate`` to every item, preserving order."""
    return _fan_out(evaluate, [list(items)], max_workers)


def evaluate_pairs(
    evaluate: Callable[[T, T], R],
    foregrounds: Iterable[T],
    backgrounds: Iterable[T],
    *,
    max_workers: Optional[int] = None,
) -> List[R]:
    """Apply ``evaluate`` to every (foreground, background) pair by index.

    Raises LengthMismatchError when the two sequences differ in length.
    """
    fgs = list(foregrounds)
    bgs = list(backgrounds)
    if len(fgs) != len(bgs):
        raise LengthMismatchError(len(fgs), len(bgs))
    return _fan_out(evaluate, [fgs, bgs], max_workers)
