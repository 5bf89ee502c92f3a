"""
Stride partitioning of the TCP port space.

Worker ``i`` of ``N`` owns ports ``i+1, i+1+N, i+1+2N, ...`` up to 65535,
so the N sequences are disjoint and together cover every port exactly once.
"""
from typing import Iterator, List

from .errors import ConfigurationError

MIN_PORT = 1
MAX_PORT = 65535


def assign(worker_id: int, workers: int) -> Iterator[int]:
    if workers < 1:
        raise ConfigurationError(f"worker count must be at least 1, got {workers}")
    if not 0 <= worker_id < workers:
        raise ConfigurationError(f"worker id {worker_id} outside [0, {workers})")
    # Empty when worker_id >= MAX_PORT
    return iter(range(MIN_PORT + worker_id, MAX_PORT + 1, workers))


def partitions(workers: int) -> List[Iterator[int]]:
    """One lazy port sequence per worker, indexed by worker id."""
    return [assign(i, workers) for i in range(workers)]
