"""
Execution timing for backends.

Each backend records how long the factorization, solve and statistics
steps took so that the breakdown ends up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    GPU kernels run asynchronously, so a GPU backend passes
    sync_cuda=True to make every measurement wait for the device.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('svd'):
            U, s, Vt = svd(X)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'svd': ...}
    """

    def __init__(self, sync_cuda: bool = False):
        self._sync_cuda = sync_cuda
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def _sync(self) -> None:
        if not self._sync_cuda:
            return
        import torch
        if torch.cuda.is_available():
            torch.cuda.synchronize()

    def start(self) -> None:
        self._sync()
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        self._sync()
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named block; repeated names accumulate."""
        self._sync()
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._sync()
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - begin)

    def result(self) -> dict[str, float]:
        """
        Timing breakdown with 'total_seconds' plus every section.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
