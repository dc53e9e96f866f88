"""
Wall-clock timing of the phases of a training run.

FittingStrategy.train() splits each run into a 'fit' phase and an
'evaluate' phase; the Timer measures both and the total, and the
resulting dict becomes Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Measures a total duration plus any number of named phases.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('fit'):
            slope, intercept = solve(x, y)
        with timer.section('evaluate'):
            mse = mean_squared_error(x, y, slope, intercept)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.0004, 'fit': 0.0003, 'evaluate': 0.0001}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to the phase called name."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Phase durations in seconds, plus 'total_seconds'.

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        timings = {'total_seconds': self._total}
        timings.update(self._sections)
        return timings
