import time
from typing import Optional


class Timer:
    """A stopwatch measuring elapsed seconds while running. Stopping keeps the elapsed
    time until the timer is reset.
    """

    def __init__(self) -> None:
        self._accumulated = 0.0
        self._start_ts: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._start_ts is not None

    def start(self) -> None:
        if self._start_ts is None:
            self._start_ts = time.perf_counter()

    def stop(self) -> None:
        if self._start_ts is not None:
            self._accumulated += time.perf_counter() - self._start_ts
            self._start_ts = None

    def reset(self) -> None:
        """Zeros the elapsed time, keeping the timer running if it was."""
        self._accumulated = 0.0
        if self._start_ts is not None:
            self._start_ts = time.perf_counter()

    def get(self) -> float:
        """Elapsed seconds."""
        if self._start_ts is None:
            return self._accumulated

        return self._accumulated + time.perf_counter() - self._start_ts

    def has_elapsed(self, seconds: float) -> bool:
        return self.get() >= seconds
