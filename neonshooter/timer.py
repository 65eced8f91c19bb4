"""Frame timer: time between frames and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures elapsed time per frame and counts frames per second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last_time = clock()
        self.frame_rate = 0
        self.elapsed_time = 0.0
        self._frame_count = 0
        self._one_second_count = 0.0

    def update(self) -> float:
        """Advance one frame and return the seconds since the previous one."""
        now = self._clock()
        self.elapsed_time = now - self._last_time
        self._last_time = now

        self._frame_count += 1
        self._one_second_count += self.elapsed_time
        if self._one_second_count >= 1.0:
            self.frame_rate = self._frame_count
            self._frame_count = 0
            self._one_second_count = 0.0
        return self.elapsed_time

    def report(self) -> tuple[str, str]:
        """The two status lines shown on screen."""
        return (
            f"FPS : {self.frame_rate}",
            f"ElapsedTime : {self.elapsed_time:f}",
        )