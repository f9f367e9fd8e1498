"""Frame timer measuring delta time and frames per second."""

from __future__ import annotations

import math
import time
from typing import Callable


class Timer:
    """Tracks the time between updates and an FPS figure over 60 frames.

    ``clock`` returns the current time in seconds.
    """

    FPS_SAMPLE_FRAMES = 60

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()
        self._delta_time = 0.0
        self._fps = 0.0
        self._fps_time = 0.0
        self._fps_ticks = 0

    @property
    def delta_time(self) -> float:
        """Seconds elapsed between the last two updates."""
        return self._delta_time

    @property
    def fps(self) -> float:
        """Frames per second over the last complete sample window."""
        return self._fps

    def update(self) -> float:
        """Advance one frame and return the new delta time."""
        now = self._clock()
        self._delta_time = now - self._last
        self._last = now

        self._fps_time += self._delta_time
        self._fps_ticks += 1
        if self._fps_ticks == self.FPS_SAMPLE_FRAMES:
            self._fps = self._fps_ticks / self._fps_time if self._fps_time else math.inf
            self._fps_time = 0.0
            self._fps_ticks = 0
        return self._delta_time