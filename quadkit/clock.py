"""Frame timing: elapsed wall-clock time, last frame duration and FPS."""

from __future__ import annotations

import time
from typing import Callable

_I32_MAX = 2**31 - 1


class Clock:
    """Tracks time since start and the duration of the last frame."""

    def __init__(self, now: Callable[[], float] = time.monotonic, frame_time: float = 0.0):
        self._now = now
        self._start_time = now()
        self._frame_time = frame_time

    def tick(self, frame_time: float) -> None:
        """Record the duration in seconds of the frame just finished."""
        self._frame_time = frame_time

    def get_fps(self) -> int:
        """Frames per second derived from the last frame's duration."""
        if self._frame_time == 0:
            return _I32_MAX
        fps = 1.0 / self._frame_time
        return max(-_I32_MAX - 1, min(_I32_MAX, int(fps)))

    def get_frame_time(self) -> float:
        """Duration in seconds of the last frame."""
        return self._frame_time

    def get_time(self) -> float:
        """Seconds elapsed since the clock was created."""
        return self._now() - self._start_time