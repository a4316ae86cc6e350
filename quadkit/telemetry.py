"""Frame profiling: nested timing zones, logged strings and captured draw calls."""

from __future__ import annotations

import copy
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator


@dataclass
class Zone:
    """A named, timed span of a frame, possibly holding nested zones."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """The zones recorded during one frame."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _open: list[Zone] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def has_open_zone(self) -> bool:
        return bool(self._open)

    def try_clone(self) -> Frame | None:
        """A deep copy, or None while a zone is still open."""
        if self._open:
            return None
        return Frame(self.full_frame_time, copy.deepcopy(self.zones))


@dataclass
class DrawCallTelemetry:
    """One draw call recorded while a frame was captured."""

    indices_count: int
    texture: Any


class Profiler:
    """Collects zones per frame; enabling and capturing take effect at the next reset."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._frame = Frame()
        self._prev_frame = Frame()
        self.enabled = False
        self._enable_request: bool | None = None
        self._capture_request = False
        self.capturing = False
        self._drawcalls: list[DrawCallTelemetry] = []
        self._strings: list[str] = []

    def enable(self) -> None:
        """Start recording zones from the next frame."""
        self._enable_request = True

    def disable(self) -> None:
        """Stop recording zones from the next frame."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone nested in the currently open one."""
        if not self.enabled:
            return
        zone = Zone(name, self._now())
        open_zones = self._frame._open
        siblings = open_zones[-1].children if open_zones else self._frame.zones
        siblings.append(zone)
        open_zones.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone."""
        if not self.enabled:
            return
        if not self._frame._open:
            raise RuntimeError("end_zone called without begin_zone")
        zone = self._frame._open.pop()
        zone.duration = self._now() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Time the enclosed block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the enclosed block took as a string."""
        start = self._now()
        try:
            yield
        finally:
            self.log_string(f"Time query: {name}, {self._now() - start:.1f}s")

    def reset(self, frame_time: float) -> None:
        """Finish the current frame and start a new one."""
        if self._frame._open:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()

        if self._enable_request is not None:
            self.enabled = self._enable_request
            self._enable_request = None

        if self.capturing:
            self.capturing = False

        if self._capture_request:
            self._drawcalls.clear()
            self.capturing = True
            self._capture_request = False

    def frame(self) -> Frame:
        """A copy of the last finished frame."""
        return Frame(self._prev_frame.full_frame_time, copy.deepcopy(self._prev_frame.zones))

    def log_string(self, string: str) -> None:
        self._strings.append(string)

    def strings(self) -> list[str]:
        return list(self._strings)

    def capture_frame(self) -> None:
        """Capture the draw calls of the next frame."""
        self._capture_request = True

    def track_drawcall(self, indices_count: int, texture: Any = None) -> None:
        """Record a draw call."""
        self._drawcalls.append(DrawCallTelemetry(indices_count, texture))

    def drawcalls(self) -> list[DrawCallTelemetry]:
        return list(self._drawcalls)