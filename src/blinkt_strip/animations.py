"""Scripted fade and blink sequences.

Every sequence is synchronous: it mutates the strip, flushes a frame and
sleeps between frames, returning only when the last frame is out. Lamps
are faded in pairs (i, 7 - i) so the sweep is symmetric.
"""

import time
from datetime import timedelta
from typing import Callable, Union

from .colors import OFF, parse_color
from .protocol import ProtocolEncoder
from .state import NUM_LAMPS, ColorState

Interval = Union[float, int, timedelta]

DEFAULT_FADE_STEPS = 10
PAIRS = NUM_LAMPS // 2


def to_seconds(interval: Interval) -> float:
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


class AnimationEngine:
    """Startup sweep, blink and shutdown sweep over a ColorState."""

    def __init__(
        self,
        state: ColorState,
        encoder: ProtocolEncoder,
        sleep: Callable[[float], None] = time.sleep,
        fade_steps: int = DEFAULT_FADE_STEPS,
    ):
        if fade_steps < 1:
            raise ValueError(f"fade_steps must be at least 1, got {fade_steps}")
        self._state = state
        self._encoder = encoder
        self._sleep = sleep
        self._fade_steps = fade_steps

    def _flush(self) -> None:
        self._encoder.write_frame(self._state)

    def _set_pair(self, i: int, color: str, brightness: float) -> None:
        self._state.set(i, color, brightness)
        self._state.set(NUM_LAMPS - 1 - i, color, brightness)

    def _ramp_up(self, brightness: float):
        """brightness * k / steps for k = 0..steps-1; empty if brightness <= 0."""
        if brightness <= 0:
            return []
        return [brightness * k / self._fade_steps for k in range(self._fade_steps)]

    def _ramp_down(self, brightness: float):
        if brightness <= 0:
            return []
        return [brightness * (self._fade_steps - k) / self._fade_steps for k in range(self._fade_steps)]

    def startup(self, color: str, brightness: float) -> None:
        """Fade pairs in from the middle (3, 4) out to the ends (0, 7), then blank."""
        for i in range(PAIRS - 1, -1, -1):
            for level in self._ramp_up(brightness):
                self._set_pair(i, color, level)
                self._flush()
            self._set_pair(i, color, brightness)
            self._flush()
        self._state.set_all(OFF, 0)
        self._flush()

    def flash(self, index: int, color: str, brightness: float, times: int, interval: Interval) -> None:
        """Blink one lamp on/off `times` times, pausing `interval` after each frame."""
        seconds = to_seconds(interval)
        if seconds < 0:
            raise ValueError(f"interval must not be negative, got {seconds}")
        self._state.check_index(index)
        parse_color(color)
        for _ in range(times):
            self._state.set(index, color, brightness)
            self._flush()
            self._sleep(seconds)
            self._state.set(index, OFF, 0)
            self._flush()
            self._sleep(seconds)

    def shutdown(self, color: str, brightness: float) -> None:
        """Light everything, then fade pairs out from the ends (0, 7) in to the middle.

        Leaves every lamp off. Releasing the pins is up to the caller.
        """
        self._state.set_all(color, brightness)
        self._flush()
        for i in range(PAIRS):
            for level in self._ramp_down(brightness):
                self._set_pair(i, color, level)
                self._flush()
            self._set_pair(i, OFF, 0)
            self._flush()
