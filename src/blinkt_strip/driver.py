"""Blinkt - the public driver for the 8-lamp strip.

    with Blinkt(WHITE, 0.2) as strip:
        strip.set(0, RED, 0.5)
        strip.show()

Construction runs the startup sweep before returning; close() runs the
shutdown sweep and releases the pins. A closed driver refuses everything.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional, Tuple

from .animations import AnimationEngine, Interval
from .colors import parse_color
from .config import BlinktConfig, get_config_manager
from .errors import PostCloseUse
from .gpio import PinBackend, get_pins
from .protocol import ProtocolEncoder
from .state import ColorState

logger = logging.getLogger(__name__)


class DriverState(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


class Blinkt:
    """Owns the pin backend, the strip state and the frame encoder.

    Not thread-safe: callers sharing one instance must serialize calls,
    since interleaved frames corrupt the bit stream.
    """

    def __init__(
        self,
        color: Optional[str] = None,
        brightness: Optional[float] = None,
        pins: Optional[PinBackend] = None,
        config: Optional[BlinktConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            color: Startup sweep color (default from config)
            brightness: Startup sweep brightness (default from config)
            pins: Pin backend; built from config when omitted
            config: Driver configuration (global config manager if omitted)
            sleep: Blocking pause used between animation frames
        """
        self.state = DriverState.UNINITIALIZED
        self._config = config or get_config_manager().load()
        anim = self._config.animation
        color = anim.startup_color if color is None else color
        brightness = anim.startup_brightness if brightness is None else brightness
        parse_color(color)

        if pins is None:
            pin_cfg = self._config.pins
            pins = get_pins(pin_cfg.data_pin, pin_cfg.clock_pin, pin_cfg.backend)
        self._pins = pins
        self._colors = ColorState()
        self._encoder = ProtocolEncoder(pins)
        self._animations = AnimationEngine(self._colors, self._encoder, sleep, anim.fade_steps)

        try:
            self._animations.startup(color, brightness)
        except Exception:
            self._pins.release()
            self.state = DriverState.CLOSED
            raise
        self.state = DriverState.ACTIVE
        logger.info("Strip ready on data=%d clock=%d", *pins.lines())

    @property
    def is_active(self) -> bool:
        return self.state is DriverState.ACTIVE

    def _require_active(self, operation: str) -> None:
        if self.state is not DriverState.ACTIVE:
            raise PostCloseUse(operation)

    def set(self, led: int, color: str, brightness: float) -> None:
        """Set one lamp. Takes effect on the next show()."""
        self._require_active("set")
        self._colors.set(led, color, brightness)

    def set_all(self, color: str, brightness: float) -> None:
        """Set every lamp. Takes effect on the next show()."""
        self._require_active("set_all")
        self._colors.set_all(color, brightness)

    def show(self) -> None:
        """Write the current lamp state to the strip as one frame."""
        self._require_active("show")
        self._encoder.write_frame(self._colors)

    def flash(self, led: int, color: str, brightness: float, times: int, interval: Interval) -> None:
        """Blink one lamp; blocks for 2 * times * interval."""
        self._require_active("flash")
        self._animations.flash(led, color, brightness, times, interval)

    def get(self, led: int) -> Tuple[int, int, int]:
        """Stored (r, g, b) for one lamp, after brightness and gamma."""
        self._require_active("get")
        return self._colors[led].as_tuple()

    def lamps(self) -> Tuple[Tuple[int, int, int], ...]:
        self._require_active("lamps")
        return self._colors.snapshot()

    def close(self, color: Optional[str] = None, brightness: Optional[float] = None) -> None:
        """Run the shutdown sweep and release the pins. Terminal."""
        self._require_active("close")
        anim = self._config.animation
        color = anim.shutdown_color if color is None else color
        brightness = anim.shutdown_brightness if brightness is None else brightness
        parse_color(color)

        try:
            self._animations.shutdown(color, brightness)
        finally:
            self.state = DriverState.CLOSED
            self._pins.release()
        logger.info("Strip closed after %d frames", self._encoder.frames_written)

    def __enter__(self) -> "Blinkt":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_active:
            self.close()
