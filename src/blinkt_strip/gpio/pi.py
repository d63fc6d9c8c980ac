"""
Real Pi pins via Adafruit Blinka (board + digitalio).

Only imported when running on actual Pi hardware.

Lines are BCM numbers; the Blinkt! uses BCM 23 for data and BCM 24 for
clock.
"""

import logging

from .base import CLK, DAT, PinBackend

logger = logging.getLogger(__name__)


class DigitalioPins(PinBackend):
    """Two push-pull outputs driven through digitalio."""

    def __init__(self, data_pin: int = DAT, clock_pin: int = CLK):
        super().__init__(data_pin, clock_pin)
        import board
        import digitalio

        self._outputs = {}
        try:
            for line in (data_pin, clock_pin):
                pin = getattr(board, f"D{line}", None)
                if pin is None:
                    raise ValueError(f"Board has no GPIO line D{line}")
                dio = digitalio.DigitalInOut(pin)
                dio.switch_to_output(value=False, drive_mode=digitalio.DriveMode.PUSH_PULL)
                self._outputs[line] = dio
        except Exception:
            self.release()
            raise
        logger.info("GPIO lines ready (data=%d, clock=%d)", data_pin, clock_pin)

    def write(self, line: int, level: int) -> None:
        self._outputs[line].value = bool(level)

    def release(self) -> None:
        while self._outputs:
            line, dio = self._outputs.popitem()
            dio.deinit()
            logger.debug("Released GPIO line %d", line)

    def is_pi(self) -> bool:
        return True
