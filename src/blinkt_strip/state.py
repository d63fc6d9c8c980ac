"""Per-lamp color state for the 8-lamp strip."""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .colors import parse_color
from .errors import IndexOutOfRange
from .gamma import correct

NUM_LAMPS = 8


@dataclass(frozen=True)
class LampSetting:
    """Gamma-corrected intensities for one lamp (each 0-255)."""
    red: int = 0
    green: int = 0
    blue: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


def scale_channel(raw: int, brightness: float) -> int:
    """Scale a raw 0-255 channel by brightness and gamma-correct it.

    Rounds half up (floor(x + 0.5)), then clamps into the table's domain
    so brightness above 1.0 saturates and negative brightness reads as off.
    """
    scaled = raw * brightness
    # NaN compares false both ways; clamp before floor so inf cannot overflow
    scaled = 0.0 if scaled != scaled else min(255.0, max(0.0, scaled))
    return correct(int(math.floor(scaled + 0.5)))


class ColorState:
    """The strip: exactly NUM_LAMPS LampSettings in wiring order.

    Entries are replaced, never shared, so nothing outside this object can
    alias a lamp's stored value.
    """

    def __init__(self):
        self._lamps: List[LampSetting] = [LampSetting() for _ in range(NUM_LAMPS)]

    def __len__(self) -> int:
        return NUM_LAMPS

    def __iter__(self):
        return iter(tuple(self._lamps))

    def __getitem__(self, index: int) -> LampSetting:
        return self._lamps[self.check_index(index)]

    def check_index(self, index: int) -> int:
        """Return index if it names a lamp, else raise IndexOutOfRange."""
        # bool is an int subclass; True/False are not lamp numbers
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < NUM_LAMPS:
            raise IndexOutOfRange(index, NUM_LAMPS)
        return index

    def set(self, index: int, color: str, brightness: float) -> None:
        """Set one lamp from a hex color and brightness factor.

        Raises:
            IndexOutOfRange: index not in 0-7
            InvalidColorFormat: color not six hex digits
        """
        index = self.check_index(index)
        r, g, b = parse_color(color)
        self._lamps[index] = LampSetting(
            red=scale_channel(r, brightness),
            green=scale_channel(g, brightness),
            blue=scale_channel(b, brightness),
        )

    def set_all(self, color: str, brightness: float) -> None:
        """Apply set() to every lamp in order.

        Not transactional: if a lamp fails validation, lamps before it keep
        their new value.
        """
        for index in range(NUM_LAMPS):
            self.set(index, color, brightness)

    def snapshot(self) -> Tuple[Tuple[int, int, int], ...]:
        """All lamps as (r, g, b) tuples, in wiring order."""
        return tuple(lamp.as_tuple() for lamp in self._lamps)
