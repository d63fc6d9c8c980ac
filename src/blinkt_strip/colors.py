"""Hex color strings and the predefined palette."""

import string
from typing import Tuple

from .errors import InvalidColorFormat

WHITE = "FFFFFF"
RED = "FF0000"
GREEN = "00FF00"
BLUE = "0000FF"
OFF = "000000"

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_color(color: str) -> Tuple[int, int, int]:
    """Parse "RRGGBB" into (r, g, b) byte values.

    Case-insensitive. Anything that is not exactly six hex digits (no "#"
    prefix, no "0x", no whitespace) raises InvalidColorFormat.
    """
    if not isinstance(color, str) or len(color) != 6 or not _HEX_DIGITS.issuperset(color):
        raise InvalidColorFormat(color)
    return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))
