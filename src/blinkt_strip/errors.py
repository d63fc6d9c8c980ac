"""Error types raised by the strip driver.

All of them are caller bugs rather than transient hardware trouble, so
nothing here is retried; the failing call aborts before anything is
written to the pins.
"""


class BlinktError(Exception):
    """Base class for driver errors."""
    pass


class InvalidColorFormat(BlinktError, ValueError):
    """Color string is not exactly six hex digits."""

    def __init__(self, color):
        self.color = color
        super().__init__(f"Invalid color {color!r}: expected 6 hex digits (RRGGBB)")


class IndexOutOfRange(BlinktError, IndexError):
    """Lamp index outside the strip."""

    def __init__(self, index, num_lamps: int = 8):
        self.index = index
        self.num_lamps = num_lamps
        super().__init__(f"Lamp index {index!r} out of range 0-{num_lamps - 1}")


class PostCloseUse(BlinktError, RuntimeError):
    """Operation attempted on a driver that has already been closed."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: driver is closed")
