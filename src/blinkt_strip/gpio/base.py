"""
Pin backend interface.

The driver only ever needs two output lines (data and clock) and two
operations on them: drive a line to 0/1, and let go of both lines.
"""

from abc import ABC, abstractmethod
from typing import Tuple

LOW = 0
HIGH = 1

# Blinkt! wiring, BCM numbering
DAT = 23
CLK = 24


class PinBackend(ABC):
    """Abstract two-line output backend - implemented by mock and Pi."""

    def __init__(self, data_pin: int, clock_pin: int):
        if data_pin == clock_pin:
            raise ValueError(f"data and clock must be different lines (both {data_pin})")
        self.data_pin = data_pin
        self.clock_pin = clock_pin

    def lines(self) -> Tuple[int, int]:
        """(data, clock) line numbers."""
        return (self.data_pin, self.clock_pin)

    @abstractmethod
    def write(self, line: int, level: int) -> None:
        """Drive a line to LOW (0) or HIGH (1)."""
        pass

    @abstractmethod
    def release(self) -> None:
        """Free both lines. Safe to call more than once."""
        pass

    def is_pi(self) -> bool:
        """Is this driving real Pi hardware?"""
        return False
