"""
Mock pins for development off the Pi.

Records every write in order, so it doubles as the test double for
checking the exact bit stream a frame produces.
"""

from typing import List, Tuple

from .base import CLK, DAT, PinBackend


class MockPins(PinBackend):
    """In-memory pins that remember what was written to them."""

    def __init__(self, data_pin: int = DAT, clock_pin: int = CLK):
        super().__init__(data_pin, clock_pin)
        self.writes: List[Tuple[int, int]] = []
        self.levels = {data_pin: 0, clock_pin: 0}
        self.release_count = 0

    @property
    def released(self) -> bool:
        return self.release_count > 0

    def write(self, line: int, level: int) -> None:
        if self.released:
            raise RuntimeError(f"Write to line {line} after release")
        if line not in self.levels:
            raise ValueError(f"Line {line} is not a configured output ({self.data_pin}, {self.clock_pin})")
        if level not in (0, 1):
            raise ValueError(f"Level must be 0 or 1, got {level!r}")
        self.levels[line] = level
        self.writes.append((line, level))

    def release(self) -> None:
        self.release_count += 1

    def clear(self) -> None:
        """Forget recorded writes (levels are kept)."""
        self.writes.clear()

    def clock_pulses(self) -> int:
        """Number of rising edges seen on the clock line."""
        return sum(1 for line, level in self.writes if line == self.clock_pin and level == 1)

    def sampled_bits(self) -> List[int]:
        """Data line level at each rising clock edge, i.e. what the strip latches."""
        bits = []
        data = 0
        for line, level in self.writes:
            if line == self.data_pin:
                data = level
            elif level == 1:
                bits.append(data)
        return bits
