"""
Shared test fixtures for the blinkt-strip test suite.

MockPins records every pin write, so the helpers here turn that record
back into frames and lamp colors for assertions.
"""

import pytest

from blinkt_strip import Blinkt
from blinkt_strip.config import ConfigManager
from blinkt_strip.gpio import MockPins

FRAME_BITS = 32 + 8 * 32 + 32


# ---------------------------------------------------------------------------
# Bit stream helpers
# ---------------------------------------------------------------------------

def split_frames(bits):
    """Cut a sampled bit stream into whole frames."""
    assert len(bits) % FRAME_BITS == 0, f"{len(bits)} bits is not a whole number of frames"
    return [bits[i:i + FRAME_BITS] for i in range(0, len(bits), FRAME_BITS)]


def byte_at(bits, offset):
    value = 0
    for bit in bits[offset:offset + 8]:
        value = (value << 1) | bit
    return value


def decode_frame(frame):
    """Frame bits -> list of 8 (r, g, b), checking framing and header bytes."""
    assert frame[:32] == [0] * 32, "start frame must be 32 zero bits"
    assert frame[-32:] == [1] * 32, "end frame must be 32 one bits"
    lamps = []
    for lamp in range(8):
        offset = 32 + lamp * 32
        assert byte_at(frame, offset) == 0xFF
        blue = byte_at(frame, offset + 8)
        green = byte_at(frame, offset + 16)
        red = byte_at(frame, offset + 24)
        lamps.append((red, green, blue))
    return lamps


def decode_frames(pins):
    return [decode_frame(frame) for frame in split_frames(pins.sampled_bits())]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the global config manager at an empty temp dir."""
    manager = ConfigManager(tmp_path / "blinkt_config.yaml")
    monkeypatch.setattr("blinkt_strip.config._config_manager", manager)
    return manager


class SleepRecorder:
    """Stand-in for time.sleep that records instead of blocking."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def pins():
    """Recording pins on the default Blinkt! lines."""
    return MockPins(data_pin=23, clock_pin=24)


@pytest.fixture
def sleeps():
    return SleepRecorder()


@pytest.fixture
def strip(pins, sleeps):
    """Active driver whose startup traffic has been cleared from the record."""
    driver = Blinkt("FFFFFF", 1.0, pins=pins, sleep=sleeps)
    pins.clear()
    return driver
