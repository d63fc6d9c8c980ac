"""Pin backends - mock off the Pi, digitalio on it."""

import logging
from pathlib import Path

from .base import CLK, DAT, HIGH, LOW, PinBackend
from .mock import MockPins

logger = logging.getLogger(__name__)

BACKENDS = ("auto", "pi", "mock")


def _is_raspberry_pi() -> bool:
    """Detect if running on actual Raspberry Pi hardware."""
    model = Path("/proc/device-tree/model")
    try:
        if model.exists():
            return "Raspberry Pi" in model.read_text(errors="ignore")
        cpuinfo = Path("/proc/cpuinfo")
        if cpuinfo.exists():
            text = cpuinfo.read_text(errors="ignore")
            return "Raspberry Pi" in text or "BCM" in text
    except OSError:
        pass
    return False


# Only import Pi pins if actually on Pi
DigitalioPins = None
if _is_raspberry_pi():
    try:
        from .pi import DigitalioPins
    except ImportError:
        pass

DEFAULT_BACKEND = "pi" if DigitalioPins else "mock"


def get_pins(data_pin: int = DAT, clock_pin: int = CLK, backend: str = "auto") -> PinBackend:
    """Get a pin backend. Auto-detects Pi vs everything else."""
    if backend not in BACKENDS:
        raise ValueError(f"Unknown pin backend {backend!r} (expected one of {', '.join(BACKENDS)})")

    if backend == "auto":
        backend = DEFAULT_BACKEND
        if backend == "mock":
            logger.warning("Not on a Raspberry Pi with Blinka installed - using mock pins")

    if backend == "pi":
        if DigitalioPins is None:
            raise RuntimeError("Pi pin backend unavailable: needs a Raspberry Pi with adafruit-blinka installed")
        return DigitalioPins(data_pin, clock_pin)
    return MockPins(data_pin, clock_pin)


__all__ = ["PinBackend", "MockPins", "DigitalioPins", "get_pins", "HIGH", "LOW", "DAT", "CLK", "BACKENDS"]
