"""
blinkt-strip - driver for an 8-lamp APA102 RGB strip on two GPIO lines.

Per-lamp color and brightness with gamma correction, plus startup and
shutdown sweeps and a blink helper.
"""

__version__ = "0.1.0"

from .colors import WHITE, RED, GREEN, BLUE, OFF, parse_color
from .config import (
    AnimationConfig,
    BlinktConfig,
    ConfigManager,
    PinConfig,
    get_animation_config,
    get_config_manager,
    get_pin_config,
)
from .driver import Blinkt, DriverState
from .errors import BlinktError, IndexOutOfRange, InvalidColorFormat, PostCloseUse
from .gamma import GAMMA_TABLE, correct
from .gpio import CLK, DAT, MockPins, PinBackend, get_pins
from .state import NUM_LAMPS, ColorState, LampSetting

__all__ = [
    "Blinkt",
    "DriverState",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "OFF",
    "DAT",
    "CLK",
    "NUM_LAMPS",
    "parse_color",
    "GAMMA_TABLE",
    "correct",
    "ColorState",
    "LampSetting",
    "PinBackend",
    "MockPins",
    "get_pins",
    "BlinktError",
    "InvalidColorFormat",
    "IndexOutOfRange",
    "PostCloseUse",
    "AnimationConfig",
    "BlinktConfig",
    "ConfigManager",
    "PinConfig",
    "get_animation_config",
    "get_config_manager",
    "get_pin_config",
]
