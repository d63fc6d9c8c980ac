"""
Configuration - wiring and animation defaults for the strip.

Loaded from YAML (or JSON, by file suffix). A missing file means defaults;
an unreadable or invalid one is logged and replaced by defaults so a bad
config never stops the lamps from coming up.
"""

import json
import logging
import yaml
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple, Optional, Dict, Any

from .colors import parse_color
from .errors import InvalidColorFormat
from .gpio.base import CLK, DAT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("blinkt_config.yaml")


@dataclass
class PinConfig:
    """Which GPIO lines the strip is wired to (BCM numbering)."""
    data_pin: int = DAT
    clock_pin: int = CLK
    backend: str = "auto"  # "auto", "pi", "mock"

    def validate(self) -> Tuple[bool, Optional[str]]:
        for name in ("data_pin", "clock_pin"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= 27):
                return False, f"{name} must be a BCM line 0-27, got {value!r}"
        if self.data_pin == self.clock_pin:
            return False, "data_pin and clock_pin must differ"
        if self.backend not in ("auto", "pi", "mock"):
            return False, f"backend must be auto, pi or mock, got {self.backend!r}"
        return True, None


@dataclass
class AnimationConfig:
    """Startup/shutdown sweep settings."""
    fade_steps: int = 10
    startup_color: str = "FFFFFF"
    startup_brightness: float = 0.2
    shutdown_color: str = "FFFFFF"
    shutdown_brightness: float = 0.2

    def validate(self) -> Tuple[bool, Optional[str]]:
        if isinstance(self.fade_steps, bool) or not isinstance(self.fade_steps, int) or self.fade_steps < 1:
            return False, "fade_steps must be a positive integer"
        for name in ("startup_color", "shutdown_color"):
            try:
                parse_color(getattr(self, name))
            except InvalidColorFormat as e:
                return False, f"{name}: {e}"
        for name in ("startup_brightness", "shutdown_brightness"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not (0 <= value <= 1):
                return False, f"{name} must be 0-1"
        return True, None


@dataclass
class BlinktConfig:
    """Complete configuration for the strip driver."""
    pins: PinConfig = field(default_factory=PinConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pins": asdict(self.pins),
            "animation": asdict(self.animation),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "BlinktConfig":
        data = data or {}
        return cls(
            pins=PinConfig(**data.get("pins", {})),
            animation=AnimationConfig(**data.get("animation", {})),
        )

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate entire configuration."""
        valid, error = self.pins.validate()
        if not valid:
            return False, f"Pins: {error}"
        valid, error = self.animation.validate()
        if not valid:
            return False, f"Animation: {error}"
        return True, None


def _is_yaml(path: Path) -> bool:
    return path.suffix in (".yaml", ".yml")


class ConfigManager:
    """Manages configuration loading and saving."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (default: blinkt_config.yaml in current dir)
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        self.config_path = Path(config_path)
        self._config: Optional[BlinktConfig] = None

    def load(self, force_reload: bool = False) -> BlinktConfig:
        """Load configuration from file or return defaults."""
        if self._config is not None and not force_reload:
            return self._config

        if not self.config_path.exists():
            self._config = BlinktConfig()
            return self._config

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f) if _is_yaml(self.config_path) else json.load(f)
            config = BlinktConfig.from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.warning("Error loading %s, using defaults: %s", self.config_path, e)
            self._config = BlinktConfig()
            return self._config

        valid, error = config.validate()
        if not valid:
            logger.warning("Invalid config in %s, using defaults: %s", self.config_path, error)
            config = BlinktConfig()
        self._config = config
        return self._config

    def save(self, config: Optional[BlinktConfig] = None) -> bool:
        """
        Save configuration to file.

        Returns:
            True if saved successfully
        """
        if config is None:
            config = self._config or self.load()

        valid, error = config.validate()
        if not valid:
            logger.warning("Cannot save invalid config: %s", error)
            return False

        try:
            data = config.to_dict()
            with open(self.config_path, "w") as f:
                if _is_yaml(self.config_path):
                    yaml.dump(data, f, default_flow_style=False, sort_keys=False)
                else:
                    json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning("Error saving config to %s: %s", self.config_path, e)
            return False

        self._config = config
        return True

    def reload(self) -> BlinktConfig:
        """Force reload configuration from file."""
        self._config = None
        return self.load()

    def get_pin_config(self) -> PinConfig:
        return self.load().pins

    def get_animation_config(self) -> AnimationConfig:
        return self.load().animation


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[Path] = None) -> ConfigManager:
    """Get global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_pin_config() -> PinConfig:
    """Get current pin configuration."""
    return get_config_manager().get_pin_config()


def get_animation_config() -> AnimationConfig:
    """Get current animation configuration."""
    return get_config_manager().get_animation_config()
