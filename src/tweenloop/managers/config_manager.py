"""
Config Manager

Loads tween defaults, named presets and logger settings from YAML.
Falls back to built-in factory defaults when the file is missing or broken.
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Union

from tweenloop.models.tween_config import TweenConfig
from tweenloop.utils.logger import get_category_logger, configure_logger, LogLevel, LogCategory

log = get_category_logger(LogCategory.CONFIG)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "tweens.yaml"

FACTORY_DEFAULTS: Dict = {
    "logging": {"level": "INFO", "colors": True},
    "defaults": {
        "duration_ms": 1000,
        "delay_ms": 0,
        "repeat": 0,
        "yoyo": False,
        "easing": "linear",
    },
    "presets": {},
}

CONFIG_KEYS = ("duration_ms", "delay_ms", "repeat", "yoyo", "easing")


def _section(loaded: Dict, name: str) -> Dict:
    """Return a top-level section, which must be a mapping if present"""
    value = loaded.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"section '{name}' must be a mapping, got {type(value).__name__}")
    return value


class ConfigManager:
    """
    Configuration manager for tween defaults and presets

    Example:
        config = ConfigManager()
        config.load()

        defaults = config.get_defaults()       # TweenConfig
        pulse = config.get_preset("pulse")     # TweenConfig

        Tween.from_config(sprite, pulse).to({"scale": 1.2}).start()
    """

    def __init__(self, config_path: Union[str, Path, None] = None):
        """
        Initialize ConfigManager

        Args:
            config_path: YAML file to load (default: packaged config/tweens.yaml)
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.data: Dict = copy.deepcopy(FACTORY_DEFAULTS)
        self._defaults: TweenConfig = TweenConfig()
        self._presets: Dict[str, TweenConfig] = {}

    def load(self) -> Dict:
        """
        Load YAML configuration

        Process:
        1. Read config file with yaml.safe_load
        2. Fill missing sections from factory defaults
        3. Fall back to factory defaults entirely on failure
        4. Apply logging section, build defaults and presets

        Returns:
            Merged config data dict
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"top level must be a mapping, got {type(loaded).__name__}")
            data = self._merge_with_factory(loaded)
            self._apply(data)
            log.info("Loaded tween configuration", path=str(self.config_path))

        except (OSError, yaml.YAMLError, ValueError, TypeError) as ex:
            log.error("Failed to load tween config", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            data = copy.deepcopy(FACTORY_DEFAULTS)
            self._apply(data)

        self.data = data

        log.debug("Presets ready", presets=", ".join(self._presets) or "-")
        return self.data

    def _merge_with_factory(self, loaded: Dict) -> Dict:
        merged = copy.deepcopy(FACTORY_DEFAULTS)
        for section in ("logging", "defaults"):
            merged[section].update(_section(loaded, section))
        merged["presets"] = _section(loaded, "presets")
        return merged

    def _apply(self, data: Dict):
        """Apply logging and build defaults and presets; raises on bad values"""
        self._apply_logging(data["logging"])
        defaults = self._build_config(data["defaults"])
        presets = {}
        for name, values in data["presets"].items():
            if values is not None and not isinstance(values, dict):
                raise ValueError(f"preset '{name}' must be a mapping, got {type(values).__name__}")
            presets[name] = self._build_config(values or {}, base=defaults)
        self._defaults = defaults
        self._presets = presets

    def _apply_logging(self, section: Dict):
        level_name = str(section.get("level", "INFO")).upper()
        try:
            level = LogLevel[level_name]
        except KeyError:
            log.warn(f"Unknown log level '{level_name}', using INFO")
            level = LogLevel.INFO
        configure_logger(min_level=level, use_colors=bool(section.get("colors", True)))

    def _build_config(self, values: Dict, base: Optional[TweenConfig] = None) -> TweenConfig:
        """Turn a YAML mapping into a TweenConfig (missing keys inherit from base)"""
        unknown = set(values) - set(CONFIG_KEYS)
        if unknown:
            log.warn("Ignoring unknown tween config keys", keys=", ".join(sorted(unknown)))

        base = base or TweenConfig()
        changes = {key: values[key] for key in ("duration_ms", "delay_ms", "repeat", "yoyo") if key in values}
        if "easing" in values:
            changes["ease_function"] = values["easing"]
        return base.replace(**changes)

    # === Accessors ===

    def get_defaults(self) -> TweenConfig:
        return self._defaults

    def get_preset(self, name: str) -> TweenConfig:
        """
        Get a named preset

        Raises:
            KeyError: if the preset is not defined
        """
        try:
            return self._presets[name]
        except KeyError:
            raise KeyError(f"Unknown tween preset: {name!r}") from None

    @property
    def preset_names(self) -> List[str]:
        return list(self._presets)
