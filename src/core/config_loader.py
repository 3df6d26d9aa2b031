"""
Trainer settings: built-in defaults with a YAML file layered on top.
"""
import copy
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
import logging

import yaml

from .checks import is_finite_number, is_integral
from .io_utils import atomic_write_yaml, load_yaml

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


def _positive_int(value) -> bool:
    return is_integral(value) and value > 0


def _optional_positive(value) -> bool:
    return value is None or (is_finite_number(value) and value > 0)


def _optional_int(value) -> bool:
    return value is None or is_integral(value)


def _text(value) -> bool:
    return isinstance(value, str) and bool(value)


class Config:
    """
    Settings container. Unknown sections and bad values are ignored with a
    warning so a typo never stops a practice session.
    """

    DEFAULTS = {
        # Question generation
        "practice": {
            "preset": "preset-basic",
            "difficulty": "advanced",  # beginner, intermediate, advanced, expert
            "starting_score": 501,
        },

        # Throw model
        "simulation": {
            "seed": None,  # None = non-deterministic
            "probability_radial_steps": 120,
            "probability_angular_steps": 120,
        },

        # Session length (terminal practice loop)
        "session": {
            "question_count": 10,  # 10, 20, 50 or 100
            "time_limit_min": None,  # 3, 5 or 10
        },
    }

    CHECKS: Dict[Tuple[str, str], Callable[[Any], bool]] = {
        ("practice", "preset"): _text,
        ("practice", "difficulty"): _text,
        ("practice", "starting_score"): lambda v: is_integral(v) and v > 1,
        ("simulation", "seed"): _optional_int,
        ("simulation", "probability_radial_steps"): _positive_int,
        ("simulation", "probability_angular_steps"): _positive_int,
        ("session", "question_count"): _positive_int,
        ("session", "time_limit_min"): _optional_positive,
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Settings YAML (None or a missing file = defaults only)
        """
        self.data = copy.deepcopy(self.DEFAULTS)
        self.source: Optional[Path] = None

        if config_path is None:
            logger.info("Using default configuration")
            return

        config_path = Path(config_path)
        if not config_path.exists():
            logger.info(f"No config at {config_path}, using defaults")
            return

        try:
            user_config = load_yaml(config_path)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config: {e}, using defaults")
            return

        if not isinstance(user_config, dict):
            logger.warning(f"Config {config_path} is not a mapping, using defaults")
            return

        self._merge_config(user_config)
        self.source = config_path
        logger.info(f"Configuration loaded from {config_path}")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Overlay user values key by key."""
        for section, values in user_config.items():
            if section not in self.data:
                logger.warning(f"Ignoring unknown config section: {section}")
                continue
            if not isinstance(values, dict):
                logger.warning(f"Config section '{section}' must be a mapping")
                continue

            for key, value in values.items():
                check = self.CHECKS.get((section, key))
                if check is None:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")
                elif not check(value):
                    logger.warning(
                        f"Invalid {section}.{key}={value!r}, keeping {self.data[section][key]!r}"
                    )
                else:
                    self.data[section][key] = value

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Copy of one section."""
        return dict(self.data.get(section, {}))

    def save(self, config_path: Path) -> None:
        """Write the current settings, e.g. to start a user config file."""
        atomic_write_yaml(config_path, self.data)
        logger.info(f"Configuration saved to {config_path}")
