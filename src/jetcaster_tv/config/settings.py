"""
Settings management for Jetcaster TV.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, asdict
from typing import Dict, Any

from jetcaster_tv import constants


@dataclass
class Settings:
    """Application settings with default values."""

    enable_artwork: bool = True
    fullscreen: bool = True
    catalog_path: str = ""  # Local catalog JSON, overrides the bundled one
    catalog_url: str = ""  # Remote catalog JSON, takes priority over catalog_path
    account_name: str = "Name"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config file.

    Returns:
        Dictionary of settings with defaults for missing values
    """
    default_settings = get_default_settings()

    try:
        if os.path.exists(constants.CONFIG_FILE):
            with open(constants.CONFIG_FILE, "r") as f:
                loaded_settings = json.load(f)
                # Merge with defaults to handle new settings
                default_settings.update(loaded_settings)
        else:
            # Create config file with defaults
            save_settings(default_settings)
    except Exception as e:
        from jetcaster_tv.utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    return default_settings


def save_settings(settings_to_save: Dict[str, Any]) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save

    Returns:
        True if successful, False otherwise
    """
    try:
        config_dir = os.path.dirname(constants.CONFIG_FILE)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(constants.CONFIG_FILE, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except Exception as e:
        from jetcaster_tv.utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False


# ---- Controller Mapping ---- #

_controller_mapping: Dict[str, Any] = {}


def get_controller_mapping() -> Dict[str, Any]:
    """Get the current controller mapping."""
    return _controller_mapping


def load_controller_mapping() -> bool:
    """
    Load the remote/controller mapping from file.

    A missing file is not an error: the keyboard defaults and the
    hat D-pad work without one.

    Returns:
        True if mapping was loaded, False otherwise
    """
    global _controller_mapping

    mapping_file = constants.CONTROLLER_MAPPING_FILE

    try:
        if os.path.exists(mapping_file):
            with open(mapping_file, "r") as f:
                loaded = json.load(f)
            # JSON has no tuples; hat mappings come back as lists
            _controller_mapping = {
                action: tuple(value) if isinstance(value, list) else value
                for action, value in loaded.items()
            }
            print("Controller mapping loaded from file")
            return True
        else:
            print("No controller mapping found, using defaults")
            _controller_mapping = {}
            return False
    except Exception as e:
        from jetcaster_tv.utils.logging import log_error

        log_error(
            "Failed to load controller mapping",
            type(e).__name__,
            traceback.format_exc(),
        )
        _controller_mapping = {}
        return False
