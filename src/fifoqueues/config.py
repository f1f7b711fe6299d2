from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
import sys
import tomllib
from typing import Any, ClassVar, TypeVar

from loguru import logger

# --- Constants ---
APP_NAME = "fifoqueues"
# Use a platform-agnostic user config directory
if sys.platform == "win32":
    CONFIG_DIR = Path.home() / "AppData" / "Roaming" / APP_NAME
else:
    CONFIG_DIR = Path.home() / ".config" / APP_NAME

CONFIG_FILE = CONFIG_DIR / "config.toml"

# --- Dataclass Models for Settings ---
T = TypeVar("T")


@dataclass
class GeneralSettings:
    """Logging settings applied by `setup_logging_from_settings`."""

    log_level_console: str = "INFO"
    log_level_file: str = "DEBUG"
    log_directory: str = str(CONFIG_DIR / "logs")


@dataclass
class ContainerSettings:
    """Defaults used by the factory functions."""

    # Used when a bounded container is requested without a capacity.
    default_capacity: int = 16


@dataclass
class Settings:
    """Root container for all package settings."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    containers: ContainerSettings = field(default_factory=ContainerSettings)

    _instance: ClassVar["Settings | None"] = None

    @classmethod
    def get_instance(cls) -> "Settings":
        """Returns the lazily loaded singleton instance of the Settings object."""
        if cls._instance is None:
            cls._instance = load_config()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drops the cached instance so the next access reloads the file."""
        cls._instance = None


def _update_dataclass(dc_instance: T, data: dict[str, Any]) -> T:
    """Recursively updates a dataclass instance from a dictionary.

    Keys without a matching field are ignored.
    """
    for f in field_names(dc_instance):
        if f in data:
            field_value = getattr(dc_instance, f)
            if is_dataclass(field_value):
                if isinstance(data[f], dict):
                    _update_dataclass(field_value, data[f])
                else:
                    logger.warning(f"Ignoring non-table value for section '{f}'.")
            else:
                setattr(dc_instance, f, data[f])
    return dc_instance


def field_names(dc_instance: Any) -> list[str]:
    """Helper to get field names from a dataclass instance, skipping ClassVars."""
    return [f.name for f in fields(dc_instance)]


def load_config(path: Path = CONFIG_FILE) -> Settings:
    """Loads settings from a TOML file, merging them with defaults.

    A missing or unreadable file is not an error: the defaults are returned.

    Args:
        path: The path to the configuration file.

    Returns:
        A populated Settings object.
    """
    settings_obj = Settings()
    logger.debug(f"Loading configuration from '{path}'...")

    if not path.exists():
        logger.debug(f"Configuration file not found at '{path}'. Using defaults.")
        return settings_obj

    try:
        with path.open("rb") as f:
            user_config = tomllib.load(f)
        _update_dataclass(settings_obj, user_config)
        logger.debug("Successfully loaded user configuration.")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML from '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
    except OSError as e:
        logger.error(f"Could not read configuration file '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")

    return settings_obj
