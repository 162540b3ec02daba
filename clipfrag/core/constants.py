"""Core constants and paths for clipfrag.

Single source of truth for global paths and defaults. All modules should
import from here instead of hardcoding paths like `Path.home() / ".clipfrag"`.
"""

from pathlib import Path

CLIPFRAG_DIR_NAME = ".clipfrag"
CONFIG_FILE_NAME = "config.json"

# Budget used when neither the command line nor a config file sets one
DEFAULT_MAX_UNITS = 10_240


def get_clipfrag_dir() -> Path:
    """Get ~/.clipfrag (global config directory)."""
    return Path.home() / CLIPFRAG_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_clipfrag_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get the project-local config file path for a working directory."""
    return cwd / CLIPFRAG_DIR_NAME / CONFIG_FILE_NAME
