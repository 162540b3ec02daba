"""Configuration loading and validation."""

from clipfrag.config.loader import load_config
from clipfrag.config.schema import Config, MessagesConfig

__all__ = [
    "Config",
    "MessagesConfig",
    "load_config",
]
