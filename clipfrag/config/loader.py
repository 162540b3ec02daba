"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.clipfrag/config.json)
2. Project local config (cwd/.clipfrag/config.json)

Missing layers are skipped. With no file at all the Pydantic defaults apply.
A layer that exists but cannot be read, is not JSON, or is not a JSON object
stops the run with ConfigError.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from clipfrag.config.schema import Config
from clipfrag.core.constants import get_default_config_path, get_local_config_path
from clipfrag.core.errors import ConfigError
from clipfrag.core.utils import deep_merge

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading
            and the file must exist.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file is unreadable or not a JSON object, or
            the merged config fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    global_config = get_default_config_path()
    local_config = get_local_config_path(effective_cwd)
    layers = [global_config]
    if local_config.resolve() != global_config.resolve():
        layers.append(local_config)

    for layer in layers:
        data = _read_layer(layer)
        if data:
            merged = deep_merge(merged, data)
            loaded_from.append(layer)

    if loaded_from:
        logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    else:
        logger.debug("No config files found, using Pydantic defaults")
        return Config()

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    data = _read_layer(path)
    if data is None:
        raise ConfigError(f"Config file not found: {path}")

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e


def _read_layer(path: Path) -> dict[str, Any] | None:
    """Parse one config file.

    Returns None when there is no file at `path` and an empty dict when the
    file is blank. A UTF-8 byte order mark is accepted.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or holds
            something other than a JSON object.
    """
    # Git Bash style home paths only pass is_file() once resolved
    resolved = path.resolve()
    if not resolved.is_file():
        logger.debug("Config file not found: %s (resolved: %s)", path, resolved)
        return None

    logger.debug("Loading config file: %s", resolved)
    try:
        content = resolved.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must hold a JSON object, got {type(data).__name__}"
        )
    return data
