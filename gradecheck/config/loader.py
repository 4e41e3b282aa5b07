"""Configuration loading with YAML parsing and environment variable expansion."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from gradecheck.config.schema import GradesConfig

logger = logging.getLogger(__name__)

# config.json is accepted as-is: JSON documents are valid YAML
DEFAULT_CONFIG_PATHS = [
    Path("config.yaml"),
    Path("config.json"),
    Path("~/.gradecheck/config.yaml"),
]

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${ENV_VAR} references in config values."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), ""), value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _find_config_file(explicit_path: str | Path | None = None) -> Path | None:
    """Find the config file to load."""
    if explicit_path is not None:
        path = Path(explicit_path).expanduser()
        if path.exists():
            return path
        logger.warning("Config file not found: %s", path)
        return None

    for candidate in DEFAULT_CONFIG_PATHS:
        resolved = candidate.expanduser()
        if resolved.exists():
            logger.info("Using config: %s", resolved)
            return resolved

    return None


def load_config(path: str | Path | None = None) -> GradesConfig:
    """Load and validate configuration.

    Resolution order:
    1. Explicit path argument
    2. config.yaml, then config.json, in current directory
    3. ~/.gradecheck/config.yaml
    4. All defaults (no file needed)

    Environment variables are expanded in string values: ${VAR_NAME}
    """
    config_path = _find_config_file(path)

    if config_path is not None:
        logger.info("Loading config from %s", config_path)
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        raw = _expand_env_vars(raw)
    else:
        logger.info("No config file found, using defaults")
        raw = {}

    config = GradesConfig.model_validate(raw)
    logger.debug(
        "Config loaded: %d scale tier(s), grading_term=%r",
        len(config.scale),
        config.grading_term,
    )
    return config
