"""Runtime configuration for componentgraph - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from componentgraph.analysis.config import IGNORED_PARAMETERS, LOCAL_IMPORT_PREFIXES
from componentgraph.utils.constants import CONFIG_FILE_NAME, ENV_PREFIX, STATE_DIR_NAME
from componentgraph.utils.logging import logger

DEFAULTS = {
    "sources": {
        "extensions": [".js", ".jsx", ".ts", ".tsx"],
        "ignore_dirs": [
            "node_modules",
            "test",
            "tests",
            "__tests__",
            "dist",
            "build",
            ".next",
            ".git",
            "public",
            "assets",
        ],
        "max_files": 200,
        "max_depth": 10,
    },
    "analysis": {
        "local_prefixes": list(LOCAL_IMPORT_PREFIXES),
        "ignored_parameters": sorted(IGNORED_PARAMETERS),
    },
    "output": {
        "indent": 2,
    },
}


def config_path(root: str | Path = ".") -> Path:
    return Path(root) / STATE_DIR_NAME / CONFIG_FILE_NAME


def _coerce_env(value: str, default_value: Any) -> Any:
    if isinstance(default_value, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default_value, int):
        return int(value)
    if isinstance(default_value, float):
        return float(value)
    if isinstance(default_value, list):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .cgraph/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (COMPONENTGRAPH_<SECTION>_<KEY>)
    2. <root>/.cgraph/config.json
    3. Built-in defaults

    Values whose type does not match the default are ignored.

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = config_path(root)
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section, values in cfg.items():
                    overrides = user.get(section)
                    if not isinstance(overrides, dict):
                        continue
                    for key, value in overrides.items():
                        if key in values and isinstance(value, type(values[key])):
                            values[key] = value
                        else:
                            logger.warning(f"Ignoring config key {section}.{key} in {path}")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section, values in cfg.items():
        for key, default_value in values.items():
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var not in os.environ:
                continue
            try:
                values[key] = _coerce_env(os.environ[env_var], default_value)
            except ValueError:
                logger.warning(f"Invalid value for {env_var}, using {default_value!r}")

    return cfg
