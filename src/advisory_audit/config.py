# advisory_audit/config.py

"""
Settings loading from a JSON file and environment variables.

Precedence, lowest to highest: defaults, settings file, environment.
The settings file uses the same keys as the "settings" section of a report.

Environment Variables:
  ADVISORY_AUDIT_CONFIG                 : Path to a JSON settings file
  ADVISORY_AUDIT_TARGET_ARCH            : Target CPU architecture
  ADVISORY_AUDIT_TARGET_OS              : Target operating system
  ADVISORY_AUDIT_SEVERITY               : Minimum severity to report
  ADVISORY_AUDIT_IGNORE                 : Comma-separated advisory IDs to ignore
  ADVISORY_AUDIT_INFORMATIONAL_WARNINGS : Comma-separated informational categories
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import ConfigurationError
from .report.settings import Settings

logger = logging.getLogger("advisory-audit")

CONFIG_ENV = "ADVISORY_AUDIT_CONFIG"
ENV_PREFIX = "ADVISORY_AUDIT_"

_SCALAR_KEYS = ("target_arch", "target_os", "severity")
_LIST_KEYS = ("ignore", "informational_warnings")


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise ConfigurationError(f"Settings file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Settings file is not valid JSON: {path}",
            details={"error": str(e)},
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file must contain a JSON object: {path}")

    unknown = set(data) - set(_SCALAR_KEYS) - set(_LIST_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown settings in {path}: {', '.join(sorted(unknown))}")
    return {k: v for k, v in data.items() if k in _SCALAR_KEYS or k in _LIST_KEYS}


def _load_env(env: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key in _SCALAR_KEYS:
        raw = env.get(ENV_PREFIX + key.upper())
        if raw is not None and raw.strip():
            values[key] = raw.strip()
    for key in _LIST_KEYS:
        raw = env.get(ENV_PREFIX + key.upper())
        if raw is not None:
            values[key] = _split_list(raw)
    return values


def load_settings(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Compose report settings from a settings file and the environment.

    Args:
        path: Explicit settings file; falls back to ADVISORY_AUDIT_CONFIG
        env: Environment mapping, defaults to os.environ

    Returns:
        Settings: The validated settings

    Raises:
        ConfigurationError: If the settings file is missing or unreadable
        ValidationError: If a severity or category value is invalid
    """
    env = os.environ if env is None else env
    values: Dict[str, Any] = {}

    file_path = path or env.get(CONFIG_ENV)
    if file_path:
        logger.debug(f"Loading settings from {file_path}")
        values.update(_load_file(file_path))

    values.update(_load_env(env))
    return Settings.from_dict(values)
