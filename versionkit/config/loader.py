"""
Configuration loading and merging for versionkit.

Configuration is a small YAML document layered on top of built-in defaults.
The loader performs deep merging with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Config File Discovery
---------------------
1. An explicit ``config_path`` always wins and must exist.
2. Otherwise the loader walks upward from ``start_dir`` (default: the
   current working directory) looking for ``versionkit.yaml``.
3. If nothing is found, the built-in defaults are returned as-is.

Defaults
--------
    policy:
      strategy: newer          # newer | compatible
      allow_prerelease: false
      relaxed: true

Functions
---------
load_effective_config : function
    Load and merge configuration (main public API).
policy_from_config : function
    Build an UpdatePolicy from a merged configuration dict.

Error Handling
--------------
- ConfigError: missing explicit file, YAML parse errors, empty files,
  non-mapping top level, invalid policy values
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from versionkit.config import load_effective_config, policy_from_config
    >>> cfg = load_effective_config()
    >>> policy_from_config(cfg).strategy
    'newer'
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from versionkit.exceptions import ConfigError
from versionkit.logging import Logger, get_global_logger
from versionkit.policy import STRATEGIES, UpdatePolicy

CONFIG_FILENAME = "versionkit.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "policy": {
        "strategy": "newer",
        "allow_prerelease": False,
        "relaxed": True,
    },
}

# -------------------------------
# YAML helpers
# -------------------------------


def load_yaml_file(p: Path, *, loader: type = yaml.SafeLoader) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    'loader' selects the PyYAML loader class (safe loading by default).

    Raises:
      ConfigError - when the file does not exist, is not valid YAML or is empty
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=loader)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Config discovery
# -------------------------------


def _find_config_file(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for 'versionkit.yaml'.
    Returns the file path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(
    config_path: Path | None = None,
    *,
    start_dir: Path | None = None,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """
    Load and merge the effective configuration.

    Steps
      1) Start from a copy of DEFAULT_CONFIG.
      2) Use 'config_path' if given, else search upward from 'start_dir'.
      3) Read the YAML file (must be a mapping).
      4) Merge: defaults -> file (dicts deep-merge, lists replace).

    Returns
      A merged configuration dict. Without a config file this equals the
      defaults.

    Raises
      ConfigError on a missing explicit file, YAML parse errors, empty
      files or a non-mapping top level.
    """
    logger = logger or get_global_logger()

    merged = copy.deepcopy(DEFAULT_CONFIG)

    if config_path is None:
        search_from = (start_dir or Path.cwd()).resolve()
        config_path = _find_config_file(search_from)
        if config_path is None:
            logger.verbose("CONFIG", "No config file found; using built-in defaults")
            return merged

    config_path = Path(config_path).resolve()
    logger.verbose("CONFIG", f"Loading: {config_path}")

    data = load_yaml_file(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {config_path}")

    merged = _deep_merge_dicts(merged, data)
    logger.debug("CONFIG", f"Effective config: {merged}")
    return merged


def policy_from_config(cfg: dict[str, Any]) -> UpdatePolicy:
    """
    Build an UpdatePolicy from the 'policy' section of a merged config.

    Raises
      ConfigError if the section is not a mapping, the strategy is unknown
      or a flag is not a boolean.
    """
    section = cfg.get("policy", {})
    if not isinstance(section, dict):
        raise ConfigError("'policy' must be a mapping")

    strategy = section.get("strategy", "newer")
    if strategy not in STRATEGIES:
        raise ConfigError(
            f"unknown policy strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}"
        )

    flags: dict[str, bool] = {}
    for key in ("allow_prerelease", "relaxed"):
        value = section.get(key, DEFAULT_CONFIG["policy"][key])
        if not isinstance(value, bool):
            raise ConfigError(f"policy.{key} must be true or false, got {value!r}")
        flags[key] = value

    return UpdatePolicy(strategy=strategy, **flags)
