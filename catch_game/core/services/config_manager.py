"""
config_manager.py
-----------------
Universal configuration loader for game config.

Features:
- Supports .json and .yaml config files
- Resolves bare filenames against the packaged config directory
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

import yaml

from catch_game.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

YAML_EXTENSIONS = (".yaml", ".yml")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename relative to the config directory, or a full path
        default_dict: Default fallback config
        strict: If True, raise exception on missing or malformed file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_path(filename)

    try:
        if path.endswith(YAML_EXTENSIONS):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"top-level value must be a mapping, got {type(data).__name__}")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not usable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_path(filename):
    """Absolute paths pass through, others resolve under DATA_ROOT."""
    if os.path.isabs(filename):
        return filename
    return os.path.join(DATA_ROOT, filename.replace("\\", "/").lstrip("/"))


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file yields an empty mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
