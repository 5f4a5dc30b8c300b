"""Configuration loader and validator for symlayer.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/symlayer/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.

Configuration is read-only; settings are never written back.
"""

from __future__ import annotations

import json
import logging
import os
import re

logger = logging.getLogger(__name__)

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'lock_threshold_ms': 250,
    'next_threshold_ms': 350,
    'simple_lock_threshold_ms': 350,
    'long_press_threshold_ms': 500,
    'debug': False,
}

THRESHOLD_KEYS = (
    'lock_threshold_ms',
    'next_threshold_ms',
    'simple_lock_threshold_ms',
    'long_press_threshold_ms',
)
THRESHOLD_MIN_MS = 10
THRESHOLD_MAX_MS = 5000

USER_CONFIG_PATH = '~/.config/symlayer/config.json'


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    defaults = dict(DEFAULT_CONFIG)
    out = dict(defaults)

    # thresholds — int milliseconds in [THRESHOLD_MIN_MS, THRESHOLD_MAX_MS]
    for key in THRESHOLD_KEYS:
        raw = conf.get(key, defaults[key])
        if isinstance(raw, bool):
            raise ValueError(f"Invalid '{key}': {raw}")
        try:
            val = int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid '{key}': {raw}")
        if val != raw and not isinstance(raw, str):
            raise ValueError(f"Invalid '{key}': {raw} (must be a whole number of ms)")
        if not (THRESHOLD_MIN_MS <= val <= THRESHOLD_MAX_MS):
            raise ValueError(
                f"Invalid '{key}': {raw} (must be between {THRESHOLD_MIN_MS} and {THRESHOLD_MAX_MS})"
            )
        out[key] = val

    # debug — boolean
    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        if debug:
            logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            if debug:
                logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        if debug:
            logger.warning("Invalid config %s: top level must be an object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/symlayer/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)

    if config_path is not None:
        # Explicit path — use only it, no fallback
        if os.path.exists(config_path):
            _read_and_merge(config_path, config, debug=debug)
        return config

    user_cfg = os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(user_cfg):
        _read_and_merge(user_cfg, config, debug=debug)

    return config
