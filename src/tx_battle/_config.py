# Area: Shared
"""
tx_battle._config — Runner Configuration
========================================

Defaults and validation for the config dict shared by the runner,
the engine and the block feed.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("tx_battle.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "api_base_url": "https://blockstream.info/api",
    "request_timeout_seconds": 10,
    "cache_freshness_seconds": 30,
    # Bitcoin's average inter-block time
    "round_seconds": 600,
    "tick_interval_seconds": 1,
    "poll_interval_seconds": 30,
    "log_file": "tx_battle.log",
    "demo_mode": False,
    "demo_block_interval_seconds": 45,
}

POSITIVE_NUMBER_KEYS = [
    "request_timeout_seconds",
    "cache_freshness_seconds",
    "round_seconds",
    "tick_interval_seconds",
    "poll_interval_seconds",
    "demo_block_interval_seconds",
]

INTEGER_KEYS = {"round_seconds"}


def build_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge overrides over the defaults and validate the result.

    Keys whose override is None keep their default.

    Raises:
        ValueError: If a value is invalid
    """
    config = dict(DEFAULT_CONFIG)
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    validate_config(config)
    changed = sorted(k for k in config if config[k] != DEFAULT_CONFIG.get(k))
    if changed:
        logger.debug("Config overrides: %s", changed)
    return config


def validate_config(config: dict) -> None:
    """
    Validate numeric configuration values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If a value is missing, not a number, or not positive
    """
    errors = []
    for key in POSITIVE_NUMBER_KEYS:
        value = config.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{key} must be a number, got {value!r}")
        elif value <= 0:
            errors.append(f"{key} must be positive, got {value!r}")
        elif key in INTEGER_KEYS and int(value) != value:
            errors.append(f"{key} must be a whole number, got {value!r}")
    if not str(config.get("api_base_url", "")).startswith(("http://", "https://")):
        errors.append(f"api_base_url must be an http(s) URL, got {config.get('api_base_url')!r}")
    if errors:
        raise ValueError(f"Invalid config: {errors}")
