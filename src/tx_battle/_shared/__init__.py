# Area: Shared
"""
Shared utilities used by the runner and CLI.

This package contains:
- Logging configuration
- Round display lines for the terminal
"""

from .logging_config import setup_logging, log_battle_error
from .logging_formatters import (
    enable_display_mode,
    disable_display_mode,
    is_display_mode_enabled,
)
from .round_logger import RoundLogger

__all__ = [
    "setup_logging",
    "log_battle_error",
    "enable_display_mode",
    "disable_display_mode",
    "is_display_mode_enabled",
    "RoundLogger",
]
