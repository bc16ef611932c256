# Area: Shared
"""
tx_battle._shared.logging_formatters — Logging formatters and filters
=====================================================================

Formatters for the two handlers installed by ``setup_logging`` and the
display-mode switch that silences the terminal handler while the runner
prints its own round lines.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Round context passed through ``extra=`` and copied into the JSON lines
CONTEXT_FIELDS = ("error_type", "operation", "block_height", "generation")

PACKAGE_PREFIX = "tx_battle."

_display_mode_enabled = False


class DisplayFilter(logging.Filter):
    """Drops terminal records while display mode is on."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _display_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colours the level name and shortens ``tx_battle.<area>`` logger names."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy; the file handler formats the same record
        shown = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(shown.levelname, self.RESET)
        shown.levelname = color + shown.levelname + self.RESET
        if shown.name.startswith(PACKAGE_PREFIX):
            shown.name = shown.name[len(PACKAGE_PREFIX):]
        return super().format(shown)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with any round context attached."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def enable_display_mode() -> None:
    """Hide standard log lines on the terminal.

    The runner's RoundLogger lines are printed directly and stay visible;
    the JSON log file keeps receiving every record.
    """
    global _display_mode_enabled
    _display_mode_enabled = True


def disable_display_mode() -> None:
    global _display_mode_enabled
    _display_mode_enabled = False


def is_display_mode_enabled() -> bool:
    return _display_mode_enabled
