# Area: Shared
"""
tx_battle._shared.logging_config — Logger setup for the runner
==============================================================

Everything the package logs goes through the ``tx_battle`` logger, which
gets two handlers: coloured lines on stdout and JSON lines in the log
file. Engine errors are additionally printed as framed blocks on stderr.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .logging_formatters import DisplayFilter, JSONFormatter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import TxBattleError

PACKAGE_LOGGER = "tx_battle"
TERMINAL_FORMAT = "%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s"
TERMINAL_DATEFMT = "%H:%M:%S"

logger = logging.getLogger(PACKAGE_LOGGER)


def _terminal_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(fmt=TERMINAL_FORMAT, datefmt=TERMINAL_DATEFMT))
    handler.addFilter(DisplayFilter())
    return handler


def _file_handler(log_file_path: str, level: int) -> Optional[logging.Handler]:
    """JSON-lines handler, or None if the file cannot be opened."""
    path = Path(log_file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        logger.warning("Log file %s unavailable, logging to terminal only: %s", path, exc)
        return None
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: str = "tx_battle.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure the ``tx_battle`` logger.

    Calling it again replaces the handlers, so a runner can be rebuilt
    with another log file.

    Parameters
    ----------
    log_file_path : str
        JSON-lines log file, created with its parent directories.
    level : int
        Level for the logger and both handlers.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()
    pkg_logger.propagate = False

    pkg_logger.addHandler(_terminal_handler(level))
    file_handler = _file_handler(log_file_path, level)
    if file_handler is not None:
        pkg_logger.addHandler(file_handler)


def log_battle_error(error: "TxBattleError") -> None:
    """
    Report an engine error: framed block on stderr, one record in the log.

    The record carries ``error_type`` and, where the error has one,
    ``operation`` so the JSON line can be filtered on them.
    """
    # stderr gets the block as-is; display mode only hides the log handler
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        "%s: %s", error.__class__.__name__, error,
        extra={
            "error_type": error.__class__.__name__,
            "operation": getattr(error, "operation", None),
        },
    )
