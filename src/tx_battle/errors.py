"""
tx_battle.errors — Custom exception classes
============================================

Defines the exception hierarchy for the round engine and block feed.
Each exception stores its context so it can be logged as a framed block.

None of these are fatal: ``DataUnavailableError`` is retried on the next
timer tick, the other two are rejected before any state changes.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from .error_formatter import format_error_block


class TxBattleError(Exception):
    """Base exception for all tx_battle errors."""
    pass


class DataUnavailableError(TxBattleError):
    """Raised when a block fetch fails or returns unparsable data."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Block data unavailable for '{operation}': {reason}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="DATA_UNAVAILABLE",
            operation=self.operation,
            details={"reason": self.reason},
        )


class InvalidStateError(TxBattleError):
    """Raised when an operation is invoked from a state that forbids it."""

    def __init__(self, operation: str, status: Any):
        self.operation = operation
        self.status = getattr(status, "value", status)
        super().__init__(
            f"Operation '{operation}' is not allowed while round is {self.status}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_STATE",
            operation=self.operation,
            details={"status": self.status},
        )


class InvalidPredictionError(TxBattleError):
    """Raised when a prediction has no recognized field or a bad value."""

    def __init__(
        self,
        payload: Optional[Mapping[str, Any]],
        validation_errors: List[str],
    ):
        self.payload: Dict[str, Any] = dict(payload or {})
        self.validation_errors = validation_errors
        super().__init__(f"Invalid prediction: {validation_errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_PREDICTION",
            operation="submit_prediction",
            details={"payload": self.payload},
            validation_errors=self.validation_errors,
        )
