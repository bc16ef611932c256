"""
tx_battle.types — Records shared by the engine, feed and presentation
=====================================================================

All block and outcome records are frozen dataclasses. They are produced
by the block feed or the scoring code and are never mutated afterwards.

    >>> Prediction(tx_count=2000).fields()
    ['tx_count']
"""

from __future__ import annotations
import math
from dataclasses import dataclass, fields as dataclass_fields
from typing import List, Optional

from .errors import InvalidPredictionError


# ============================================
# Blocks
# ============================================

@dataclass(frozen=True)
class Block:
    """Snapshot of a mined block.

    Fields
    ------
    height : int
        Block height, e.g. 800000.
    tx_count : int
        Number of transactions in the block.
    size_bytes : int
        Serialized block size in bytes.
    timestamp : int
        Block header time (Unix seconds).
    difficulty : float
        Network difficulty at this block.
    """
    height: int
    tx_count: int
    size_bytes: int
    timestamp: int
    difficulty: float
    block_hash: Optional[str] = None
    weight: Optional[int] = None
    previous_block_hash: Optional[str] = None


@dataclass(frozen=True)
class TransactionSummary:
    """One transaction of a block, trimmed for display."""
    txid: str
    size: int
    weight: int
    fee: int
    input_count: int
    output_count: int
    total_output_sats: int
    confirmed: bool


@dataclass(frozen=True)
class NetworkStats:
    """Headline numbers about the chain tip."""
    total_transactions: int
    current_block: int
    next_block_eta: int
    average_block_time: int


# ============================================
# Predictions and outcomes
# ============================================

def _field_problem(name: str, value) -> Optional[str]:
    """Why ``value`` is not a usable prediction field, or None if it is."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{name} must be a number, got {value!r}"
    if not math.isfinite(value):
        return f"{name} must be finite, got {value!r}"
    if value <= 0:
        return f"{name} must be positive, got {value!r}"
    return None


@dataclass(frozen=True)
class Prediction:
    """A player's forecast for the next block.

    Every field is optional; a present field must be a finite positive
    number. A prediction with no field set is *empty* and the engine
    refuses it.
    """
    tx_count: Optional[int] = None
    block_size: Optional[int] = None
    difficulty: Optional[float] = None

    def __post_init__(self):
        problems = (_field_problem(f.name, getattr(self, f.name)) for f in dataclass_fields(self))
        errors = [p for p in problems if p]
        if errors:
            raise InvalidPredictionError(self.as_dict(), errors)

    def fields(self) -> List[str]:
        """Names of the fields that were predicted."""
        return [f.name for f in dataclass_fields(self) if getattr(self, f.name) is not None]

    def is_empty(self) -> bool:
        return not self.fields()

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self)}


@dataclass(frozen=True)
class RoundOutcome:
    """Result of scoring a prediction against the block actually mined.

    A ``*_hit`` field is None when that attribute was not predicted.
    """
    tx_count_hit: Optional[bool]
    block_size_hit: Optional[bool]
    difficulty_hit: Optional[bool]
    points: int
    correct: bool


@dataclass
class PlayerStats:
    """Cumulative counters across resolved rounds that had a prediction."""
    total_games: int = 0
    wins: int = 0
    score: int = 0
    streak: int = 0

    @property
    def win_rate(self) -> float:
        if not self.total_games:
            return 0.0
        return self.wins / self.total_games
