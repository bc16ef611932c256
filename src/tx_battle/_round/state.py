# Area: Round
"""
tx_battle._round.state — Round state tracker
=============================================

Mutable state of the round in progress. Only RoundEngine writes to it;
everybody else reads snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..types import Block, Prediction, RoundOutcome
from .enums import RoundStatus, ResolutionReason


@dataclass
class RoundState:
    """Full state of one round, from start to resolution."""
    status: RoundStatus = RoundStatus.IDLE
    current_block: Optional[Block] = None
    next_block: Optional[Block] = None
    prediction: Optional[Prediction] = None
    time_remaining_seconds: int = 0
    outcome: Optional[RoundOutcome] = None
    resolved_by: Optional[ResolutionReason] = None

    def begin(self, block: Block, round_seconds: int) -> None:
        self.current_block = block
        self.next_block = None
        self.prediction = None
        self.outcome = None
        self.resolved_by = None
        self.time_remaining_seconds = round_seconds

    def finish(
        self,
        actual: Block,
        outcome: Optional[RoundOutcome],
        reason: ResolutionReason,
    ) -> None:
        self.next_block = actual
        self.outcome = outcome
        self.resolved_by = reason

    def clear(self) -> None:
        """Discard everything about the round; stats live elsewhere."""
        self.current_block = None
        self.next_block = None
        self.prediction = None
        self.outcome = None
        self.resolved_by = None
        self.time_remaining_seconds = 0
