# Area: Round
"""
tx_battle._round.stats — Prediction scoring and player stats
============================================================

Scores a prediction against the block actually mined and keeps the
player's cumulative score, wins and streak. Stats are a pure function of
the recorded outcomes: replaying ``history`` through ``from_history``
rebuilds the same numbers.

Scoring table (tolerances are inclusive):

    field        tolerance                 reward
    tx_count     ±50 transactions          100
    block_size   ±50,000 bytes             150
    difficulty   ±10% of actual            200
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from ..types import Block, PlayerStats, Prediction, RoundOutcome

logger = logging.getLogger("tx_battle.round.stats")

TX_COUNT_TOLERANCE = 50
TX_COUNT_REWARD = 100
BLOCK_SIZE_TOLERANCE = 50_000
BLOCK_SIZE_REWARD = 150
DIFFICULTY_TOLERANCE_RATIO = 0.10
DIFFICULTY_REWARD = 200


def _within(actual: float, predicted: float, tolerance: float) -> bool:
    return abs(actual - predicted) <= tolerance


class StatsAccumulator:
    """Owns PlayerStats; updated only through ``record_outcome``."""

    def __init__(self) -> None:
        self._stats = PlayerStats()
        self._history: List[RoundOutcome] = []

    @classmethod
    def from_history(cls, outcomes: Iterable[RoundOutcome]) -> "StatsAccumulator":
        """Rebuild an accumulator by replaying recorded outcomes."""
        accumulator = cls()
        for outcome in outcomes:
            accumulator.record_outcome(outcome)
        return accumulator

    @property
    def stats(self) -> PlayerStats:
        """A copy of the current stats."""
        return replace(self._stats)

    @property
    def history(self) -> List[RoundOutcome]:
        return list(self._history)

    @staticmethod
    def score(prediction: Prediction, actual: Block) -> RoundOutcome:
        """
        Compare a prediction with the mined block.

        Only predicted fields are evaluated. ``correct`` is True iff every
        evaluated field is a hit.
        """
        points = 0
        tx_hit: Optional[bool] = None
        size_hit: Optional[bool] = None
        difficulty_hit: Optional[bool] = None

        if prediction.tx_count is not None:
            tx_hit = _within(actual.tx_count, prediction.tx_count, TX_COUNT_TOLERANCE)
            if tx_hit:
                points += TX_COUNT_REWARD

        if prediction.block_size is not None:
            size_hit = _within(actual.size_bytes, prediction.block_size, BLOCK_SIZE_TOLERANCE)
            if size_hit:
                points += BLOCK_SIZE_REWARD

        if prediction.difficulty is not None:
            tolerance = actual.difficulty * DIFFICULTY_TOLERANCE_RATIO
            difficulty_hit = _within(actual.difficulty, prediction.difficulty, tolerance)
            if difficulty_hit:
                points += DIFFICULTY_REWARD

        evaluated = [hit for hit in (tx_hit, size_hit, difficulty_hit) if hit is not None]
        return RoundOutcome(
            tx_count_hit=tx_hit,
            block_size_hit=size_hit,
            difficulty_hit=difficulty_hit,
            points=points,
            correct=bool(evaluated) and all(evaluated),
        )

    def record_outcome(self, outcome: RoundOutcome, had_prediction: bool = True) -> None:
        """
        Fold one resolved round into the stats.

        Rounds without a prediction leave the stats untouched. Points are
        added even when the outcome is not fully correct.
        """
        if not had_prediction:
            return

        self._stats.total_games += 1
        if outcome.correct:
            self._stats.wins += 1
            self._stats.streak += 1
        else:
            self._stats.streak = 0
        self._stats.score += outcome.points
        self._history.append(outcome)

        logger.info(
            "Outcome recorded: +%d points, correct=%s (score=%d, streak=%d)",
            outcome.points, outcome.correct, self._stats.score, self._stats.streak,
        )
