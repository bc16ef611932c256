# Area: Round
"""
tx_battle._round.snapshot — Round state snapshot builder
========================================================

Builds the plain-dict view of the round and the player's stats that
presentation code reads after every transition.
"""

from dataclasses import asdict
from typing import Optional

from ..types import Block, PlayerStats
from .state import RoundState


def build_round_snapshot(state: RoundState, stats: PlayerStats) -> dict:
    """Build a serializable snapshot of the round and stats."""
    return {
        "status": state.status.value,
        "current_block": _block_snapshot(state.current_block),
        "next_block": _block_snapshot(state.next_block),
        "prediction": state.prediction.as_dict() if state.prediction else None,
        "time_remaining_seconds": state.time_remaining_seconds,
        "outcome": asdict(state.outcome) if state.outcome else None,
        "resolved_by": state.resolved_by.value if state.resolved_by else None,
        "stats": _stats_snapshot(stats),
    }


def _block_snapshot(block: Optional[Block]) -> Optional[dict]:
    if block is None:
        return None
    return asdict(block)


def _stats_snapshot(stats: PlayerStats) -> dict:
    return {
        "total_games": stats.total_games,
        "wins": stats.wins,
        "score": stats.score,
        "streak": stats.streak,
        "win_rate": round(stats.win_rate, 4),
    }
