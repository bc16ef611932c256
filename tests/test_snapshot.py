# Area: Round Tests
"""Tests for build_round_snapshot."""

from tx_battle._round.enums import ResolutionReason, RoundStatus
from tx_battle._round.snapshot import build_round_snapshot
from tx_battle._round.state import RoundState
from tx_battle.types import Block, PlayerStats, Prediction, RoundOutcome


BLOCK = Block(height=800000, tx_count=2500, size_bytes=1_500_000, timestamp=1_700_000_000, difficulty=5.0e13)
NEXT = Block(height=800001, tx_count=2600, size_bytes=1_520_000, timestamp=1_700_000_600, difficulty=5.0e13)


class TestBuildRoundSnapshot:
    """Tests for the snapshot dict."""

    def test_idle_state(self):
        snap = build_round_snapshot(RoundState(), PlayerStats())
        assert snap == {
            "status": "idle",
            "current_block": None,
            "next_block": None,
            "prediction": None,
            "time_remaining_seconds": 0,
            "outcome": None,
            "resolved_by": None,
            "stats": {"total_games": 0, "wins": 0, "score": 0, "streak": 0, "win_rate": 0.0},
        }

    def test_active_state(self):
        state = RoundState(status=RoundStatus.ACTIVE)
        state.begin(BLOCK, 600)
        state.prediction = Prediction(tx_count=2550)

        snap = build_round_snapshot(state, PlayerStats())

        assert snap["status"] == "active"
        assert snap["current_block"]["height"] == 800000
        assert snap["current_block"]["block_hash"] is None
        assert snap["prediction"]["tx_count"] == 2550
        assert snap["time_remaining_seconds"] == 600

    def test_resolved_state(self):
        state = RoundState(status=RoundStatus.RESOLVED)
        state.begin(BLOCK, 600)
        outcome = RoundOutcome(tx_count_hit=True, block_size_hit=None, difficulty_hit=None, points=100, correct=True)
        state.finish(NEXT, outcome, ResolutionReason.NEW_BLOCK)

        snap = build_round_snapshot(state, PlayerStats(total_games=3, wins=2, score=350, streak=1))

        assert snap["next_block"]["tx_count"] == 2600
        assert snap["outcome"]["points"] == 100
        assert snap["resolved_by"] == "new_block"
        assert snap["stats"]["win_rate"] == 0.6667

    def test_clear_resets_round_fields(self):
        state = RoundState(status=RoundStatus.RESOLVED)
        state.begin(BLOCK, 600)
        state.finish(NEXT, None, ResolutionReason.COUNTDOWN_EXPIRED)
        state.clear()
        state.status = RoundStatus.IDLE

        assert build_round_snapshot(state, PlayerStats()) == build_round_snapshot(RoundState(), PlayerStats())
