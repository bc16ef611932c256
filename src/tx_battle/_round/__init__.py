# Area: Round
"""
Round lifecycle and scoring.

This package contains:
- RoundEngine and its state machine
- Generation-tagged round timers
- Prediction validation and scoring
"""

from .engine import RoundEngine
from .enums import ResolutionReason, RoundEvent, RoundStatus
from .prediction_schema import parse_prediction
from .snapshot import build_round_snapshot
from .stats import StatsAccumulator

__all__ = [
    "RoundEngine",
    "RoundStatus",
    "RoundEvent",
    "ResolutionReason",
    "StatsAccumulator",
    "parse_prediction",
    "build_round_snapshot",
]
