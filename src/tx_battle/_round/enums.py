# Area: Round
"""
tx_battle._round.enums — Round State Machine Enums
==================================================

Defines the statuses and events of a single prediction round.
"""

from enum import Enum


class RoundStatus(Enum):
    """
    Status of the current round.

    State transitions:
    IDLE -> ACTIVE (on START)
    ACTIVE -> RESOLVED (on RESOLVE)
    ACTIVE -> IDLE (on RESET, round abandoned)
    RESOLVED -> IDLE (on RESET)
    """
    IDLE = "idle"
    ACTIVE = "active"
    RESOLVED = "resolved"


class RoundEvent(Enum):
    """
    Events that trigger round transitions.

    Events are triggered by:
    - START: start_round() fetched the current block
    - RESOLVE: poll saw a new block, the countdown expired, or resolve() was called
    - RESET: reset_round()
    """
    START = "START"
    RESOLVE = "RESOLVE"
    RESET = "RESET"


class ResolutionReason(Enum):
    """Why a round was resolved."""
    NEW_BLOCK = "new_block"
    COUNTDOWN_EXPIRED = "countdown_expired"
    MANUAL = "manual"
