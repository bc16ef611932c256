# Area: Round
"""
tx_battle._round.state_machine — Round State Machine
====================================================

Tracks the status of the current round and validates transitions.
Invalid transitions raise InvalidStateError so callers see the
status that refused them.
"""

from ..errors import InvalidStateError
from .enums import RoundStatus, RoundEvent


# Valid state transitions: {current_status: {event: next_status}}
TRANSITIONS = {
    RoundStatus.IDLE: {
        RoundEvent.START: RoundStatus.ACTIVE,
    },
    RoundStatus.ACTIVE: {
        RoundEvent.RESOLVE: RoundStatus.RESOLVED,
        RoundEvent.RESET: RoundStatus.IDLE,
    },
    RoundStatus.RESOLVED: {
        RoundEvent.RESET: RoundStatus.IDLE,
    },
}


class RoundStateMachine:
    """
    State machine for the round lifecycle.

    Attributes:
        current_status: The current status of the round
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_status = RoundStatus.IDLE

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from the current status.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_status, {})

    def transition(self, event: RoundEvent, operation: str = "") -> RoundStatus:
        """
        Execute a status transition.

        Args:
            event: The event triggering the transition
            operation: Name of the public operation, used in the error

        Returns:
            The new status after transition

        Raises:
            InvalidStateError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidStateError(operation or event.value, self.current_status)

        self.current_status = TRANSITIONS[self.current_status][event]
        return self.current_status
