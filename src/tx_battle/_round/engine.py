# Area: Round
"""
tx_battle._round.engine — Round lifecycle and scoring
=====================================================

RoundEngine owns one round at a time:

    start_round()  IDLE -> ACTIVE     fetch tip block, start countdown + poll
    submit_prediction()               ACTIVE only, last write wins
    pump()                            fire due timers (poll before tick)
    resolve()      ACTIVE -> RESOLVED score, record stats, stop timers
    reset_round()  ACTIVE|RESOLVED -> IDLE

Every start, resolve and reset bumps the round generation. Timer
callbacks carry the generation they were scheduled for and do nothing
once it is stale, so a superseded round can never resolve twice.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .._blocks.feed import BlockFeed
from .._config import DEFAULT_CONFIG
from ..errors import DataUnavailableError, InvalidPredictionError, InvalidStateError
from ..types import Block, Prediction, RoundOutcome
from .enums import ResolutionReason, RoundEvent, RoundStatus
from .prediction_schema import EMPTY_PREDICTION_ERROR, parse_prediction
from .snapshot import build_round_snapshot
from .state import RoundState
from .state_machine import RoundStateMachine
from .stats import StatsAccumulator
from .timers import RoundTimers

logger = logging.getLogger("tx_battle.round.engine")

POLL_TIMER = "block_poll"
TICK_TIMER = "countdown"

Listener = Callable[[dict], None]


class RoundEngine:
    """
    Round state machine driven by two timers per round.

    The countdown decrements ``time_remaining_seconds`` once per tick
    interval and forces resolution at zero. The poll checks the chain tip
    and resolves as soon as a block above the round's block appears.
    """

    def __init__(
        self,
        feed: BlockFeed,
        config: Optional[Dict[str, Any]] = None,
        stats: Optional[StatsAccumulator] = None,
    ):
        config = config or {}
        self.feed = feed
        self.stats = stats or StatsAccumulator()
        self.round_seconds = int(config.get("round_seconds", DEFAULT_CONFIG["round_seconds"]))
        self.tick_interval = config.get("tick_interval_seconds", DEFAULT_CONFIG["tick_interval_seconds"])
        self.poll_interval = config.get("poll_interval_seconds", DEFAULT_CONFIG["poll_interval_seconds"])

        self.state = RoundState()
        self.state_machine = RoundStateMachine()
        self.timers = RoundTimers()
        self._generation = 0
        self._listeners: List[Listener] = []

    # ── Read access ──────────────────────────────────────────

    @property
    def status(self) -> RoundStatus:
        return self.state.status

    @property
    def generation(self) -> int:
        return self._generation

    def snapshot(self) -> dict:
        return build_round_snapshot(self.state, self.stats.stats)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(snapshot)`` after every transition and tick."""
        self._listeners.append(listener)

    # ── Player operations ────────────────────────────────────

    def start_round(self) -> Block:
        """
        Start a round on the current tip block.

        Raises:
            InvalidStateError: If a round is active or awaiting reset
            DataUnavailableError: If the tip block cannot be fetched;
                the engine stays IDLE
        """
        if not self.state_machine.can_transition(RoundEvent.START):
            raise InvalidStateError("start_round", self.state.status)

        block = self.feed.latest_block()

        self._transition(RoundEvent.START, "start_round")
        self._generation += 1
        generation = self._generation
        self.state.begin(block, self.round_seconds)
        logger.info(
            "Round %d started on block %d", generation, block.height,
            extra={"block_height": block.height, "generation": generation},
        )

        self.timers.schedule(
            POLL_TIMER, generation, self.poll_interval,
            lambda: self._on_poll(generation), priority=0,
        )
        self.timers.schedule(
            TICK_TIMER, generation, self.tick_interval,
            lambda: self._on_tick(generation), priority=1, catch_up=True,
        )
        self._notify()
        return block

    def submit_prediction(
        self, prediction: Union[Prediction, Mapping[str, Any]]
    ) -> Prediction:
        """
        Store the player's prediction for this round, replacing any earlier one.

        Raises:
            InvalidStateError: If no round is active
            InvalidPredictionError: If no recognized field is set
        """
        if self.state.status is not RoundStatus.ACTIVE:
            raise InvalidStateError("submit_prediction", self.state.status)

        if not isinstance(prediction, Prediction):
            prediction = parse_prediction(prediction)
        elif prediction.is_empty():
            raise InvalidPredictionError(prediction.as_dict(), [EMPTY_PREDICTION_ERROR])

        if self.state.prediction is not None:
            logger.info("Prediction replaced: %s", prediction.as_dict())
        else:
            logger.info("Prediction submitted: %s", prediction.as_dict())
        self.state.prediction = prediction
        self._notify()
        return prediction

    def resolve(
        self, actual: Block, reason: ResolutionReason = ResolutionReason.MANUAL
    ) -> Optional[RoundOutcome]:
        """
        Resolve the active round against ``actual``.

        Returns:
            The outcome, or None if no prediction was made

        Raises:
            InvalidStateError: If no round is active
        """
        if self.state.status is not RoundStatus.ACTIVE:
            raise InvalidStateError("resolve", self.state.status)
        return self._resolve(actual, reason)

    def reset_round(self) -> None:
        """
        Return to IDLE. From ACTIVE this abandons the round; stats are untouched.

        Raises:
            InvalidStateError: If already IDLE
        """
        if not self.state_machine.can_transition(RoundEvent.RESET):
            raise InvalidStateError("reset_round", self.state.status)

        if self.state.status is RoundStatus.ACTIVE:
            logger.info("Round abandoned on block %d", self.state.current_block.height)
        self._invalidate_round()
        self._transition(RoundEvent.RESET, "reset_round")
        self.state.clear()
        self._notify()

    def pump(self) -> int:
        """Fire due timers of the current round. Returns callbacks fired."""
        return self.timers.run_due(self._generation)

    # ── Timer callbacks ──────────────────────────────────────

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation or self.state.status is not RoundStatus.ACTIVE:
            return

        if self.state.time_remaining_seconds > 0:
            self.state.time_remaining_seconds -= 1
            self._notify()

        if self.state.time_remaining_seconds == 0:
            self._expire(generation)

    def _expire(self, generation: int) -> None:
        """Force resolution: next block if one appeared, else the round's own tip."""
        current = self.state.current_block
        try:
            height = self.feed.latest_height()
            if height > current.height:
                actual = self.feed.block_at(current.height + 1)
            else:
                actual = current
        except DataUnavailableError:
            logger.warning("Countdown expired without block data, retrying next tick")
            return

        if generation != self._generation:
            return
        if actual is current:
            logger.info("No new block after %ds, resolving against tip %d",
                        self.round_seconds, current.height)
        self._resolve(actual, ResolutionReason.COUNTDOWN_EXPIRED)

    def _on_poll(self, generation: int) -> None:
        if generation != self._generation or self.state.status is not RoundStatus.ACTIVE:
            return

        current = self.state.current_block
        try:
            height = self.feed.latest_height()
            if height <= current.height:
                logger.debug("Poll: tip still %d", height)
                return
            actual = self.feed.block_at(current.height + 1)
        except DataUnavailableError:
            return

        if generation != self._generation:
            logger.debug("Discarding poll result for superseded round %d", generation)
            return
        self._resolve(actual, ResolutionReason.NEW_BLOCK)

    # ── Internals ────────────────────────────────────────────

    def _resolve(self, actual: Block, reason: ResolutionReason) -> Optional[RoundOutcome]:
        self._transition(RoundEvent.RESOLVE, "resolve")
        generation = self._generation
        self._invalidate_round()

        outcome = None
        if self.state.prediction is not None:
            outcome = self.stats.score(self.state.prediction, actual)
            self.stats.record_outcome(outcome, had_prediction=True)

        self.state.finish(actual, outcome, reason)
        logger.info(
            "Round resolved (%s) against block %d: %s",
            reason.value, actual.height,
            f"{outcome.points} points" if outcome else "no prediction",
            extra={"block_height": actual.height, "generation": generation},
        )
        self._notify()
        return outcome

    def _invalidate_round(self) -> None:
        self.timers.cancel_generation(self._generation)
        self._generation += 1

    def _transition(self, event: RoundEvent, operation: str) -> None:
        self.state.status = self.state_machine.transition(event, operation)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
