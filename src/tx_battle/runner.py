# Area: Runner
"""
tx_battle.runner — Terminal round runner
========================================

Drives the round engine from a single-threaded loop: start a round,
submit the prediction, pump the engine's timers once per tick interval
until the round resolves, print the result, reset.
"""

from __future__ import annotations
import logging
import signal
import time
from typing import Any, Dict, Mapping, Optional, Union

from ._blocks import BlockDataSource, BlockFeed, EsploraBlockSource, ResponseCache
from ._config import build_config
from ._round import RoundEngine, RoundStatus
from ._shared import RoundLogger, enable_display_mode, log_battle_error, setup_logging
from .demo_source import DemoBlockSource
from .errors import DataUnavailableError
from .types import PlayerStats, Prediction

logger = logging.getLogger("tx_battle")

COUNTDOWN_DISPLAY_EVERY = 60
COUNTDOWN_DISPLAY_FINAL = 10


class BattleRunner:
    """
    Plays rounds against a block source.

    Uses the Esplora API unless ``demo_mode`` is set in the config or a
    source is passed in.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        source: Optional[BlockDataSource] = None,
    ):
        self.config = build_config(config)
        self._running = False

        setup_logging(log_file_path=self.config["log_file"])

        self.source = source or self._build_source()
        self.cache = ResponseCache(self.config["cache_freshness_seconds"])
        self.feed = BlockFeed(self.source, self.cache)
        self.engine = RoundEngine(self.feed, config=self.config)
        self.engine.subscribe(self._on_change)

        self.tick_interval = self.config["tick_interval_seconds"]
        self._round_logger = RoundLogger()
        self._last_snapshot: Optional[dict] = None

        # Suppress standard logs on terminal; RoundLogger prints instead
        enable_display_mode()

    def _build_source(self) -> BlockDataSource:
        if self.config["demo_mode"]:
            return DemoBlockSource(
                block_interval_seconds=self.config["demo_block_interval_seconds"],
            )
        return EsploraBlockSource(
            base_url=self.config["api_base_url"],
            timeout=self.config["request_timeout_seconds"],
        )

    def run(
        self,
        prediction: Optional[Union[Prediction, Mapping[str, Any]]] = None,
        rounds: int = 1,
    ) -> PlayerStats:
        """
        Play ``rounds`` rounds. Blocks until done or interrupted.

        Raises:
            DataUnavailableError: If the first round cannot start
            InvalidPredictionError: If ``prediction`` is invalid
        """
        self._running = True
        signal.signal(signal.SIGINT, lambda s, f: setattr(self, "_running", False))
        self._log_startup()

        played = 0
        while self._running and played < rounds:
            try:
                self.play_round(prediction)
            except DataUnavailableError as e:
                if not played:
                    raise
                log_battle_error(e)
                break
            played += 1

        stats = self.engine.stats.stats
        logger.info("Runner stopped after %d round(s), score %d", played, stats.score)
        return stats

    def play_round(
        self, prediction: Optional[Union[Prediction, Mapping[str, Any]]] = None
    ) -> Optional[dict]:
        """Play one round. Returns the resolved snapshot, or None if interrupted."""
        self.engine.start_round()
        try:
            if prediction is not None:
                self.engine.submit_prediction(prediction)

            while self._running and self.engine.status is RoundStatus.ACTIVE:
                self.engine.pump()
                if self.engine.status is RoundStatus.ACTIVE:
                    time.sleep(self.tick_interval)

            result = None
            if self.engine.status is RoundStatus.RESOLVED:
                result = self.engine.snapshot()
                self._show_transactions()
            return result
        finally:
            self.engine.reset_round()

    def stop(self) -> None:
        self._running = False

    def _log_startup(self) -> None:
        logger.info("=" * 60)
        logger.info("  Bitcoin TX Battle Runner — Starting")
        logger.info(f"  Source: {type(self.source).__name__}")
        logger.info(f"  Round:  {self.engine.round_seconds}s window")
        logger.info(f"  Poll:   every {self.engine.poll_interval}s")
        logger.info("=" * 60)

    def _show_transactions(self) -> None:
        block = self.engine.state.next_block
        try:
            transactions = self.feed.recent_transactions(block, limit=5)
        except DataUnavailableError as e:
            self._round_logger.log_error(f"Transactions unavailable: {e.reason}")
            return
        self._round_logger.log_transactions(transactions)

    def _on_change(self, snapshot: dict) -> None:
        """Print round lines for each transition the engine reports."""
        previous = self._last_snapshot or {}
        self._last_snapshot = snapshot
        status = snapshot["status"]

        if status == RoundStatus.ACTIVE.value:
            if previous.get("status") != status:
                self._round_logger.log_round_started(snapshot)
            elif snapshot["prediction"] != previous.get("prediction"):
                self._round_logger.log_prediction(snapshot)
            elif snapshot["time_remaining_seconds"] != previous.get("time_remaining_seconds"):
                remaining = snapshot["time_remaining_seconds"]
                if remaining % COUNTDOWN_DISPLAY_EVERY == 0 or remaining <= COUNTDOWN_DISPLAY_FINAL:
                    self._round_logger.log_countdown(remaining)
        elif status == RoundStatus.RESOLVED.value and previous.get("status") != status:
            self._round_logger.log_resolved(snapshot)
