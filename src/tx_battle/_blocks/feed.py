# Area: Blocks
"""
tx_battle._blocks.feed — Cached access to a block source
========================================================

The only path from the engine to block data. Every failure raised by
the source is logged and re-raised as DataUnavailableError, so callers
have a single condition to recover from.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, TypeVar

from ..errors import DataUnavailableError
from ..types import Block, NetworkStats, TransactionSummary
from .cache import ResponseCache
from .source import BlockDataSource

logger = logging.getLogger("tx_battle.blocks.feed")

LATEST_BLOCK_KEY = "latest-block"
AVERAGE_BLOCK_TIME_SECONDS = 600

T = TypeVar("T")


class BlockFeed:
    """Combines a BlockDataSource with a ResponseCache."""

    def __init__(self, source: BlockDataSource, cache: ResponseCache) -> None:
        self.source = source
        self.cache = cache

    def _call(self, operation: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except DataUnavailableError as exc:
            logger.warning(
                "%s failed: %s", operation, exc.reason, extra={"operation": operation},
            )
            raise
        except Exception as exc:
            logger.warning(
                "%s failed: %s", operation, exc,
                exc_info=True, extra={"operation": operation},
            )
            raise DataUnavailableError(operation, str(exc)) from exc

    def latest_height(self) -> int:
        """Current tip height, always fetched from the source."""
        return self._call("latest_height", self.source.get_latest_height)

    def latest_block(self) -> Block:
        """Tip block, served from the cache while fresh."""
        cached = self.cache.get(LATEST_BLOCK_KEY)
        if cached is not None:
            return cached

        height = self.latest_height()
        block = self.block_at(height)
        self.cache.put(LATEST_BLOCK_KEY, block)
        return block

    def block_at(self, height: int) -> Block:
        return self._call("block_at", lambda: self.source.get_block(height))

    def recent_transactions(self, block: Block, limit: int = 10) -> List[TransactionSummary]:
        """First ``limit`` transactions of ``block``; empty without a block hash."""
        if not block.block_hash:
            return []
        return self._call(
            "recent_transactions",
            lambda: self.source.get_block_transactions(block.block_hash, limit),
        )

    def network_stats(self) -> NetworkStats:
        """Headline numbers for the tip; ETA counts down from the tip's age."""
        block = self.latest_block()
        age = max(0, int(time.time()) - block.timestamp)
        return NetworkStats(
            total_transactions=block.tx_count,
            current_block=block.height,
            next_block_eta=max(0, AVERAGE_BLOCK_TIME_SECONDS - age),
            average_block_time=AVERAGE_BLOCK_TIME_SECONDS,
        )
