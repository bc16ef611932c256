# Area: Blocks
"""
tx_battle._blocks.cache — Single-slot block cache
=================================================

Holds the most recent block fetch for a freshness window. There is one
slot: ``put`` replaces whatever was there. A ``get`` for another key, or
after the window, is a miss and the caller fetches from the source.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..types import Block

logger = logging.getLogger("tx_battle.blocks.cache")

DEFAULT_FRESHNESS_SECONDS = 30.0


class ResponseCache:
    """Time-boxed cache of one block, aged with the monotonic clock."""

    def __init__(self, freshness_seconds: float = DEFAULT_FRESHNESS_SECONDS) -> None:
        self.freshness_seconds = freshness_seconds
        self._key: Optional[str] = None
        self._block: Optional[Block] = None
        self._inserted_at = 0.0

    def get(self, key: str) -> Optional[Block]:
        """Return the cached block if it was stored under ``key`` and is fresh."""
        if self._block is None or key != self._key:
            return None
        if time.monotonic() - self._inserted_at >= self.freshness_seconds:
            logger.debug("Cache stale for %s", key)
            return None
        return self._block

    def put(self, key: str, block: Block) -> None:
        self._key = key
        self._block = block
        self._inserted_at = time.monotonic()
        logger.debug("Cached %s: block %d", key, block.height)

    def age(self) -> Optional[float]:
        """Seconds since the slot was filled, or None when empty."""
        if self._block is None:
            return None
        return time.monotonic() - self._inserted_at

    def clear(self) -> None:
        self._key = None
        self._block = None
        self._inserted_at = 0.0
