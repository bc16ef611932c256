# Area: Blocks
"""
tx_battle._blocks.source — Block data sources
=============================================

BlockDataSource is the contract the feed consumes. Any method may raise;
the feed turns every failure into DataUnavailableError.

InMemoryBlockSource keeps a chain in memory. The demo source builds on
it, and embedders can use it to drive rounds by hand.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..errors import DataUnavailableError
from ..types import Block, TransactionSummary

logger = logging.getLogger("tx_battle.blocks.source")


class BlockDataSource(ABC):
    """Read access to a Bitcoin chain."""

    @abstractmethod
    def get_latest_height(self) -> int:
        """Height of the chain tip."""

    @abstractmethod
    def get_block(self, height: int) -> Block:
        """Block mined at ``height``."""

    def get_block_transactions(
        self, block_hash: str, limit: int = 10
    ) -> List[TransactionSummary]:
        """First ``limit`` transactions of a block. Sources may not support it."""
        return []


class InMemoryBlockSource(BlockDataSource):
    """A chain held in a dict, extended with ``mine()``."""

    def __init__(self, blocks: Iterable[Block] = ()) -> None:
        self._blocks: Dict[int, Block] = {}
        self._transactions: Dict[str, List[TransactionSummary]] = {}
        for block in blocks:
            self.mine(block)

    @property
    def tip_height(self) -> Optional[int]:
        return max(self._blocks) if self._blocks else None

    def mine(
        self,
        block: Block,
        transactions: Optional[List[TransactionSummary]] = None,
    ) -> None:
        """Append a block above the current tip."""
        tip = self.tip_height
        if tip is not None and block.height <= tip:
            raise ValueError(f"Block {block.height} is not above tip {tip}")
        self._blocks[block.height] = block
        if block.block_hash and transactions:
            self._transactions[block.block_hash] = list(transactions)
        logger.debug("Mined block %d", block.height)

    def get_latest_height(self) -> int:
        tip = self.tip_height
        if tip is None:
            raise DataUnavailableError("get_latest_height", "chain is empty")
        return tip

    def get_block(self, height: int) -> Block:
        try:
            return self._blocks[height]
        except KeyError:
            raise DataUnavailableError("get_block", f"block {height} not yet mined") from None

    def get_block_transactions(
        self, block_hash: str, limit: int = 10
    ) -> List[TransactionSummary]:
        return self._transactions.get(block_hash, [])[:limit]
