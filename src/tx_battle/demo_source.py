# Area: Blocks
"""
tx_battle.demo_source — Offline demo chain
==========================================

A ready-to-use block source that needs no network. It mines a synthetic
block every ``block_interval_seconds`` of wall time, with values in the
ranges of real mainnet blocks.

Usage:
    from tx_battle import BattleRunner, DemoBlockSource

    runner = BattleRunner(config=config, source=DemoBlockSource(block_interval_seconds=20))
    runner.run()
"""

import random
import time
from typing import List, Optional

from ._blocks.source import InMemoryBlockSource
from .types import Block, TransactionSummary

DEMO_START_HEIGHT = 850000
DEMO_DIFFICULTY = 55621444139429.57
DEMO_WEIGHT = 4_000_000
DEMO_TXS_PER_BLOCK = 10


class DemoBlockSource(InMemoryBlockSource):
    """
    In-memory chain that grows with time.

    Heights start at ``start_height``; pass ``seed`` for reproducible
    block contents.
    """

    def __init__(
        self,
        block_interval_seconds: float = 45.0,
        seed: Optional[int] = None,
        start_height: int = DEMO_START_HEIGHT,
    ):
        super().__init__()
        self.block_interval_seconds = block_interval_seconds
        self._rng = random.Random(seed)
        self._start_height = start_height
        self._started_at = time.monotonic()
        self._genesis_time = int(time.time())
        self._mine_next(start_height)

    def get_latest_height(self) -> int:
        self._catch_up()
        return super().get_latest_height()

    def get_block(self, height: int) -> Block:
        self._catch_up()
        return super().get_block(height)

    def _catch_up(self) -> None:
        """Mine every block that is due by now."""
        elapsed = time.monotonic() - self._started_at
        target = self._start_height + int(elapsed // self.block_interval_seconds)
        while self.tip_height < target:
            self._mine_next(self.tip_height + 1)

    def _mine_next(self, height: int) -> None:
        rng = self._rng
        previous = self._blocks.get(height - 1)
        block = Block(
            height=height,
            tx_count=2000 + rng.randrange(1000),
            size_bytes=1_400_000 + rng.randrange(400_000),
            timestamp=self._genesis_time
            + int((height - self._start_height) * self.block_interval_seconds),
            difficulty=DEMO_DIFFICULTY,
            block_hash=f"{rng.getrandbits(256):064x}",
            weight=DEMO_WEIGHT,
            previous_block_hash=previous.block_hash if previous else None,
        )
        self.mine(block, self._make_transactions())

    def _make_transactions(self) -> List[TransactionSummary]:
        rng = self._rng
        transactions = []
        for _ in range(DEMO_TXS_PER_BLOCK):
            size = 200 + rng.randrange(400)
            transactions.append(TransactionSummary(
                txid=f"{rng.getrandbits(256):064x}",
                size=size,
                weight=size * 3 + rng.randrange(size),
                fee=size * (1 + rng.randrange(40)),
                input_count=1 + rng.randrange(3),
                output_count=1 + rng.randrange(4),
                total_output_sats=rng.randrange(10_000, 500_000_000),
                confirmed=True,
            ))
        return transactions
