"""
tx_battle — Bitcoin TX Battle Royale round engine
=================================================

Copyright (c) 2026 The Bitcoin TX Battle authors.

Released under the MIT License. See the LICENSE file for full terms.

Predict the transaction count, size and difficulty of the next Bitcoin
block, then score the prediction against the block that is actually mined.

Quick Start (offline demo chain):
    from tx_battle import BattleRunner
    runner = BattleRunner(config={"demo_mode": True, "round_seconds": 120})
    runner.run(prediction={"tx_count": 2500})

Embedding the engine:
    from tx_battle import BlockFeed, EsploraBlockSource, ResponseCache, RoundEngine
    feed = BlockFeed(EsploraBlockSource(), ResponseCache(30))
    engine = RoundEngine(feed)
    engine.subscribe(render)          # receives a snapshot dict after every change
    engine.start_round()
    engine.submit_prediction({"txCount": 3000})
    ...                               # call engine.pump() about once a second
    engine.reset_round()
"""

from ._blocks import (
    BlockDataSource,
    BlockFeed,
    EsploraBlockSource,
    InMemoryBlockSource,
    ResponseCache,
)
from ._round import (
    RoundEngine,
    RoundStatus,
    ResolutionReason,
    StatsAccumulator,
    parse_prediction,
)
from .demo_source import DemoBlockSource
from .errors import (
    TxBattleError,
    DataUnavailableError,
    InvalidStateError,
    InvalidPredictionError,
)
from .runner import BattleRunner
from .types import (
    Block,
    NetworkStats,
    PlayerStats,
    Prediction,
    RoundOutcome,
    TransactionSummary,
)

__all__ = [
    # Engine
    "RoundEngine",
    "RoundStatus",
    "ResolutionReason",
    "StatsAccumulator",
    "parse_prediction",
    # Block data
    "BlockDataSource",
    "BlockFeed",
    "EsploraBlockSource",
    "InMemoryBlockSource",
    "DemoBlockSource",
    "ResponseCache",
    # Runner
    "BattleRunner",
    # Errors
    "TxBattleError",
    "DataUnavailableError",
    "InvalidStateError",
    "InvalidPredictionError",
    # Types
    "Block",
    "NetworkStats",
    "PlayerStats",
    "Prediction",
    "RoundOutcome",
    "TransactionSummary",
]
__version__ = "1.0.0"
__license__ = "MIT — Copyright (c) 2026 The Bitcoin TX Battle authors"
__author__ = "The Bitcoin TX Battle authors"
