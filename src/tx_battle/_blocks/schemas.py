# Area: Blocks
"""
tx_battle._blocks.schemas — Esplora response models
===================================================

Pydantic models for the JSON bodies returned by an Esplora block
explorer (blockstream.info, mempool.space). Only the fields the game
reads are declared; everything else is ignored.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveFloat

from ..types import Block, TransactionSummary


class EsploraBlock(BaseModel):
    """Body of ``GET /block/{hash}``."""

    model_config = ConfigDict(extra="ignore")

    id: str
    height: NonNegativeInt
    timestamp: int
    tx_count: NonNegativeInt
    size: NonNegativeInt
    difficulty: PositiveFloat
    weight: Optional[NonNegativeInt] = None
    previousblockhash: Optional[str] = None

    def to_block(self) -> Block:
        return Block(
            height=self.height,
            tx_count=self.tx_count,
            size_bytes=self.size,
            timestamp=self.timestamp,
            difficulty=self.difficulty,
            block_hash=self.id,
            weight=self.weight,
            previous_block_hash=self.previousblockhash,
        )


class EsploraOutput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: NonNegativeInt = 0


class EsploraStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    confirmed: bool = False
    block_height: Optional[int] = None


class EsploraTransaction(BaseModel):
    """One item of ``GET /block/{hash}/txs``."""

    model_config = ConfigDict(extra="ignore")

    txid: str
    size: NonNegativeInt
    weight: NonNegativeInt
    fee: NonNegativeInt = 0
    vin: List[dict] = Field(default_factory=list)
    vout: List[EsploraOutput] = Field(default_factory=list)
    status: EsploraStatus = Field(default_factory=EsploraStatus)

    def to_summary(self) -> TransactionSummary:
        return TransactionSummary(
            txid=self.txid,
            size=self.size,
            weight=self.weight,
            fee=self.fee,
            input_count=len(self.vin),
            output_count=len(self.vout),
            total_output_sats=sum(out.value for out in self.vout),
            confirmed=self.status.confirmed,
        )
