# Area: Blocks
"""
tx_battle._blocks.esplora — Esplora HTTP block source
=====================================================

Reads blocks from an Esplora REST API (blockstream.info by default).
A block lookup by height takes two requests: height -> hash, then the
block body. Requests are single-shot with a timeout; retrying is left
to the round timers, which poll again on their next tick.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from ..errors import DataUnavailableError
from ..types import Block, TransactionSummary
from .schemas import EsploraBlock, EsploraTransaction
from .source import BlockDataSource

logger = logging.getLogger("tx_battle.blocks.esplora")

DEFAULT_BASE_URL = "https://blockstream.info/api"
USER_AGENT = "bitcoin-tx-battle/1.0.0"

_BLOCK_HASH_RE = re.compile(r"^[0-9a-f]{64}$")


class EsploraBlockSource(BlockDataSource):
    """
    Esplora API client.

    Endpoints used:
        GET /blocks/tip/height    -> plain-text height
        GET /block-height/{h}     -> plain-text block hash
        GET /block/{hash}         -> block JSON
        GET /block/{hash}/txs     -> first page of transactions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        })
        logger.debug("Esplora source initialized: %s (timeout=%.1fs)", self.base_url, timeout)

    def _get(self, path: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Esplora request failed: %s (%s)", path, exc)
            raise DataUnavailableError(path, str(exc)) from exc
        return response

    def _get_json(self, path: str) -> Any:
        response = self._get(path)
        try:
            return response.json()
        except ValueError as exc:
            raise DataUnavailableError(path, f"invalid JSON: {exc}") from exc

    # ==================== Block Methods ====================

    def get_latest_height(self) -> int:
        text = self._get("/blocks/tip/height").text.strip()
        if not text.isdigit():
            raise DataUnavailableError("/blocks/tip/height", f"not a height: {text[:40]!r}")
        return int(text)

    def get_block_hash(self, height: int) -> str:
        path = f"/block-height/{height}"
        block_hash = self._get(path).text.strip()
        if not _BLOCK_HASH_RE.match(block_hash):
            raise DataUnavailableError(path, f"not a block hash: {block_hash[:80]!r}")
        return block_hash

    def get_block(self, height: int) -> Block:
        block_hash = self.get_block_hash(height)
        path = f"/block/{block_hash}"
        data = self._get_json(path)
        try:
            return EsploraBlock.model_validate(data).to_block()
        except ValidationError as exc:
            raise DataUnavailableError(path, f"malformed block: {exc.error_count()} errors") from exc

    def get_block_transactions(
        self, block_hash: str, limit: int = 10
    ) -> List[TransactionSummary]:
        path = f"/block/{block_hash}/txs"
        data = self._get_json(path)
        if not isinstance(data, list):
            raise DataUnavailableError(path, f"expected a list, got {type(data).__name__}")
        try:
            return [EsploraTransaction.model_validate(item).to_summary() for item in data[:limit]]
        except ValidationError as exc:
            raise DataUnavailableError(path, f"malformed transaction: {exc.error_count()} errors") from exc
