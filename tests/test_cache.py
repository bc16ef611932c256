# Area: Blocks Tests
"""Tests for ResponseCache — single-slot freshness window."""

from unittest.mock import patch

import pytest

from tx_battle._blocks.cache import ResponseCache
from tx_battle.types import Block


MOCK_TIME = "tx_battle._blocks.cache.time"

BLOCK = Block(height=800000, tx_count=2500, size_bytes=1_500_000, timestamp=1_700_000_000, difficulty=5.0e13)
OTHER = Block(height=800001, tx_count=3100, size_bytes=1_650_000, timestamp=1_700_000_600, difficulty=5.0e13)


class TestResponseCache:
    """Unit tests for ResponseCache."""

    def test_empty_cache_misses(self):
        cache = ResponseCache(30)
        assert cache.get("latest-block") is None
        assert cache.age() is None

    def test_fresh_hit(self):
        cache = ResponseCache(30)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            cache.put("latest-block", BLOCK)

            mock_time.monotonic.return_value = 129.9
            assert cache.get("latest-block") is BLOCK
            assert cache.age() == pytest.approx(29.9)

    def test_stale_at_exactly_freshness(self):
        cache = ResponseCache(30)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            cache.put("latest-block", BLOCK)

            mock_time.monotonic.return_value = 130.0
            assert cache.get("latest-block") is None

    def test_other_key_misses(self):
        cache = ResponseCache(30)
        cache.put("latest-block", BLOCK)
        assert cache.get("block-800001") is None

    def test_put_replaces_slot(self):
        cache = ResponseCache(30)
        cache.put("latest-block", BLOCK)
        cache.put("block-800001", OTHER)
        assert cache.get("latest-block") is None
        assert cache.get("block-800001") is OTHER

    def test_clear(self):
        cache = ResponseCache(30)
        cache.put("latest-block", BLOCK)
        cache.clear()
        assert cache.get("latest-block") is None
        assert cache.age() is None
