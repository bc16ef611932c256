# Area: Blocks Tests
"""Tests for DemoBlockSource — offline chain that grows with time."""

from unittest.mock import patch

from tx_battle.demo_source import DEMO_DIFFICULTY, DEMO_START_HEIGHT, DemoBlockSource


MOCK_TIME = "tx_battle.demo_source.time"


def make_source(interval=45.0, seed=7):
    with patch(MOCK_TIME) as mock_time:
        mock_time.monotonic.return_value = 0.0
        mock_time.time.return_value = 1_700_000_000
        source = DemoBlockSource(block_interval_seconds=interval, seed=seed)
    return source


class TestDemoBlockSource:
    """Tests for DemoBlockSource."""

    def test_starts_with_one_block(self):
        source = make_source()
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 10.0
            assert source.get_latest_height() == DEMO_START_HEIGHT

    def test_mines_one_block_per_interval(self):
        source = make_source(interval=45.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 44.9
            assert source.get_latest_height() == DEMO_START_HEIGHT
            mock_time.monotonic.return_value = 45.0
            assert source.get_latest_height() == DEMO_START_HEIGHT + 1
            mock_time.monotonic.return_value = 200.0
            assert source.get_latest_height() == DEMO_START_HEIGHT + 4

    def test_block_values_in_mainnet_ranges(self):
        source = make_source(interval=1.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 20.0
            blocks = [source.get_block(DEMO_START_HEIGHT + i) for i in range(20)]

        for block in blocks:
            assert 2000 <= block.tx_count < 3000
            assert 1_400_000 <= block.size_bytes < 1_800_000
            assert block.difficulty == DEMO_DIFFICULTY
            assert len(block.block_hash) == 64

    def test_blocks_are_chained(self):
        source = make_source(interval=1.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 2.0
            first = source.get_block(DEMO_START_HEIGHT)
            second = source.get_block(DEMO_START_HEIGHT + 1)

        assert first.previous_block_hash is None
        assert second.previous_block_hash == first.block_hash
        assert second.timestamp == first.timestamp + 1

    def test_same_seed_same_chain(self):
        a = make_source(seed=42)
        b = make_source(seed=42)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            assert a.get_block(DEMO_START_HEIGHT) == b.get_block(DEMO_START_HEIGHT)

    def test_each_block_has_transactions(self):
        source = make_source()
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            block = source.get_block(DEMO_START_HEIGHT)
        transactions = source.get_block_transactions(block.block_hash, limit=5)
        assert len(transactions) == 5
        assert all(tx.confirmed for tx in transactions)
