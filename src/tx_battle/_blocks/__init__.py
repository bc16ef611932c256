# Area: Blocks
"""
Block data layer.

This package contains:
- BlockDataSource contract and the in-memory chain
- Esplora HTTP client
- Single-slot response cache
- BlockFeed, which combines a source with the cache
"""

from .cache import ResponseCache
from .esplora import EsploraBlockSource
from .feed import BlockFeed
from .source import BlockDataSource, InMemoryBlockSource

__all__ = [
    "BlockDataSource",
    "BlockFeed",
    "EsploraBlockSource",
    "InMemoryBlockSource",
    "ResponseCache",
]
