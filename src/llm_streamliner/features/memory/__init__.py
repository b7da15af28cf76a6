"""
Memory Module - packaging et sérialisation des contextes compressés.
"""

from .module import MemoryModule
from .stats import CompressionStats, compute_stats

__all__ = [
    "MemoryModule",
    "CompressionStats",
    "compute_stats",
]
