"""
Statistiques de compression d'un memory module.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any

from ...core.tokens import count_tokens_text
from .module import MemoryModule


@dataclass
class CompressionStats:
    """Tailles avant/après et tokens du contexte archivé."""
    original_bytes: int = 0
    compressed_bytes: int = 0
    original_tokens: int = 0
    compression_ratio: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_stats(context: str, module: MemoryModule) -> CompressionStats:
    """
    Calcule les statistiques d'un module construit depuis `context`.

    Le ratio vaut compressed/original (1.0 pour un contexte vide).
    """
    original_bytes = len(context.encode("utf-8"))
    compressed_bytes = module.compressed_size
    ratio = compressed_bytes / original_bytes if original_bytes > 0 else 1.0

    return CompressionStats(
        original_bytes=original_bytes,
        compressed_bytes=compressed_bytes,
        original_tokens=count_tokens_text(context),
        compression_ratio=round(ratio, 4)
    )
