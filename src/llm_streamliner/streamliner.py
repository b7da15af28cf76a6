"""
ContextStreamliner - chaîne complète codec -> memory module -> stockage.

Flux:
    archive: texte -> compress -> MemoryModule (+metadata) -> JSON -> fichier
    restore: fichier -> JSON -> MemoryModule -> expand -> texte
"""
import asyncio
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config.settings import StreamlinerSettings
from .features.codecs.registry import Codec, get_codec
from .features.memory.module import MemoryModule
from .features.memory.stats import CompressionStats, compute_stats
from .features.storage.files import load_memory_module, save_memory_module

logger = logging.getLogger(__name__)


@dataclass
class ArchiveResult:
    """Résultat d'un archivage."""
    location: str
    metadata: str
    stats: CompressionStats = field(default_factory=CompressionStats)

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "metadata": self.metadata,
            "stats": self.stats.to_dict(),
        }


class ContextStreamliner:
    """
    Façade d'archivage de contextes.

    Le codec est choisi une fois (configuration ou injection) et sert aux deux
    sens. La metadata posée par défaut est le nom du codec: c'est une simple
    annotation, elle n'est jamais relue pour choisir l'expandeur.
    """

    def __init__(self, settings: StreamlinerSettings = None, codec: Codec = None):
        self.settings = settings or StreamlinerSettings()
        self.codec = codec or get_codec(
            self.settings.codec, level=self.settings.compression_level
        )

    async def compress(self, context: str, metadata: Optional[str] = None) -> MemoryModule:
        """Construit un module; metadata par défaut = nom du codec."""
        module = await MemoryModule.create(context, self.codec.compressor)
        module.set_metadata(self.codec.name if metadata is None else metadata)
        return module

    async def expand(self, module: MemoryModule) -> str:
        return await module.expand(self.codec.expander)

    def resolve_location(self, location: Union[str, "os.PathLike[str]"]) -> Path:
        """Les emplacements relatifs sont résolus sous storage_dir."""
        path = Path(location).expanduser()
        if path.is_absolute():
            return path
        return Path(self.settings.storage_dir).expanduser() / path

    async def archive(
        self,
        context: str,
        location: Union[str, "os.PathLike[str]"],
        metadata: Optional[str] = None
    ) -> ArchiveResult:
        """
        Compresse un contexte et le persiste.

        Args:
            context: Texte à archiver
            location: Fichier cible (relatif à storage_dir ou absolu)
            metadata: Annotation (optionnel, défaut: nom du codec)

        Returns:
            ArchiveResult avec les statistiques de compression
        """
        path = self.resolve_location(location)
        module = await self.compress(context, metadata)
        # Stats avant écriture: un échec de tokenization ne laisse pas de fichier
        stats = await asyncio.to_thread(compute_stats, context, module)

        await asyncio.to_thread(os.makedirs, path.parent, exist_ok=True)
        await save_memory_module(path, module)

        logger.info(
            f"🗜️ Contexte archivé dans {path}: {stats.original_bytes} -> "
            f"{stats.compressed_bytes} octets (ratio {stats.compression_ratio})"
        )
        return ArchiveResult(location=str(path), metadata=module.metadata, stats=stats)

    async def restore(self, location: Union[str, "os.PathLike[str]"]) -> str:
        """Relit un module archivé et restitue le texte original."""
        path = self.resolve_location(location)
        module = await load_memory_module(path)
        context = await self.expand(module)
        logger.info(f"📤 Contexte restauré depuis {path} ({len(context)} caractères)")
        return context
