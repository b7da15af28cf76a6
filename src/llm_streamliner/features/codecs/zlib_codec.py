"""
Codec zlib (DEFLATE) - le seul algorithme de compression livré.

Flux zlib standard, niveau par défaut, sans dictionnaire ni fenêtre
personnalisée. Le travail zlib est synchrone: il est déporté dans un thread
(asyncio.to_thread) pour ne pas bloquer l'event loop de l'appelant.
"""
import asyncio
import logging
import zlib

from ...core.constants import ZLIB_DEFAULT_LEVEL, ZLIB_MIN_LEVEL, ZLIB_MAX_LEVEL
from ...core.exceptions import CompressionError, ConfigurationError, ExpansionError

logger = logging.getLogger(__name__)

CODEC_NAME = "zlib"


def _deflate(context: str, level: int) -> bytes:
    try:
        data = context.encode("utf-8")
    except (UnicodeEncodeError, AttributeError) as e:
        raise CompressionError(f"Texte non encodable en UTF-8: {e}", codec=CODEC_NAME) from e

    try:
        return zlib.compress(data, level)
    except (zlib.error, MemoryError) as e:
        raise CompressionError(f"Compression zlib échouée: {e}", codec=CODEC_NAME) from e


def _inflate(compressed: bytes) -> str:
    try:
        raw = zlib.decompress(compressed)
    except (zlib.error, TypeError) as e:
        raise ExpansionError(f"Flux zlib invalide: {e}", codec=CODEC_NAME) from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExpansionError(f"UTF-8 conversion failed: {e}", codec=CODEC_NAME) from e


class ZlibCompressor:
    """Compression zlib au niveau configuré (défaut: Z_DEFAULT_COMPRESSION)."""

    name = CODEC_NAME

    def __init__(self, level: int = ZLIB_DEFAULT_LEVEL):
        if isinstance(level, bool) or not isinstance(level, int) or not (
            ZLIB_MIN_LEVEL <= level <= ZLIB_MAX_LEVEL
        ):
            raise ConfigurationError(
                message=f"Niveau zlib invalide: {level!r} (attendu {ZLIB_MIN_LEVEL}..{ZLIB_MAX_LEVEL})",
                config_key="compression_level"
            )
        self.level = level

    async def compress(self, context: str) -> bytes:
        compressed = await asyncio.to_thread(_deflate, context, self.level)
        logger.debug(f"🗜️ zlib: {len(context)} caractères -> {len(compressed)} octets")
        return compressed

    def __repr__(self):
        return f"ZlibCompressor(level={self.level})"


class ZlibExpander:
    """Expansion d'un flux zlib vers du texte UTF-8."""

    name = CODEC_NAME

    async def expand(self, compressed: bytes) -> str:
        text = await asyncio.to_thread(_inflate, compressed)
        logger.debug(f"📤 zlib: {len(compressed)} octets -> {len(text)} caractères")
        return text

    def __repr__(self):
        return "ZlibExpander()"
