"""
Codec identité (no-op) - utile pour les tests et le débogage.
"""
from ...core.exceptions import CompressionError, ExpansionError

CODEC_NAME = "identity"


class IdentityCompressor:
    """Retourne les octets UTF-8 du texte, sans compression."""

    name = CODEC_NAME

    async def compress(self, context: str) -> bytes:
        try:
            return context.encode("utf-8")
        except (UnicodeEncodeError, AttributeError) as e:
            raise CompressionError(f"Texte non encodable en UTF-8: {e}", codec=CODEC_NAME) from e


class IdentityExpander:
    """Décode les octets en UTF-8 strict."""

    name = CODEC_NAME

    async def expand(self, compressed: bytes) -> str:
        try:
            return bytes(compressed).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExpansionError(f"UTF-8 conversion failed: {e}", codec=CODEC_NAME) from e
        except TypeError as e:
            raise ExpansionError(f"Données non binaires: {e}", codec=CODEC_NAME) from e
