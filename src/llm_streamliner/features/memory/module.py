"""
Memory Module - format de packaging d'un contexte compressé.

Un module lie les octets compressés (opaques) à une annotation libre
(`metadata`). Forme sérialisée, compacte et stable:

    {"compressed_data": [120, 156, ...], "metadata": "zlib"}

Les octets sont encodés en tableau JSON d'entiers 0..255. Les champs
inconnus sont refusés à la désérialisation.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from ...core.constants import FIELD_COMPRESSED_DATA, FIELD_METADATA, MODULE_FIELDS
from ...core.exceptions import SerializationError
from ..codecs.base import Compressor, Expander


def _decode_byte_array(value: object) -> bytes:
    if not isinstance(value, list):
        raise SerializationError(
            f"'{FIELD_COMPRESSED_DATA}' doit être un tableau d'octets",
            field=FIELD_COMPRESSED_DATA
        )
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 255:
            raise SerializationError(
                f"'{FIELD_COMPRESSED_DATA}' contient une valeur hors octet: {item!r}",
                field=FIELD_COMPRESSED_DATA
            )
    return bytes(value)


class MemoryModule:
    """Contexte compressé + métadonnées, unité échangée avec le stockage.

    `compressed_data` est immuable après construction; `metadata` se remplace
    librement via le setter.
    """

    __slots__ = ("_compressed_data", "_metadata")

    def __init__(self, compressed_data: bytes, metadata: str = ""):
        self._compressed_data = bytes(compressed_data)
        self._metadata = metadata

    @classmethod
    async def create(cls, context: str, compressor: Compressor) -> "MemoryModule":
        """
        Crée un module en compressant le contexte.

        Args:
            context: Texte à compresser
            compressor: Compresseur à utiliser

        Returns:
            Nouveau module, metadata vide

        Raises:
            CompressionError: Propagée telle quelle depuis le compresseur
        """
        compressed_data = await compressor.compress(context)
        return cls(compressed_data)

    async def expand(self, expander: Expander) -> str:
        """Restitue le texte original via l'expandeur (sans muter le module)."""
        return await expander.expand(self._compressed_data)

    @property
    def compressed_data(self) -> bytes:
        return self._compressed_data

    @property
    def compressed_size(self) -> int:
        return len(self._compressed_data)

    @property
    def metadata(self) -> str:
        return self._metadata

    @metadata.setter
    def metadata(self, value: str) -> None:
        self._metadata = value

    def set_metadata(self, metadata: str) -> None:
        """Remplace l'annotation, sans validation."""
        self._metadata = metadata

    # ------------------------------------------------------------------
    # Sérialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            FIELD_COMPRESSED_DATA: list(self._compressed_data),
            FIELD_METADATA: self._metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemoryModule":
        """
        Reconstruit un module depuis sa forme dict.

        Raises:
            SerializationError: Objet invalide, champ manquant/inconnu ou mal typé
        """
        if not isinstance(data, dict):
            raise SerializationError("Un memory module doit être un objet JSON")

        missing = [name for name in MODULE_FIELDS if name not in data]
        if missing:
            raise SerializationError(
                f"Champ requis manquant: {missing[0]}",
                field=missing[0]
            )

        unknown = sorted(set(data) - set(MODULE_FIELDS))
        if unknown:
            raise SerializationError(
                f"Champ inconnu: {unknown[0]}",
                field=unknown[0]
            )

        metadata = data[FIELD_METADATA]
        if not isinstance(metadata, str):
            raise SerializationError(
                f"'{FIELD_METADATA}' doit être une chaîne",
                field=FIELD_METADATA
            )

        return cls(_decode_byte_array(data[FIELD_COMPRESSED_DATA]), metadata)

    def to_json(self) -> str:
        """
        Sérialise le module en JSON compact.

        Raises:
            SerializationError: Si une valeur n'est pas sérialisable (ex: metadata non
                textuelle, ou texte non représentable en UTF-8 comme un surrogate isolé)
        """
        try:
            text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Sérialisation JSON impossible: {e}") from e

        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SerializationError(
                f"Metadata non encodable en UTF-8: {e}", field=FIELD_METADATA
            ) from e
        return text

    @classmethod
    def from_json(cls, text: str) -> "MemoryModule":
        """
        Désérialise un module. Ne vérifie pas que la charge utile est expansible.

        Raises:
            SerializationError: JSON mal formé ou structure invalide
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise SerializationError(f"JSON invalide: {e}") from e
        return cls.from_dict(data)

    def __eq__(self, other):
        if not isinstance(other, MemoryModule):
            return NotImplemented
        return (
            self._compressed_data == other._compressed_data
            and self._metadata == other._metadata
        )

    __hash__ = None

    def __repr__(self):
        return f"MemoryModule(compressed_size={self.compressed_size}, metadata={self._metadata!r})"
