"""Contrats des codecs (Compressor / Expander).

Deux capacités complémentaires, utilisables indépendamment. Toute classe qui
expose un attribut `name` et la coroutine attendue satisfait le contrat, sans
héritage.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Compressor(Protocol):
    """Transforme un texte en représentation binaire compacte.

    Attributes:
        name: Identifiant unique de l'algorithme
    """

    name: str

    async def compress(self, context: str) -> bytes:
        """Compresse un texte.

        Args:
            context: Texte à compresser

        Returns:
            Octets compressés

        Raises:
            CompressionError: Si la transformation échoue
        """
        ...


@runtime_checkable
class Expander(Protocol):
    """Inverse d'un Compressor: restitue le texte original."""

    name: str

    async def expand(self, compressed: bytes) -> str:
        """Décompresse des octets produits par le compresseur associé.

        Raises:
            ExpansionError: Flux invalide pour ce codec, ou UTF-8 invalide
        """
        ...
