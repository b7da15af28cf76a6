"""
Tokenization avec Tiktoken - Comptage des tokens du contexte archivé.
"""
from functools import lru_cache

import tiktoken

from .constants import TOKEN_ENCODING_NAME


@lru_cache(maxsize=1)
def get_encoding() -> "tiktoken.Encoding":
    """Charge l'encodage Tiktoken (cl100k_base) une seule fois."""
    return tiktoken.get_encoding(TOKEN_ENCODING_NAME)


def count_tokens_text(text: str) -> int:
    """
    Compte les tokens d'un texte simple.

    Args:
        text: Texte à analyser

    Returns:
        Nombre de tokens
    """
    if not text:
        return 0
    return len(get_encoding().encode(text, disallowed_special=()))
