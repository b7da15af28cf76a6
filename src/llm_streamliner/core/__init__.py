"""
Noyau partagé: exceptions, constantes, tokenization.
"""

from .exceptions import (
    StreamlinerError,
    ConfigurationError,
    CompressionError,
    ExpansionError,
    SerializationError,
    StorageError,
)

__all__ = [
    "StreamlinerError",
    "ConfigurationError",
    "CompressionError",
    "ExpansionError",
    "SerializationError",
    "StorageError",
]
