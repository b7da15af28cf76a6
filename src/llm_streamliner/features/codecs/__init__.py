"""
Codecs - capacités Compressor / Expander interchangeables.
"""

from .base import Compressor, Expander
from .zlib_codec import ZlibCompressor, ZlibExpander
from .identity import IdentityCompressor, IdentityExpander
from .registry import (
    Codec,
    available_codecs,
    get_codec,
    register_codec,
    unregister_codec,
)

__all__ = [
    "Compressor",
    "Expander",
    "ZlibCompressor",
    "ZlibExpander",
    "IdentityCompressor",
    "IdentityExpander",
    "Codec",
    "available_codecs",
    "get_codec",
    "register_codec",
    "unregister_codec",
]
