"""
LLM Streamliner - compression de contextes LLM en memory modules persistables.
"""

__version__ = "0.1.0"

from .core.exceptions import (
    StreamlinerError,
    ConfigurationError,
    CompressionError,
    ExpansionError,
    SerializationError,
    StorageError,
)
from .config import StreamlinerSettings, load_config
from .features.codecs import (
    Compressor,
    Expander,
    ZlibCompressor,
    ZlibExpander,
    IdentityCompressor,
    IdentityExpander,
    Codec,
    available_codecs,
    get_codec,
    register_codec,
)
from .features.memory import MemoryModule, CompressionStats, compute_stats
from .features.storage import (
    store_module,
    retrieve_module,
    save_memory_module,
    load_memory_module,
)
from .streamliner import ContextStreamliner, ArchiveResult

__all__ = [
    "__version__",
    "StreamlinerError",
    "ConfigurationError",
    "CompressionError",
    "ExpansionError",
    "SerializationError",
    "StorageError",
    "StreamlinerSettings",
    "load_config",
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
    "MemoryModule",
    "CompressionStats",
    "compute_stats",
    "store_module",
    "retrieve_module",
    "save_memory_module",
    "load_memory_module",
    "ContextStreamliner",
    "ArchiveResult",
]
