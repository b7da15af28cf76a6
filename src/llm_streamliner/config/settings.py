"""
Dataclasses pour la configuration.
"""
from dataclasses import dataclass
from typing import Dict, Any

from ..core.constants import DEFAULT_CODEC, DEFAULT_STORAGE_DIR, ZLIB_DEFAULT_LEVEL


@dataclass
class StreamlinerSettings:
    """Configuration globale du streamliner."""
    codec: str = DEFAULT_CODEC
    compression_level: int = ZLIB_DEFAULT_LEVEL
    storage_dir: str = DEFAULT_STORAGE_DIR

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StreamlinerSettings":
        """Crée une instance depuis un dictionnaire déjà normalisé."""
        return cls(
            codec=data.get("codec", DEFAULT_CODEC),
            compression_level=data.get("compression_level", ZLIB_DEFAULT_LEVEL),
            storage_dir=data.get("storage_dir", DEFAULT_STORAGE_DIR)
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "StreamlinerSettings":
        """Crée une instance depuis la configuration TOML chargée."""
        from .loader import get_streamliner_config

        return cls.from_dict(get_streamliner_config(config))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "codec": self.codec,
            "compression_level": self.compression_level,
            "storage_dir": self.storage_dir,
        }
