"""
Configuration de LLM Streamliner.
"""

from .loader import load_config, reload_config, get_streamliner_config, default_config_path
from .settings import StreamlinerSettings

__all__ = [
    "load_config",
    "reload_config",
    "get_streamliner_config",
    "default_config_path",
    "StreamlinerSettings",
]
