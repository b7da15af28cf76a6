"""llm_streamliner.config.loader

Chargement de la configuration TOML.

Note d'architecture:
- Le package `config/` est consommé par la couche Features.
- Il ne doit donc pas dépendre de `features/*` afin d'éviter les imports circulaires.
"""
import os
import re
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ..core.constants import (
    DEFAULT_STREAMLINER_CONFIG,
    ZLIB_MIN_LEVEL,
    ZLIB_MAX_LEVEL,
)
from ..core.exceptions import ConfigurationError

# Cache global de configuration
_config_cache: Optional[Dict[str, Any]] = None

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def _expand_env_vars(obj: Any) -> Any:
    """
    Récursivement étend les variables d'environnement ${VAR} dans la config.

    Les variables absentes de l'environnement sont laissées telles quelles.
    """
    if isinstance(obj, str):
        def replace_env_var(match):
            var_name = match.group(1)
            return os.environ.get(var_name, match.group(0))
        return _ENV_VAR_PATTERN.sub(replace_env_var, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


def _clear_config_cache():
    """Vide le cache de configuration."""
    global _config_cache
    _config_cache = None


def default_config_path() -> str:
    """Chemin du config.toml à la racine du projet."""
    # Structure: project/src/llm_streamliner/config/loader.py
    current_file = os.path.abspath(__file__)
    project_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(current_file))))
    return os.path.join(project_dir, "config.toml")


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Charge la configuration depuis config.toml.

    Args:
        config_path: Chemin vers le fichier config (optionnel)

    Returns:
        Dictionnaire de configuration

    Raises:
        ConfigurationError: Si le fichier n'existe pas ou est invalide
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    if config_path is None:
        config_path = default_config_path()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(
            message=f"Fichier de configuration non trouvé: {config_path}",
            config_key="config_path"
        )

    try:
        with open(path, "rb") as f:
            raw_config = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            message=f"Fichier de configuration invalide ({config_path}): {e}",
            config_key="config_path"
        ) from e
    except OSError as e:
        raise ConfigurationError(
            message=f"Fichier de configuration illisible ({config_path}): {e}",
            config_key="config_path"
        ) from e

    _config_cache = _expand_env_vars(raw_config)
    return _config_cache


def reload_config(config_path: str = None) -> Dict[str, Any]:
    """
    Recharge la configuration depuis le fichier.

    Returns:
        Nouvelle configuration chargée
    """
    _clear_config_cache()
    return load_config(config_path)


def _clamp_int(value: object, *, default: int, min_value: int, max_value: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        v = value
    elif isinstance(value, float):
        v = int(value)
    else:
        return default
    if v < min_value:
        return min_value
    if v > max_value:
        return max_value
    return v


def get_streamliner_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extrait la section `[streamliner]` avec fallback robuste.

    Propriétés:
    - Section absente/incomplète -> valeurs par défaut
    - Validation/clamp des types pour éviter un crash au runtime

    Args:
        config: Configuration chargée

    Returns:
        Configuration normalisée (codec, compression_level, storage_dir)
    """
    obj = config.get("streamliner")
    if not isinstance(obj, dict):
        obj = {}

    codec_obj = obj.get("codec", DEFAULT_STREAMLINER_CONFIG["codec"])
    if isinstance(codec_obj, str) and codec_obj.strip():
        codec = codec_obj.strip().lower()
    else:
        codec = DEFAULT_STREAMLINER_CONFIG["codec"]

    compression_level = _clamp_int(
        obj.get("compression_level", DEFAULT_STREAMLINER_CONFIG["compression_level"]),
        default=DEFAULT_STREAMLINER_CONFIG["compression_level"],
        min_value=ZLIB_MIN_LEVEL,
        max_value=ZLIB_MAX_LEVEL,
    )

    storage_dir_obj = obj.get("storage_dir", DEFAULT_STREAMLINER_CONFIG["storage_dir"])
    if isinstance(storage_dir_obj, str) and storage_dir_obj.strip():
        storage_dir = os.path.expanduser(storage_dir_obj.strip())
    else:
        storage_dir = DEFAULT_STREAMLINER_CONFIG["storage_dir"]

    return {
        "codec": codec,
        "compression_level": compression_level,
        "storage_dir": storage_dir,
    }
