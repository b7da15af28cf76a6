"""
Registre des codecs - sélection d'algorithme par nom.

Les factories reçoivent les options de configuration (ex: `level`) en
arguments nommés et ignorent celles qui ne les concernent pas.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ...core.constants import ZLIB_DEFAULT_LEVEL
from ...core.exceptions import ConfigurationError
from .base import Compressor, Expander
from .identity import IdentityCompressor, IdentityExpander
from .zlib_codec import ZlibCompressor, ZlibExpander

logger = logging.getLogger(__name__)

CompressorFactory = Callable[..., Compressor]
ExpanderFactory = Callable[..., Expander]


@dataclass(frozen=True)
class Codec:
    """Paire compresseur/expandeur d'un même algorithme."""
    name: str
    compressor: Compressor
    expander: Expander


def _zlib_compressor(level: int = ZLIB_DEFAULT_LEVEL, **_options) -> Compressor:
    return ZlibCompressor(level=level)


def _zlib_expander(**_options) -> Expander:
    return ZlibExpander()


def _identity_compressor(**_options) -> Compressor:
    return IdentityCompressor()


def _identity_expander(**_options) -> Expander:
    return IdentityExpander()


_REGISTRY: Dict[str, Tuple[CompressorFactory, ExpanderFactory]] = {
    "zlib": (_zlib_compressor, _zlib_expander),
    "identity": (_identity_compressor, _identity_expander),
}


def _normalize_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError(f"Nom de codec invalide: {name!r}", config_key="codec")
    return name.strip().lower()


def register_codec(
    name: str,
    compressor_factory: CompressorFactory,
    expander_factory: ExpanderFactory,
) -> None:
    """
    Enregistre (ou remplace) un codec.

    Args:
        name: Nom du codec (insensible à la casse)
        compressor_factory: Callable(**options) -> Compressor
        expander_factory: Callable(**options) -> Expander
    """
    key = _normalize_name(name)
    if key in _REGISTRY:
        logger.warning(f"Codec '{key}' déjà enregistré, remplacement")
    _REGISTRY[key] = (compressor_factory, expander_factory)


def unregister_codec(name: str) -> None:
    """Retire un codec du registre (no-op s'il est absent)."""
    _REGISTRY.pop(_normalize_name(name), None)


def available_codecs() -> List[str]:
    """Liste triée des noms de codecs enregistrés."""
    return sorted(_REGISTRY)


def get_codec(name: str, **options) -> Codec:
    """
    Instancie la paire compresseur/expandeur d'un codec.

    Args:
        name: Nom du codec (ex: "zlib")
        **options: Options transmises aux factories (ex: level=9)

    Returns:
        Codec prêt à l'emploi

    Raises:
        ConfigurationError: Si le codec est inconnu ou ne respecte pas le contrat
    """
    key = _normalize_name(name)
    factories = _REGISTRY.get(key)
    if factories is None:
        raise ConfigurationError(
            message=f"Codec inconnu: '{key}' (disponibles: {', '.join(available_codecs())})",
            config_key="codec"
        )

    compressor_factory, expander_factory = factories
    compressor = compressor_factory(**options)
    expander = expander_factory(**options)

    if not isinstance(compressor, Compressor) or not isinstance(expander, Expander):
        raise ConfigurationError(
            message=f"Le codec '{key}' ne fournit pas un Compressor/Expander valide",
            config_key="codec"
        )

    return Codec(name=key, compressor=compressor, expander=expander)
