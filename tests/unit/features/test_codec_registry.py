"""
Tests unitaires pour le registre des codecs.
"""
import pytest

from llm_streamliner.core.exceptions import ConfigurationError
from llm_streamliner.features.codecs import (
    Codec,
    IdentityCompressor,
    IdentityExpander,
    ZlibCompressor,
    ZlibExpander,
    available_codecs,
    get_codec,
    register_codec,
    unregister_codec,
)


class ReversedCompressor:
    """Codec jouet: inverse la chaîne avant encodage."""

    name = "reversed"

    async def compress(self, context: str) -> bytes:
        return context[::-1].encode("utf-8")


class ReversedExpander:
    name = "reversed"

    async def expand(self, compressed: bytes) -> str:
        return compressed.decode("utf-8")[::-1]


@pytest.fixture
def reversed_codec():
    register_codec(
        "reversed",
        lambda **_: ReversedCompressor(),
        lambda **_: ReversedExpander(),
    )
    yield
    unregister_codec("reversed")


def test_builtin_codecs_available():
    assert available_codecs() == ["identity", "zlib"]


def test_get_zlib_codec_default_level():
    codec = get_codec("zlib")

    assert isinstance(codec, Codec)
    assert codec.name == "zlib"
    assert isinstance(codec.compressor, ZlibCompressor)
    assert isinstance(codec.expander, ZlibExpander)
    assert codec.compressor.level == -1


def test_get_codec_forwards_level():
    assert get_codec("zlib", level=9).compressor.level == 9


def test_get_codec_name_is_normalized():
    assert get_codec("  ZLib ").name == "zlib"


def test_identity_codec_ignores_level():
    codec = get_codec("identity", level=9)
    assert isinstance(codec.compressor, IdentityCompressor)
    assert isinstance(codec.expander, IdentityExpander)


def test_unknown_codec_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        get_codec("brotli")
    assert exc_info.value.details == {"key": "codec"}
    assert "zlib" in exc_info.value.message


@pytest.mark.parametrize("name", ["", "   ", None])
def test_invalid_codec_name(name):
    with pytest.raises(ConfigurationError):
        get_codec(name)


@pytest.mark.asyncio
async def test_register_custom_codec(reversed_codec):
    assert "reversed" in available_codecs()

    codec = get_codec("reversed")
    compressed = await codec.compressor.compress("abc")

    assert compressed == b"cba"
    assert await codec.expander.expand(compressed) == "abc"


def test_factory_without_contract_is_rejected():
    register_codec("broken", lambda **_: object(), lambda **_: object())
    try:
        with pytest.raises(ConfigurationError):
            get_codec("broken")
    finally:
        unregister_codec("broken")
