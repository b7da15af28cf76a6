"""
Tests unitaires pour MemoryModule (packaging + sérialisation).
"""
import json

import pytest

from llm_streamliner.core.exceptions import (
    CompressionError,
    ExpansionError,
    SerializationError,
)
from llm_streamliner.features.codecs import (
    IdentityCompressor,
    IdentityExpander,
    ZlibCompressor,
    ZlibExpander,
)
from llm_streamliner.features.memory import MemoryModule


LONGER = "This is a longer test string to verify zlib compression works properly"


class FailingCompressor:
    name = "failing"

    async def compress(self, context: str) -> bytes:
        raise CompressionError("buffer indisponible", codec=self.name)


class TestConstruction:
    """Tests de construction et d'expansion."""

    @pytest.mark.asyncio
    async def test_create_with_identity(self):
        module = await MemoryModule.create("test context", IdentityCompressor())

        assert module.compressed_data == b"test context"
        assert module.metadata == ""
        assert await module.expand(IdentityExpander()) == "test context"

    @pytest.mark.asyncio
    async def test_create_with_zlib(self):
        module = await MemoryModule.create(LONGER, ZlibCompressor())

        assert module.compressed_data != LONGER.encode("utf-8")
        assert await module.expand(ZlibExpander()) == LONGER

    @pytest.mark.asyncio
    async def test_create_propagates_compression_error(self):
        with pytest.raises(CompressionError, match="buffer indisponible"):
            await MemoryModule.create("x", FailingCompressor())

    @pytest.mark.asyncio
    async def test_expand_does_not_mutate(self):
        module = await MemoryModule.create(LONGER, ZlibCompressor())
        before = module.compressed_data

        await module.expand(ZlibExpander())
        await module.expand(ZlibExpander())

        assert module.compressed_data == before

    @pytest.mark.asyncio
    async def test_mismatched_expander_fails(self):
        """Données identité passées à l'expandeur zlib -> ExpansionError."""
        module = await MemoryModule.create("test context", IdentityCompressor())
        with pytest.raises(ExpansionError):
            await module.expand(ZlibExpander())

    def test_compressed_data_is_read_only(self):
        module = MemoryModule(b"\x01\x02")
        with pytest.raises(AttributeError):
            module.compressed_data = b"autre"

    def test_compressed_size(self):
        assert MemoryModule(b"\x01\x02\x03").compressed_size == 3


class TestMetadata:
    """Tests du canal d'annotation libre."""

    @pytest.mark.asyncio
    async def test_set_metadata_replaces_value(self):
        module = await MemoryModule.create("ctx", IdentityCompressor())

        module.set_metadata("zlib v1")
        assert module.metadata == "zlib v1"

        module.metadata = "tag=session-42"
        assert module.metadata == "tag=session-42"

    @pytest.mark.asyncio
    async def test_metadata_does_not_affect_payload(self):
        module = await MemoryModule.create(LONGER, ZlibCompressor())
        data_before = module.compressed_data
        expanded_before = await module.expand(ZlibExpander())

        module.set_metadata("n'importe quoi")

        assert module.compressed_data == data_before
        assert await module.expand(ZlibExpander()) == expanded_before


class TestSerialization:
    """Tests du format JSON."""

    def test_to_json_format(self):
        module = MemoryModule(b"\x01\x02\xff", "zlib")

        assert module.to_json() == '{"compressed_data":[1,2,255],"metadata":"zlib"}'

    def test_to_json_keeps_unicode_metadata(self):
        module = MemoryModule(b"", "café ☕")
        assert json.loads(module.to_json()) == {"compressed_data": [], "metadata": "café ☕"}

    @pytest.mark.asyncio
    async def test_json_roundtrip_scenario(self):
        """Chaîne longue -> module -> JSON -> module -> expand: identique."""
        module = await MemoryModule.create(LONGER, ZlibCompressor())
        module.set_metadata("zlib")

        restored = MemoryModule.from_json(module.to_json())

        assert restored == module
        assert restored.metadata == "zlib"
        assert await restored.expand(ZlibExpander()) == LONGER

    @pytest.mark.asyncio
    async def test_json_roundtrip_long_context(self, long_context):
        module = await MemoryModule.create(long_context, ZlibCompressor())
        restored = MemoryModule.from_json(module.to_json())

        assert await restored.expand(ZlibExpander()) == await module.expand(ZlibExpander())

    def test_to_json_non_serializable_metadata(self):
        """Le setter ne valide pas: l'échec surgit à la sérialisation."""
        module = MemoryModule(b"\x01")
        module.set_metadata(object())

        with pytest.raises(SerializationError):
            module.to_json()

    @pytest.mark.parametrize("text", [
        "",
        "{not json",
        "[1, 2, 3]",
        '"juste une chaîne"',
        "null",
    ])
    def test_from_json_malformed(self, text):
        with pytest.raises(SerializationError):
            MemoryModule.from_json(text)

    def test_from_json_missing_field(self):
        with pytest.raises(SerializationError) as exc_info:
            MemoryModule.from_json('{"compressed_data": [1, 2]}')
        assert exc_info.value.field == "metadata"

    def test_from_json_unknown_field_rejected(self):
        with pytest.raises(SerializationError) as exc_info:
            MemoryModule.from_json('{"compressed_data": [], "metadata": "", "algorithm": "zlib"}')
        assert exc_info.value.field == "algorithm"

    @pytest.mark.parametrize("payload", [
        '{"compressed_data": "AQID", "metadata": ""}',
        '{"compressed_data": [1, 256], "metadata": ""}',
        '{"compressed_data": [-1], "metadata": ""}',
        '{"compressed_data": [1.5], "metadata": ""}',
        '{"compressed_data": [true], "metadata": ""}',
    ])
    def test_from_json_bad_byte_array(self, payload):
        with pytest.raises(SerializationError) as exc_info:
            MemoryModule.from_json(payload)
        assert exc_info.value.field == "compressed_data"

    def test_from_json_bad_metadata_type(self):
        with pytest.raises(SerializationError) as exc_info:
            MemoryModule.from_json('{"compressed_data": [], "metadata": 42}')
        assert exc_info.value.field == "metadata"

    @pytest.mark.asyncio
    async def test_from_json_does_not_validate_payload(self):
        """Une charge non expansible se désérialise; l'échec arrive à expand."""
        module = MemoryModule.from_json('{"compressed_data": [1, 2, 3], "metadata": "zlib"}')

        assert module.compressed_data == b"\x01\x02\x03"
        with pytest.raises(ExpansionError):
            await module.expand(ZlibExpander())

    def test_dict_roundtrip(self):
        module = MemoryModule(b"abc", "m")
        assert MemoryModule.from_dict(module.to_dict()) == module

    def test_equality(self):
        assert MemoryModule(b"a", "x") == MemoryModule(b"a", "x")
        assert MemoryModule(b"a", "x") != MemoryModule(b"a", "y")
        assert MemoryModule(b"a", "x") != MemoryModule(b"b", "x")
        assert MemoryModule(b"a") != "a"


def test_to_json_lone_surrogate_metadata():
    module = MemoryModule(b"\x01", "tag \ud800")

    with pytest.raises(SerializationError) as exc_info:
        module.to_json()

    assert exc_info.value.field == "metadata"
