"""Tests for JsonConfigSerializer."""

import json
from pathlib import Path

import pytest

from cachegen import (
    CacheConfig,
    CacheRule,
    CacheScope,
    JsonConfigSerializer,
    SerializationError,
)


@pytest.fixture
def config() -> CacheConfig:
    return CacheConfig(
        name="shop",
        rules=[
            CacheRule(types=["Customer"], max_age=60, scope=CacheScope.PRIVATE),
            CacheRule(types=["Session"], max_age=0, passthrough=True),
        ],
        invalidations={"createOrder": ["Order:*"]},
    )


class TestJsonConfigSerializer:
    """Tests for JsonConfigSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonConfigSerializer:
        """Create a serializer for testing."""
        return JsonConfigSerializer()

    def test_serialize_layout(
        self, serializer: JsonConfigSerializer, config: CacheConfig
    ) -> None:
        """Two-space indent, key order kept, trailing newline."""
        result = serializer.serialize(config)

        assert isinstance(result, bytes)
        text = result.decode()
        assert text.endswith("}\n")
        assert text.startswith('{\n  "version": "1.0",\n  "name": "shop",')
        assert json.loads(text) == config.to_dict()

    def test_compact(self, config: CacheConfig) -> None:
        """Test compact output has no indentation."""
        result = JsonConfigSerializer(indent=None).serialize(config)

        assert b"\n  " not in result

    def test_deserialize(
        self, serializer: JsonConfigSerializer, config: CacheConfig
    ) -> None:
        """Test a document is read back into a config."""
        assert serializer.deserialize(serializer.serialize(config)) == config

    def test_deserialize_invalid_json(self, serializer: JsonConfigSerializer) -> None:
        """Test invalid JSON is rejected."""
        with pytest.raises(SerializationError, match="Failed to deserialize"):
            serializer.deserialize(b"not json {")

    def test_deserialize_non_object(self, serializer: JsonConfigSerializer) -> None:
        """Test a non-object document is rejected."""
        with pytest.raises(SerializationError, match="JSON object"):
            serializer.deserialize(b"[1, 2]")

    def test_deserialize_bad_scope(self, serializer: JsonConfigSerializer) -> None:
        """Test an unknown scope is rejected."""
        with pytest.raises(SerializationError, match="Invalid config document"):
            serializer.deserialize(b'{"rules": [{"types": ["A"], "scope": "shared"}]}')

    def test_write(
        self, serializer: JsonConfigSerializer, config: CacheConfig, tmp_path: Path
    ) -> None:
        """Test the config is written to a file."""
        target = serializer.write(config, tmp_path / "out" / "cache-config.json")

        assert target.exists()
        assert json.loads(target.read_text())["rules"][1] == {
            "types": ["Session"],
            "maxAge": 0,
            "passthrough": True,
        }
