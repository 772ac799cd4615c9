"""JSON serializer for cache config documents."""

import json
from pathlib import Path

from cachegen.core.entities.cache_config import CacheConfig
from cachegen.core.interfaces.serializer import SerializationError


class JsonConfigSerializer:
    """JSON serializer for cache configs.

    Produces the document the edge runtime loads: camelCase keys,
    two-space indentation and a trailing newline.
    """

    def __init__(self, encoding: str = "utf-8", indent: int | None = 2) -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
            indent: Indentation of the output, None for compact JSON.
        """
        self._encoding = encoding
        self._indent = indent

    def serialize(self, config: CacheConfig) -> bytes:
        """Serialize a config to bytes.

        Args:
            config: The config to serialize.

        Returns:
            The JSON document as bytes.

        Raises:
            SerializationError: If the config cannot be serialized.
        """
        try:
            json_str = json.dumps(config.to_dict(), indent=self._indent)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize config: {e}") from e
        return (json_str + "\n").encode(self._encoding)

    def deserialize(self, data: bytes) -> CacheConfig:
        """Deserialize bytes to a config.

        Args:
            data: The JSON document.

        Returns:
            The parsed config.

        Raises:
            SerializationError: If the data is not a config document.
        """
        try:
            parsed = json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

        if not isinstance(parsed, dict):
            raise SerializationError("Config document must be a JSON object")

        try:
            return CacheConfig.from_dict(parsed)
        except (AttributeError, TypeError, ValueError) as e:
            raise SerializationError(f"Invalid config document: {e}") from e

    def write(self, config: CacheConfig, path: str | Path) -> Path:
        """Serialize a config and write it to a file.

        Returns:
            The path written to.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.serialize(config))
        return target
