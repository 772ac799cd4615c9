"""Config serializer interface."""

from typing import Protocol

from cachegen.core.entities.cache_config import CacheConfig


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass


class IConfigSerializer(Protocol):
    """Contract for encoding cache config documents.

    Serializers handle the conversion between CacheConfig and the bytes
    handed to the deployment step.
    """

    def serialize(self, config: CacheConfig) -> bytes:
        """Serialize a config to bytes.

        Raises:
            SerializationError: If the config cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> CacheConfig:
        """Deserialize bytes to a config.

        Raises:
            SerializationError: If the data is not a config document.
        """
        ...
