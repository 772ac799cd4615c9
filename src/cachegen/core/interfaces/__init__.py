"""Core interfaces (Protocol classes) for cachegen."""

from cachegen.core.interfaces.llm_client import ILLMClient, ProviderError
from cachegen.core.interfaces.schema_cache import ISchemaCache
from cachegen.core.interfaces.serializer import IConfigSerializer, SerializationError

__all__ = [
    "ILLMClient",
    "ISchemaCache",
    "IConfigSerializer",
    "ProviderError",
    "SerializationError",
]
