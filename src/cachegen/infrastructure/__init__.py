"""Infrastructure layer implementations for cachegen."""

from cachegen.infrastructure.backends import InMemorySchemaCache
from cachegen.infrastructure.credentials import CredentialStore
from cachegen.infrastructure.introspection import IntrospectionClient
from cachegen.infrastructure.llm import LLMClient
from cachegen.infrastructure.serializers import JsonConfigSerializer

__all__ = [
    "InMemorySchemaCache",
    "CredentialStore",
    "IntrospectionClient",
    "LLMClient",
    "JsonConfigSerializer",
]
