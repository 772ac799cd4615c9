"""Schema cache backends."""

from cachegen.infrastructure.backends.memory import InMemorySchemaCache

__all__ = ["InMemorySchemaCache"]
