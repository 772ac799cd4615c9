"""In-memory schema cache implementation."""

from cachetools import TTLCache  # type: ignore[import-untyped]

from cachegen.core.entities.introspection import IntrospectionSchema


class InMemorySchemaCache:
    """In-memory cache of introspection results using LRU with TTL.

    Suitable for a single process that re-analyzes the same endpoints.
    Uses cachetools for LRU eviction and TTL expiration.
    """

    def __init__(
        self,
        maxsize: int = 32,
        ttl: float = 300.0,
    ) -> None:
        """Initialize the schema cache.

        Args:
            maxsize: Maximum number of schemas kept.
            ttl: Seconds a schema stays valid.
        """
        self._cache: TTLCache[str, IntrospectionSchema] = TTLCache(
            maxsize=maxsize,
            ttl=ttl,
        )

    async def get(self, key: str) -> IntrospectionSchema | None:
        """Retrieve a cached schema.

        Args:
            key: The cache key.

        Returns:
            The cached schema, or None if not found or expired.
        """
        return self._cache.get(key)

    async def set(self, key: str, schema: IntrospectionSchema) -> None:
        """Store a schema.

        Args:
            key: The cache key.
            schema: The schema to store.
        """
        self._cache[key] = schema

    async def delete(self, key: str) -> bool:
        """Delete a cached schema.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        if key in self._cache:
            del self._cache[key]
            return True
        return False

    async def clear(self) -> None:
        """Clear all cached schemas."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of cached schemas."""
        return len(self._cache)
