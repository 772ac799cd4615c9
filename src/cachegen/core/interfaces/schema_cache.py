"""Schema cache interface."""

from typing import Protocol

from cachegen.core.entities.introspection import IntrospectionSchema


class ISchemaCache(Protocol):
    """Contract for caching introspection results between fetches.

    Methods are async so distributed implementations can be plugged in
    next to the in-memory one.
    """

    async def get(self, key: str) -> IntrospectionSchema | None:
        """Retrieve a cached schema.

        Args:
            key: The cache key (endpoint and request fingerprint).

        Returns:
            The cached schema, or None if not found or expired.
        """
        ...

    async def set(self, key: str, schema: IntrospectionSchema) -> None:
        """Store a schema under a key."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached schema.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def clear(self) -> None:
        """Clear all cached schemas."""
        ...
