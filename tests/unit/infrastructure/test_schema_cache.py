"""Tests for InMemorySchemaCache."""

import time

import pytest

from cachegen import InMemorySchemaCache, IntrospectionSchema
from cachegen.core.entities import IntrospectionType, TypeKind


def make_schema(query_name: str = "Query") -> IntrospectionSchema:
    return IntrospectionSchema(
        types=(IntrospectionType(kind=TypeKind.OBJECT, name=query_name, fields=()),),
        query_type=query_name,
    )


class TestInMemorySchemaCache:
    """Tests for InMemorySchemaCache."""

    @pytest.fixture
    def cache(self) -> InMemorySchemaCache:
        """Create a cache for testing."""
        return InMemorySchemaCache(maxsize=10, ttl=300.0)

    @pytest.mark.asyncio
    async def test_set_and_get(self, cache: InMemorySchemaCache) -> None:
        """Test a stored schema is returned."""
        schema = make_schema()
        await cache.set("schema:https://a", schema)

        assert await cache.get("schema:https://a") == schema

    @pytest.mark.asyncio
    async def test_get_missing_key(self, cache: InMemorySchemaCache) -> None:
        """Test a missing key returns None."""
        assert await cache.get("schema:nowhere") is None

    @pytest.mark.asyncio
    async def test_delete(self, cache: InMemorySchemaCache) -> None:
        """Test a deleted entry is gone."""
        await cache.set("k", make_schema())

        assert await cache.delete("k") is True
        assert await cache.get("k") is None
        assert await cache.delete("k") is False

    @pytest.mark.asyncio
    async def test_clear(self, cache: InMemorySchemaCache) -> None:
        """Test clear removes every entry."""
        await cache.set("a", make_schema())
        await cache.set("b", make_schema("Root"))

        await cache.clear()

        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_lru_eviction(self) -> None:
        """Oldest entry is evicted once maxsize is reached."""
        cache = InMemorySchemaCache(maxsize=2)
        await cache.set("a", make_schema())
        await cache.set("b", make_schema())
        await cache.set("c", make_schema())

        assert len(cache) == 2
        assert await cache.get("a") is None
        assert await cache.get("c") is not None

    @pytest.mark.asyncio
    async def test_ttl_expiration(self) -> None:
        """Entries expire after the TTL."""
        cache = InMemorySchemaCache(ttl=0.1)
        await cache.set("a", make_schema())

        time.sleep(0.15)

        assert await cache.get("a") is None
