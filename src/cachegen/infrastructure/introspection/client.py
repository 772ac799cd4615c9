"""GraphQL introspection over HTTP."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from graphql import get_introspection_query

from cachegen.core.entities.introspection import (
    IntrospectionSchema,
    MalformedSchemaError,
)
from cachegen.core.entities.settings import Settings
from cachegen.core.interfaces.schema_cache import ISchemaCache
from cachegen.infrastructure.backends.memory import InMemorySchemaCache
from cachegen.utils.hashing import schema_cache_key

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = get_introspection_query(descriptions=True)
INTROSPECTION_OPERATION = "IntrospectionQuery"

# Minimal query used to check an endpoint.
SCHEMA_CHECK_QUERY = "query { __schema { queryType { name } } }"


@dataclass
class IntrospectionResult:
    """Outcome of an introspection fetch."""

    success: bool
    schema: IntrospectionSchema | None = None
    error: str | None = None


@dataclass
class EndpointReachability:
    """Outcome of an endpoint reachability check."""

    reachable: bool
    error: str | None = None


def _graphql_errors(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors") or []
    return [
        e.get("message", "Unknown error") if isinstance(e, dict) else str(e)
        for e in errors
    ]


class IntrospectionClient:
    """Fetches schemas from GraphQL servers.

    Network failures, HTTP errors and GraphQL errors are reported as
    unsuccessful results. Cancellation of the calling task propagates.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        cache: ISchemaCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            headers: Headers sent with every request (e.g. authorization).
            cache: Optional cache of successful introspection results.
            transport: Optional httpx transport, mainly for tests.
        """
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._cache = cache
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "IntrospectionClient":
        """Create a client with an in-memory schema cache sized by settings."""
        return cls(
            timeout=settings.introspection_timeout,
            headers=headers,
            cache=InMemorySchemaCache(
                maxsize=settings.schema_cache_size,
                ttl=settings.schema_cache_ttl,
            ),
            transport=transport,
        )

    def _client(self, timeout: float | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout if timeout is None else timeout,
            transport=self._transport,
        )

    async def fetch_schema(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        use_cache: bool = True,
    ) -> IntrospectionResult:
        """Run the full introspection query against an endpoint.

        Args:
            endpoint: The GraphQL endpoint URL.
            headers: Extra headers for this request.
            use_cache: Serve from and store into the schema cache.

        Returns:
            The parsed schema, or the reason it could not be fetched.
        """
        request_headers = {**self._headers, **(headers or {})}
        key = schema_cache_key(endpoint, request_headers)

        if use_cache and self._cache is not None:
            cached = await self._cache.get(key)
            if cached is not None:
                logger.debug("Schema cache hit for %s", endpoint)
                return IntrospectionResult(success=True, schema=cached)

        try:
            async with self._client() as client:
                response = await client.post(
                    endpoint,
                    headers={"Content-Type": "application/json", **request_headers},
                    json={
                        "query": INTROSPECTION_QUERY,
                        "operationName": INTROSPECTION_OPERATION,
                    },
                )
        except httpx.TimeoutException:
            return IntrospectionResult(
                success=False,
                error=f"Request timeout after {int(self._timeout * 1000)}ms",
            )
        except httpx.HTTPError as e:
            return IntrospectionResult(success=False, error=str(e) or type(e).__name__)

        if not response.is_success:
            return IntrospectionResult(
                success=False,
                error=f"HTTP {response.status_code}: {response.reason_phrase}",
            )

        try:
            payload = response.json()
        except ValueError as e:
            return IntrospectionResult(
                success=False, error=f"Invalid JSON in introspection response: {e}"
            )

        errors = _graphql_errors(payload)
        if errors:
            return IntrospectionResult(
                success=False, error=f"GraphQL errors: {'; '.join(errors)}"
            )

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict) or not data.get("__schema"):
            return IntrospectionResult(
                success=False,
                error="Invalid introspection response: missing __schema",
            )

        try:
            schema = IntrospectionSchema.from_dict(data["__schema"])
        except MalformedSchemaError as e:
            return IntrospectionResult(
                success=False, error=f"Invalid introspection response: {e}"
            )

        if use_cache and self._cache is not None:
            await self._cache.set(key, schema)

        logger.debug("Fetched schema with %d types from %s", len(schema.types), endpoint)
        return IntrospectionResult(success=True, schema=schema)

    async def is_introspection_enabled(self, endpoint: str) -> bool:
        """Check whether the server answers introspection queries.

        Some servers disable introspection in production.
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    endpoint,
                    headers={"Content-Type": "application/json", **self._headers},
                    json={"query": SCHEMA_CHECK_QUERY},
                )
            payload = response.json()
        except (httpx.HTTPError, ValueError):
            return False

        data = payload.get("data") if isinstance(payload, dict) else None
        schema = data.get("__schema") if isinstance(data, dict) else None
        return bool(schema and schema.get("queryType"))

    async def check_reachability(
        self, endpoint: str, timeout: float = 5.0
    ) -> EndpointReachability:
        """Check an endpoint with a minimal introspection query.

        A server that rejects introspection still counts as reachable.
        """
        try:
            async with self._client(timeout) as client:
                response = await client.post(
                    endpoint,
                    headers={"Content-Type": "application/json", **self._headers},
                    json={"query": SCHEMA_CHECK_QUERY},
                )
        except httpx.TimeoutException:
            return EndpointReachability(
                reachable=False, error=f"Request timed out ({timeout:g} seconds)"
            )
        except httpx.HTTPError as e:
            return EndpointReachability(reachable=False, error=str(e) or type(e).__name__)

        if not response.is_success:
            return EndpointReachability(
                reachable=False,
                error=f"HTTP {response.status_code}: {response.reason_phrase}",
            )

        try:
            payload = response.json()
        except ValueError:
            return EndpointReachability(
                reachable=False, error="Endpoint did not return JSON"
            )

        errors = _graphql_errors(payload)
        if errors:
            if "introspection" in errors[0].lower():
                return EndpointReachability(reachable=True)
            return EndpointReachability(
                reachable=False, error=f"GraphQL error: {errors[0]}"
            )

        return EndpointReachability(reachable=True)


async def fetch_schema(
    endpoint: str,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> IntrospectionResult:
    """Fetch a schema with a one-off IntrospectionClient."""
    return await IntrospectionClient(timeout=timeout).fetch_schema(endpoint, headers)
