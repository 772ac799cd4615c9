"""GraphQL introspection client."""

from cachegen.infrastructure.introspection.client import (
    INTROSPECTION_QUERY,
    EndpointReachability,
    IntrospectionClient,
    IntrospectionResult,
    fetch_schema,
)

__all__ = [
    "INTROSPECTION_QUERY",
    "IntrospectionClient",
    "IntrospectionResult",
    "EndpointReachability",
    "fetch_schema",
]
