"""Hashing utilities for cache keys and prompt fingerprints."""

import hashlib
import json
from typing import Any


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    Args:
        value: Any JSON-serializable value.

    Returns:
        A hexadecimal hash string (first 16 chars of SHA-256).
    """
    if value is None:
        return "none"

    # Sorted keys so equal mappings hash the same
    normalized = json.dumps(value, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def schema_cache_key(endpoint: str, headers: dict[str, str] | None = None) -> str:
    """Build the cache key of an introspection request.

    Header values are hashed so credentials never appear in keys.

    Args:
        endpoint: The GraphQL endpoint URL.
        headers: Extra request headers, if any.

    Returns:
        A key of the form ``schema:<endpoint>`` or
        ``schema:<endpoint>:h:<hash>``.
    """
    parts = ["schema", endpoint.rstrip("/")]
    if headers:
        lowered = {k.lower(): v for k, v in headers.items()}
        parts.append(f"h:{hash_value(lowered)}")
    return ":".join(parts)
