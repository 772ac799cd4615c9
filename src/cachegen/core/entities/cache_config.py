"""Cache configuration entities.

The cache-rule document consumed by the edge-caching runtime, the
structured reply expected from the LLM, and the preferences a caller can
pass to steer generation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

CONFIG_VERSION = "1.0"
DEFAULT_CONFIG_NAME = "orion"


class CacheScope(Enum):
    """Cache scope of a rule.

    PUBLIC: Response can be cached by shared caches (CDN).
    PRIVATE: Response is user-specific, only the client may cache it.
    """

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass
class CacheRule:
    """A policy applied to one or more GraphQL types.

    Attributes:
        types: Type names the rule applies to.
        max_age: Freshness lifetime in seconds.
        stale_while_revalidate: Seconds stale content may be served while
            revalidating.
        stale_if_error: Seconds stale content may be served when the
            origin fails.
        scope: PUBLIC or PRIVATE. None means not set.
        passthrough: If True, never cache these types.
    """

    types: list[str]
    max_age: int | None = None
    stale_while_revalidate: int | None = None
    stale_if_error: int | None = None
    scope: CacheScope | None = None
    passthrough: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the runtime's camelCase shape, omitting unset values."""
        data: dict[str, Any] = {"types": list(self.types)}
        if self.max_age is not None:
            data["maxAge"] = self.max_age
        if self.stale_while_revalidate is not None:
            data["staleWhileRevalidate"] = self.stale_while_revalidate
        if self.stale_if_error is not None:
            data["staleIfError"] = self.stale_if_error
        if self.scope is not None:
            data["scope"] = self.scope.value
        if self.passthrough:
            data["passthrough"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CacheRule":
        scope = data.get("scope")
        return cls(
            types=list(data.get("types", [])),
            max_age=data.get("maxAge"),
            stale_while_revalidate=data.get("staleWhileRevalidate"),
            stale_if_error=data.get("staleIfError"),
            scope=CacheScope(scope) if scope else None,
            passthrough=bool(data.get("passthrough", False)),
        )


@dataclass
class CacheDefaults:
    """Policy applied to types no rule matches."""

    max_age: int = 300
    stale_while_revalidate: int = 0
    stale_if_error: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "maxAge": self.max_age,
            "staleWhileRevalidate": self.stale_while_revalidate,
            "staleIfError": self.stale_if_error,
        }


@dataclass
class CacheConfig:
    """The cache-rule document handed to the edge runtime.

    ``invalidations`` maps a mutation name to the cache-key patterns it
    purges (e.g. ``"User:*"``).
    """

    name: str = DEFAULT_CONFIG_NAME
    defaults: CacheDefaults = field(default_factory=CacheDefaults)
    rules: list[CacheRule] = field(default_factory=list)
    invalidations: dict[str, list[str]] = field(default_factory=dict)
    version: str = CONFIG_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the runtime document shape."""
        return {
            "version": self.version,
            "name": self.name,
            "defaults": self.defaults.to_dict(),
            "rules": [rule.to_dict() for rule in self.rules],
            "invalidations": {
                mutation: list(patterns)
                for mutation, patterns in self.invalidations.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CacheConfig":
        defaults = data.get("defaults", {})
        return cls(
            name=data.get("name", DEFAULT_CONFIG_NAME),
            defaults=CacheDefaults(
                max_age=defaults.get("maxAge", 300),
                stale_while_revalidate=defaults.get("staleWhileRevalidate", 0),
                stale_if_error=defaults.get("staleIfError", 0),
            ),
            rules=[CacheRule.from_dict(r) for r in data.get("rules", [])],
            invalidations={
                k: list(v) for k, v in data.get("invalidations", {}).items()
            },
            version=data.get("version", CONFIG_VERSION),
        )


@dataclass
class GeneratedCacheRule:
    """A cache rule as proposed by the LLM, with its reasoning."""

    types: list[str]
    max_age: int
    reasoning: str
    stale_while_revalidate: int | None = None
    stale_if_error: int | None = None
    scope: CacheScope | None = None
    passthrough: bool | None = None


@dataclass
class AIConfigResponse:
    """Structured reply extracted from the LLM output."""

    rules: list[GeneratedCacheRule]
    invalidations: dict[str, list[str]] = field(default_factory=dict)
    explanation: str = "No explanation provided"
    confidence: float = 0.7
    warnings: list[str] = field(default_factory=list)


class DefaultTtl(Enum):
    """Preferred default freshness window."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


# Prompt hint for each preference and the default maxAge it selects.
TTL_RANGES = {
    DefaultTtl.SHORT: "60-300s",
    DefaultTtl.MEDIUM: "300-900s",
    DefaultTtl.LONG: "900-3600s",
}
TTL_DEFAULT_MAX_AGE = {
    DefaultTtl.SHORT: 60,
    DefaultTtl.MEDIUM: 300,
    DefaultTtl.LONG: 900,
}


@dataclass
class ConfigPreferences:
    """Caller hints for AI generation."""

    default_ttl: DefaultTtl | None = None
    aggressive_caching: bool | None = None
    no_cache_types: list[str] = field(default_factory=list)
    private_types: list[str] = field(default_factory=list)
    custom_hints: str | None = None

    def __post_init__(self) -> None:
        """Accept plain strings for default_ttl."""
        if isinstance(self.default_ttl, str):
            self.default_ttl = DefaultTtl(self.default_ttl)


@dataclass
class GenerateConfigResult:
    """Outcome of one generation attempt. Never raised, always returned."""

    success: bool
    config: CacheConfig | None = None
    ai_response: AIConfigResponse | None = None
    error: str | None = None
