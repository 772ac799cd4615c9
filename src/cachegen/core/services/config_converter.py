"""Cache config generation from an analyzed schema or an LLM reply."""

from dataclasses import dataclass

from cachegen.core.entities.cache_config import (
    DEFAULT_CONFIG_NAME,
    TTL_DEFAULT_MAX_AGE,
    AIConfigResponse,
    CacheConfig,
    CacheDefaults,
    CacheRule,
    CacheScope,
    ConfigPreferences,
)
from cachegen.core.entities.schema import AnalyzedSchema, Entity

DEFAULT_MAX_AGE = 300

# Heuristic buckets in priority order. An entity lands in the first bucket
# whose trait it has; entities with none of them are "stable".
SENSITIVE = "sensitive"
USER_SPECIFIC = "user_specific"
VOLATILE = "volatile"
STABLE = "stable"

BUCKET_PRIORITY = (SENSITIVE, USER_SPECIFIC, VOLATILE, STABLE)


@dataclass(frozen=True)
class BucketPolicy:
    """Fixed policy of a heuristic bucket."""

    max_age: int
    stale_while_revalidate: int | None = None
    stale_if_error: int | None = None
    scope: CacheScope | None = None

    def to_rule(self, types: list[str]) -> CacheRule:
        return CacheRule(
            types=types,
            max_age=self.max_age,
            stale_while_revalidate=self.stale_while_revalidate,
            stale_if_error=self.stale_if_error,
            scope=self.scope,
        )


BUCKET_POLICIES = {
    SENSITIVE: BucketPolicy(max_age=60, scope=CacheScope.PRIVATE),
    USER_SPECIFIC: BucketPolicy(
        max_age=300, stale_while_revalidate=60, scope=CacheScope.PRIVATE
    ),
    VOLATILE: BucketPolicy(max_age=60, stale_while_revalidate=30),
    STABLE: BucketPolicy(max_age=900, stale_while_revalidate=300, stale_if_error=3600),
}


def classify_bucket(entity: Entity) -> str:
    """Pick the single heuristic bucket for an entity."""
    traits = entity.characteristics
    if traits.has_sensitive_fields:
        return SENSITIVE
    if traits.is_user_specific:
        return USER_SPECIFIC
    if traits.is_volatile:
        return VOLATILE
    return STABLE


def build_invalidations(schema: AnalyzedSchema) -> dict[str, list[str]]:
    """Map each mutation with inferred affected types to ``<Type>:*`` patterns."""
    return {
        mutation.name: [f"{type_name}:*" for type_name in mutation.affected_types]
        for mutation in schema.mutations
        if mutation.affected_types
    }


def generate_basic_config(
    schema: AnalyzedSchema,
    name: str = DEFAULT_CONFIG_NAME,
) -> CacheConfig:
    """Generate a cache config from schema heuristics, without an LLM.

    Non-root entities are partitioned by priority
    sensitive > user-specific > volatile > stable and each non-empty
    bucket becomes one rule with a fixed policy.

    Args:
        schema: The analyzed schema.
        name: Name of the produced config.

    Returns:
        The generated cache config.
    """
    buckets: dict[str, list[str]] = {bucket: [] for bucket in BUCKET_PRIORITY}
    for entity in schema.cacheable_entities:
        buckets[classify_bucket(entity)].append(entity.name)

    rules = [
        BUCKET_POLICIES[bucket].to_rule(buckets[bucket])
        for bucket in BUCKET_PRIORITY
        if buckets[bucket]
    ]

    return CacheConfig(
        name=name,
        defaults=CacheDefaults(
            max_age=DEFAULT_MAX_AGE,
            stale_while_revalidate=60,
            stale_if_error=0,
        ),
        rules=rules,
        invalidations=build_invalidations(schema),
    )


def convert_to_cache_config(
    ai_response: AIConfigResponse,
    preferences: ConfigPreferences | None = None,
    name: str = DEFAULT_CONFIG_NAME,
) -> CacheConfig:
    """Convert an LLM reply into the runtime config document.

    Reasoning is dropped. Stale windows are only kept when positive and
    passthrough only when true.

    Args:
        ai_response: The parsed LLM reply.
        preferences: Optional preferences; ``default_ttl`` selects the
            default maxAge (short=60, medium=300, long=900).
        name: Name of the produced config.

    Returns:
        The cache config.
    """
    default_max_age = DEFAULT_MAX_AGE
    if preferences is not None and preferences.default_ttl is not None:
        default_max_age = TTL_DEFAULT_MAX_AGE[preferences.default_ttl]

    rules = []
    for generated in ai_response.rules:
        rule = CacheRule(types=list(generated.types), max_age=generated.max_age)
        if generated.stale_while_revalidate and generated.stale_while_revalidate > 0:
            rule.stale_while_revalidate = generated.stale_while_revalidate
        if generated.stale_if_error and generated.stale_if_error > 0:
            rule.stale_if_error = generated.stale_if_error
        if generated.scope is not None:
            rule.scope = generated.scope
        if generated.passthrough:
            rule.passthrough = True
        rules.append(rule)

    return CacheConfig(
        name=name,
        defaults=CacheDefaults(
            max_age=default_max_age,
            stale_while_revalidate=0,
            stale_if_error=0,
        ),
        rules=rules,
        invalidations={k: list(v) for k, v in ai_response.invalidations.items()},
    )
