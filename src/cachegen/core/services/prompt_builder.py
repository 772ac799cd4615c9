"""Prompt construction for AI cache config generation."""

from cachegen.core.entities.cache_config import TTL_RANGES, ConfigPreferences
from cachegen.core.entities.schema import AnalyzedSchema
from cachegen.core.services.summary_renderer import render_schema_summary

SYSTEM_PROMPT = """\
You are an expert in GraphQL caching strategies and CDN configuration. \
Your task is to analyze a GraphQL schema and recommend optimal caching rules \
for an edge caching layer.

## Caching Concepts

1. **maxAge**: How long (in seconds) a response can be served from cache \
before it's considered stale.
   - Short (60-300s): For frequently changing data
   - Medium (300-900s): For moderately stable data
   - Long (900-3600s): For rarely changing data

2. **staleWhileRevalidate**: Time (in seconds) during which stale content can \
be served while fresh content is fetched in the background.
   - Improves perceived performance
   - Good for data that's acceptable to be slightly outdated

3. **staleIfError**: Time (in seconds) during which stale content can be \
served if the origin returns an error.
   - Improves reliability
   - Good for critical data that should always be available

4. **scope**:
   - "public": Can be cached by shared caches (CDN). Use for data that's the \
same for all users.
   - "private": Can only be cached by user's browser. Use for user-specific data.

5. **passthrough**: When true, bypasses cache entirely. Use for:
   - Real-time data that must always be fresh
   - Highly sensitive data
   - Data that changes on every request

## Guidelines

1. **Entity Types with ID fields** are good candidates for caching with \
surrogate keys
2. **User-specific data** (containing userId, author, etc.) should typically \
be "private"
3. **Volatile data** (with updatedAt, viewCount, etc.) needs shorter TTLs
4. **Sensitive data** (email, password, etc.) should be "private" or passthrough
5. **List queries** benefit from staleWhileRevalidate for pagination
6. **Mutations** should always invalidate related cache entries

## Output Format

Respond with a JSON object containing:
- rules: Array of cache rules with types, maxAge, staleWhileRevalidate, \
staleIfError, scope, passthrough, and reasoning
- invalidations: Object mapping mutation names to arrays of type patterns \
to invalidate
- explanation: Overall explanation of the caching strategy
- confidence: Number 0-1 indicating confidence in recommendations
- warnings: Array of potential issues or considerations

Be specific and practical. Consider real-world usage patterns."""

CLOSING_INSTRUCTIONS = """
Generate a comprehensive caching configuration. Consider:
1. Which types should be cached and for how long
2. Which types need private scope
3. Which types should bypass cache entirely
4. What invalidation rules should apply when mutations occur

Respond with valid JSON only."""


def build_system_prompt() -> str:
    """Return the fixed system prompt describing the task and reply format."""
    return SYSTEM_PROMPT


def build_user_prompt(
    schema: AnalyzedSchema,
    preferences: ConfigPreferences | None = None,
) -> str:
    """Build the user prompt from the schema summary and preferences.

    Args:
        schema: The analyzed schema; rendered with ``render_schema_summary``.
        preferences: Optional caller preferences, added as a
            "User Preferences" section.

    Returns:
        The prompt text.
    """
    summary = render_schema_summary(schema)
    prompt = (
        "Analyze the following GraphQL schema and generate caching "
        f"configuration:\n\n{summary}\n"
    )

    if preferences is not None:
        prompt += "\n## User Preferences\n\n"
        prompt += "".join(f"- {line}\n" for line in _preference_lines(preferences))

    return prompt + CLOSING_INSTRUCTIONS


def _preference_lines(preferences: ConfigPreferences) -> list[str]:
    lines = []
    if preferences.default_ttl is not None:
        ttl = preferences.default_ttl
        lines.append(f"Preferred default TTL: {ttl.value} ({TTL_RANGES[ttl]})")
    if preferences.aggressive_caching is not None:
        answer = (
            "Yes, prioritize performance"
            if preferences.aggressive_caching
            else "No, prioritize freshness"
        )
        lines.append(f"Aggressive caching: {answer}")
    if preferences.no_cache_types:
        lines.append(
            "Types that should never be cached: "
            + ", ".join(preferences.no_cache_types)
        )
    if preferences.private_types:
        lines.append(
            "Types that should be private (user-specific): "
            + ", ".join(preferences.private_types)
        )
    if preferences.custom_hints:
        lines.append(f"Additional context: {preferences.custom_hints}")
    return lines
