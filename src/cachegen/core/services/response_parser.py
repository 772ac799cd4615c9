"""Parsing of LLM replies into structured cache recommendations.

Strict on the overall shape (a JSON object with a ``rules`` array),
lenient per field: missing or malformed rule fields get defaults instead
of failing the whole reply.
"""

import json
import math
import re
from typing import Any

from cachegen.core.entities.cache_config import (
    AIConfigResponse,
    CacheScope,
    GeneratedCacheRule,
)

CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

DEFAULT_RULE_MAX_AGE = 300
DEFAULT_REASONING = "No reasoning provided"
DEFAULT_EXPLANATION = "No explanation provided"
DEFAULT_CONFIDENCE = 0.7


class ResponseParseError(Exception):
    """Raised when an LLM reply is not a usable cache recommendation."""

    pass


def extract_json_text(response_text: str) -> str:
    """Return the content of the first fenced code block, or the text as is."""
    match = CODE_BLOCK_PATTERN.search(response_text)
    if match and match.group(1):
        return match.group(1).strip()
    return response_text


def parse_ai_response(response_text: str) -> AIConfigResponse:
    """Parse an LLM reply into an AIConfigResponse.

    Args:
        response_text: Raw text returned by the provider, optionally
            wrapped in a fenced code block.

    Returns:
        The structured reply.

    Raises:
        ResponseParseError: If the text is not JSON, or the JSON has no
            ``rules`` array.
    """
    try:
        parsed = json.loads(extract_json_text(response_text))
        if not isinstance(parsed, dict) or not isinstance(parsed.get("rules"), list):
            raise ValueError("Missing or invalid 'rules' array")

        rules = [_parse_rule(rule) for rule in parsed["rules"]]
        return AIConfigResponse(
            rules=rules,
            invalidations=_parse_invalidations(parsed.get("invalidations")),
            explanation=parsed.get("explanation") or DEFAULT_EXPLANATION,
            confidence=_parse_confidence(parsed.get("confidence")),
            warnings=_parse_warnings(parsed.get("warnings")),
        )
    except (ValueError, TypeError) as e:
        raise ResponseParseError(f"Failed to parse AI response: {e}") from e


def _parse_rule(rule: Any) -> GeneratedCacheRule:
    if not isinstance(rule, dict):
        raise TypeError(f"Rule must be an object, got {type(rule).__name__}")

    types = rule.get("types")
    if isinstance(types, str):
        types = [types]
    elif not isinstance(types, list):
        types = []
    passthrough = rule.get("passthrough")

    return GeneratedCacheRule(
        types=[str(t) for t in types],
        max_age=_parse_seconds(rule.get("maxAge"), DEFAULT_RULE_MAX_AGE),
        reasoning=rule.get("reasoning") or DEFAULT_REASONING,
        stale_while_revalidate=_parse_seconds(rule.get("staleWhileRevalidate")),
        stale_if_error=_parse_seconds(rule.get("staleIfError")),
        scope=_parse_scope(rule.get("scope")),
        passthrough=passthrough if isinstance(passthrough, bool) else None,
    )


def _is_number(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_seconds(value: Any, default: int | None = None) -> int | None:
    if not _is_number(value) or value < 0:
        return default
    return int(value)


def _parse_scope(value: Any) -> CacheScope | None:
    if not isinstance(value, str):
        return None
    try:
        return CacheScope(value.lower())
    except ValueError:
        return None


def _parse_confidence(value: Any) -> float:
    if not _is_number(value):
        return DEFAULT_CONFIDENCE
    return min(max(float(value), 0.0), 1.0)


def _parse_invalidations(value: Any) -> dict[str, list[str]]:
    if not isinstance(value, dict):
        return {}
    invalidations = {}
    for mutation, patterns in value.items():
        if isinstance(patterns, str):
            patterns = [patterns]
        if isinstance(patterns, list):
            invalidations[str(mutation)] = [str(p) for p in patterns]
    return invalidations


def _parse_warnings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(w) for w in value]
