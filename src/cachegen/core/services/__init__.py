"""Domain services for cachegen."""

from cachegen.core.services.ai_config_generator import AIConfigGenerator
from cachegen.core.services.config_converter import (
    convert_to_cache_config,
    generate_basic_config,
)
from cachegen.core.services.entity_extractor import extract_entities
from cachegen.core.services.operation_extractor import (
    extract_operations,
    infer_affected_types,
)
from cachegen.core.services.prompt_builder import (
    build_system_prompt,
    build_user_prompt,
)
from cachegen.core.services.relationship_builder import (
    build_relationships,
    link_referenced_by,
)
from cachegen.core.services.response_parser import (
    ResponseParseError,
    parse_ai_response,
)
from cachegen.core.services.schema_analyzer import SchemaAnalyzer, analyze_schema
from cachegen.core.services.summary_renderer import render_schema_summary
from cachegen.core.services.type_resolver import resolve_type_ref

__all__ = [
    # Analysis engine
    "SchemaAnalyzer",
    "analyze_schema",
    "resolve_type_ref",
    "extract_entities",
    "extract_operations",
    "infer_affected_types",
    "build_relationships",
    "link_referenced_by",
    "render_schema_summary",
    # Config generation
    "generate_basic_config",
    "convert_to_cache_config",
    "AIConfigGenerator",
    "build_system_prompt",
    "build_user_prompt",
    "parse_ai_response",
    "ResponseParseError",
]
