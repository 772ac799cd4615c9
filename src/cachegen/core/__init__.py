"""Core domain layer for cachegen."""

from cachegen.core.entities import AnalyzedSchema, CacheConfig, IntrospectionSchema
from cachegen.core.interfaces import (
    IConfigSerializer,
    ILLMClient,
    ISchemaCache,
)
from cachegen.core.services import (
    AIConfigGenerator,
    SchemaAnalyzer,
    analyze_schema,
    generate_basic_config,
)

__all__ = [
    # Entities
    "AnalyzedSchema",
    "CacheConfig",
    "IntrospectionSchema",
    # Interfaces
    "ILLMClient",
    "ISchemaCache",
    "IConfigSerializer",
    # Services
    "SchemaAnalyzer",
    "AIConfigGenerator",
    "analyze_schema",
    "generate_basic_config",
]
