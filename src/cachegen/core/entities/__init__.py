"""Domain entities for cachegen."""

from cachegen.core.entities.cache_config import (
    AIConfigResponse,
    CacheConfig,
    CacheDefaults,
    CacheRule,
    CacheScope,
    ConfigPreferences,
    DefaultTtl,
    GeneratedCacheRule,
    GenerateConfigResult,
)
from cachegen.core.entities.introspection import (
    IntrospectionEnumValue,
    IntrospectionField,
    IntrospectionInputValue,
    IntrospectionSchema,
    IntrospectionType,
    IntrospectionTypeRef,
    MalformedSchemaError,
    TypeKind,
)
from cachegen.core.entities.schema import (
    AnalyzedSchema,
    ArgumentInfo,
    Entity,
    EntityCharacteristics,
    FieldInfo,
    Operation,
    OperationKind,
    RelationshipDirection,
    ResolvedFieldType,
    TypeRelationship,
)
from cachegen.core.entities.settings import Settings

__all__ = [
    # Introspection input
    "IntrospectionSchema",
    "IntrospectionType",
    "IntrospectionField",
    "IntrospectionInputValue",
    "IntrospectionEnumValue",
    "IntrospectionTypeRef",
    "TypeKind",
    "MalformedSchemaError",
    # Analysis output
    "AnalyzedSchema",
    "Entity",
    "EntityCharacteristics",
    "FieldInfo",
    "ArgumentInfo",
    "Operation",
    "OperationKind",
    "TypeRelationship",
    "RelationshipDirection",
    "ResolvedFieldType",
    # Cache config
    "CacheConfig",
    "CacheDefaults",
    "CacheRule",
    "CacheScope",
    "GeneratedCacheRule",
    "AIConfigResponse",
    "ConfigPreferences",
    "DefaultTtl",
    "GenerateConfigResult",
    # Settings
    "Settings",
]
