"""cachegen - derive edge-caching policies from GraphQL schemas.

Pulls a schema through introspection, classifies its types by
caching-relevant traits (volatile, user-specific, sensitive), and turns
that analysis into a cache-rule document for an edge-caching runtime,
either from fixed heuristics or through one LLM call.

Heuristic config:
    from cachegen import (
        IntrospectionClient,
        JsonConfigSerializer,
        analyze_schema,
        generate_basic_config,
    )

    result = await IntrospectionClient(timeout=10).fetch_schema(
        "https://api.example.com/graphql",
        headers={"Authorization": "Bearer ..."},
    )
    if result.success:
        analyzed = analyze_schema(result.schema)
        config = generate_basic_config(analyzed)
        JsonConfigSerializer().write(config, "cache-config.json")

AI-generated config:
    from cachegen import ConfigPreferences, generate_cache_config

    result = await generate_cache_config(
        analyzed,
        provider="anthropic",
        preferences=ConfigPreferences(default_ttl="short", private_types=["Order"]),
    )
    if result.success:
        print(result.ai_response.explanation)
    else:
        print(result.error)

In-process schemas (graphql-core):
    from graphql import build_schema
    from cachegen import IntrospectionSchema, analyze_schema

    schema = build_schema(sdl)
    analyzed = analyze_schema(IntrospectionSchema.from_graphql_schema(schema))
"""

from cachegen.core.entities import (
    AIConfigResponse,
    AnalyzedSchema,
    ArgumentInfo,
    CacheConfig,
    CacheDefaults,
    CacheRule,
    CacheScope,
    ConfigPreferences,
    DefaultTtl,
    Entity,
    EntityCharacteristics,
    FieldInfo,
    GeneratedCacheRule,
    GenerateConfigResult,
    IntrospectionSchema,
    IntrospectionType,
    IntrospectionTypeRef,
    MalformedSchemaError,
    Operation,
    ResolvedFieldType,
    Settings,
    TypeKind,
    TypeRelationship,
)
from cachegen.core.interfaces import (
    IConfigSerializer,
    ILLMClient,
    ISchemaCache,
    ProviderError,
    SerializationError,
)
from cachegen.core.services import (
    AIConfigGenerator,
    ResponseParseError,
    SchemaAnalyzer,
    analyze_schema,
    build_system_prompt,
    build_user_prompt,
    convert_to_cache_config,
    generate_basic_config,
    parse_ai_response,
    render_schema_summary,
    resolve_type_ref,
)
from cachegen.generation import generate_cache_config
from cachegen.infrastructure import (
    CredentialStore,
    InMemorySchemaCache,
    IntrospectionClient,
    JsonConfigSerializer,
    LLMClient,
)
from cachegen.infrastructure.llm import (
    AIProvider,
    get_default_model,
    get_supported_providers,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Introspection input
    "IntrospectionSchema",
    "IntrospectionType",
    "IntrospectionTypeRef",
    "TypeKind",
    "MalformedSchemaError",
    # Analysis
    "SchemaAnalyzer",
    "analyze_schema",
    "resolve_type_ref",
    "render_schema_summary",
    "AnalyzedSchema",
    "Entity",
    "EntityCharacteristics",
    "FieldInfo",
    "ArgumentInfo",
    "Operation",
    "TypeRelationship",
    "ResolvedFieldType",
    # Cache config
    "CacheConfig",
    "CacheDefaults",
    "CacheRule",
    "CacheScope",
    "generate_basic_config",
    "convert_to_cache_config",
    # AI generation
    "AIConfigGenerator",
    "AIConfigResponse",
    "GeneratedCacheRule",
    "ConfigPreferences",
    "DefaultTtl",
    "GenerateConfigResult",
    "generate_cache_config",
    "build_system_prompt",
    "build_user_prompt",
    "parse_ai_response",
    "ResponseParseError",
    # Providers
    "AIProvider",
    "LLMClient",
    "ProviderError",
    "get_default_model",
    "get_supported_providers",
    # Interfaces
    "ILLMClient",
    "ISchemaCache",
    "IConfigSerializer",
    "SerializationError",
    # Infrastructure implementations
    "IntrospectionClient",
    "InMemorySchemaCache",
    "JsonConfigSerializer",
    "CredentialStore",
    # Settings
    "Settings",
]
