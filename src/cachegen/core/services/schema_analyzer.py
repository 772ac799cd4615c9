"""Schema analyzer - main entry point of the analysis engine.

Walks an introspected schema once and derives the entities, root
operations and relationships that drive cache policy generation. Pure and
synchronous: no I/O and no shared state, so independent schemas can be
analyzed concurrently.
"""

import logging
from collections.abc import Mapping
from typing import Any

from cachegen.core.entities.introspection import (
    IntrospectionSchema,
    IntrospectionType,
    MalformedSchemaError,
)
from cachegen.core.entities.schema import AnalyzedSchema, OperationKind
from cachegen.core.services.entity_extractor import extract_entities
from cachegen.core.services.operation_extractor import extract_operations
from cachegen.core.services.relationship_builder import (
    build_relationships,
    link_referenced_by,
)

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Derives an AnalyzedSchema from an introspection result."""

    def analyze(
        self, schema: IntrospectionSchema | Mapping[str, Any]
    ) -> AnalyzedSchema:
        """Analyze an introspected schema.

        Args:
            schema: A parsed IntrospectionSchema, or the raw introspection
                JSON (any shape accepted by ``IntrospectionSchema.from_dict``).

        Returns:
            The analyzed schema.

        Raises:
            MalformedSchemaError: If the input is not a valid introspection
                result or a declared root type is missing.
        """
        if not isinstance(schema, IntrospectionSchema):
            schema = IntrospectionSchema.from_dict(schema)

        type_map: dict[str, IntrospectionType] = {}
        for type_def in schema.types:
            type_map[type_def.name] = type_def

        entities = extract_entities(schema.types, type_map)
        queries = extract_operations(
            self._root_type(schema.query_type, type_map, "query"),
            type_map,
            OperationKind.QUERY,
        )
        mutations = extract_operations(
            self._root_type(schema.mutation_type, type_map, "mutation"),
            type_map,
            OperationKind.MUTATION,
        )
        relationships = build_relationships(entities, type_map)
        entities = link_referenced_by(entities, relationships)

        logger.debug(
            "Analyzed schema: %d entities, %d queries, %d mutations, "
            "%d relationships",
            len(entities),
            len(queries),
            len(mutations),
            len(relationships),
        )

        return AnalyzedSchema(
            entities=entities,
            queries=queries,
            mutations=mutations,
            relationships=relationships,
            type_map=type_map,
        )

    def _root_type(
        self,
        name: str | None,
        type_map: Mapping[str, IntrospectionType],
        role: str,
    ) -> IntrospectionType | None:
        if name is None:
            return None
        if name not in type_map:
            raise MalformedSchemaError(
                f"Schema declares {role} type '{name}' but does not define it"
            )
        return type_map[name]


def analyze_schema(schema: IntrospectionSchema | Mapping[str, Any]) -> AnalyzedSchema:
    """Analyze an introspected schema with a default SchemaAnalyzer."""
    return SchemaAnalyzer().analyze(schema)
