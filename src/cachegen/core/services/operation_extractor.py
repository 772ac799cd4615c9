"""Operation extraction from the Query and Mutation root types."""

import logging
from collections.abc import Mapping

from cachegen.core.entities.introspection import (
    IntrospectionField,
    IntrospectionType,
)
from cachegen.core.entities.schema import ArgumentInfo, Operation, OperationKind
from cachegen.core.services.entity_extractor import is_object_reference
from cachegen.core.services.patterns import (
    MUTATION_VERB_PREFIXES,
    type_from_mutation_name,
)
from cachegen.core.services.type_resolver import resolve_type_ref

logger = logging.getLogger(__name__)


def extract_operations(
    root_type: IntrospectionType | None,
    type_map: Mapping[str, IntrospectionType],
    kind: OperationKind,
) -> list[Operation]:
    """Extract one operation per field of a root type.

    Args:
        root_type: The Query or Mutation type, or None if the schema has
            no such root.
        type_map: All schema types keyed by name.
        kind: Whether the root is the query or the mutation type.
            Affected types are only inferred for mutations.

    Returns:
        The operations in field order, or an empty list if the root type
        is absent or has no fields.
    """
    if root_type is None or not root_type.fields:
        return []

    return [_extract_operation(f, type_map, kind) for f in root_type.fields]


def _extract_operation(
    field: IntrospectionField,
    type_map: Mapping[str, IntrospectionType],
    kind: OperationKind,
) -> Operation:
    resolved = resolve_type_ref(field.type)

    arguments = []
    for arg in field.args:
        arg_type = resolve_type_ref(arg.type)
        arguments.append(
            ArgumentInfo(
                name=arg.name,
                type_name=arg_type.type_name,
                is_required=arg_type.is_non_null,
                description=arg.description,
            )
        )

    affected: list[str] = []
    if kind == OperationKind.MUTATION:
        affected = infer_affected_types(field.name, resolved.type_name, type_map)

    return Operation(
        name=field.name,
        description=field.description,
        return_type=resolved.type_name,
        returns_list=resolved.is_list,
        arguments=tuple(arguments),
        affected_types=tuple(affected),
    )


def infer_affected_types(
    mutation_name: str,
    return_type: str,
    type_map: Mapping[str, IntrospectionType],
) -> list[str]:
    """Infer which types a mutation modifies.

    Two sources, in this order:
    1. The return type, if it is a user-defined object type.
    2. The mutation name: ``updatePost`` affects ``Post`` when a type of
       that name exists.

    This follows naming conventions only. Mutations such as
    ``archiveUser`` or ``toggleLike`` are attributed to nothing.

    Returns:
        Deduplicated type names in discovery order.
    """
    affected: dict[str, None] = {}

    if is_object_reference(return_type, type_map):
        affected.setdefault(return_type)

    lower_name = mutation_name.lower()
    for prefix in MUTATION_VERB_PREFIXES:
        if not lower_name.startswith(prefix):
            continue
        candidate = type_from_mutation_name(mutation_name, prefix)
        if candidate and candidate in type_map:
            affected.setdefault(candidate)

    if not affected:
        logger.debug("No affected types inferred for mutation %s", mutation_name)

    return list(affected)
