"""Entity extraction from introspected types."""

from collections.abc import Iterable, Mapping

from cachegen.core.entities.introspection import (
    IntrospectionField,
    IntrospectionType,
    TypeKind,
)
from cachegen.core.entities.schema import Entity, EntityCharacteristics, FieldInfo
from cachegen.core.services.patterns import (
    COLLECTION_SUFFIXES,
    IDENTITY_FIELD_NAMES,
    ROOT_TYPE_NAMES,
    SENSITIVE_FIELD_PATTERNS,
    USER_SPECIFIC_PATTERNS,
    VOLATILE_FIELD_PATTERNS,
    is_built_in,
    matches_any,
)
from cachegen.core.services.type_resolver import resolve_type_ref


def is_entity_type(type_def: IntrospectionType) -> bool:
    """Check if a type qualifies as an entity.

    Entities are user-defined OBJECT types with a field list.
    """
    return (
        type_def.kind == TypeKind.OBJECT
        and type_def.fields is not None
        and not is_built_in(type_def.name)
    )


def is_object_reference(
    type_name: str, type_map: Mapping[str, IntrospectionType]
) -> bool:
    """Check if a resolved type name points at a user-defined object type."""
    referenced = type_map.get(type_name)
    return (
        referenced is not None
        and referenced.kind == TypeKind.OBJECT
        and not is_built_in(type_name)
    )


def extract_entities(
    types: Iterable[IntrospectionType],
    type_map: Mapping[str, IntrospectionType],
) -> list[Entity]:
    """Extract one entity per qualifying type, in input order.

    ``referenced_by`` is left empty; it is filled in by the relationship
    pass.

    Args:
        types: All named types of the schema.
        type_map: The same types keyed by name.

    Returns:
        The extracted entities.
    """
    return [
        extract_entity(type_def, type_map)
        for type_def in types
        if is_entity_type(type_def)
    ]


def extract_entity(
    type_def: IntrospectionType,
    type_map: Mapping[str, IntrospectionType],
) -> Entity:
    """Build the entity record for a single object type."""
    raw_fields = type_def.fields or ()
    fields = tuple(_extract_field_info(f) for f in raw_fields)

    return Entity(
        name=type_def.name,
        description=type_def.description,
        has_id=any(f.name in IDENTITY_FIELD_NAMES for f in fields),
        fields=fields,
        references=tuple(find_referenced_types(type_def.name, fields, type_map)),
        characteristics=classify(type_def.name, [f.name for f in fields]),
    )


def _extract_field_info(field: IntrospectionField) -> FieldInfo:
    resolved = resolve_type_ref(field.type)
    return FieldInfo(
        name=field.name,
        type_name=resolved.type_name,
        is_non_null=resolved.is_non_null,
        is_list=resolved.is_list,
        description=field.description,
    )


def find_referenced_types(
    owner: str,
    fields: Iterable[FieldInfo],
    type_map: Mapping[str, IntrospectionType],
) -> list[str]:
    """Object types referenced by the fields, deduplicated in first-seen order.

    The owning type and root types are never included.
    """
    references: dict[str, None] = {}
    for field in fields:
        if field.type_name == owner or field.type_name in ROOT_TYPE_NAMES:
            continue
        if is_object_reference(field.type_name, type_map):
            references.setdefault(field.type_name)
    return list(references)


def classify(type_name: str, field_names: list[str]) -> EntityCharacteristics:
    """Infer caching traits from the type name and its field names."""
    return EntityCharacteristics(
        is_volatile=matches_any(field_names, VOLATILE_FIELD_PATTERNS),
        is_user_specific=matches_any(field_names, USER_SPECIFIC_PATTERNS),
        has_sensitive_fields=matches_any(field_names, SENSITIVE_FIELD_PATTERNS),
        is_collection=type_name.endswith(COLLECTION_SUFFIXES),
        is_root_type=type_name in ROOT_TYPE_NAMES,
    )
