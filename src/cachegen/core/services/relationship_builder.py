"""Relationship graph between entities."""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from cachegen.core.entities.introspection import IntrospectionType
from cachegen.core.entities.schema import (
    Entity,
    RelationshipDirection,
    TypeRelationship,
)
from cachegen.core.services.type_resolver import resolve_type_ref


def build_relationships(
    entities: Iterable[Entity],
    type_map: Mapping[str, IntrospectionType],
) -> list[TypeRelationship]:
    """Build the directed edge list between entities.

    One edge per field whose resolved type is another entity. Two fields
    pointing at the same target give two edges. Self-references and root
    types (Query/Mutation/Subscription) produce no edges.

    Args:
        entities: Entities from the extraction pass.
        type_map: All schema types keyed by name.

    Returns:
        Edges in discovery order (entity order, then field order).
    """
    entities = list(entities)
    linkable = {
        e.name for e in entities if not e.characteristics.is_root_type
    }
    relationships: list[TypeRelationship] = []

    for entity in entities:
        if entity.name not in linkable:
            continue
        type_def = type_map[entity.name]

        for field in type_def.fields or ():
            resolved = resolve_type_ref(field.type)
            if resolved.type_name == entity.name:
                continue
            if resolved.type_name not in linkable:
                continue
            relationships.append(
                TypeRelationship(
                    source=entity.name,
                    target=resolved.type_name,
                    field_name=field.name,
                    is_list=resolved.is_list,
                    direction=RelationshipDirection.OUTGOING,
                )
            )

    return relationships


def link_referenced_by(
    entities: Iterable[Entity],
    relationships: Iterable[TypeRelationship],
) -> list[Entity]:
    """Return new entities with ``referenced_by`` filled from the edges.

    Sources are added in edge order and deduplicated. The input entities
    are not modified.
    """
    referenced_by: dict[str, dict[str, None]] = {}
    for rel in relationships:
        referenced_by.setdefault(rel.target, {}).setdefault(rel.source)

    return [
        replace(entity, referenced_by=tuple(referenced_by[entity.name]))
        if entity.name in referenced_by
        else entity
        for entity in entities
    ]
