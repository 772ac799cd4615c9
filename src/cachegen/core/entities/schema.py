"""Analyzed schema entities.

Output of the schema analyzer: entities (cacheable object types), root
operations, and the relationship graph between entities.
"""

from dataclasses import dataclass, field
from enum import Enum

from cachegen.core.entities.introspection import IntrospectionType


@dataclass(frozen=True)
class ResolvedFieldType:
    """A type reference with its LIST/NON_NULL wrappers flattened."""

    type_name: str
    is_non_null: bool = False
    is_list: bool = False


@dataclass(frozen=True)
class FieldInfo:
    """A field of an entity, with its resolved type."""

    name: str
    type_name: str
    is_non_null: bool = False
    is_list: bool = False
    description: str | None = None


@dataclass(frozen=True)
class ArgumentInfo:
    """An argument of a root operation.

    ``is_required`` reflects NON_NULL wrapping only; a default value in
    the schema does not make the argument optional here.
    """

    name: str
    type_name: str
    is_required: bool = False
    description: str | None = None


@dataclass(frozen=True)
class EntityCharacteristics:
    """Caching-relevant traits inferred from field and type names.

    Traits are independent; an entity may be volatile, user-specific and
    sensitive at the same time.
    """

    is_volatile: bool = False
    is_user_specific: bool = False
    has_sensitive_fields: bool = False
    is_collection: bool = False
    is_root_type: bool = False

    def trait_labels(self) -> list[str]:
        """Labels of the set traits, in summary order (root excluded)."""
        labels = []
        if self.is_volatile:
            labels.append("volatile")
        if self.is_user_specific:
            labels.append("user-specific")
        if self.has_sensitive_fields:
            labels.append("has-sensitive-data")
        if self.is_collection:
            labels.append("collection")
        return labels


@dataclass(frozen=True)
class Entity:
    """A user-defined object type treated as a cacheable unit.

    Attributes:
        name: The GraphQL type name.
        description: Type description from the schema, if any.
        has_id: Whether a field is named ``id``, ``_id`` or ``ID``.
        fields: Fields in schema order.
        references: Entity-like object types this type points at.
        referenced_by: Entities with a relationship edge to this one.
            Empty until the relationship pass has run.
        characteristics: Inferred caching traits.
    """

    name: str
    description: str | None = None
    has_id: bool = False
    fields: tuple[FieldInfo, ...] = ()
    references: tuple[str, ...] = ()
    referenced_by: tuple[str, ...] = ()
    characteristics: EntityCharacteristics = field(
        default_factory=EntityCharacteristics
    )

    @property
    def field_names(self) -> list[str]:
        """Field names in schema order."""
        return [f.name for f in self.fields]


class OperationKind(Enum):
    """Root operation kinds that are extracted."""

    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class Operation:
    """A field of the Query or Mutation root type.

    ``affected_types`` is only inferred for mutations and is empty for
    queries.
    """

    name: str
    return_type: str
    description: str | None = None
    returns_list: bool = False
    arguments: tuple[ArgumentInfo, ...] = ()
    affected_types: tuple[str, ...] = ()


class RelationshipDirection(Enum):
    """Direction of an edge from the declaring entity's perspective."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"


@dataclass(frozen=True)
class TypeRelationship:
    """A directed edge created by a field whose type is another entity."""

    source: str
    target: str
    field_name: str
    is_list: bool = False
    direction: RelationshipDirection = RelationshipDirection.OUTGOING


@dataclass
class AnalyzedSchema:
    """Result of analyzing an introspected schema.

    ``type_map`` keeps the raw introspection types by name so consumers
    can re-resolve types the analysis did not keep.
    """

    entities: list[Entity] = field(default_factory=list)
    queries: list[Operation] = field(default_factory=list)
    mutations: list[Operation] = field(default_factory=list)
    relationships: list[TypeRelationship] = field(default_factory=list)
    type_map: dict[str, IntrospectionType] = field(default_factory=dict)

    def get_entity(self, name: str) -> Entity | None:
        """Look up an entity by type name."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None

    @property
    def cacheable_entities(self) -> list[Entity]:
        """Entities that are not Query/Mutation/Subscription root types."""
        return [e for e in self.entities if not e.characteristics.is_root_type]
