"""Introspection entities.

Mirror the shape of a standard GraphQL introspection result (the payload
under ``__schema``). These are the input of the schema analyzer and are
never mutated once parsed.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MalformedSchemaError(Exception):
    """Raised when an introspection result does not have the expected shape."""

    pass


class TypeKind(Enum):
    """GraphQL ``__TypeKind`` values."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


def _require(data: Any, key: str, context: str) -> Any:
    if not isinstance(data, Mapping):
        raise MalformedSchemaError(
            f"Expected an object for {context}, got {type(data).__name__}"
        )
    if key not in data:
        raise MalformedSchemaError(f"Missing '{key}' in {context}")
    return data[key]


def _parse_kind(value: Any, context: str) -> TypeKind:
    try:
        return TypeKind(value)
    except ValueError as e:
        raise MalformedSchemaError(f"Unknown type kind {value!r} in {context}") from e


def _parse_list(value: Any, key: str, context: str) -> list[Any] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedSchemaError(f"Expected '{key}' to be a list in {context}")
    return value


def _root_name(value: Any, key: str) -> str | None:
    if value is None:
        return None
    return _require(value, "name", key)


@dataclass(frozen=True)
class IntrospectionTypeRef:
    """A possibly wrapped type reference.

    LIST and NON_NULL wrappers carry no name and point at the wrapped
    reference through ``of_type``; the innermost reference names a type.
    """

    kind: TypeKind
    name: str | None = None
    of_type: "IntrospectionTypeRef | None" = None

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionTypeRef":
        """Parse a ``__Type`` reference (``kind``/``name``/``ofType``)."""
        kind = _parse_kind(_require(data, "kind", "type reference"), "type reference")
        inner = data.get("ofType")
        return cls(
            kind=kind,
            name=data.get("name"),
            of_type=cls.from_dict(inner) if inner is not None else None,
        )

    @classmethod
    def named(cls, kind: TypeKind, name: str) -> "IntrospectionTypeRef":
        """Create a reference to a named type."""
        return cls(kind=kind, name=name)

    @classmethod
    def non_null(cls, of_type: "IntrospectionTypeRef") -> "IntrospectionTypeRef":
        """Wrap a reference in NON_NULL."""
        return cls(kind=TypeKind.NON_NULL, of_type=of_type)

    @classmethod
    def list_of(cls, of_type: "IntrospectionTypeRef") -> "IntrospectionTypeRef":
        """Wrap a reference in LIST."""
        return cls(kind=TypeKind.LIST, of_type=of_type)


@dataclass(frozen=True)
class IntrospectionInputValue:
    """An argument or input field."""

    name: str
    type: IntrospectionTypeRef
    description: str | None = None
    default_value: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionInputValue":
        name = _require(data, "name", "input value")
        return cls(
            name=name,
            type=IntrospectionTypeRef.from_dict(
                _require(data, "type", f"input value '{name}'")
            ),
            description=data.get("description"),
            default_value=data.get("defaultValue"),
        )


@dataclass(frozen=True)
class IntrospectionField:
    """A field of an object or interface type."""

    name: str
    type: IntrospectionTypeRef
    description: str | None = None
    args: tuple[IntrospectionInputValue, ...] = ()
    is_deprecated: bool = False
    deprecation_reason: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionField":
        name = _require(data, "name", "field")
        context = f"field '{name}'"
        args = _parse_list(data.get("args"), "args", context) or []
        return cls(
            name=name,
            type=IntrospectionTypeRef.from_dict(_require(data, "type", context)),
            description=data.get("description"),
            args=tuple(IntrospectionInputValue.from_dict(a) for a in args),
            is_deprecated=bool(data.get("isDeprecated", False)),
            deprecation_reason=data.get("deprecationReason"),
        )


@dataclass(frozen=True)
class IntrospectionEnumValue:
    """A value of an enum type."""

    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionEnumValue":
        return cls(
            name=_require(data, "name", "enum value"),
            description=data.get("description"),
            is_deprecated=bool(data.get("isDeprecated", False)),
            deprecation_reason=data.get("deprecationReason"),
        )


@dataclass(frozen=True)
class IntrospectionType:
    """A named type of the schema.

    ``fields`` is None for kinds that have no fields (scalars, enums,
    unions, input objects).
    """

    kind: TypeKind
    name: str
    description: str | None = None
    fields: tuple[IntrospectionField, ...] | None = None
    input_fields: tuple[IntrospectionInputValue, ...] | None = None
    interfaces: tuple[IntrospectionTypeRef, ...] | None = None
    enum_values: tuple[IntrospectionEnumValue, ...] | None = None
    possible_types: tuple[IntrospectionTypeRef, ...] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionType":
        """Parse one entry of ``__schema.types``.

        Raises:
            MalformedSchemaError: If required keys are missing or a
                collection has the wrong type.
        """
        name = _require(data, "name", "type")
        context = f"type '{name}'"
        kind = _parse_kind(_require(data, "kind", context), context)

        fields = _parse_list(data.get("fields"), "fields", context)
        input_fields = _parse_list(data.get("inputFields"), "inputFields", context)
        interfaces = _parse_list(data.get("interfaces"), "interfaces", context)
        enum_values = _parse_list(data.get("enumValues"), "enumValues", context)
        possible_types = _parse_list(
            data.get("possibleTypes"), "possibleTypes", context
        )

        return cls(
            kind=kind,
            name=name,
            description=data.get("description"),
            fields=(
                tuple(IntrospectionField.from_dict(f) for f in fields)
                if fields is not None
                else None
            ),
            input_fields=(
                tuple(IntrospectionInputValue.from_dict(f) for f in input_fields)
                if input_fields is not None
                else None
            ),
            interfaces=(
                tuple(IntrospectionTypeRef.from_dict(i) for i in interfaces)
                if interfaces is not None
                else None
            ),
            enum_values=(
                tuple(IntrospectionEnumValue.from_dict(v) for v in enum_values)
                if enum_values is not None
                else None
            ),
            possible_types=(
                tuple(IntrospectionTypeRef.from_dict(p) for p in possible_types)
                if possible_types is not None
                else None
            ),
        )


@dataclass(frozen=True)
class IntrospectionSchema:
    """The ``__schema`` payload of an introspection result."""

    types: tuple[IntrospectionType, ...]
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None
    directives: tuple[dict[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> "IntrospectionSchema":
        """Parse an introspection result.

        Accepts the ``__schema`` payload itself, a ``{"__schema": ...}``
        wrapper, or a full ``{"data": {"__schema": ...}}`` HTTP response.

        Raises:
            MalformedSchemaError: If the structure is not a valid
                introspection result.
        """
        if isinstance(data, Mapping) and "data" in data:
            data = data["data"]
        if isinstance(data, Mapping) and "__schema" in data:
            data = data["__schema"]
        if data is None:
            raise MalformedSchemaError("Introspection result has no schema")

        types = _require(data, "types", "schema")
        if not isinstance(types, list):
            raise MalformedSchemaError("Expected 'types' to be a list in schema")
        directives = _parse_list(data.get("directives"), "directives", "schema") or []

        return cls(
            types=tuple(IntrospectionType.from_dict(t) for t in types),
            query_type=_root_name(data.get("queryType"), "queryType"),
            mutation_type=_root_name(data.get("mutationType"), "mutationType"),
            subscription_type=_root_name(
                data.get("subscriptionType"), "subscriptionType"
            ),
            directives=tuple(directives),
        )

    @classmethod
    def from_graphql_schema(cls, schema: Any) -> "IntrospectionSchema":
        """Build the introspection input from a graphql-core schema.

        Args:
            schema: A ``graphql.GraphQLSchema`` instance.

        Returns:
            The parsed introspection schema.
        """
        from graphql import introspection_from_schema

        return cls.from_dict(introspection_from_schema(schema))
