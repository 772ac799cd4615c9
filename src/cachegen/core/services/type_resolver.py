"""Type reference resolution."""

from cachegen.core.entities.introspection import IntrospectionTypeRef, TypeKind
from cachegen.core.entities.schema import ResolvedFieldType

UNKNOWN_TYPE_NAME = "Unknown"


def resolve_type_ref(type_ref: IntrospectionTypeRef) -> ResolvedFieldType:
    """Unwrap LIST and NON_NULL wrappers around a named type.

    Nesting order and depth are ignored: the result is a list if any
    wrapper is LIST, and non-null if any wrapper is NON_NULL. So
    ``[String!]!`` and ``[String]!`` both resolve to a non-null list of
    ``String``.

    Args:
        type_ref: The (possibly wrapped) type reference.

    Returns:
        The innermost type name with the flattened wrapper flags.
    """
    is_non_null = False
    is_list = False
    current = type_ref

    while current.of_type is not None:
        if current.kind == TypeKind.NON_NULL:
            is_non_null = True
        elif current.kind == TypeKind.LIST:
            is_list = True
        current = current.of_type

    return ResolvedFieldType(
        type_name=current.name or UNKNOWN_TYPE_NAME,
        is_non_null=is_non_null,
        is_list=is_list,
    )
