"""Tests for type reference resolution."""

from cachegen.core.entities import IntrospectionTypeRef, ResolvedFieldType, TypeKind
from cachegen.core.services.type_resolver import UNKNOWN_TYPE_NAME, resolve_type_ref

STRING = IntrospectionTypeRef.named(TypeKind.SCALAR, "String")
USER = IntrospectionTypeRef.named(TypeKind.OBJECT, "User")


class TestResolveTypeRef:
    """Tests for resolve_type_ref."""

    def test_named_type(self) -> None:
        """A bare named type has no wrapper flags."""
        assert resolve_type_ref(STRING) == ResolvedFieldType("String", False, False)

    def test_non_null(self) -> None:
        """String! is non-null, not a list."""
        resolved = resolve_type_ref(IntrospectionTypeRef.non_null(STRING))

        assert resolved.type_name == "String"
        assert resolved.is_non_null is True
        assert resolved.is_list is False

    def test_list(self) -> None:
        """[User] is a nullable list."""
        resolved = resolve_type_ref(IntrospectionTypeRef.list_of(USER))

        assert resolved == ResolvedFieldType("User", is_non_null=False, is_list=True)

    def test_non_null_list_of_non_null(self) -> None:
        """[User!]! flattens to a non-null list of User."""
        ref = IntrospectionTypeRef.non_null(
            IntrospectionTypeRef.list_of(IntrospectionTypeRef.non_null(USER))
        )

        assert resolve_type_ref(ref) == ResolvedFieldType("User", True, True)

    def test_inner_non_null_only(self) -> None:
        """Flags are OR-ed regardless of nesting level."""
        ref = IntrospectionTypeRef.list_of(IntrospectionTypeRef.non_null(USER))

        assert resolve_type_ref(ref) == ResolvedFieldType("User", True, True)

    def test_nested_lists(self) -> None:
        """[[String]] is still just a list."""
        ref = IntrospectionTypeRef.list_of(IntrospectionTypeRef.list_of(STRING))

        assert resolve_type_ref(ref) == ResolvedFieldType("String", False, True)

    def test_unnamed_terminal_falls_back(self) -> None:
        """A terminal without a name resolves to the unknown sentinel."""
        ref = IntrospectionTypeRef.non_null(IntrospectionTypeRef(kind=TypeKind.SCALAR))

        resolved = resolve_type_ref(ref)

        assert resolved.type_name == UNKNOWN_TYPE_NAME
        assert resolved.is_non_null is True

    def test_idempotent(self) -> None:
        """Resolving the same reference twice gives identical results."""
        ref = IntrospectionTypeRef.non_null(IntrospectionTypeRef.list_of(USER))

        assert resolve_type_ref(ref) == resolve_type_ref(ref)
