"""Tests for entity extraction."""

from cachegen.core.entities import (
    IntrospectionField,
    IntrospectionType,
    IntrospectionTypeRef,
    TypeKind,
)
from cachegen.core.services.entity_extractor import (
    classify,
    extract_entities,
    is_entity_type,
)
from cachegen.core.services.patterns import matches_any

STRING = IntrospectionTypeRef.named(TypeKind.SCALAR, "String")
ID = IntrospectionTypeRef.non_null(IntrospectionTypeRef.named(TypeKind.SCALAR, "ID"))


def object_type(name: str, fields: dict[str, IntrospectionTypeRef]) -> IntrospectionType:
    """Build an OBJECT type from a name -> type mapping."""
    return IntrospectionType(
        kind=TypeKind.OBJECT,
        name=name,
        fields=tuple(IntrospectionField(name=n, type=t) for n, t in fields.items()),
    )


def ref(name: str) -> IntrospectionTypeRef:
    return IntrospectionTypeRef.named(TypeKind.OBJECT, name)


def extract(*types: IntrospectionType):
    type_map = {t.name: t for t in types}
    return extract_entities(list(types), type_map)


class TestQualification:
    """Tests for which types become entities."""

    def test_object_with_fields_qualifies(self) -> None:
        """Test an object type with fields qualifies."""
        assert is_entity_type(object_type("User", {"id": ID}))

    def test_scalar_does_not_qualify(self) -> None:
        """Test a scalar does not qualify."""
        assert not is_entity_type(IntrospectionType(kind=TypeKind.SCALAR, name="DateTime"))

    def test_object_without_field_list_does_not_qualify(self) -> None:
        """Test an object type without a field list does not qualify."""
        assert not is_entity_type(IntrospectionType(kind=TypeKind.OBJECT, name="Empty"))

    def test_introspection_types_skipped(self) -> None:
        """__-prefixed meta types are never entities."""
        entities = extract(
            object_type("__Schema", {"description": STRING}),
            object_type("__CustomMeta", {"name": STRING}),
            object_type("User", {"id": ID}),
        )

        assert [e.name for e in entities] == ["User"]

    def test_input_order_preserved(self) -> None:
        """Test entities keep the input order."""
        entities = extract(
            object_type("Zebra", {"id": ID}),
            object_type("Apple", {"id": ID}),
        )

        assert [e.name for e in entities] == ["Zebra", "Apple"]


class TestIdentity:
    """Tests for identity field detection."""

    def test_id_variants(self) -> None:
        """Test each accepted identifier field name."""
        for field_name in ("id", "_id", "ID"):
            [entity] = extract(object_type("Thing", {field_name: ID}))
            assert entity.has_id is True, field_name

    def test_no_fuzzy_match(self) -> None:
        """Only exact names count; userId or Id do not."""
        [entity] = extract(object_type("Thing", {"userId": ID, "Id": ID}))

        assert entity.has_id is False


class TestReferences:
    """Tests for outbound reference detection."""

    def test_references_object_types_only(self) -> None:
        """Test only object types count as references."""
        post = object_type("Post", {"id": ID})
        user = object_type(
            "User",
            {
                "id": ID,
                "name": STRING,
                "posts": IntrospectionTypeRef.list_of(ref("Post")),
                "pinned": ref("Post"),
            },
        )

        [user_entity, _] = extract(user, post)

        assert user_entity.references == ("Post",)

    def test_self_reference_excluded(self) -> None:
        """Test a type does not reference itself."""
        [entity] = extract(
            object_type("Comment", {"id": ID, "parent": ref("Comment")})
        )

        assert entity.references == ()

    def test_root_type_not_referenced(self) -> None:
        """Test a field returning a root type is not a reference."""
        query = object_type("Query", {"viewer": ref("User")})
        user = object_type("User", {"id": ID, "query": ref("Query")})

        [_, user_entity] = extract(query, user)

        assert user_entity.references == ()

    def test_unknown_type_not_referenced(self) -> None:
        """A type name missing from the type map is not a reference."""
        [entity] = extract(object_type("Post", {"id": ID, "ghost": ref("Ghost")}))

        assert entity.references == ()

    def test_referenced_by_starts_empty(self) -> None:
        """Test referenced_by is empty before linking."""
        post = object_type("Post", {"id": ID})
        user = object_type("User", {"posts": IntrospectionTypeRef.list_of(ref("Post"))})

        for entity in extract(user, post):
            assert entity.referenced_by == ()


class TestCharacteristics:
    """Tests for trait classification."""

    def test_user_profile_example(self) -> None:
        """Test the traits of a typical user profile type."""
        [entity] = extract(
            object_type(
                "UserProfile", {"id": ID, "email": STRING, "updatedAt": STRING}
            )
        )

        assert entity.has_id is True
        traits = entity.characteristics
        assert traits.has_sensitive_fields is True
        assert traits.is_volatile is True
        assert traits.is_user_specific is False
        assert traits.is_collection is False
        assert traits.is_root_type is False

    def test_substring_case_insensitive(self) -> None:
        """Patterns match anywhere in the field name, ignoring case."""
        traits = classify("Account", ["primaryEMAILAddress"])

        assert traits.has_sensitive_fields is True

    def test_user_specific(self) -> None:
        """Test user-specific field names are detected."""
        assert classify("Post", ["authorId"]).is_user_specific is True
        assert classify("Post", ["viewer"]).is_user_specific is True

    def test_traits_are_independent(self) -> None:
        """Test traits are detected independently."""
        traits = classify("Order", ["ownerId", "status", "creditCardLast4"])

        assert traits.is_user_specific is True
        assert traits.is_volatile is True
        assert traits.has_sensitive_fields is True

    def test_collection_suffixes(self) -> None:
        """Test collection type name suffixes."""
        for name in ("UserConnection", "UserEdge", "TagList", "ResultPage"):
            assert classify(name, []).is_collection is True, name
        assert classify("Listing", []).is_collection is False

    def test_root_types(self) -> None:
        """Test root type names are flagged."""
        for name in ("Query", "Mutation", "Subscription"):
            assert classify(name, []).is_root_type is True
        assert classify("QueryLog", []).is_root_type is False

    def test_stable_type(self) -> None:
        """Test stable type name fragments."""
        traits = classify("Country", ["code", "flag"])

        assert traits.trait_labels() == []

    def test_matches_any(self) -> None:
        """Test substring matching against a pattern list."""
        assert matches_any(["lastSeenAt"], ["lastSeen"])
        assert not matches_any(["title"], ["email", "token"])
        assert not matches_any([], ["email"])
