"""Name patterns driving entity classification and mutation inference.

Kept as plain tables so they can be tested and extended without touching
the extractors.
"""

from collections.abc import Iterable

# Built-in scalars and introspection meta-types.
BUILT_IN_TYPES = frozenset(
    {
        "String",
        "Int",
        "Float",
        "Boolean",
        "ID",
        "__Schema",
        "__Type",
        "__TypeKind",
        "__Field",
        "__InputValue",
        "__EnumValue",
        "__Directive",
        "__DirectiveLocation",
    }
)

REFLECTION_PREFIX = "__"

IDENTITY_FIELD_NAMES = frozenset({"id", "_id", "ID"})

# Fields that suggest frequent updates.
VOLATILE_FIELD_PATTERNS = (
    "updatedAt",
    "modifiedAt",
    "lastModified",
    "lastUpdated",
    "lastSeen",
    "lastActive",
    "viewCount",
    "likeCount",
    "commentCount",
    "score",
    "rating",
    "status",
    "state",
)

# Fields that suggest per-user data.
USER_SPECIFIC_PATTERNS = (
    "userId",
    "ownerId",
    "authorId",
    "creatorId",
    "user",
    "owner",
    "author",
    "creator",
    "me",
    "currentUser",
    "viewer",
    "myProfile",
)

# Fields that suggest sensitive data.
SENSITIVE_FIELD_PATTERNS = (
    "email",
    "password",
    "passwordHash",
    "token",
    "secret",
    "apiKey",
    "privateKey",
    "ssn",
    "creditCard",
    "phone",
    "address",
    "salary",
    "balance",
)

COLLECTION_SUFFIXES = ("Connection", "Edge", "List", "Page")

ROOT_TYPE_NAMES = frozenset({"Query", "Mutation", "Subscription"})

# Verb prefixes of mutation names; the remainder names the affected type
# (``createUser`` -> ``User``).
MUTATION_VERB_PREFIXES = (
    "create",
    "add",
    "insert",
    "update",
    "edit",
    "modify",
    "delete",
    "remove",
    "destroy",
)


def is_built_in(type_name: str) -> bool:
    """Check if a type is a built-in scalar or introspection type."""
    return type_name in BUILT_IN_TYPES or type_name.startswith(REFLECTION_PREFIX)


def matches_any(field_names: Iterable[str], patterns: Iterable[str]) -> bool:
    """Check if any field name contains any pattern, case-insensitively.

    Matching is by substring: ``"userEmail"`` matches ``"email"``.
    """
    lowered = [name.lower() for name in field_names]
    return any(
        pattern.lower() in name for pattern in patterns for name in lowered
    )


def type_from_mutation_name(mutation_name: str, prefix: str) -> str:
    """Strip a verb prefix and capitalize the remainder.

    ``type_from_mutation_name("createUser", "create")`` returns ``"User"``.
    """
    remainder = mutation_name[len(prefix):]
    return remainder[:1].upper() + remainder[1:]
