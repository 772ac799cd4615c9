"""Pytest configuration for cachegen tests."""

from typing import Any

import pytest
from graphql import build_schema

from cachegen import AnalyzedSchema, IntrospectionSchema, analyze_schema


def _named(kind: str, name: str) -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def _non_null(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def _list_of(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": of_type}


def _field(name: str, type_ref: dict[str, Any], args: list | None = None) -> dict[str, Any]:
    return {
        "name": name,
        "description": None,
        "args": args or [],
        "type": type_ref,
        "isDeprecated": False,
        "deprecationReason": None,
    }


def _arg(name: str, type_ref: dict[str, Any]) -> dict[str, Any]:
    return {"name": name, "description": None, "type": type_ref, "defaultValue": None}


def _object(name: str, fields: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "kind": "OBJECT",
        "name": name,
        "description": None,
        "fields": fields,
        "inputFields": None,
        "interfaces": [],
        "enumValues": None,
        "possibleTypes": None,
    }


def _scalar(name: str) -> dict[str, Any]:
    return {
        "kind": "SCALAR",
        "name": name,
        "description": None,
        "fields": None,
        "inputFields": None,
        "interfaces": None,
        "enumValues": None,
        "possibleTypes": None,
    }


@pytest.fixture
def blog_introspection() -> dict[str, Any]:
    """Raw introspection result of a small blog schema.

    Query { users: [User] }
    Mutation { createPost(title: String!): Post }
    User { id: ID!, email: String, posts: [Post] }
    Post { id: ID!, title: String!, author: User }
    """
    user = _named("OBJECT", "User")
    post = _named("OBJECT", "Post")
    string = _named("SCALAR", "String")
    id_ = _named("SCALAR", "ID")

    return {
        "__schema": {
            "queryType": {"name": "Query"},
            "mutationType": {"name": "Mutation"},
            "subscriptionType": None,
            "types": [
                _object("Query", [_field("users", _list_of(user))]),
                _object(
                    "Mutation",
                    [
                        _field(
                            "createPost",
                            post,
                            args=[_arg("title", _non_null(string))],
                        )
                    ],
                ),
                _object(
                    "User",
                    [
                        _field("id", _non_null(id_)),
                        _field("email", string),
                        _field("posts", _list_of(post)),
                    ],
                ),
                _object(
                    "Post",
                    [
                        _field("id", _non_null(id_)),
                        _field("title", _non_null(string)),
                        _field("author", user),
                    ],
                ),
                _scalar("String"),
                _scalar("ID"),
                _scalar("Boolean"),
                _object(
                    "__Schema",
                    [_field("description", string)],
                ),
            ],
            "directives": [],
        }
    }


@pytest.fixture
def blog_schema(blog_introspection: dict[str, Any]) -> AnalyzedSchema:
    """The blog schema, analyzed."""
    return analyze_schema(blog_introspection)


SHOP_SDL = """
type Query {
    products(first: Int, category: String): ProductConnection!
    product(id: ID!): Product
    me: Customer
}

type Mutation {
    createOrder(productIds: [ID!]!): Order!
    updateProduct(id: ID!, price: Float): Product
    deleteReview(id: ID!): Boolean!
    toggleWishlist(productId: ID!): Boolean!
}

type Product {
    id: ID!
    title: String!
    price: Float!
    rating: Float
    reviews: [Review!]!
}

type Review {
    id: ID!
    body: String!
    author: Customer!
    product: Product!
}

type Customer {
    id: ID!
    email: String!
    orders: [Order!]!
}

type Order {
    id: ID!
    status: String!
    customer: Customer!
    items: [Product!]!
}

type ProductConnection {
    edges: [Product!]!
    totalCount: Int!
}

type Category {
    slug: String!
    title: String!
}
"""


@pytest.fixture
def shop_schema() -> AnalyzedSchema:
    """A storefront schema built with graphql-core and analyzed."""
    return analyze_schema(
        IntrospectionSchema.from_graphql_schema(build_schema(SHOP_SDL))
    )
