# cloudsearch_query/__init__.py
"""cloudsearch_query - Structured query builder for AWS CloudSearch."""

from cloudsearch_query.exceptions import ArgumentError, ConsistencyError, QueryError
from cloudsearch_query.query import (
    Expression,
    ExpressionKind,
    Operator,
    and_,
    eq,
    format_date,
    matchall,
    not_,
    or_,
    phrase,
    prefix,
    quote,
    range,
    serialize,
    term,
    with_boost,
)

__all__ = [
    # Expression model
    "Expression",
    "ExpressionKind",
    "Operator",
    # Factories
    "matchall",
    "eq",
    "term",
    "phrase",
    "prefix",
    "range",
    "and_",
    "or_",
    "not_",
    "with_boost",
    # Rendering
    "serialize",
    "quote",
    "format_date",
    # Errors
    "QueryError",
    "ArgumentError",
    "ConsistencyError",
]
