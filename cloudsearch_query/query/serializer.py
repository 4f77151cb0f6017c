# cloudsearch_query/query/serializer.py
"""Render expression trees as structured query text.

Every token is separated by a single space::

    ( and ( term field= title 'star wars' ) ( range field= year { 1977 , 1980 } ) )

An open range bound contributes no token, so ``{ 1977 , }`` keeps its braces
and comma.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cloudsearch_query.exceptions import ConsistencyError
from cloudsearch_query.query.kinds import ExpressionKind, Operator

if TYPE_CHECKING:
    from cloudsearch_query.query.combinators import Expression

logger = logging.getLogger(__name__)

VALUE_KINDS = (ExpressionKind.TERM, ExpressionKind.PHRASE, ExpressionKind.PREFIX)
FIELD_KINDS = (*VALUE_KINDS, ExpressionKind.RANGE)


def serialize(expression: Expression) -> str:
    """Convert an Expression tree to structured query syntax."""
    query_str = _render(expression)
    logger.debug("Built structured query: %s", query_str)
    return query_str


def _render(expression: Expression) -> str:
    _check(expression)
    # Only field expressions carry a boost token.
    boost = [] if expression.boost is None else [f"boost={expression.boost}"]

    match expression.kind:
        case ExpressionKind.MATCH_ALL:
            tokens = ["(", ExpressionKind.MATCH_ALL.value, ")"]
        case ExpressionKind.COMPOUND:
            children = [_render(child) for child in expression.children]
            tokens = ["(", expression.operator.value, *children, ")"]
        case ExpressionKind.TERM | ExpressionKind.PHRASE | ExpressionKind.PREFIX:
            tokens = ["(", expression.kind.value, "field=", expression.field, *boost, expression.literal, ")"]
        case ExpressionKind.RANGE:
            bounds = [expression.range_from or "", ",", expression.range_to or ""]
            tokens = ["(", "range", "field=", expression.field, *boost, "{", *bounds, "}", ")"]
        case _:
            raise ConsistencyError(str(expression.kind), "unknown expression kind")

    return " ".join(token for token in tokens if token)


def _check(expression: Expression) -> None:
    """Verify the expression carries exactly the data its kind requires."""
    kind = expression.kind
    if not isinstance(kind, ExpressionKind) or not isinstance(expression.operator, Operator):
        raise ConsistencyError(str(kind), "unknown expression kind or operator")

    payload = (
        bool(expression.literal),
        bool(expression.range_from or expression.range_to),
        bool(expression.children),
    )

    match kind:
        case ExpressionKind.MATCH_ALL:
            expected = (False, False, False)
        case ExpressionKind.RANGE:
            expected = (False, True, False)
        case ExpressionKind.COMPOUND:
            expected = (False, False, True)
        case _:
            expected = (True, False, False)

    if payload != expected:
        raise ConsistencyError(kind.value, "literal, range bounds and children do not match its kind")

    if (kind in FIELD_KINDS) != bool(expression.field):
        raise ConsistencyError(kind.value, f"unexpected field {expression.field!r}")

    if kind is ExpressionKind.COMPOUND:
        if expression.operator is Operator.NONE:
            raise ConsistencyError(kind.value, "missing operator")
        if expression.operator is Operator.NOT and len(expression.children) != 1:
            raise ConsistencyError(kind.value, "not takes exactly one expression")
        for child in expression.children:
            if not isinstance(child, type(expression)):
                raise ConsistencyError(kind.value, f"child is not an Expression: {child!r}")
    elif expression.operator is not Operator.NONE:
        raise ConsistencyError(kind.value, f"unexpected operator {expression.operator.value}")

    if expression.boost is not None and (isinstance(expression.boost, bool) or not isinstance(expression.boost, int)):
        raise ConsistencyError(kind.value, f"boost must be an integer, got {expression.boost!r}")
