from .combinators import (
    Expression,
    and_,
    eq,
    matchall,
    not_,
    or_,
    phrase,
    prefix,
    range,
    term,
    with_boost,
)
from .formatting import format_date, quote
from .kinds import ExpressionKind, Operator
from .serializer import serialize

__all__ = [
    "Expression",
    "ExpressionKind",
    "Operator",
    "and_",
    "eq",
    "format_date",
    "matchall",
    "not_",
    "or_",
    "phrase",
    "prefix",
    "quote",
    "range",
    "serialize",
    "term",
    "with_boost",
]
