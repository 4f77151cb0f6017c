# cloudsearch_query/query/combinators.py
from dataclasses import dataclass, replace

from cloudsearch_query.exceptions import ArgumentError
from cloudsearch_query.query.formatting import Value, domain_of, format_value, quote
from cloudsearch_query.query.kinds import ExpressionKind, Operator
from cloudsearch_query.query.serializer import serialize


@dataclass(frozen=True)
class Expression:
    """A node of a structured query tree.

    Build expressions with the factory functions (``eq``, ``phrase``,
    ``range``, ``and_`` ...) rather than calling the constructor. Literal and
    range bound text is stored already formatted for the query grammar.
    """

    kind: ExpressionKind
    operator: Operator = Operator.NONE
    field: str | None = None
    literal: str | None = None
    range_from: str | None = None
    range_to: str | None = None
    children: tuple["Expression", ...] = ()
    boost: int | None = None

    def with_boost(self, weight: int) -> "Expression":
        """Return a copy of this expression carrying a relevance boost."""
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ArgumentError(f"Boost must be an integer, got {weight!r}")
        return replace(self, boost=weight)

    def build(self) -> str:
        """Render this expression as structured query text."""
        return serialize(self)

    def __str__(self) -> str:
        return self.build()

    def __and__(self, other: "Expression") -> "Expression":
        return and_(self, other)

    def __or__(self, other: "Expression") -> "Expression":
        return or_(self, other)

    def __invert__(self) -> "Expression":
        return not_(self)


def _require_field(field: str) -> str:
    if not isinstance(field, str) or not field:
        raise ArgumentError("Field name must be a non-empty string")
    return field


def _require_text(text: str) -> str:
    if not isinstance(text, str) or not text:
        raise ArgumentError("Value must be a non-empty string")
    return text


def _compound(operator: Operator, expressions: tuple[Expression, ...]) -> Expression:
    for expression in expressions:
        if not isinstance(expression, Expression):
            raise ArgumentError(f"Expected an Expression, got {type(expression).__name__}")
    return Expression(ExpressionKind.COMPOUND, operator=operator, children=expressions)


# Factory functions (public API)
def matchall() -> Expression:
    """Match every document in the domain: ``( matchall )``."""
    return Expression(ExpressionKind.MATCH_ALL)


def eq(field: str, value: Value) -> Expression:
    """Term match on a text, numeric or date value.

    ``eq("year", 1977)`` renders ``( term field= year 1977 )``. Single quotes
    inside text values are passed through unescaped.
    """
    return Expression(ExpressionKind.TERM, field=_require_field(field), literal=format_value(value))


term = eq


def phrase(field: str, text: str) -> Expression:
    return Expression(ExpressionKind.PHRASE, field=_require_field(field), literal=quote(_require_text(text)))


def prefix(field: str, text: str) -> Expression:
    return Expression(ExpressionKind.PREFIX, field=_require_field(field), literal=quote(_require_text(text)))


def range(field: str, from_: Value | None = None, to: Value | None = None) -> Expression:
    """Range match between two bounds; either bound may be left open.

    Both bounds must come from the same value domain (text, number or date).
    ``range("year", 1977, None)`` renders ``( range field= year { 1977 , } )``.
    """
    field = _require_field(field)
    if from_ is None and to is None:
        raise ArgumentError("A range needs at least one bound")
    if from_ is not None and to is not None and domain_of(from_) != domain_of(to):
        raise ArgumentError(f"Range bounds must share a type, got {from_!r} and {to!r}")
    return Expression(
        ExpressionKind.RANGE,
        field=field,
        range_from=None if from_ is None else format_value(from_),
        range_to=None if to is None else format_value(to),
    )


def and_(*expressions: Expression) -> Expression:
    if not expressions:
        raise ArgumentError("At least one expression is required")
    return _compound(Operator.AND, expressions)


def or_(*expressions: Expression) -> Expression:
    if not expressions:
        raise ArgumentError("At least one expression is required")
    return _compound(Operator.OR, expressions)


def not_(expression: Expression) -> Expression:
    return _compound(Operator.NOT, (expression,))


def with_boost(expression: Expression, weight: int) -> Expression:
    return expression.with_boost(weight)
