# cloudsearch_query/query/kinds.py
from enum import StrEnum


class ExpressionKind(StrEnum):
    """Shape of an expression node. Values are the grammar keywords."""

    MATCH_ALL = "matchall"
    TERM = "term"
    PHRASE = "phrase"
    PREFIX = "prefix"
    RANGE = "range"
    COMPOUND = "compound"


class Operator(StrEnum):
    """Boolean operator of a compound expression."""

    AND = "and"
    OR = "or"
    NOT = "not"
    NONE = "none"
