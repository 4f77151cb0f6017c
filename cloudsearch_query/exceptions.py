# cloudsearch_query/exceptions.py
"""Exception classes for structured query construction."""


class QueryError(Exception):
    """Base exception for structured query errors."""

    pass


class ArgumentError(QueryError, ValueError):
    """Raised when a factory is called with arguments it cannot accept."""

    pass


class ConsistencyError(QueryError, RuntimeError):
    """Raised when an expression is missing the data its kind requires."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(f"Malformed {kind} expression: {message}")
