# cloudsearch_query/query/formatting.py
"""Literal formatting for structured query values.

Strings and dates are wrapped in single quotes. Dates are converted to UTC and
rendered as RFC 3339 timestamps with a literal ``Z`` suffix. Numbers are
rendered as plain decimal text.
"""

import math
from datetime import UTC, datetime

from cloudsearch_query.exceptions import ArgumentError

QUOTED_FORMAT = "'{}'"
DATE_FORMAT = "{:04d}-{:%m-%dT%H:%M:%S}Z"

Value = str | int | float | datetime


def quote(text: str) -> str:
    """Wrap text in single quotes.

    Embedded quotes are not escaped; callers must escape them beforehand.
    """
    return QUOTED_FORMAT.format(text)


def format_date(value: datetime) -> str:
    """Format a datetime as a UTC timestamp, e.g. ``1970-01-01T00:00:00Z``.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return DATE_FORMAT.format(value.year, value)


def domain_of(value: Value) -> str:
    """Name the value domain used to check that range bounds agree."""
    match value:
        case bool():
            raise ArgumentError(f"Unsupported value type: {type(value).__name__}")
        case str():
            return "text"
        case int() | float():
            return "number"
        case datetime():
            return "date"
        case _:
            raise ArgumentError(f"Unsupported value type: {type(value).__name__}")


def format_value(value: Value) -> str:
    """Render a term or range value as query literal text."""
    if value is None:
        raise ArgumentError("Value is required")
    match domain_of(value):
        case "text":
            if not value:
                raise ArgumentError("Value must not be empty")
            return quote(value)
        case "date":
            return quote(format_date(value))
        case _:
            if isinstance(value, float) and not math.isfinite(value):
                raise ArgumentError(f"Number must be finite, got {value!r}")
            return str(value)
