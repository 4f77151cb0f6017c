import logging
from datetime import UTC, datetime

import pytest

from cloudsearch_query import ConsistencyError
from cloudsearch_query.query.combinators import (
    Expression,
    ExpressionKind,
    Operator,
    and_,
    eq,
    matchall,
    not_,
    or_,
    phrase,
    prefix,
    range,
)
from cloudsearch_query.query.serializer import serialize


def test_matchall():
    assert serialize(matchall()) == "( matchall )"


def test_term():
    assert eq("f", "v").build() == "( term field= f 'v' )"


def test_numeric_term():
    assert eq("year", 1977).build() == "( term field= year 1977 )"


def test_date_term():
    q = eq("released", datetime(1970, 1, 1, tzinfo=UTC))
    assert q.build() == "( term field= released '1970-01-01T00:00:00Z' )"


def test_phrase_and_prefix():
    assert phrase("plot", "the phrase").build() == "( phrase field= plot 'the phrase' )"
    assert prefix("title", "sta").build() == "( prefix field= title 'sta' )"


def test_str_matches_build():
    q = and_(eq("f", "a"), range("g", 1, 2))
    assert str(q) == q.build()


def test_boost_precedes_literal():
    assert eq("f", "v").with_boost(5).build() == "( term field= f boost=5 'v' )"


def test_boost_absent_when_unset():
    assert "boost" not in eq("f", "v").build()


def test_range():
    assert range("year", 100, 200).build() == "( range field= year { 100 , 200 } )"


def test_range_with_boost():
    assert range("year", 100, 200).with_boost(3).build() == "( range field= year boost=3 { 100 , 200 } )"


def test_range_open_upper_bound():
    assert range("year", 100, None).build() == "( range field= year { 100 , } )"


def test_range_open_lower_bound():
    assert range("year", to=200).build() == "( range field= year { , 200 } )"


def test_date_range():
    q = range("released", datetime(1970, 1, 1, tzinfo=UTC), datetime(1971, 1, 1, tzinfo=UTC))
    assert q.build() == "( range field= released { '1970-01-01T00:00:00Z' , '1971-01-01T00:00:00Z' } )"


@pytest.mark.parametrize(("factory", "keyword"), [(and_, "and"), (or_, "or")])
def test_compound_joins_children(factory, keyword):
    children = [eq("f", "a"), phrase("g", "b c"), range("h", 1.5, 2.5), matchall()]
    expected = f"( {keyword} " + " ".join(serialize(c) for c in children) + " )"
    assert serialize(factory(*children)) == expected


def test_single_child_compound():
    assert and_(eq("f", "a")).build() == "( and ( term field= f 'a' ) )"


def test_not():
    e = phrase("f", "the phrase")
    assert serialize(not_(e)) == "( not " + serialize(e) + " )"


def test_boost_on_compound_is_not_rendered():
    children = [eq("f", "a"), eq("f", "b").with_boost(4)]
    q = or_(*children).with_boost(2)
    assert q.boost == 2
    assert q.build() == "( or " + " ".join(serialize(c) for c in children) + " )"
    assert q.build() == "( or ( term field= f 'a' ) ( term field= f boost=4 'b' ) )"


def test_boost_on_matchall_is_not_rendered():
    assert matchall().with_boost(3).build() == "( matchall )"


def test_children_keep_insertion_order():
    a, b = eq("f", "a"), eq("f", "b")
    assert and_(b, a).build() == "( and ( term field= f 'b' ) ( term field= f 'a' ) )"


def test_end_to_end():
    q = and_(eq("title", "star wars"), range("year", 1977, 1980))
    assert q.build() == "( and ( term field= title 'star wars' ) ( range field= year { 1977 , 1980 } ) )"


def test_nested_operators():
    q = (eq("genre", "scifi") | eq("genre", "fantasy")) & ~prefix("title", "star")
    assert q.build() == (
        "( and ( or ( term field= genre 'scifi' ) ( term field= genre 'fantasy' ) )"
        " ( not ( prefix field= title 'star' ) ) )"
    )


def test_build_is_idempotent():
    q = and_(eq("title", "star wars").with_boost(4), not_(range("year", 1977, None)))
    assert q.build() == q.build()


def test_logs_rendered_query(caplog):
    with caplog.at_level(logging.DEBUG, logger="cloudsearch_query.query.serializer"):
        text = matchall().build()
    assert text in caplog.text


@pytest.mark.parametrize(
    "expression",
    [
        Expression(ExpressionKind.TERM, field="f"),
        Expression(ExpressionKind.TERM, literal="'v'"),
        Expression(ExpressionKind.PHRASE, field="f", literal=""),
        Expression(ExpressionKind.RANGE, field="f"),
        Expression(ExpressionKind.RANGE, field="f", literal="'v'", range_from="1"),
        Expression(ExpressionKind.MATCH_ALL, field="f"),
        Expression(ExpressionKind.COMPOUND, operator=Operator.AND),
        Expression(ExpressionKind.COMPOUND, children=(matchall(),)),
        Expression(ExpressionKind.COMPOUND, operator=Operator.NOT, children=(matchall(), matchall())),
        Expression(ExpressionKind.TERM, operator=Operator.OR, field="f", literal="'v'"),
        Expression(ExpressionKind.TERM, field="f", literal="'v'", boost="5"),
        Expression("wildcard", field="f", literal="'v'"),
    ],
)
def test_malformed_expression_raises(expression):
    with pytest.raises(ConsistencyError):
        serialize(expression)


def test_malformed_child_raises_without_partial_output():
    bad = Expression(ExpressionKind.TERM, field="f")
    with pytest.raises(ConsistencyError, match="Malformed term expression"):
        and_(eq("f", "a"), bad).build()
