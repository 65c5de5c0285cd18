"""Tests for unlock-condition parsing and evaluation."""

import logging

import pytest

from tycoonengine.catalog.conditions import (
    ALWAYS,
    Never,
    Operator,
    Threshold,
    parse_condition,
)


@pytest.mark.parametrize("text", ["always", "  always ", "", None])
def test_always_variants(text):
    assert parse_condition(text) is ALWAYS


def test_parse_threshold():
    cond = parse_condition("deposit >= 1")
    assert cond == Threshold("deposit", Operator.GE, 1)
    assert str(cond) == "deposit >= 1"


@pytest.mark.parametrize(
    "op, value, expected",
    [
        (">=", 1, True),
        (">=", 2, False),
        (">", 0, True),
        (">", 1, False),
        ("==", 1, True),
        ("==", 2, False),
        ("<=", 1, True),
        ("<=", 0, False),
        ("<", 2, True),
        ("<", 1, False),
    ],
)
def test_every_operator(op, value, expected):
    cond = parse_condition(f"deposit {op} {value}")
    assert cond.evaluate(lambda ref: 1) is expected


@pytest.mark.parametrize(
    "text",
    [
        "deposit >=",
        "deposit => 1",
        "deposit != 1",
        "deposit >= one",
        "deposit >= 1.5",
        ">= 1",
        "deposit >= 1 extra",
    ],
)
def test_malformed_condition_fails_closed(text, caplog):
    with caplog.at_level(logging.WARNING, logger="tycoonengine"):
        cond = parse_condition(text)

    assert isinstance(cond, Never)
    assert cond.evaluate(lambda ref: 10**9) is False
    assert "Malformed unlock condition" in caplog.text


def test_non_string_condition_fails_closed():
    assert isinstance(parse_condition(5), Never)  # type: ignore[arg-type]


def test_reference_resolver_receives_reference_id():
    seen = []
    parse_condition("savings < 3").evaluate(lambda ref: seen.append(ref) or 0)
    assert seen == ["savings"]
