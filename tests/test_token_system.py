"""Test tokenization and RPN sequence validation."""

import dataclasses

import pytest

from core import (
    Token, TokenType, RPNValidator, UnknownToken, UnknownOperator,
    make_token, tokenize, ensure_tokens, build_operator_table
)


def test_tokenize_basic():
    """Tokenize splits on whitespace and classifies each part."""
    tokens = tokenize("3 + 4 * 2")
    assert [t.name for t in tokens] == ["3", "+", "4", "*", "2"]
    assert [t.type for t in tokens] == [
        TokenType.OPERAND, TokenType.OPERATOR, TokenType.OPERAND,
        TokenType.OPERATOR, TokenType.OPERAND,
    ]
    assert [t.position for t in tokens] == [0, 1, 2, 3, 4]
    assert tokens[0].value == 3.0
    assert tokens[1].value is None


def test_tokenize_tolerates_whitespace_runs():
    tokens = tokenize("  1 \t +\n  2  ")
    assert [t.name for t in tokens] == ["1", "+", "2"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   ") == []


@pytest.mark.parametrize("text,value", [
    ("123", 123.0),
    ("45.67", 45.67),
    ("-8.9", -8.9),
    ("+2", 2.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("2.5E-1", 0.25),
])
def test_make_token_operand(text, value):
    token = make_token(text)
    assert token.is_operand
    assert token.value == value


@pytest.mark.parametrize("text", ["^", "*", "/", "+", "-"])
def test_make_token_operator(text):
    token = make_token(text)
    assert token.is_operator
    assert not token.is_operand


@pytest.mark.parametrize("text", ["abc", "x", "%", "1.2.3", "nan", "inf", "1,5", "--1", "(", "**"])
def test_make_token_unknown(text):
    with pytest.raises(UnknownToken) as excinfo:
        make_token(text, position=4)
    assert excinfo.value.token == text
    assert excinfo.value.position == 4
    assert excinfo.value.kind == "UnknownToken"


def test_tokenize_reports_position():
    with pytest.raises(UnknownToken) as excinfo:
        tokenize("1 + foo * 2")
    assert excinfo.value.token == "foo"
    assert excinfo.value.position == 2


def test_tokenize_custom_error_class():
    with pytest.raises(UnknownOperator):
        tokenize("1 % 2", unknown_error=UnknownOperator)


def test_tokenize_respects_operator_table():
    """A symbol missing from the table is not an operator."""
    table = build_operator_table({'+': 1, '-': 1})
    with pytest.raises(UnknownToken):
        tokenize("2 * 3", operator_table=table)


def test_token_is_immutable():
    token = make_token("7")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = 8.0


def test_token_equality_and_str():
    assert make_token("7", 0) == make_token("7", 0)
    assert str(make_token("+")) == "+"


def test_ensure_tokens_accepts_strings_and_tokens():
    plus = make_token("+", 1)
    tokens = ensure_tokens(["1", plus, "2"])
    assert [t.name for t in tokens] == ["1", "+", "2"]
    assert tokens[1] is plus
    assert tokens[2].position == 2


def test_ensure_tokens_accepts_numbers():
    tokens = ensure_tokens([1, "+", 2.5])
    assert tokens[0].value == 1.0
    assert tokens[2].value == 2.5


@pytest.mark.parametrize("expression,valid", [
    ("1", True),
    ("1 2 +", True),
    ("5 3 2 * +", True),
    ("1 1 9 * 0 + -", True),
    ("", False),
    ("+", False),
    ("1 +", False),
    ("1 2", False),
    ("+ 1 2", False),
    ("1 2 + +", False),
    ("1 2 + 3", False),
])
def test_rpn_validator_is_valid(expression, valid):
    assert RPNValidator.is_valid(tokenize(expression)) is valid


def test_rpn_validator_stack_size():
    assert RPNValidator.calculate_stack_size(tokenize("1 2 3 +")) == 2
    assert RPNValidator.calculate_stack_size(tokenize("1 2 3 + *")) == 1
    assert RPNValidator.calculate_stack_size(tokenize("")) == 0
