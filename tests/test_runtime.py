import logging

import pytest

from monkey.ast import (
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Node,
    PrefixExpression,
    Program,
)
from monkey.parser import parse
from monkey.runtime import EvalError, evaluate, wrap_int64
from monkey.token import TokenType
from monkey.value import Integer

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


@pytest.mark.parametrize(
    "node, errmsg",
    [
        pytest.param(
            LetStatement(name="birthday", value=IntegerLiteral(1103)),
            "evaluating a let statement is unsupported",
        ),
        pytest.param(Identifier("birthday"), "evaluating an identifier is unsupported"),
        pytest.param(
            InfixExpression(operator=TokenType.PLUS, left=IntegerLiteral(1), right=Identifier("x")),
            "evaluating an identifier is unsupported",
        ),
        pytest.param(
            PrefixExpression(operator=TokenType.MINUS, right=Identifier("x")),
            "evaluating an identifier is unsupported",
        ),
        pytest.param(
            PrefixExpression(operator=TokenType.PLUS, right=IntegerLiteral(1)),
            "Unexpected prefix operator: PLUS",
        ),
        pytest.param(
            InfixExpression(operator=TokenType.COMMA, left=IntegerLiteral(1), right=IntegerLiteral(2)),
            "Unexpected infix operator: COMMA",
        ),
    ],
)
def test_unsupported_nodes(node: Node, errmsg: str) -> None:
    with pytest.raises(EvalError) as exc_info:
        evaluate(node)
    assert exc_info.value.errmsg == errmsg


def test_let_fails_inside_program() -> None:
    with pytest.raises(EvalError, match="let statement"):
        evaluate(parse("1; let a = 2; 3;"))


def test_failure_stops_evaluation_before_right_operand() -> None:
    # the right side would fail differently if it were ever reached
    node = InfixExpression(
        operator=TokenType.MINUS,
        left=LetStatement(name="a", value=IntegerLiteral(1)),  # type: ignore[arg-type]
        right=Identifier("b"),
    )
    with pytest.raises(EvalError, match="let statement"):
        evaluate(node)


def test_evaluate_statement_and_expression_nodes() -> None:
    assert evaluate(ExpressionStatement(IntegerLiteral(5))) == Integer(5)
    assert evaluate(IntegerLiteral(-5)) == Integer(-5)
    assert evaluate(Program(())) == Integer(0)


def test_division_by_zero() -> None:
    with pytest.raises(EvalError) as exc_info:
        evaluate(parse("1 / (2 - 2);"))
    assert str(exc_info.value) == "Runtime error: division by zero"


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("9223372036854775807 + 1;", INT64_MIN),
        pytest.param("-9223372036854775807 - 2;", INT64_MAX),
        pytest.param("9223372036854775807 * 2;", -2),
        pytest.param("-(-9223372036854775807 - 1);", INT64_MIN),
        pytest.param("(-9223372036854775807 - 1) / -1;", INT64_MIN),
    ],
)
def test_overflow_wraps(code: str, expected: int) -> None:
    assert evaluate(parse(code)) == Integer(expected)


def test_wrap_int64() -> None:
    assert wrap_int64(0) == 0
    assert wrap_int64(INT64_MAX) == INT64_MAX
    assert wrap_int64(INT64_MIN) == INT64_MIN
    assert wrap_int64(INT64_MAX + 1) == INT64_MIN
    assert wrap_int64(INT64_MIN - 1) == INT64_MAX
    assert wrap_int64(2**64) == 0


def test_inspect() -> None:
    assert Integer(42).inspect() == "42"
    assert Integer(-7).inspect() == "-7"
    assert evaluate(parse("40 + 2;")).inspect() == "42"


def test_hand_built_literals_wrap() -> None:
    assert evaluate(IntegerLiteral(INT64_MAX + 1)) == Integer(INT64_MIN)
    assert evaluate(IntegerLiteral(2**64 + 5)) == Integer(5)


def test_debug_log_names_result(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="monkey.runtime"):
        evaluate(parse("2 + 3;"))
    assert "evaluated Program to Integer(v=5)" in caplog.text
