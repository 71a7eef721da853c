import logging
from dataclasses import dataclass
from typing import Type

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
from monkey.token import INT64_MIN, TokenType
from monkey.value import BinaryOperationImpl, Integer, UnaryOperationImpl, Value

logger = logging.getLogger(__name__)


@dataclass
class EvalError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


def wrap_int64(n: int) -> int:
    """Reduces n to the signed 64-bit range the way two's complement overflow does"""
    return (n - INT64_MIN) % 2**64 + INT64_MIN


def evaluate(node: Node) -> Value:
    try:
        result = evaluate_node(node)
    except RecursionError:
        raise EvalError("expression nested too deeply") from None
    logger.debug("evaluated %s to %s", type(node).__name__, result)
    return result


def evaluate_node(node: Node) -> Value:
    if isinstance(node, Program):
        result: Value = Integer(0)
        for statement in node.statements:
            result = evaluate_node(statement)
        return result
    elif isinstance(node, ExpressionStatement):
        return evaluate_node(node.expression)
    elif isinstance(node, LetStatement):
        raise EvalError("evaluating a let statement is unsupported")
    elif isinstance(node, IntegerLiteral):
        return Integer(wrap_int64(node.value))
    elif isinstance(node, Identifier):
        raise EvalError("evaluating an identifier is unsupported")
    elif isinstance(node, PrefixExpression):
        if node.operator is TokenType.MINUS:
            operand = evaluate_node(node.right)
            return eval_unary_operation(table=neg_impls, operand=operand, op_name="Negation")
        else:
            raise EvalError(f"Unexpected prefix operator: {node.operator}")
    elif isinstance(node, InfixExpression):
        table, op_name = BINARY_OPERATIONS.get(node.operator, (None, None))
        if table is None:
            raise EvalError(f"Unexpected infix operator: {node.operator}")
        left_res = evaluate_node(node.left)
        right_res = evaluate_node(node.right)
        return eval_binary_operation(table=table, a=left_res, b=right_res, op_name=op_name)
    else:
        raise EvalError(f"Unexpected node type: {node}")


BinaryOperationImplTable = list[tuple[tuple[Type[Value], Type[Value]], BinaryOperationImpl]]


def eval_binary_operation(table: BinaryOperationImplTable, a: Value, b: Value, op_name: str) -> Value:
    for (type_a, type_b), impl in table:
        if isinstance(a, type_a) and isinstance(b, type_b):
            return impl(a, b)
    else:
        raise EvalError(f"{op_name} is not defined for {a.type_name()} and {b.type_name()}")


def _truncating_div(a: Integer, b: Integer) -> Integer:
    if b.v == 0:
        raise EvalError("division by zero")
    quotient = abs(a.v) // abs(b.v)
    if (a.v < 0) != (b.v < 0):
        quotient = -quotient
    return Integer(wrap_int64(quotient))


add_impls: BinaryOperationImplTable = [((Integer, Integer), lambda a, b: Integer(wrap_int64(a.v + b.v)))]  # type: ignore
sub_impls: BinaryOperationImplTable = [((Integer, Integer), lambda a, b: Integer(wrap_int64(a.v - b.v)))]  # type: ignore
mul_impls: BinaryOperationImplTable = [((Integer, Integer), lambda a, b: Integer(wrap_int64(a.v * b.v)))]  # type: ignore
div_impls: BinaryOperationImplTable = [((Integer, Integer), _truncating_div)]  # type: ignore

BINARY_OPERATIONS: dict[TokenType, tuple[BinaryOperationImplTable, str]] = {
    TokenType.PLUS: (add_impls, "Addition"),
    TokenType.MINUS: (sub_impls, "Subtraction"),
    TokenType.ASTERISK: (mul_impls, "Multiplication"),
    TokenType.SLASH: (div_impls, "Division"),
}

UnaryOperationImplTable = list[tuple[Type[Value], UnaryOperationImpl]]


def eval_unary_operation(table: UnaryOperationImplTable, operand: Value, op_name: str) -> Value:
    for operand_type, impl in table:
        if isinstance(operand, operand_type):
            return impl(operand)
    else:
        raise EvalError(f"{op_name} is not defined for {operand.type_name()}")


neg_impls: UnaryOperationImplTable = [(Integer, lambda a: Integer(wrap_int64(-a.v)))]  # type: ignore
