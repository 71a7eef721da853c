"""Syntax tree produced by the parser and consumed by the runtime.

Nodes are immutable and compare structurally. ``str(node)`` renders source
text with every prefix and infix expression parenthesised, so the grouping the
parser chose is visible and the text parses back to an equal tree.
"""

from dataclasses import dataclass
from typing import Union

from monkey.token import TokenType

OPERATOR_LEXEMES = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
}


def _lexeme(operator: TokenType) -> str:
    return OPERATOR_LEXEMES.get(operator, str(operator))


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IntegerLiteral:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PrefixExpression:
    operator: TokenType
    right: "Expression"

    def __str__(self) -> str:
        return f"({_lexeme(self.operator)}{self.right})"


@dataclass(frozen=True)
class InfixExpression:
    operator: TokenType
    left: "Expression"
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.left} {_lexeme(self.operator)} {self.right})"


Expression = Union[Identifier, IntegerLiteral, PrefixExpression, InfixExpression]


@dataclass(frozen=True)
class LetStatement:
    name: str
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression

    def __str__(self) -> str:
        return f"{self.expression};"


Statement = Union[LetStatement, ExpressionStatement]


@dataclass(frozen=True)
class Program:
    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.statements)


Node = Union[Program, Statement, Expression]
