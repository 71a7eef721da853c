"""Arithmetic parser written directly from the layered grammar

    expr   ::= term (("+" | "-") term)*
    term   ::= factor (("*" | "/") factor)*
    factor ::= "-" factor | INT | "(" expr ")"

It accepts a single expression statement and builds the same trees as the
Pratt parser, which makes it useful for cross-checking that parser.
"""

from monkey.ast import Expression, InfixExpression, IntegerLiteral, PrefixExpression
from monkey.parser import ParserError
from monkey.token import Token, TokenType
from monkey.tokenizer import tokenize

SUM_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
PRODUCT_OPERATORS = (TokenType.ASTERISK, TokenType.SLASH)

_EOF = Token(TokenType.EOF)


def parse_arithmetic(code: str) -> Expression:
    tokens = tokenize(code)
    try:
        expr, i = _consume_expr(tokens, 0)
    except RecursionError:
        raise ParserError("expression nested too deeply", token=tokens[0]) from None
    if _at(tokens, i).type is not TokenType.SEMICOLON:
        raise ParserError(f"expected {TokenType.SEMICOLON}, got {_at(tokens, i)}", token=_at(tokens, i))
    if i + 1 < len(tokens):
        raise ParserError(f"expected {TokenType.EOF}, got {tokens[i + 1]}", token=tokens[i + 1])
    return expr


def _at(tokens: list[Token], i: int) -> Token:
    return tokens[i] if i < len(tokens) else _EOF


def _consume_expr(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_chain(tokens, i, SUM_OPERATORS, _consume_term)


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_chain(tokens, i, PRODUCT_OPERATORS, _consume_factor)


def _consume_chain(tokens: list[Token], i: int, operators, consume_operand) -> tuple[Expression, int]:
    result, i = consume_operand(tokens, i)
    while _at(tokens, i).type in operators:
        operator = tokens[i].type
        right, i = consume_operand(tokens, i + 1)
        result = InfixExpression(operator=operator, left=result, right=right)
    return result, i


def _consume_factor(tokens: list[Token], i: int) -> tuple[Expression, int]:
    first = _at(tokens, i)
    if first.type is TokenType.MINUS:
        operand, i = _consume_factor(tokens, i + 1)
        return PrefixExpression(operator=TokenType.MINUS, right=operand), i
    elif first.type is TokenType.INT:
        return IntegerLiteral(first.value), i + 1
    elif first.type is TokenType.LPAREN:
        inner, i = _consume_expr(tokens, i + 1)
        if _at(tokens, i).type is not TokenType.RPAREN:
            raise ParserError(f"expected {TokenType.RPAREN}, got {_at(tokens, i)}", token=_at(tokens, i))
        return inner, i + 1
    else:
        raise ParserError(f"invalid token {first}", token=first)
