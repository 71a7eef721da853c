import logging
from dataclasses import dataclass
from typing import Callable

from monkey.ast import (
    Expression,
    ExpressionStatement,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    Statement,
)
from monkey.token import Precedence, Token, TokenType, precedence_of
from monkey.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class ParserError(Exception):
    errmsg: str
    token: Token

    def __str__(self) -> str:
        return f"Parser error: {self.errmsg}"


PrefixHandler = Callable[[], Expression]
InfixHandler = Callable[[Expression], Expression]


class Parser:
    """Pratt parser over a token stream with one token of lookahead.

    Every handler leaves ``current`` on the first token after the part of the
    input it consumed.
    """

    def __init__(self, tokenizer: Tokenizer) -> None:
        self.tokenizer = tokenizer
        self.current = tokenizer.next_token()
        self.peek = tokenizer.next_token()

        self.prefix_handlers: dict[TokenType, PrefixHandler] = {
            TokenType.INT: self._parse_integer_literal,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.LPAREN: self._parse_grouped_expression,
        }
        self.infix_handlers: dict[TokenType, InfixHandler] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
        }

    def advance(self) -> None:
        self.current = self.peek
        self.peek = self.tokenizer.next_token()

    def parse_program(self) -> Program:
        statements: list[Statement] = []
        while self.current.type is not TokenType.EOF:
            statements.append(self._parse_statement())
            self.advance()
        return Program(tuple(statements))

    def _parse_statement(self) -> Statement:
        if self.current.type is TokenType.LET:
            return self._parse_let_statement()
        else:
            return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement:
        self.advance()
        if self.current.type is not TokenType.IDENT:
            raise ParserError(f"invalid identifier {self.current}", token=self.current)
        name = self.current.value
        self.advance()
        self._expect_current(TokenType.ASSIGN)
        self.advance()
        value = self.parse_expression(Precedence.LOWEST)
        self._expect_current(TokenType.SEMICOLON)
        return LetStatement(name=name, value=value)

    def _parse_expression_statement(self) -> ExpressionStatement:
        expression = self.parse_expression(Precedence.LOWEST)
        self._expect_current(TokenType.SEMICOLON)
        return ExpressionStatement(expression)

    def _expect_current(self, token_type: TokenType) -> None:
        if self.current.type is not token_type:
            raise ParserError(f"expected {token_type}, got {self.current}", token=self.current)

    def parse_expression(self, precedence: Precedence) -> Expression:
        prefix = self.prefix_handlers.get(self.current.type)
        if prefix is None:
            raise ParserError(f"invalid token {self.current}", token=self.current)
        left = prefix()

        while self.current.type is not TokenType.SEMICOLON and precedence_of(self.current.type) > precedence:
            infix = self.infix_handlers.get(self.current.type)
            if infix is None:
                return left
            left = infix(left)

        return left

    def _parse_integer_literal(self) -> Expression:
        literal = IntegerLiteral(self.current.value)
        self.advance()
        return literal

    def _parse_prefix_expression(self) -> Expression:
        operator = self.current.type
        self.advance()
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpression(operator=operator, right=right)

    def _parse_infix_expression(self, left: Expression) -> Expression:
        operator = self.current.type
        self.advance()
        # parsing the right side at the operator's own precedence keeps chains left-associative
        right = self.parse_expression(precedence_of(operator))
        return InfixExpression(operator=operator, left=left, right=right)

    def _parse_grouped_expression(self) -> Expression:
        self.advance()
        expression = self.parse_expression(Precedence.LOWEST)
        self._expect_current(TokenType.RPAREN)
        self.advance()
        return expression


def parse(code: str) -> Program:
    parser = Parser(Tokenizer(code))
    try:
        program = parser.parse_program()
    except RecursionError:
        raise ParserError("expression nested too deeply", token=parser.current) from None
    logger.debug("parsed %d statement(s)", len(program.statements))
    return program
