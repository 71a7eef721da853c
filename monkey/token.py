import enum
from dataclasses import dataclass
from typing import Optional, Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class TokenType(PrintableEnum):
    EOF = enum.auto()
    ILLEGAL = enum.auto()

    IDENT = enum.auto()
    INT = enum.auto()

    ASSIGN = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    ASTERISK = enum.auto()
    SLASH = enum.auto()

    COMMA = enum.auto()
    SEMICOLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()

    FUNCTION = enum.auto()
    LET = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Union[str, int]] = None

    def __str__(self) -> str:
        if self.value is None:
            return str(self.type)
        return f"{self.type}({self.value})"


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
}


def lookup_ident(name: str) -> Token:
    if name in KEYWORDS:
        return Token(KEYWORDS[name])
    return Token(TokenType.IDENT, name)


class Precedence(enum.IntEnum):
    LOWEST = enum.auto()
    EQUALS = enum.auto()  # ==
    LESSGREATER = enum.auto()  # > or <
    SUM = enum.auto()
    PRODUCT = enum.auto()
    PREFIX = enum.auto()  # -x
    CALL = enum.auto()  # f(x)


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
}


def precedence_of(token_type: TokenType) -> Precedence:
    return PRECEDENCES.get(token_type, Precedence.LOWEST)
