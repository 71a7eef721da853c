from typing import Iterator

from monkey.token import INT64_MAX, Token, TokenType, lookup_ident


SINGLE_CHAR_TOKENS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalpha() or s == "_"


def _is_valid_in_number(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return "0" <= s <= "9"


class Tokenizer:
    """Lazily splits source text into tokens.

    ``next_token`` returns ``EOF`` forever once the input is exhausted;
    iterating the tokenizer stops before ``EOF`` instead of yielding it.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token

    def next_token(self) -> Token:
        self._skip_whitespace()
        if self.pos >= len(self.code):
            return Token(TokenType.EOF)

        char = self.code[self.pos]
        if char in SINGLE_CHAR_TOKENS:
            self.pos += 1
            return Token(SINGLE_CHAR_TOKENS[char])
        elif _is_valid_in_identifier(char):
            return lookup_ident(self._read_while(_is_valid_in_identifier))
        elif _is_valid_in_number(char):
            digits = self._read_while(_is_valid_in_number).lstrip("0") or "0"
            # int() refuses very long digit strings, so reject by length first
            if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
                return Token(TokenType.ILLEGAL)
            return Token(TokenType.INT, int(digits))
        else:
            self.pos += 1
            return Token(TokenType.ILLEGAL)

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.code) and self.code[self.pos].isspace():
            self.pos += 1

    def _read_while(self, predicate) -> str:
        start = self.pos
        while self.pos < len(self.code) and predicate(self.code[self.pos]):
            self.pos += 1
        return self.code[start : self.pos]


def tokenize(code: str) -> list[Token]:
    return list(Tokenizer(code))
