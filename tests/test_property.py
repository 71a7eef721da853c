from hypothesis import given, settings
from hypothesis import strategies as st

from monkey.grammar import parse_arithmetic
from monkey.parser import parse
from monkey.runtime import evaluate
from monkey.token import Token, TokenType
from monkey.tokenizer import Tokenizer
from monkey.value import Integer

INT64_MAX = 2**63 - 1


def wrap(n: int) -> int:
    return ((n + 2**63) % 2**64) - 2**63


# "+ - *" with unary minus group the same way in Python, so eval() is an oracle
arithmetic = st.recursive(
    st.integers(min_value=0, max_value=1000).map(str),
    lambda children: st.one_of(
        st.tuples(children, st.sampled_from(["+", "-", "*"]), children).map(lambda t: f"{t[0]} {t[1]} {t[2]}"),
        children.map(lambda s: f"-{s}"),
        children.map(lambda s: f"({s})"),
    ),
    max_leaves=12,
)


@given(st.integers(min_value=0, max_value=INT64_MAX))
def test_literal_evaluates_to_itself(n: int) -> None:
    assert evaluate(parse(f"{n};")) == Integer(n)


@given(st.integers(min_value=0, max_value=INT64_MAX))
def test_unary_minus_negates(n: int) -> None:
    assert evaluate(parse(f"-{n};")) == Integer(-n)


@settings(deadline=None)
@given(arithmetic)
def test_evaluation_matches_python(code: str) -> None:
    assert evaluate(parse(f"{code};")) == Integer(wrap(eval(code)))


@settings(deadline=None)
@given(arithmetic)
def test_parsers_agree(code: str) -> None:
    assert parse_arithmetic(f"{code};") == parse(f"{code};").statements[0].expression


@settings(deadline=None)
@given(arithmetic)
def test_parsing_is_repeatable(code: str) -> None:
    program = parse(f"{code};")
    assert parse(f"{code};") == program
    assert parse(str(program)) == program


@given(st.text(max_size=30))
def test_tokenizer_ends_with_eof_forever(code: str) -> None:
    tokenizer = Tokenizer(code)
    tokens = list(tokenizer)
    assert Token(TokenType.EOF) not in tokens
    assert tokenizer.next_token() == Token(TokenType.EOF)
    assert tokenizer.next_token() == Token(TokenType.EOF)
