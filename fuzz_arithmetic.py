"""Compares random arithmetic against Python's own integer arithmetic and
against the grammar parser. Runs until interrupted, printing mismatches."""
import random
import re

from monkey.grammar import parse_arithmetic
from monkey.parser import parse
from monkey.runtime import evaluate, wrap_int64


def eval_py(code: str) -> int | str:
    try:
        return wrap_int64(eval(code))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    try:
        return evaluate(parse(code + ";")).v
    except Exception as e:
        return str(e)


def same_tree(code: str) -> bool:
    try:
        pratt = parse(code + ";").statements[0].expression
    except Exception:
        pratt = None
    try:
        grammar = parse_arithmetic(code + ";")
    except Exception:
        grammar = None
    return pratt == grammar


if __name__ == "__main__":
    # no "/" since Python's // floors where the runtime truncates
    alphabet = "0123456789()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"(^|[-+*(])\s*\+", code):
            continue  # unary plus is Python-only

        if re.findall(r"\b0\d", code):
            continue  # leading zeros are a syntax error in Python

        if not code.strip():
            continue

        if not same_tree(code):
            print(f"{code!r}\nparsers disagree\n\n")

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
