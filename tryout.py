from monkey.parser import ParserError, parse
from monkey.runtime import EvalError, evaluate
from monkey.tokenizer import tokenize

for code in [
    "5;",
    "-1;",
    "1 + 1;",
    "-1 + 1;",
    "1 + -1;",
    "4 + 6 * 3;",
    "(4 + 6);",
    "(4+6) * 3;",
    "7/6/2000;",
    "2206-1103;",
    "1103-1103+1103;",
    "-1103-1103*1103;",
    "1103-(1103+1103);",
    "9223372036854775807 + 1;",
    "let birthday = 1103;",
    "let birthday = ;",
    "1 $ 2;",
    "1 / 0;",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    print(f"tokens: {' '.join(str(t) for t in tokenize(code))}")

    try:
        program = parse(code)
    except ParserError as e:
        print(e)
        continue
    statements_str = "\n".join(f" {i + 1:> 2}: {stmt}" for i, stmt in enumerate(program.statements))
    print(f"ast:\n{statements_str}")

    try:
        result = evaluate(program)
    except EvalError as e:
        print(e)
        continue
    print(f"result: {result.inspect()}")
