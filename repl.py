import logging

from termcolor import colored

from monkey.parser import ParserError, parse
from monkey.runtime import EvalError, evaluate


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)

    while True:
        try:
            code = input("> ")
        except EOFError:
            break

        try:
            program = parse(code)
        except ParserError as e:
            print(colored(str(e), "red"))
            continue

        try:
            result = evaluate(program)
        except EvalError as e:
            print(colored(str(e), "red"))
            continue

        print(result.inspect())
