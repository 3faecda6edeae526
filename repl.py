import argparse
import logging

from interpreter.parser import ParseError, check
from interpreter.runtime import MathError, evaluate
from interpreter.tokenizer import LexError, format_tokens, tokenize


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Simple arithmetic interpreter")
    arg_parser.add_argument("--log-level", default="WARNING", help="logging level, e.g. DEBUG")
    arg_parser.add_argument("--no-trace", action="store_true", help="do not echo the token stream")
    args = arg_parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    print("Simple Interpreter")
    while True:
        try:
            code = input("Enter an expression: ")
        except EOFError:
            break

        try:
            tokens = tokenize(code)
        except LexError as e:
            print(e)
            continue

        if not args.no_trace:
            print(format_tokens(tokens))

        try:
            remaining = check(tokens)
        except ParseError as e:
            print(e)
            continue

        if not args.no_trace:
            print(format_tokens(remaining))

        try:
            result = evaluate(tokens)
        except (ParseError, MathError) as e:
            print(e)
            continue

        print(f"Result = {result.as_value()}")
