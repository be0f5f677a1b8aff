import argparse
import logging
import sys

import repl
from lexer import Lexer, print_tokens
from parser import Parser
from printer import render


def read_input(path):
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="monkey", add_help=True)
    parser.add_argument("mode", choices=("lex", "parse", "repl"),
                        help="lex: print tokens; parse: print the parsed program; repl: interactive token printer")
    parser.add_argument("source", nargs="?",
                        help="Input file (stdin when omitted; ignored by repl).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log diagnostics as they are recorded.")
    parser.add_argument("--debug-lexer", action="store_true",
                        help="Build the ply lexer in debug mode.")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "repl":
        try:
            repl.start()
        except KeyboardInterrupt:
            print()
        return 0

    data = read_input(args.source)
    lexer = Lexer(data, debug=args.debug_lexer)

    if args.mode == "lex":
        print_tokens(list(lexer))
        return 0

    # parse
    parser = Parser(lexer)
    program = parser.parse_program()
    if parser.errors:
        for er in parser.errors:
            print(er)
        return 1

    out = render(program)
    if out:
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
