import sys

from lexer import Lexer
from tokens import EOF

PROMPT = ">> "


def start(stdin=sys.stdin, stdout=sys.stdout):
    """Read a line, print its tokens, repeat until input runs out."""
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        lexer = Lexer(line)
        tok = lexer.next_token()
        while tok.type != EOF:
            print(tok, file=stdout)
            tok = lexer.next_token()
