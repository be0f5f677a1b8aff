from __future__ import annotations
import logging
from typing import Iterator, List

import ply.lex as lex

from tokens import Token, EOF, ILLEGAL, lookup_ident

log = logging.getLogger(__name__)


class Lexer:
    """Pull-based scanner over one source text.

    ``next_token()`` never runs dry: once the input is exhausted it keeps
    returning EOF. Iterating the lexer stops at the first EOF instead.
    """

    tokens = (
        # Keywords
        'FUNCTION', 'LET', 'RETURN',

        # Identifiers and values
        'IDENT', 'INT', 'STRING',

        # Two-character operators
        'EQ', 'NOT_EQ',

        # Single-character operators
        'ASSIGN', 'BANG', 'PLUS', 'MINUS', 'ASTERISK', 'SLASH',
        'LT', 'GT',

        # Delimiters
        'COMMA', 'SEMICOLON',
        'LPAREN', 'RPAREN',
        'LBRACE', 'RBRACE',

        # Anything the language does not know
        'ILLEGAL',
    )

    # Ignored characters
    t_ignore = ' \t\r\f\v'

    # Longer patterns win over their one-character prefixes
    t_EQ = r'=='
    t_NOT_EQ = r'!='

    t_ASSIGN = r'='
    t_BANG = r'!'
    t_PLUS = r'\+'
    t_MINUS = r'-'
    t_ASTERISK = r'\*'
    t_SLASH = r'/'
    t_LT = r'<'
    t_GT = r'>'

    t_COMMA = r','
    t_SEMICOLON = r';'
    t_LPAREN = r'\('
    t_RPAREN = r'\)'
    t_LBRACE = r'\{'
    t_RBRACE = r'\}'

    def __init__(self, source, **kwargs):
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("utf-8")
        if not isinstance(source, str):
            raise TypeError(f"source must be str or bytes, not {type(source).__name__}")
        self.source = source
        # offset where the current line begins
        self.line_start = 0
        self.lexer = None
        self.build(**kwargs)
        self.lexer.input(self.source)

    # Identifiers and keywords
    def t_IDENT(self, t):
        r'[A-Za-z_]+'
        t.type = lookup_ident(t.value)
        return t

    # Integer literals keep their source text
    def t_INT(self, t):
        r'[0-9]+'
        return t

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)
        self.line_start = t.lexpos + len(t.value)

    # Unknown characters become ILLEGAL tokens and scanning goes on.
    # An embedded NUL is one of them; only the real end of input is EOF.
    def t_error(self, t):
        t.type = ILLEGAL
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    def build(self, **kwargs):
        """Build the ply lexer; kwargs go straight to ``lex.lex``."""
        kwargs.setdefault('errorlog', log)
        if kwargs.get('debug'):
            kwargs.setdefault('debuglog', log)
        self.lexer = lex.lex(module=self, **kwargs)
        return self.lexer

    def _column(self, lexpos: int) -> int:
        return lexpos - self.line_start + 1

    def next_token(self) -> Token:
        tok = self.lexer.token()
        if tok is None:
            end = len(self.source)
            return Token(EOF, "", self.lexer.lineno, self._column(end), end)
        return Token(tok.type, tok.value, tok.lineno, self._column(tok.lexpos), tok.lexpos)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.type == EOF:
                return
            yield tok


def tokenize(data: str) -> List[Token]:
    return list(Lexer(data))


def print_tokens(tokens: List[Token]):
    if not tokens:
        print("No tokens found!")
        return

    print(f"{'Line':<6}| {'Column':<7}| {'Token':<12}| Value")
    print("-" * 48)

    for tok in tokens:
        value = tok.literal
        # Display escape characters
        if not value.isprintable():
            value = repr(value)[1:-1]
        print(f"{tok.line:<6}| {tok.column:<7}| {tok.type:<12}| {value}")
