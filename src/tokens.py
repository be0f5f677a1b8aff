from __future__ import annotations
from dataclasses import dataclass, field

# Identifiers and values
IDENT = 'IDENT'
INT = 'INT'
STRING = 'STRING'   # reserved, never produced by the lexer

EOF = 'EOF'
ILLEGAL = 'ILLEGAL'

# Operators
ASSIGN = 'ASSIGN'
BANG = 'BANG'
PLUS = 'PLUS'
MINUS = 'MINUS'
SLASH = 'SLASH'
ASTERISK = 'ASTERISK'
EQ = 'EQ'
NOT_EQ = 'NOT_EQ'
LT = 'LT'
GT = 'GT'

# Delimiters
COMMA = 'COMMA'
SEMICOLON = 'SEMICOLON'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
LBRACE = 'LBRACE'
RBRACE = 'RBRACE'

# Keywords
FUNCTION = 'FUNCTION'
LET = 'LET'
RETURN = 'RETURN'

KEYWORDS = {
    'fn': FUNCTION,
    'let': LET,
    'return': RETURN,
}

# How each fixed token shows up in diagnostics and the REPL
_DISPLAY = {
    EOF: 'EOF',
    ASSIGN: '=',
    BANG: '!',
    PLUS: '+',
    MINUS: '-',
    SLASH: '/',
    ASTERISK: '*',
    EQ: '==',
    NOT_EQ: '!=',
    LT: '<',
    GT: '>',
    COMMA: ',',
    SEMICOLON: 'Semicolon',
    LPAREN: '(',
    RPAREN: ')',
    LBRACE: '{',
    RBRACE: '}',
    FUNCTION: 'function',
    LET: 'let',
    RETURN: 'return',
}

_TAGGED = {
    IDENT: 'Ident',
    INT: 'Int',
    STRING: 'String',
    ILLEGAL: 'ILLEGAL',
}


@dataclass(frozen=True)
class Token:
    type: str
    literal: str = ""
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    lexpos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.type in _TAGGED:
            return f"{_TAGGED[self.type]}({self.literal})"
        return _DISPLAY.get(self.type, self.type)


def lookup_ident(word: str) -> str:
    return KEYWORDS.get(word, IDENT)
