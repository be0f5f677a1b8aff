from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Tuple

from ast_nodes import *
from lexer import Lexer
from tokens import (
    Token, EOF, ILLEGAL, IDENT, INT, ASSIGN, BANG, MINUS, PLUS, ASTERISK,
    SLASH, EQ, NOT_EQ, LT, GT, SEMICOLON, LET, RETURN,
)

log = logging.getLogger(__name__)


class ParseError(Exception):
    def __init__(self, message: str, line: int, col: int):
        super().__init__(f"ParseError at {line}:{col} - {message}")
        self.message = message
        self.line = line
        self.col = col


# Binding strength of every infix operator
PRECEDENCES: Dict[str, Precedence] = {
    EQ: Precedence.EQUALS,
    NOT_EQ: Precedence.EQUALS,
    LT: Precedence.LESSGREATER,
    GT: Precedence.LESSGREATER,
    PLUS: Precedence.SUM,
    MINUS: Precedence.SUM,
    SLASH: Precedence.PRODUCT,
    ASTERISK: Precedence.PRODUCT,
}


class Parser:
    """Recursive descent over a lexer with one token of lookahead.

    Statements that fail to parse are dropped and described in ``errors``;
    ``parse_program`` always hands back a Program, so callers have to check
    both.
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []
        self.current_token = Token(EOF)
        self.peek_token = Token(EOF)

        self.prefix_parse_fns: Dict[str, Callable[[], Expr]] = {
            IDENT: self.parse_identifier,
            INT: self.parse_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
        }
        self.infix_parse_fns: Dict[str, Callable[[Expr], Expr]] = {
            ttype: self.parse_infix_expression for ttype in PRECEDENCES
        }

        # fill current_token and peek_token
        self.next_token()
        self.next_token()

    def next_token(self):
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        tok = self.current_token
        if tok.type == ILLEGAL:
            self._record(f"LexError at {tok.line}:{tok.column} - illegal character {tok.literal!r}")

    def _record(self, message: str):
        log.debug("recorded diagnostic: %s", message)
        self.errors.append(message)

    def current_is(self, ttype: str) -> bool:
        return self.current_token.type == ttype

    def peek_is(self, ttype: str) -> bool:
        return self.peek_token.type == ttype

    def expect_peek(self, ttype: str, expected: str):
        if not self.peek_is(ttype):
            tok = self.peek_token
            raise ParseError(f"expected next token to be {expected}, got {tok}", tok.line, tok.column)
        self.next_token()

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.current_token.type, Precedence.LOWEST)

    # ---------------- PROGRAM ----------------
    def parse_program(self) -> Program:
        statements: List[Stmt] = []
        while not self.current_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            # step past the statement terminator
            self.next_token()
        return Program(statements=tuple(statements), line=1, column=1)

    def parse_statement(self) -> Optional[Stmt]:
        ttype = self.current_token.type
        if ttype == SEMICOLON:
            # empty statement
            return None
        try:
            if ttype == LET:
                return self.parse_let_statement()
            if ttype == RETURN:
                return self.parse_return_statement()
            return self.parse_expression_statement()
        except ParseError as e:
            self._record(str(e))
            self._synchronize()
            return None

    def _synchronize(self):
        # drop the rest of a broken statement, up to its ';'
        while not self.current_is(SEMICOLON) and not self.current_is(EOF):
            self.next_token()

    def _skip_semicolon(self):
        if self.peek_is(SEMICOLON):
            self.next_token()

    # ---------------- STATEMENTS ----------------
    def parse_let_statement(self) -> Let:
        t = self.current_token
        self.expect_peek(IDENT, "IDENT")
        name = Identifier(
            name=self.current_token.literal,
            line=self.current_token.line,
            column=self.current_token.column,
        )
        self.expect_peek(ASSIGN, "'='")
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()
        return Let(name=name, value=value, line=t.line, column=t.column)

    def parse_return_statement(self) -> Return:
        t = self.current_token
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()
        return Return(value=value, line=t.line, column=t.column)

    def parse_expression_statement(self) -> ExprStmt:
        t = self.current_token
        expr = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()
        return ExprStmt(expr=expr, line=t.line, column=t.column)

    # ---------------- EXPRESSIONS (precedence) ----------------
    def _prefix_fn(self) -> Callable[[], Expr]:
        tok = self.current_token
        prefix = self.prefix_parse_fns.get(tok.type)
        if prefix is None:
            raise ParseError(f"no prefix parse function for {tok} found", tok.line, tok.column)
        return prefix

    def parse_expression(self, precedence: Precedence) -> Expr:
        left = self._prefix_fn()()

        while not self.peek_is(SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> Identifier:
        t = self.current_token
        return Identifier(name=t.literal, line=t.line, column=t.column)

    def parse_literal(self) -> Literal:
        t = self.current_token
        return Literal(value=t.literal, line=t.line, column=t.column)

    def parse_prefix_expression(self) -> UnaryOp:
        # collect the whole run of prefix operators, then wrap innermost first
        op_toks = []
        while self.current_is(BANG) or self.current_is(MINUS):
            op_toks.append(self.current_token)
            self.next_token()

        expr = self._prefix_fn()()
        for op_tok in reversed(op_toks):
            expr = UnaryOp(op=op_tok.literal, operand=expr, line=op_tok.line, column=op_tok.column)
        return expr

    def parse_infix_expression(self, left: Expr) -> BinaryOp:
        op_tok = self.current_token
        precedence = self.current_precedence()
        self.next_token()
        # equal precedence ends the inner loop, so a + b + c groups to the left
        right = self.parse_expression(precedence)
        return BinaryOp(
            op=op_tok.literal,
            left=left,
            right=right,
            precedence=precedence,
            line=op_tok.line,
            column=op_tok.column,
        )


def parse(source: str, **kwargs) -> Tuple[Program, List[str]]:
    """Parse ``source`` in a fresh session and return the program and its errors."""
    parser = Parser(Lexer(source, **kwargs))
    program = parser.parse_program()
    return program, parser.errors
