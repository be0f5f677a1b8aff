from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2       # ==
    LESSGREATER = 3  # < or >
    SUM = 4          # +
    PRODUCT = 5      # *
    PREFIX = 6       # -X or !X
    CALL = 7         # myFunc(x)


@dataclass(frozen=True)
class Node:
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

# ---------- Expressions ----------
@dataclass(frozen=True)
class Expr(Node): ...

@dataclass(frozen=True)
class Identifier(Expr):
    name: str = ""

@dataclass(frozen=True)
class Literal(Expr):
    value: str = ""  # raw source text, never converted here

@dataclass(frozen=True)
class UnaryOp(Expr):
    op: str = ""
    operand: Expr = None

@dataclass(frozen=True)
class BinaryOp(Expr):
    op: str = ""
    left: Expr = None
    right: Expr = None
    precedence: Precedence = field(default=Precedence.LOWEST, compare=False)

# ---------- Statements ----------
@dataclass(frozen=True)
class Stmt(Node): ...

@dataclass(frozen=True)
class Let(Stmt):
    name: Identifier = None
    value: Expr = None

@dataclass(frozen=True)
class Return(Stmt):
    value: Expr = None

@dataclass(frozen=True)
class ExprStmt(Stmt):
    expr: Expr = None

# ---------- Program ----------
@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Stmt, ...] = ()
