from __future__ import annotations
from typing import List
from ast_nodes import *


class SourcePrinter:
    """Renders an AST as a display form, one statement per line.

    Every unary and binary expression is wrapped in parentheses, so the
    output shows exactly how the parser grouped things. The parser has no
    grouping syntax, so this text is for reading, not for parsing back.
    """

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, s: str):
        self.lines.append(s)

    def generate(self, prog: Program) -> str:
        self.lines = []
        for st in prog.statements:
            self.gen_stmt(st)
        return "\n".join(self.lines)

    def gen_stmt(self, st: Stmt):
        if isinstance(st, Let):
            self.emit(f"let {st.name.name} = {self.gen_expr(st.value)};")
        elif isinstance(st, Return):
            self.emit(f"return {self.gen_expr(st.value)};")
        elif isinstance(st, ExprStmt):
            self.emit(f"{self.gen_expr(st.expr)};")
        else:
            raise TypeError(f"unknown statement node {type(st).__name__}")

    # -------- expressions ----------
    def gen_expr(self, e: Expr) -> str:
        if isinstance(e, Identifier):
            return e.name

        if isinstance(e, Literal):
            return e.value

        if isinstance(e, UnaryOp):
            ops = []
            while isinstance(e, UnaryOp):
                ops.append(e.op)
                e = e.operand
            out = self.gen_expr(e)
            for op in reversed(ops):
                out = f"({op}{out})"
            return out

        if isinstance(e, BinaryOp):
            return f"({self.gen_expr(e.left)} {e.op} {self.gen_expr(e.right)})"

        raise TypeError(f"unknown expression node {type(e).__name__}")


def render(prog: Program) -> str:
    return SourcePrinter().generate(prog)
