"""Rendering expressions as text."""

from __future__ import annotations

from typing import Callable, List, Optional

from .expr import calc_value
from .model import Expr, ExprType, Symbol, SymbolType, Tristate

PrintFn = Callable[[Optional[Symbol], str], None]

# Each entry: operator kinds, and the kinds that bind more loosely than them.
_PRECEDENCE = (
    (
        {ExprType.LEQ, ExprType.LTH, ExprType.GEQ, ExprType.GTH},
        {ExprType.EQUAL, ExprType.UNEQUAL},
    ),
    ({ExprType.EQUAL, ExprType.UNEQUAL}, {ExprType.NOT}),
    ({ExprType.NOT}, {ExprType.AND}),
    ({ExprType.AND}, {ExprType.OR}),
    ({ExprType.OR}, {ExprType.LIST}),
    ({ExprType.LIST}, {ExprType.NONE}),
)


def compare_type(t1: ExprType, t2: ExprType) -> int:
    """1 if an operand of kind t2 needs parentheses inside t1, 0 if equal, else -1."""
    if t1 == t2:
        return 0
    start = next(
        (i for i, (kinds, _) in enumerate(_PRECEDENCE) if t1 in kinds), None
    )
    if start is None:
        return -1
    if any(t2 in looser for _, looser in _PRECEDENCE[start:]):
        return 1
    return -1


def _emit_lhs(fn: PrintFn, sym: Symbol) -> None:
    if sym.name:
        fn(sym, sym.name)
    else:
        fn(None, "<choice>")


_RELATION = {
    ExprType.EQUAL: "=",
    ExprType.UNEQUAL: "!=",
    ExprType.LEQ: "<=",
    ExprType.LTH: "<",
    ExprType.GEQ: ">=",
    ExprType.GTH: ">",
}


def print_expr(
    e: Optional[Expr], fn: PrintFn, prevtoken: ExprType = ExprType.NONE
) -> None:
    """Feed the text of an expression, piece by piece, to fn(symbol, text)."""
    if e is None:
        fn(None, "y")
        return

    paren = compare_type(prevtoken, e.type) > 0
    if paren:
        fn(None, "(")
    t = e.type
    if t is ExprType.SYMBOL:
        _emit_lhs(fn, e.left)
    elif t is ExprType.NOT:
        fn(None, "!")
        print_expr(e.left, fn, ExprType.NOT)
    elif t in _RELATION:
        _emit_lhs(fn, e.left)
        fn(None, _RELATION[t])
        fn(e.right, e.right.name)
    elif t is ExprType.OR:
        print_expr(e.left, fn, ExprType.OR)
        fn(None, " || ")
        print_expr(e.right, fn, ExprType.OR)
    elif t is ExprType.AND:
        print_expr(e.left, fn, ExprType.AND)
        fn(None, " && ")
        print_expr(e.right, fn, ExprType.AND)
    elif t is ExprType.LIST:
        fn(e.right, e.right.name)
        if e.left is not None:
            fn(None, " ^ ")
            print_expr(e.left, fn, ExprType.LIST)
    elif t is ExprType.RANGE:
        fn(None, "[")
        fn(e.left, e.left.name)
        fn(None, " ")
        fn(e.right, e.right.name)
        fn(None, "]")
    else:
        fn(None, f"<unknown type {int(t)}>")
    if paren:
        fn(None, ")")


def expr_to_str(e: Optional[Expr]) -> str:
    """Plain text of an expression."""
    parts: List[str] = []
    print_expr(e, lambda _sym, text: parts.append(text))
    return "".join(parts)


class _TextBuilder:
    """Accumulates text, annotating symbols with their values and wrapping lines."""

    def __init__(self, max_width: int = 0) -> None:
        self.max_width = max_width
        self.text = ""

    def __call__(self, sym: Optional[Symbol], piece: str) -> None:
        sym_str = sym.string_value() if sym is not None else None
        if self.max_width:
            extra = len(piece)
            if sym_str is not None:
                extra += 4 + len(sym_str)
            last_cr = self.text.rfind("\n")
            last_line = len(self.text) - last_cr if last_cr >= 0 else len(self.text)
            if last_line + extra > self.max_width:
                self.text += "\\\n"
        self.text += piece
        if sym is not None and sym.type is not SymbolType.UNKNOWN:
            self.text += f" [={sym_str}]"


def format_expr(e: Optional[Expr], max_width: int = 0) -> str:
    """Text of an expression with each symbol's value; wrapped if max_width > 0."""
    out = _TextBuilder(max_width)
    print_expr(e, out)
    return out.text


def format_revdep(
    e: Expr, pr_type: Tristate, title: Optional[str] = None
) -> str:
    """List the top-level || terms that evaluate to pr_type, one per line.

    The title is written once, before the first listed term.
    """
    out = _TextBuilder()
    pending = [title]

    def walk(node: Expr) -> None:
        if node.type is ExprType.OR:
            walk(node.left)
            walk(node.right)
        elif calc_value(node) == pr_type:
            if pending[0]:
                out(None, pending[0])
                pending[0] = None
            out(None, "  - ")
            print_expr(node, out)
            out(None, "\n")

    walk(e)
    return out.text