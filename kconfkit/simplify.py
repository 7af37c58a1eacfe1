"""Rewriting expressions into simpler, equivalent forms."""

from __future__ import annotations

from typing import Optional, Tuple

from .expr import (
    COMPARISONS,
    alloc_comp,
    alloc_one,
    alloc_symbol,
    alloc_two,
    copy_expr,
    eliminate_yn,
    expr_eq,
)
from .model import (
    SYMBOL_MOD,
    SYMBOL_NO,
    SYMBOL_YES,
    Expr,
    ExprType,
    Symbol,
    SymbolFlag,
    SymbolType,
)

_LOGIC = (ExprType.OR, ExprType.AND)
_JOINABLE = (ExprType.EQUAL, ExprType.UNEQUAL, ExprType.SYMBOL, ExprType.NOT)
_FLIP = {
    ExprType.EQUAL: ExprType.UNEQUAL,
    ExprType.UNEQUAL: ExprType.EQUAL,
    ExprType.LEQ: ExprType.GTH,
    ExprType.GEQ: ExprType.LTH,
    ExprType.LTH: ExprType.GEQ,
    ExprType.GTH: ExprType.LEQ,
}


def trans_bool(e: Optional[Expr]) -> Optional[Expr]:
    """Rewrite FOO!=n into FOO for tristate symbols, in place."""
    if e is None:
        return None
    if e.type in (ExprType.AND, ExprType.OR, ExprType.NOT):
        e.left = trans_bool(e.left)
        e.right = trans_bool(e.right)
    elif e.type is ExprType.UNEQUAL:
        if e.left.type is SymbolType.TRISTATE and e.right is SYMBOL_NO:
            e.type = ExprType.SYMBOL
            e.right = None
    return e


def _operand_symbols(e1: Expr, e2: Expr) -> Optional[Tuple[Symbol, Symbol]]:
    """The symbols two joinable leaves talk about, or None if not joinable."""
    if e1.type not in _JOINABLE or e2.type not in _JOINABLE:
        return None
    if e1.type is ExprType.NOT:
        inner = e1.left
        if inner.type not in (ExprType.EQUAL, ExprType.UNEQUAL, ExprType.SYMBOL):
            return None
        sym1 = inner.left
    else:
        sym1 = e1.left
    if e2.type is ExprType.NOT:
        if e2.left.type is not ExprType.SYMBOL:
            return None
        sym2 = e2.left.left
    else:
        sym2 = e2.left
    return sym1, sym2


def _pair(a: Symbol, b: Symbol, x: Symbol, y: Symbol) -> bool:
    return (a is x and b is y) or (a is y and b is x)


def join_or(e1: Expr, e2: Expr) -> Optional[Expr]:
    """A single expression equivalent to e1 || e2, or None if none is known."""
    if expr_eq(e1, e2):
        return copy_expr(e1)
    syms = _operand_symbols(e1, e2)
    if syms is None:
        return None
    sym1, sym2 = syms
    if sym1 is not sym2:
        return None
    if sym1.type not in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
        return None
    if sym1.type is SymbolType.TRISTATE:
        if e1.type is ExprType.EQUAL and e2.type is ExprType.EQUAL:
            r1, r2 = e1.right, e2.right
            if _pair(r1, r2, SYMBOL_YES, SYMBOL_MOD):
                return alloc_comp(ExprType.UNEQUAL, sym1, SYMBOL_NO)
            if _pair(r1, r2, SYMBOL_YES, SYMBOL_NO):
                return alloc_comp(ExprType.UNEQUAL, sym1, SYMBOL_MOD)
            if _pair(r1, r2, SYMBOL_MOD, SYMBOL_NO):
                return alloc_comp(ExprType.UNEQUAL, sym1, SYMBOL_YES)
    if sym1.type is SymbolType.BOOLEAN:
        if (
            e1.type is ExprType.NOT
            and e1.left.type is ExprType.SYMBOL
            and e2.type is ExprType.SYMBOL
        ) or (
            e2.type is ExprType.NOT
            and e2.left.type is ExprType.SYMBOL
            and e1.type is ExprType.SYMBOL
        ):
            return alloc_symbol(SYMBOL_YES)
    return None


def _symbol_with(e1: Expr, e2: Expr, etype: ExprType, rsym: Symbol) -> bool:
    """True if one operand is a bare symbol and the other is `sym <etype> rsym`."""
    return (
        e1.type is ExprType.SYMBOL and e2.type is etype and e2.right is rsym
    ) or (e2.type is ExprType.SYMBOL and e1.type is etype and e1.right is rsym)


def join_and(e1: Expr, e2: Expr) -> Optional[Expr]:
    """A single expression equivalent to e1 && e2, or None if none is known."""
    if expr_eq(e1, e2):
        return copy_expr(e1)
    syms = _operand_symbols(e1, e2)
    if syms is None:
        return None
    sym1, sym2 = syms
    if sym1 is not sym2:
        return None
    if sym1.type not in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
        return None

    if _symbol_with(e1, e2, ExprType.EQUAL, SYMBOL_YES):
        return alloc_comp(ExprType.EQUAL, sym1, SYMBOL_YES)
    if _symbol_with(e1, e2, ExprType.UNEQUAL, SYMBOL_NO):
        return alloc_symbol(sym1)
    if _symbol_with(e1, e2, ExprType.UNEQUAL, SYMBOL_MOD):
        return alloc_comp(ExprType.EQUAL, sym1, SYMBOL_YES)

    if sym1.type is SymbolType.TRISTATE:
        for eq, ne in ((e1, e2), (e2, e1)):
            if eq.type is ExprType.EQUAL and ne.type is ExprType.UNEQUAL:
                value = eq.right
                if (ne.right.flags & SymbolFlag.CONST) and (
                    value.flags & SymbolFlag.CONST
                ):
                    if value is not ne.right:
                        return alloc_comp(ExprType.EQUAL, sym1, value)
                    return alloc_symbol(SYMBOL_NO)
                break
        if e1.type is ExprType.UNEQUAL and e2.type is ExprType.UNEQUAL:
            r1, r2 = e1.right, e2.right
            if _pair(r1, r2, SYMBOL_YES, SYMBOL_NO):
                return alloc_comp(ExprType.EQUAL, sym1, SYMBOL_MOD)
            if _pair(r1, r2, SYMBOL_YES, SYMBOL_MOD):
                return alloc_comp(ExprType.EQUAL, sym1, SYMBOL_NO)
            if _pair(r1, r2, SYMBOL_MOD, SYMBOL_NO):
                return alloc_comp(ExprType.EQUAL, sym1, SYMBOL_YES)
    return None


class _Counter:
    def __init__(self) -> None:
        self.count = 0


def _dups1(
    etype: ExprType, e1: Expr, e2: Expr, counter: _Counter
) -> Tuple[Expr, Expr]:
    if e1.type == etype:
        e1.left, e2 = _dups1(etype, e1.left, e2, counter)
        e1.right, e2 = _dups1(etype, e1.right, e2, counter)
        return e1, e2
    if e2.type == etype:
        e1, e2.left = _dups1(etype, e1, e2.left, counter)
        e1, e2.right = _dups1(etype, e1, e2.right, counter)
        return e1, e2

    if e1 is e2:
        return e1, e2

    if e1.type in _LOGIC:
        e1, _ = _dups1(e1.type, e1, e1, counter)

    if etype is ExprType.OR:
        joined = join_or(e1, e2)
        if joined is not None:
            counter.count += 1
            return alloc_symbol(SYMBOL_NO), joined
    elif etype is ExprType.AND:
        joined = join_and(e1, e2)
        if joined is not None:
            counter.count += 1
            return alloc_symbol(SYMBOL_YES), joined
    return e1, e2


def eliminate_dups(e: Optional[Expr]) -> Optional[Expr]:
    """Remove duplicate and redundant operands, e.g. A || B || A -> A || B."""
    if e is None:
        return None
    while True:
        counter = _Counter()
        if e.type in _LOGIC:
            e, _ = _dups1(e.type, e, e, counter)
        if not counter.count:
            break
        e = eliminate_yn(e)
    return e


def transform(e: Optional[Expr]) -> Optional[Expr]:
    """Simplify comparisons on booleans and push negations inwards."""
    if e is None:
        return None
    if e.type in (ExprType.AND, ExprType.OR, ExprType.NOT):
        e.left = transform(e.left)
        e.right = transform(e.right)

    t = e.type
    if t is ExprType.EQUAL:
        if e.left.type is not SymbolType.BOOLEAN:
            return e
        if e.right is SYMBOL_NO:
            e.type = ExprType.NOT
            e.left = alloc_symbol(e.left)
            e.right = None
        elif e.right is SYMBOL_MOD:
            print(
                f"boolean symbol {e.left.name} tested for 'm'? "
                "test forced to 'n'"
            )
            e.type = ExprType.SYMBOL
            e.left = SYMBOL_NO
            e.right = None
        elif e.right is SYMBOL_YES:
            e.type = ExprType.SYMBOL
            e.right = None
        return e

    if t is ExprType.UNEQUAL:
        if e.left.type is not SymbolType.BOOLEAN:
            return e
        if e.right is SYMBOL_NO:
            e.type = ExprType.SYMBOL
            e.right = None
        elif e.right is SYMBOL_MOD:
            print(
                f"boolean symbol {e.left.name} tested for 'm'? "
                "test forced to 'y'"
            )
            e.type = ExprType.SYMBOL
            e.left = SYMBOL_YES
            e.right = None
        elif e.right is SYMBOL_YES:
            e.type = ExprType.NOT
            e.left = alloc_symbol(e.left)
            e.right = None
        return e

    if t is ExprType.NOT:
        inner: Expr = e.left
        it = inner.type
        if it is ExprType.NOT:
            return transform(inner.left)
        if it in _FLIP:
            inner.type = _FLIP[it]
            return inner
        if it in _LOGIC:
            # De Morgan: !(a || b) -> !a && !b, !(a && b) -> !a || !b
            e.type = ExprType.AND if it is ExprType.OR else ExprType.OR
            e.right = alloc_one(ExprType.NOT, inner.right)
            inner.type = ExprType.NOT
            inner.right = None
            return transform(e)
        if it is ExprType.SYMBOL:
            negated = {SYMBOL_YES: SYMBOL_NO, SYMBOL_MOD: SYMBOL_MOD, SYMBOL_NO: SYMBOL_YES}
            for const, result in negated.items():
                if inner.left is const:
                    inner.left = result
                    return inner
    return e


def trans_compare(
    e: Optional[Expr], etype: ExprType, sym: Symbol
) -> Optional[Expr]:
    """Insert explicit comparisons of kind etype against sym into e.

    For example, with UNEQUAL and n: A && B becomes !(A=n || B=n).
    Returns a new expression, or None where no rewrite applies.
    """
    if e is None:
        result = alloc_symbol(sym)
        if etype is ExprType.UNEQUAL:
            result = alloc_one(ExprType.NOT, result)
        return result

    t = e.type
    if t in _LOGIC:
        e1 = trans_compare(e.left, ExprType.EQUAL, sym)
        e2 = trans_compare(e.right, ExprType.EQUAL, sym)
        result = e
        if t is ExprType.AND:
            if sym is SYMBOL_YES:
                result = alloc_two(ExprType.AND, e1, e2)
            if sym is SYMBOL_NO:
                result = alloc_two(ExprType.OR, e1, e2)
        else:
            if sym is SYMBOL_YES:
                result = alloc_two(ExprType.OR, e1, e2)
            if sym is SYMBOL_NO:
                result = alloc_two(ExprType.AND, e1, e2)
        if etype is ExprType.UNEQUAL:
            result = alloc_one(ExprType.NOT, result)
        return result
    if t is ExprType.NOT:
        flipped = ExprType.UNEQUAL if etype is ExprType.EQUAL else ExprType.EQUAL
        return trans_compare(e.left, flipped, sym)
    if t in COMPARISONS:
        if etype is ExprType.EQUAL:
            if sym is SYMBOL_YES:
                return copy_expr(e)
            if sym is SYMBOL_MOD:
                return alloc_symbol(SYMBOL_NO)
            if sym is SYMBOL_NO:
                return alloc_one(ExprType.NOT, copy_expr(e))
        else:
            if sym is SYMBOL_YES:
                return alloc_one(ExprType.NOT, copy_expr(e))
            if sym is SYMBOL_MOD:
                return alloc_symbol(SYMBOL_YES)
            if sym is SYMBOL_NO:
                return copy_expr(e)
        return None
    if t is ExprType.SYMBOL:
        return alloc_comp(etype, e.left, sym)
    return None