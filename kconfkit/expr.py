"""Expression construction, structural comparison and evaluation."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Tuple

from .model import (
    SYMBOL_NO,
    SYMBOL_YES,
    Expr,
    ExprType,
    Symbol,
    SymbolType,
    Tristate,
    expr_is_yes,
    tri_and,
    tri_not,
    tri_or,
)

COMPARISONS = frozenset(
    {
        ExprType.EQUAL,
        ExprType.UNEQUAL,
        ExprType.LTH,
        ExprType.LEQ,
        ExprType.GTH,
        ExprType.GEQ,
    }
)

_LOGIC = (ExprType.OR, ExprType.AND)
_U64_MASK = (1 << 64) - 1
_S64_MIN = -(1 << 63)
_S64_MAX = (1 << 63) - 1


class ValueKind(Enum):
    """How a symbol's text value is compared."""

    STRING = "string"
    SIGNED = "signed"
    UNSIGNED = "unsigned"


def alloc_symbol(sym: Symbol) -> Expr:
    """A bare reference to a symbol."""
    return Expr(ExprType.SYMBOL, sym)


def alloc_one(etype: ExprType, ce: Optional[Expr]) -> Expr:
    """A unary node, such as a negation."""
    return Expr(etype, ce)


def alloc_two(etype: ExprType, e1: Optional[Expr], e2: Optional[Expr]) -> Expr:
    """A binary node over two sub-expressions."""
    return Expr(etype, e1, e2)


def alloc_comp(etype: ExprType, s1: Symbol, s2: Symbol) -> Expr:
    """A comparison between two symbols."""
    return Expr(etype, s1, s2)


def alloc_and(e1: Optional[Expr], e2: Optional[Expr]) -> Optional[Expr]:
    """Conjunction where a missing operand means 'always true'."""
    if e1 is None:
        return e2
    return alloc_two(ExprType.AND, e1, e2) if e2 is not None else e1


def alloc_or(e1: Optional[Expr], e2: Optional[Expr]) -> Optional[Expr]:
    """Disjunction where a missing operand is simply dropped."""
    if e1 is None:
        return e2
    return alloc_two(ExprType.OR, e1, e2) if e2 is not None else e1


def copy_expr(org: Optional[Expr]) -> Optional[Expr]:
    """Deep-copy an expression tree; symbols are shared, not copied."""
    if org is None:
        return None
    t = org.type
    if t is ExprType.SYMBOL:
        return Expr(t, org.left, org.right)
    if t is ExprType.NOT:
        return Expr(t, copy_expr(org.left), org.right)
    if t in COMPARISONS:
        return Expr(t, org.left, org.right)
    if t in (ExprType.AND, ExprType.OR, ExprType.LIST):
        return Expr(t, copy_expr(org.left), copy_expr(org.right))
    raise ValueError(f"can't copy type {int(t)}")


def _set_const(e: Expr, sym: Symbol) -> None:
    e.type = ExprType.SYMBOL
    e.left = sym
    e.right = None


def _take_over(e: Expr, other: Expr) -> None:
    e.type, e.left, e.right = other.type, other.left, other.right


def _eliminate_eq_leaves(
    etype: ExprType, e1: Expr, e2: Expr
) -> Tuple[Expr, Expr]:
    if e1.type == etype:
        e1.left, e2 = _eliminate_eq_leaves(etype, e1.left, e2)
        e1.right, e2 = _eliminate_eq_leaves(etype, e1.right, e2)
        return e1, e2
    if e2.type == etype:
        e1, e2.left = _eliminate_eq_leaves(etype, e1, e2.left)
        e1, e2.right = _eliminate_eq_leaves(etype, e1, e2.right)
        return e1, e2

    if (
        e1.type is ExprType.SYMBOL
        and e2.type is ExprType.SYMBOL
        and e1.left is e2.left
        and (e1.left is SYMBOL_YES or e1.left is SYMBOL_NO)
    ):
        return e1, e2
    if not expr_eq(e1, e2):
        return e1, e2

    if etype is ExprType.OR:
        return alloc_symbol(SYMBOL_NO), alloc_symbol(SYMBOL_NO)
    if etype is ExprType.AND:
        return alloc_symbol(SYMBOL_YES), alloc_symbol(SYMBOL_YES)
    return e1, e2


def eliminate_eq(
    e1: Optional[Expr], e2: Optional[Expr]
) -> Tuple[Optional[Expr], Optional[Expr]]:
    """Remove operands common to both expressions; returns the rewritten pair.

    Equal operands at the same &&/|| level are replaced with the neutral
    constant and then folded away.
    """
    if e1 is None or e2 is None:
        return e1, e2
    if e1.type in _LOGIC:
        e1, e2 = _eliminate_eq_leaves(e1.type, e1, e2)
    if e1.type != e2.type and e2.type in _LOGIC:
        e1, e2 = _eliminate_eq_leaves(e2.type, e1, e2)
    return eliminate_yn(e1), eliminate_yn(e2)


def expr_eq(e1: Optional[Expr], e2: Optional[Expr]) -> bool:
    """Structural equality; &&/|| operands may appear in any order."""
    if e1 is None or e2 is None:
        return expr_is_yes(e1) and expr_is_yes(e2)
    if e1.type != e2.type:
        return False
    t = e1.type
    if t in COMPARISONS:
        return e1.left is e2.left and e1.right is e2.right
    if t is ExprType.SYMBOL:
        return e1.left is e2.left
    if t is ExprType.NOT:
        return expr_eq(e1.left, e2.left)
    if t in _LOGIC:
        c1, c2 = eliminate_eq(copy_expr(e1), copy_expr(e2))
        return (
            c1.type is ExprType.SYMBOL
            and c2.type is ExprType.SYMBOL
            and c1.left is c2.left
        )
    return False


def eliminate_yn(e: Optional[Expr]) -> Optional[Expr]:
    """Fold constant operands: x&&n->n, x&&y->x, x||n->x, x||y->y."""
    if e is None or e.type not in _LOGIC:
        return e
    e.left = eliminate_yn(e.left)
    e.right = eliminate_yn(e.right)
    if e.type is ExprType.AND:
        absorbing, neutral = SYMBOL_NO, SYMBOL_YES
    else:
        absorbing, neutral = SYMBOL_YES, SYMBOL_NO
    for side, other in ((e.left, e.right), (e.right, e.left)):
        if side.type is ExprType.SYMBOL:
            if side.left is absorbing:
                _set_const(e, absorbing)
                return e
            if side.left is neutral:
                _take_over(e, other)
                return e
    return e


_WS = r"[ \t\n\v\f\r]*"
_DEC_RE = re.compile(_WS + r"([+-]?)([0-9]+)")
_HEX_RE = re.compile(_WS + r"([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_AUTO_RE = re.compile(_WS + r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def _signed(sign: str, magnitude: int) -> Optional[int]:
    value = -magnitude if sign == "-" else magnitude
    if value < _S64_MIN or value > _S64_MAX:
        return None
    return value


def parse_string_value(
    text: str, stype: SymbolType
) -> Tuple[ValueKind, Optional[int]]:
    """Interpret a symbol's text for comparison according to its type.

    Returns the kind of comparison to use and the numeric value, or
    (ValueKind.STRING, None) when the text is not a valid number.
    """
    if stype in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
        return ValueKind.SIGNED, {"n": 0, "m": 1, "y": 2}.get(text, -1)

    if stype is SymbolType.INT:
        m = _DEC_RE.fullmatch(text)
        if m is None:
            return ValueKind.STRING, None
        value = _signed(m.group(1), int(m.group(2), 10))
        if value is None:
            return ValueKind.STRING, None
        return ValueKind.SIGNED, value

    if stype is SymbolType.HEX:
        m = _HEX_RE.fullmatch(text)
        if m is None:
            return ValueKind.STRING, None
        magnitude = int(m.group(2), 16)
        if magnitude > _U64_MASK:
            return ValueKind.STRING, None
        value = (-magnitude) & _U64_MASK if m.group(1) == "-" else magnitude
        return ValueKind.UNSIGNED, value

    m = _AUTO_RE.fullmatch(text)
    if m is None:
        return ValueKind.STRING, None
    digits = m.group(2)
    if digits[:2] in ("0x", "0X"):
        magnitude = int(digits[2:], 16)
    elif len(digits) > 1:
        magnitude = int(digits[1:], 8)
    else:
        magnitude = int(digits, 10)
    value = _signed(m.group(1), magnitude)
    if value is None:
        return ValueKind.STRING, None
    return ValueKind.SIGNED, value


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def calc_value(e: Optional[Expr]) -> Tristate:
    """Evaluate an expression against the symbols' current values.

    Symbols are read as they stand; their values are not recalculated here.
    """
    if e is None:
        return Tristate.YES
    t = e.type
    if t is ExprType.SYMBOL:
        return e.left.curr.tri
    if t is ExprType.AND:
        return tri_and(calc_value(e.left), calc_value(e.right))
    if t is ExprType.OR:
        return tri_or(calc_value(e.left), calc_value(e.right))
    if t is ExprType.NOT:
        return tri_not(calc_value(e.left))
    if t not in COMPARISONS:
        raise ValueError(f"expr_calc_value: {int(t)}?")

    lsym: Symbol = e.left
    rsym: Symbol = e.right
    str1 = lsym.string_value()
    str2 = rsym.string_value()
    k1 = k2 = ValueKind.STRING
    v1 = v2 = 0
    if lsym.type is not SymbolType.STRING or rsym.type is not SymbolType.STRING:
        k1, v1 = parse_string_value(str1, lsym.type)
        k2, v2 = parse_string_value(str2, rsym.type)

    if k1 is ValueKind.STRING or k2 is ValueKind.STRING:
        res = _cmp(str1.encode(), str2.encode())
    elif ValueKind.UNSIGNED in (k1, k2):
        res = _cmp(v1 & _U64_MASK, v2 & _U64_MASK)
    else:
        res = _cmp(v1, v2)

    outcome = {
        ExprType.EQUAL: res == 0,
        ExprType.UNEQUAL: res != 0,
        ExprType.GEQ: res >= 0,
        ExprType.GTH: res > 0,
        ExprType.LEQ: res <= 0,
        ExprType.LTH: res < 0,
    }[t]
    return Tristate.YES if outcome else Tristate.NO


def contains_symbol(dep: Optional[Expr], sym: Symbol) -> bool:
    """True if the symbol appears anywhere in the expression."""
    if dep is None:
        return False
    t = dep.type
    if t in _LOGIC:
        return contains_symbol(dep.left, sym) or contains_symbol(dep.right, sym)
    if t is ExprType.SYMBOL:
        return dep.left is sym
    if t in COMPARISONS:
        return dep.left is sym or dep.right is sym
    if t is ExprType.NOT:
        return contains_symbol(dep.left, sym)
    return False


def depends_symbol(dep: Optional[Expr], sym: Symbol) -> bool:
    """True if the expression can only hold when the symbol is enabled."""
    if dep is None:
        return False
    t = dep.type
    if t is ExprType.AND:
        return depends_symbol(dep.left, sym) or depends_symbol(dep.right, sym)
    if t is ExprType.SYMBOL:
        return dep.left is sym
    if t is ExprType.EQUAL:
        return dep.left is sym and (
            dep.right is SYMBOL_YES or dep.right.name == "m" and dep.right.flags & 1
        )
    if t is ExprType.UNEQUAL:
        return dep.left is sym and dep.right is SYMBOL_NO
    return False