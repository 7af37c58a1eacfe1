"""Core data model: tristates, symbols, expressions, properties and menus."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Any, Mapping, Optional, Union


class Tristate(IntEnum):
    """Three-valued logic used for symbol values and dependencies."""

    NO = 0
    MOD = 1
    YES = 2


def tri_or(a: Tristate, b: Tristate) -> Tristate:
    """Return the larger of two tristates."""
    return Tristate(max(a, b))


def tri_and(a: Tristate, b: Tristate) -> Tristate:
    """Return the smaller of two tristates."""
    return Tristate(min(a, b))


def tri_not(a: Tristate) -> Tristate:
    """Invert a tristate: n <-> y, m stays m."""
    return Tristate(2 - a)


class SymbolType(IntEnum):
    UNKNOWN = 0
    BOOLEAN = 1
    TRISTATE = 2
    INT = 3
    HEX = 4
    STRING = 5


class ExprType(IntEnum):
    NONE = 0
    OR = 1
    AND = 2
    NOT = 3
    EQUAL = 4
    UNEQUAL = 5
    LTH = 6
    LEQ = 7
    GTH = 8
    GEQ = 9
    LIST = 10
    SYMBOL = 11
    RANGE = 12


class PropType(IntEnum):
    UNKNOWN = 0
    PROMPT = 1
    COMMENT = 2
    MENU = 3
    DEFAULT = 4
    CHOICE = 5
    SELECT = 6
    IMPLY = 7
    RANGE = 8
    SYMBOL = 9


class SymbolFlag(IntFlag):
    NONE = 0
    CONST = 0x0001
    CHECK = 0x0008
    CHOICE = 0x0010
    CHOICEVAL = 0x0020
    VALID = 0x0080
    OPTIONAL = 0x0100
    WRITE = 0x0200
    CHANGED = 0x0400
    WRITTEN = 0x0800
    NO_WRITE = 0x1000
    CHECKED = 0x2000
    WARNED = 0x8000
    DEF = 0x10000
    DEF_USER = 0x10000
    DEF_AUTO = 0x20000
    DEF3 = 0x40000
    DEF4 = 0x80000
    NEED_SET_CHOICE_VALUES = 0x100000
    ALLNOCONFIG_Y = 0x200000


class DefSlot(IntEnum):
    """Index into Symbol.defs for externally provided values."""

    USER = 0
    AUTO = 1
    DEF3 = 2
    DEF4 = 3


class DefMode(Enum):
    DEFAULT = "default"
    YES = "yes"
    MOD = "mod"
    Y2M = "y2m"
    M2Y = "m2y"
    NO = "no"
    RANDOM = "random"


MENU_CHANGED = 0x0001
MENU_ROOT = 0x0002


def config_prefix(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the symbol name prefix, overridable through the CONFIG_ variable."""
    env = os.environ if environ is None else environ
    value = env.get("CONFIG_")
    return "CONFIG_" if value is None else value


@dataclass
class SymbolValue:
    """A value slot: an arbitrary payload plus a tristate."""

    val: Any = None
    tri: Tristate = Tristate.NO


@dataclass(eq=False)
class Symbol:
    """A configuration symbol; choices are symbols with the CHOICE flag."""

    name: Optional[str] = None
    type: SymbolType = SymbolType.UNKNOWN
    curr: SymbolValue = field(default_factory=SymbolValue)
    defs: list[SymbolValue] = field(
        default_factory=lambda: [SymbolValue() for _ in DefSlot]
    )
    visible: Tristate = Tristate.NO
    flags: SymbolFlag = SymbolFlag.NONE
    props: list["Property"] = field(default_factory=list)
    dir_dep: Optional["Expr"] = None
    dir_dep_tri: Tristate = Tristate.NO
    rev_dep: Optional["Expr"] = None
    rev_dep_tri: Tristate = Tristate.NO
    implied: Optional["Expr"] = None
    implied_tri: Tristate = Tristate.NO

    def is_choice(self) -> bool:
        return bool(self.flags & SymbolFlag.CHOICE)

    def is_choice_value(self) -> bool:
        return bool(self.flags & SymbolFlag.CHOICEVAL)

    def is_optional(self) -> bool:
        return bool(self.flags & SymbolFlag.OPTIONAL)

    def has_value(self) -> bool:
        return bool(self.flags & SymbolFlag.DEF_USER)

    def tristate_value(self) -> Tristate:
        return self.curr.tri

    def string_value(self) -> str:
        """The current value as text; bool/tristate map to n, m or y."""
        if self.type in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
            return "nmy"[self.curr.tri]
        val = self.curr.val
        return val if isinstance(val, str) else ""


SYMBOL_YES = Symbol(
    name="y",
    curr=SymbolValue("y", Tristate.YES),
    flags=SymbolFlag.CONST | SymbolFlag.VALID,
)
SYMBOL_MOD = Symbol(
    name="m",
    curr=SymbolValue("m", Tristate.MOD),
    flags=SymbolFlag.CONST | SymbolFlag.VALID,
)
SYMBOL_NO = Symbol(
    name="n",
    curr=SymbolValue("n", Tristate.NO),
    flags=SymbolFlag.CONST | SymbolFlag.VALID,
)


Operand = Union["Expr", Symbol, None]


@dataclass(eq=False)
class Expr:
    """An expression node; operands are sub-expressions or symbols by type."""

    type: ExprType
    left: Operand = None
    right: Operand = None


def expr_is_yes(e: Optional[Expr]) -> bool:
    """True for a missing expression or a bare reference to the constant y."""
    return e is None or (e.type is ExprType.SYMBOL and e.left is SYMBOL_YES)


def expr_is_no(e: Optional[Expr]) -> bool:
    """True for a bare reference to the constant n."""
    return e is not None and e.type is ExprType.SYMBOL and e.left is SYMBOL_NO


@dataclass(eq=False)
class Property:
    """A property attached to a symbol, such as a prompt, default or select."""

    type: PropType = PropType.UNKNOWN
    text: Optional[str] = None
    visible: Optional[Expr] = None
    visible_tri: Tristate = Tristate.NO
    expr: Optional[Expr] = None
    menu: Optional["Menu"] = None
    file: Optional[str] = None
    lineno: int = 0


@dataclass(eq=False)
class Menu:
    """A node of the menu tree."""

    sym: Optional[Symbol] = None
    prompt: Optional[Property] = None
    parent: Optional["Menu"] = None
    children: list["Menu"] = field(default_factory=list)
    visibility: Optional[Expr] = None
    dep: Optional[Expr] = None
    flags: int = 0
    help: Optional[str] = None
    file: Optional[str] = None
    lineno: int = 0
    data: Any = None