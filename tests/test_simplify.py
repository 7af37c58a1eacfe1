import pytest

from kconfkit.expr import alloc_comp, alloc_one, alloc_symbol, alloc_two, expr_eq
from kconfkit.model import (
    SYMBOL_MOD,
    SYMBOL_NO,
    SYMBOL_YES,
    Expr,
    ExprType,
    Symbol,
    SymbolType,
)
from kconfkit.simplify import (
    eliminate_dups,
    join_and,
    join_or,
    trans_bool,
    trans_compare,
    transform,
)


def _bool(name):
    return Symbol(name=name, type=SymbolType.BOOLEAN)


def _tri(name):
    return Symbol(name=name, type=SymbolType.TRISTATE)


def _sym(s):
    return alloc_symbol(s)


def test_trans_bool_tristate_unequal_no():
    t = _tri("T")
    e = trans_bool(alloc_comp(ExprType.UNEQUAL, t, SYMBOL_NO))
    assert e.type is ExprType.SYMBOL
    assert e.left is t
    assert e.right is None


def test_trans_bool_leaves_boolean_alone():
    b = _bool("B")
    e = trans_bool(alloc_comp(ExprType.UNEQUAL, b, SYMBOL_NO))
    assert e.type is ExprType.UNEQUAL


def test_trans_bool_recurses_into_and():
    t = _tri("T")
    e = alloc_two(ExprType.AND, alloc_comp(ExprType.UNEQUAL, t, SYMBOL_NO), _sym(_bool("B")))
    e = trans_bool(e)
    assert e.left.type is ExprType.SYMBOL
    assert e.left.left is t


def test_trans_bool_none():
    assert trans_bool(None) is None


def test_transform_bool_equal_no_becomes_not():
    b = _bool("B")
    e = transform(alloc_comp(ExprType.EQUAL, b, SYMBOL_NO))
    assert expr_eq(e, alloc_one(ExprType.NOT, _sym(b)))


def test_transform_bool_equal_yes_becomes_symbol():
    b = _bool("B")
    e = transform(alloc_comp(ExprType.EQUAL, b, SYMBOL_YES))
    assert e.type is ExprType.SYMBOL and e.left is b


def test_transform_bool_equal_mod_forced_to_no(capsys):
    b = _bool("B")
    e = transform(alloc_comp(ExprType.EQUAL, b, SYMBOL_MOD))
    assert e.type is ExprType.SYMBOL and e.left is SYMBOL_NO
    assert "test forced to 'n'" in capsys.readouterr().out


def test_transform_bool_unequal():
    b = _bool("B")
    e = transform(alloc_comp(ExprType.UNEQUAL, b, SYMBOL_YES))
    assert expr_eq(e, alloc_one(ExprType.NOT, _sym(b)))
    e2 = transform(alloc_comp(ExprType.UNEQUAL, b, SYMBOL_NO))
    assert e2.type is ExprType.SYMBOL and e2.left is b


def test_transform_bool_unequal_mod_forced_to_yes(capsys):
    b = _bool("B")
    e = transform(alloc_comp(ExprType.UNEQUAL, b, SYMBOL_MOD))
    assert e.left is SYMBOL_YES
    assert "test forced to 'y'" in capsys.readouterr().out


def test_transform_double_negation():
    a = _bool("A")
    e = transform(alloc_one(ExprType.NOT, alloc_one(ExprType.NOT, _sym(a))))
    assert e.type is ExprType.SYMBOL and e.left is a


@pytest.mark.parametrize(
    "before, after",
    [
        (ExprType.EQUAL, ExprType.UNEQUAL),
        (ExprType.UNEQUAL, ExprType.EQUAL),
        (ExprType.LEQ, ExprType.GTH),
        (ExprType.GEQ, ExprType.LTH),
        (ExprType.LTH, ExprType.GEQ),
        (ExprType.GTH, ExprType.LEQ),
    ],
)
def test_transform_negated_comparison(before, after):
    t = Symbol(name="N", type=SymbolType.INT)
    k = Symbol(name="5", type=SymbolType.INT)
    e = transform(alloc_one(ExprType.NOT, alloc_comp(before, t, k)))
    assert e.type is after
    assert e.left is t and e.right is k


def test_transform_de_morgan():
    a, b = _bool("A"), _bool("B")
    e = transform(alloc_one(ExprType.NOT, alloc_two(ExprType.OR, _sym(a), _sym(b))))
    expected = alloc_two(
        ExprType.AND,
        alloc_one(ExprType.NOT, _sym(a)),
        alloc_one(ExprType.NOT, _sym(b)),
    )
    assert expr_eq(e, expected)
    e2 = transform(alloc_one(ExprType.NOT, alloc_two(ExprType.AND, _sym(a), _sym(b))))
    assert e2.type is ExprType.OR


@pytest.mark.parametrize(
    "const, result",
    [(SYMBOL_YES, SYMBOL_NO), (SYMBOL_MOD, SYMBOL_MOD), (SYMBOL_NO, SYMBOL_YES)],
)
def test_transform_negated_constant(const, result):
    e = transform(alloc_one(ExprType.NOT, _sym(const)))
    assert e.type is ExprType.SYMBOL and e.left is result


def test_join_or_tristate_equal_pairs():
    t = _tri("T")
    e = join_or(alloc_comp(ExprType.EQUAL, t, SYMBOL_YES), alloc_comp(ExprType.EQUAL, t, SYMBOL_MOD))
    assert e.type is ExprType.UNEQUAL and e.left is t and e.right is SYMBOL_NO
    e = join_or(alloc_comp(ExprType.EQUAL, t, SYMBOL_NO), alloc_comp(ExprType.EQUAL, t, SYMBOL_YES))
    assert e.right is SYMBOL_MOD
    e = join_or(alloc_comp(ExprType.EQUAL, t, SYMBOL_MOD), alloc_comp(ExprType.EQUAL, t, SYMBOL_NO))
    assert e.right is SYMBOL_YES


def test_join_or_bool_with_negation_is_yes():
    b = _bool("B")
    e = join_or(_sym(b), alloc_one(ExprType.NOT, _sym(b)))
    assert e.type is ExprType.SYMBOL and e.left is SYMBOL_YES


def test_join_or_equal_operands_copy():
    a = _bool("A")
    first = _sym(a)
    e = join_or(first, _sym(a))
    assert e is not first
    assert expr_eq(e, first)


def test_join_or_different_symbols():
    assert join_or(_sym(_bool("A")), _sym(_bool("B"))) is None


def test_join_and_symbol_and_equal_yes():
    a = _bool("A")
    e = join_and(_sym(a), alloc_comp(ExprType.EQUAL, a, SYMBOL_YES))
    assert e.type is ExprType.EQUAL and e.left is a and e.right is SYMBOL_YES


def test_join_and_symbol_and_unequal_no():
    t = _tri("T")
    e = join_and(alloc_comp(ExprType.UNEQUAL, t, SYMBOL_NO), _sym(t))
    assert e.type is ExprType.SYMBOL and e.left is t


def test_join_and_tristate_unequal_pairs():
    t = _tri("T")
    e = join_and(alloc_comp(ExprType.UNEQUAL, t, SYMBOL_YES), alloc_comp(ExprType.UNEQUAL, t, SYMBOL_NO))
    assert e.type is ExprType.EQUAL and e.right is SYMBOL_MOD
    e = join_and(alloc_comp(ExprType.UNEQUAL, t, SYMBOL_MOD), alloc_comp(ExprType.UNEQUAL, t, SYMBOL_YES))
    assert e.right is SYMBOL_NO


def test_join_and_equal_with_unequal():
    t = _tri("T")
    e = join_and(alloc_comp(ExprType.EQUAL, t, SYMBOL_YES), alloc_comp(ExprType.UNEQUAL, t, SYMBOL_MOD))
    assert e.type is ExprType.EQUAL and e.right is SYMBOL_YES
    e = join_and(alloc_comp(ExprType.UNEQUAL, t, SYMBOL_YES), alloc_comp(ExprType.EQUAL, t, SYMBOL_YES))
    assert e.type is ExprType.SYMBOL and e.left is SYMBOL_NO


def test_join_and_unjoinable():
    a = _bool("A")
    assert join_and(_sym(a), alloc_two(ExprType.OR, _sym(a), _sym(a))) is None


def test_eliminate_dups_or():
    a, b = _bool("A"), _bool("B")
    e = alloc_two(ExprType.OR, alloc_two(ExprType.OR, _sym(a), _sym(b)), _sym(a))
    result = eliminate_dups(e)
    assert expr_eq(result, alloc_two(ExprType.OR, _sym(a), _sym(b)))


def test_eliminate_dups_and_with_equal():
    a, b = _bool("A"), _bool("B")
    e = alloc_two(
        ExprType.AND,
        alloc_two(ExprType.AND, _sym(a), _sym(b)),
        alloc_comp(ExprType.EQUAL, a, SYMBOL_YES),
    )
    result = eliminate_dups(e)
    expected = alloc_two(ExprType.AND, alloc_comp(ExprType.EQUAL, a, SYMBOL_YES), _sym(b))
    assert expr_eq(result, expected)


def test_eliminate_dups_nothing_to_do():
    a, b = _bool("A"), _bool("B")
    e = alloc_two(ExprType.AND, _sym(a), _sym(b))
    result = eliminate_dups(e)
    assert result.type is ExprType.AND
    assert {result.left.left.name, result.right.left.name} == {a.name, b.name}
    assert eliminate_dups(None) is None


def test_trans_compare_none():
    e = trans_compare(None, ExprType.UNEQUAL, SYMBOL_NO)
    assert e.type is ExprType.NOT
    assert e.left.type is ExprType.SYMBOL and e.left.left is SYMBOL_NO
    e2 = trans_compare(None, ExprType.EQUAL, SYMBOL_YES)
    assert e2.type is ExprType.SYMBOL and e2.left is SYMBOL_YES


def test_trans_compare_symbol():
    a = _bool("A")
    e = trans_compare(_sym(a), ExprType.UNEQUAL, SYMBOL_NO)
    assert e.type is ExprType.UNEQUAL and e.left is a and e.right is SYMBOL_NO


def test_trans_compare_and():
    a, b = _bool("A"), _bool("B")
    e = trans_compare(alloc_two(ExprType.AND, _sym(a), _sym(b)), ExprType.UNEQUAL, SYMBOL_NO)
    expected = alloc_one(
        ExprType.NOT,
        alloc_two(
            ExprType.OR,
            alloc_comp(ExprType.EQUAL, a, SYMBOL_NO),
            alloc_comp(ExprType.EQUAL, b, SYMBOL_NO),
        ),
    )
    assert expr_eq(e, expected)


def test_trans_compare_not_flips():
    a = _bool("A")
    e = trans_compare(alloc_one(ExprType.NOT, _sym(a)), ExprType.UNEQUAL, SYMBOL_NO)
    assert e.type is ExprType.EQUAL and e.left is a and e.right is SYMBOL_NO


def test_trans_compare_comparison():
    t = _tri("T")
    cmp = alloc_comp(ExprType.EQUAL, t, SYMBOL_YES)
    same = trans_compare(cmp, ExprType.EQUAL, SYMBOL_YES)
    assert same is not cmp and expr_eq(same, cmp)
    assert trans_compare(cmp, ExprType.EQUAL, SYMBOL_MOD).left is SYMBOL_NO
    assert trans_compare(cmp, ExprType.UNEQUAL, SYMBOL_MOD).left is SYMBOL_YES
    assert trans_compare(cmp, ExprType.EQUAL, SYMBOL_NO).type is ExprType.NOT


def test_trans_compare_list_gives_none():
    e = Expr(ExprType.LIST, None, _bool("A"))
    assert trans_compare(e, ExprType.EQUAL, SYMBOL_YES) is None