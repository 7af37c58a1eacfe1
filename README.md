# kconfkit

A pure-Python toolkit for Kconfig-style build configurations. It models
configuration symbols and their dependency expressions. It can evaluate,
simplify and print those expressions, and it formats `.config` lines and C
header defines. It also holds the layout logic behind text-dialog front ends,
and none of that logic needs a terminal.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `kconfkit.model` is the data model.
  - Tristate values come from `Tristate` (`NO`, `MOD`, `YES`), combined with
    `tri_and`, `tri_or` and `tri_not`.
  - `SymbolType`, `ExprType`, `PropType`, `SymbolFlag`, `DefSlot` and
    `DefMode` are the enumerations.
  - The data classes are `SymbolValue`, `Symbol`, `Expr`, `Property` and
    `Menu`.
  - The constant symbols are `SYMBOL_YES`, `SYMBOL_MOD` and `SYMBOL_NO`.
  - `expr_is_yes` and `expr_is_no` test for those constants.
  - `config_prefix` returns the symbol prefix. It is `CONFIG_` unless the
    `CONFIG_` environment variable overrides it.
- `kconfkit.expr` builds and evaluates expressions.
  - The builders are `alloc_symbol`, `alloc_one`, `alloc_two`, `alloc_comp`,
    `alloc_and`, `alloc_or` and `copy_expr`.
  - `calc_value` evaluates an expression against the symbols' current
    values. Comparisons on numbers use `parse_string_value`.
  - `expr_eq` tests structural equality, where `&&`/`||` operands may come
    in any order.
  - `eliminate_eq` and `eliminate_yn` remove common operands and fold
    constants.
  - `contains_symbol` and `depends_symbol` check whether an expression uses
    a symbol.
- `kconfkit.simplify` rewrites expressions.
  - `transform` simplifies comparisons on booleans and pushes negations
    inwards.
  - `eliminate_dups` removes redundant operands.
  - `trans_bool` turns a tristate `FOO!=n` into `FOO`.
  - `trans_compare` inserts explicit comparisons.
  - `join_or` and `join_and` merge two operands into one where that is
    possible.
- `kconfkit.exprprint` renders expressions as text.
  - `expr_to_str` gives plain text.
  - `format_expr` shows each symbol's value, such as `FOO [=y]`, and wraps
    the text if you give `max_width`.
  - `format_revdep` lists the top-level `||` terms that have a given value.
  - `print_expr` and `compare_type` are the lower-level pieces underneath.
- `kconfkit.configformat` formats the text of generated files.
  - `format_config_symbol` gives `.config` lines, including
    `# CONFIG_FOO is not set`.
  - `format_header_symbol` gives `#define` lines for a C header.
  - `format_config_comment` and `format_header_comment` give comment blocks.
  - `heading_text` gives the banner at the top of a generated file.
  - `escape_string_value` quotes string values.
- `kconfkit.dialog_items`: `ItemList` of `DialogItem` entries, holding a
  prompt text, tag, attached data and selection state.
- `kconfkit.dialog_wrap` handles text layout for dialogs.
  - `first_alpha` finds the hotkey position.
  - `wrap_prompt` lays out a prompt as `(row, column, word)` pieces.
  - `subtitle_line` builds the breadcrumb line.
- `kconfkit.dialog_theme`: `theme(name)` returns a `ColorSpec` for each
  screen element under the `bluetitle` (default), `classic` or `blackbg`
  theme. For `mono` it returns `None`, and `MONO_ATTRIBUTES` then applies.
- `kconfkit.dialog_text` holds two editors.
  - `TextPager` pages through text line by line. It offers `next_line`,
    `back_lines`, `page_lines`, `percent` and `vscroll`.
  - `LineEditor` edits one input line shown through a fixed-width box. It
    offers `insert`, `backspace`, `left`, `right` and `visible`.

## Example

```python
from kconfkit.model import Symbol, SymbolType, Tristate
from kconfkit.expr import alloc_symbol, alloc_and, calc_value
from kconfkit.exprprint import expr_to_str, format_expr

foo = Symbol(name="FOO", type=SymbolType.BOOLEAN)
bar = Symbol(name="BAR", type=SymbolType.TRISTATE)
e = alloc_and(alloc_symbol(foo), alloc_symbol(bar))

print(expr_to_str(e))                 # FOO && BAR
print(format_expr(e))                 # FOO [=n] && BAR [=n]
print(calc_value(e) is Tristate.NO)   # True
```

## What it does not do

- It does not parse Kconfig description files.
- It has no command-line or interactive configuration program.
- It does not read `.config` files from disk.
- It does not write `.config` files to disk.
- It does not draw dialogs on a terminal. The dialog modules only compute
  layout, colours and editing state.