"""Text formats for .config files and the generated C header."""

from __future__ import annotations

from .model import Symbol, SymbolType

_HEADING_MAX = 255
_BOOLISH = (SymbolType.BOOLEAN, SymbolType.TRISTATE)


def escape_string_value(text: str) -> str:
    """Quote a string value, escaping backslashes and double quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_config_symbol(
    sym: Symbol, value: str, prefix: str = "CONFIG_", skip_unset: bool = False
) -> str:
    """One .config line for a symbol.

    Disabled bool/tristate symbols are written as an 'is not set' comment,
    or left out entirely when skip_unset is true.
    """
    if sym.type in _BOOLISH and value.startswith("n"):
        if skip_unset:
            return ""
        return f"# {prefix}{sym.name} is not set\n"
    return f"{prefix}{sym.name}={value}\n"


def _comment_body(text: str, lead: str) -> str:
    return "".join(
        f"{lead} {segment}\n" if segment else f"{lead}\n"
        for segment in text.split("\n")
    )


def format_config_comment(text: str) -> str:
    """Turn text into '#' comment lines, one per line of text."""
    return _comment_body(text, "#")


def format_header_symbol(sym: Symbol, value: str, prefix: str = "CONFIG_") -> str:
    """One #define line for a symbol, or an empty string if nothing is defined."""
    if sym.type in _BOOLISH:
        if value.startswith("n"):
            return ""
        suffix = "_MODULE" if value.startswith("m") else ""
        return f"#define {prefix}{sym.name}{suffix} 1\n"
    if sym.type is SymbolType.HEX:
        hex_prefix = "" if value[:2] in ("0x", "0X") else "0x"
        return f"#define {prefix}{sym.name} {hex_prefix}{value}\n"
    if sym.type in (SymbolType.STRING, SymbolType.INT):
        return f"#define {prefix}{sym.name} {value}\n"
    return ""


def format_header_comment(text: str) -> str:
    """Turn text into a C block comment."""
    return "/*\n" + _comment_body(text, " *") + " */\n"


def heading_text(title: str) -> str:
    """The banner placed at the top of every generated file."""
    text = f"\nAutomatically generated file; DO NOT EDIT.\n{title}\n"
    return text[:_HEADING_MAX]