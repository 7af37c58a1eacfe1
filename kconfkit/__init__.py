"""Kconfig-style symbol model, expression handling, config text formatting and dialog layout helpers."""

__version__ = "0.1.0"

__all__ = [
    "model",
    "expr",
    "exprprint",
    "simplify",
    "configformat",
    "dialog_items",
    "dialog_wrap",
    "dialog_theme",
    "dialog_text",
]