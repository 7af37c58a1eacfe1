"""Colour themes for the dialog screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7

# Screen elements in the order their colour pairs are allocated (pair 1 first).
ELEMENTS = (
    "screen",
    "shadow",
    "dialog",
    "title",
    "border",
    "button_active",
    "button_inactive",
    "button_key_active",
    "button_key_inactive",
    "button_label_active",
    "button_label_inactive",
    "inputbox",
    "inputbox_border",
    "searchbox",
    "searchbox_title",
    "searchbox_border",
    "position_indicator",
    "menubox",
    "menubox_border",
    "item",
    "item_selected",
    "tag",
    "tag_selected",
    "tag_key",
    "tag_key_selected",
    "check",
    "check_selected",
    "uarrow",
    "darrow",
)

# Text attributes used when the display is monochrome.
MONO_ATTRIBUTES: Dict[str, str] = {
    "screen": "normal",
    "shadow": "normal",
    "dialog": "normal",
    "title": "bold",
    "border": "normal",
    "button_active": "reverse",
    "button_inactive": "dim",
    "button_key_active": "reverse",
    "button_key_inactive": "bold",
    "button_label_active": "reverse",
    "button_label_inactive": "normal",
    "inputbox": "normal",
    "inputbox_border": "normal",
    "searchbox": "normal",
    "searchbox_title": "bold",
    "searchbox_border": "normal",
    "position_indicator": "bold",
    "menubox": "normal",
    "menubox_border": "normal",
    "item": "normal",
    "item_selected": "reverse",
    "tag": "bold",
    "tag_selected": "reverse",
    "tag_key": "bold",
    "tag_key_selected": "reverse",
    "check": "bold",
    "check_selected": "reverse",
    "uarrow": "bold",
    "darrow": "bold",
}


@dataclass(frozen=True)
class ColorSpec:
    """Foreground, background and whether the element is drawn bold."""

    fg: int = BLACK
    bg: int = BLACK
    hl: bool = False


_CLASSIC = {
    "screen": ColorSpec(CYAN, BLUE, True),
    "shadow": ColorSpec(BLACK, BLACK, True),
    "dialog": ColorSpec(BLACK, WHITE, False),
    "title": ColorSpec(YELLOW, WHITE, True),
    "border": ColorSpec(WHITE, WHITE, True),
    "button_active": ColorSpec(WHITE, BLUE, True),
    "button_inactive": ColorSpec(BLACK, WHITE, False),
    "button_key_active": ColorSpec(WHITE, BLUE, True),
    "button_key_inactive": ColorSpec(RED, WHITE, False),
    "button_label_active": ColorSpec(YELLOW, BLUE, True),
    "button_label_inactive": ColorSpec(BLACK, WHITE, True),
    "inputbox": ColorSpec(BLACK, WHITE, False),
    "inputbox_border": ColorSpec(BLACK, WHITE, False),
    "searchbox": ColorSpec(BLACK, WHITE, False),
    "searchbox_title": ColorSpec(YELLOW, WHITE, True),
    "searchbox_border": ColorSpec(WHITE, WHITE, True),
    "position_indicator": ColorSpec(YELLOW, WHITE, True),
    "menubox": ColorSpec(BLACK, WHITE, False),
    "menubox_border": ColorSpec(WHITE, WHITE, True),
    "item": ColorSpec(BLACK, WHITE, False),
    "item_selected": ColorSpec(WHITE, BLUE, True),
    "tag": ColorSpec(YELLOW, WHITE, True),
    "tag_selected": ColorSpec(YELLOW, BLUE, True),
    "tag_key": ColorSpec(YELLOW, WHITE, True),
    "tag_key_selected": ColorSpec(YELLOW, BLUE, True),
    "check": ColorSpec(BLACK, WHITE, False),
    "check_selected": ColorSpec(WHITE, BLUE, True),
    "uarrow": ColorSpec(GREEN, WHITE, True),
    "darrow": ColorSpec(GREEN, WHITE, True),
}

_BLUETITLE_CHANGES = {
    "title": ColorSpec(BLUE, WHITE, True),
    "button_key_active": ColorSpec(YELLOW, BLUE, True),
    "button_label_active": ColorSpec(WHITE, BLUE, True),
    "searchbox_title": ColorSpec(BLUE, WHITE, True),
    "position_indicator": ColorSpec(BLUE, WHITE, True),
    "tag": ColorSpec(BLUE, WHITE, True),
    "tag_key": ColorSpec(BLUE, WHITE, True),
}

_BLACKBG = {
    "screen": ColorSpec(RED, BLACK, True),
    "shadow": ColorSpec(BLACK, BLACK, False),
    "dialog": ColorSpec(WHITE, BLACK, False),
    "title": ColorSpec(RED, BLACK, False),
    "border": ColorSpec(BLACK, BLACK, True),
    "button_active": ColorSpec(YELLOW, RED, False),
    "button_inactive": ColorSpec(YELLOW, BLACK, False),
    "button_key_active": ColorSpec(YELLOW, RED, True),
    "button_key_inactive": ColorSpec(RED, BLACK, False),
    "button_label_active": ColorSpec(WHITE, RED, False),
    "button_label_inactive": ColorSpec(BLACK, BLACK, True),
    "inputbox": ColorSpec(YELLOW, BLACK, False),
    "inputbox_border": ColorSpec(YELLOW, BLACK, False),
    "searchbox": ColorSpec(YELLOW, BLACK, False),
    "searchbox_title": ColorSpec(YELLOW, BLACK, True),
    "searchbox_border": ColorSpec(BLACK, BLACK, True),
    "position_indicator": ColorSpec(RED, BLACK, False),
    "menubox": ColorSpec(YELLOW, BLACK, False),
    "menubox_border": ColorSpec(BLACK, BLACK, True),
    "item": ColorSpec(WHITE, BLACK, False),
    "item_selected": ColorSpec(WHITE, RED, False),
    "tag": ColorSpec(RED, BLACK, False),
    "tag_selected": ColorSpec(YELLOW, RED, True),
    "tag_key": ColorSpec(RED, BLACK, False),
    "tag_key_selected": ColorSpec(YELLOW, RED, True),
    "check": ColorSpec(YELLOW, BLACK, False),
    "check_selected": ColorSpec(YELLOW, RED, True),
    "uarrow": ColorSpec(RED, BLACK, False),
    "darrow": ColorSpec(RED, BLACK, False),
}


def _ordered(colors: Dict[str, ColorSpec]) -> Dict[str, ColorSpec]:
    return {name: colors.get(name, ColorSpec()) for name in ELEMENTS}


def theme(name: Optional[str] = None) -> Optional[Dict[str, ColorSpec]]:
    """Colours for each screen element under the named theme.

    No name selects 'bluetitle'; 'mono' returns None, meaning the
    monochrome attributes in MONO_ATTRIBUTES apply. An unknown name leaves
    every element black on black.
    """
    if name is None or name == "bluetitle":
        return _ordered({**_CLASSIC, **_BLUETITLE_CHANGES})
    if name == "classic":
        return _ordered(_CLASSIC)
    if name == "blackbg":
        return _ordered(_BLACKBG)
    if name == "mono":
        return None
    return _ordered({})