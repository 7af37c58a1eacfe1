"""Text layout helpers for dialogs: hotkeys, prompt wrapping and subtitles."""

from __future__ import annotations

from typing import List, Sequence, Tuple

MAX_LEN = 2048
ARROW = ">"
HLINE = "-"
_ELLIPSIS = "[...] "


def first_alpha(string: str, exempt: str) -> int:
    """Position of the first letter outside brackets that is not exempt; 0 if none."""
    in_paren = 0
    for i, ch in enumerate(string):
        c = ch.lower()
        if c in "<[(":
            in_paren += 1
        if c in ">])" and in_paren > 0:
            in_paren -= 1
        if not in_paren and c.isascii() and c.isalpha() and c not in exempt:
            return i
    return 0


def _find_sep(text: str) -> int:
    positions = [p for p in (text.find("\n"), text.find(" ")) if p >= 0]
    return min(positions) if positions else -1


def wrap_prompt(prompt: str, width: int, y: int, x: int) -> List[Tuple[int, int, str]]:
    """Lay out a prompt as (row, column, word) pieces within the given width.

    A short prompt is centred on one line. Otherwise words are placed left to
    right, wrapping when a word does not fit; a newline starts a new line, and
    after a double space a short word that would strand the next one wraps early.
    """
    text = prompt[:MAX_LEN]
    if len(text) <= width - x * 2:
        return [(y, (width - len(text)) // 2, text)]

    pieces: List[Tuple[int, int, str]] = []
    cur_x, cur_y = x, y
    newl = True
    rest = text
    while rest:
        sp = _find_sep(rest)
        if sp >= 0:
            newline_sep = rest[sp] == "\n"
            word, after = rest[:sp], rest[sp + 1:]
        else:
            newline_sep = False
            word, after = rest, None

        room = width - cur_x
        wlen = len(word)
        wrap = wlen > room
        if not wrap and newl and wlen < 4 and after is not None:
            if wlen + 1 + len(after) > room:
                sp2 = _find_sep(after)
                wrap = sp2 < 0 or wlen + 1 + sp2 > room
        if wrap:
            cur_y += 1
            cur_x = x
        if word:
            pieces.append((cur_y, cur_x, word))
        cur_x += wlen

        if newline_sep:
            cur_y += 1
            cur_x = x
        else:
            cur_x += 1

        if after is not None and after.startswith(" "):
            cur_x += 1
            after = after.lstrip(" ")
            newl = True
        else:
            newl = False
        rest = after or ""
    return pieces


def subtitle_line(subtitles: Sequence[str], columns: int) -> str:
    """The breadcrumb line drawn from column 1 under the back title.

    Each subtitle is shown as '> text '; when they do not fit, the start is
    replaced by an ellipsis, and any free space is filled with a line.
    """
    total = sum(len(t) + 3 for t in subtitles)
    out: List[str] = []
    skip = 0
    if total > columns - 2:
        out.append(_ELLIPSIS)
        skip = total - (columns - 2 - len(_ELLIPSIS))

    for text in subtitles:
        if skip == 0:
            out.append(ARROW)
        else:
            skip -= 1
        if skip == 0:
            out.append(" ")
        else:
            skip -= 1
        if skip < len(text):
            out.append(text[skip:])
            skip = 0
        else:
            skip -= len(text)
        if skip == 0:
            out.append(" ")
        else:
            skip -= 1

    out.append(HLINE * max(0, columns - 1 - (total + 1)))
    return "".join(out)