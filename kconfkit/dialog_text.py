"""Scrolling text pages and a single-line input editor for dialogs."""

from __future__ import annotations

from typing import List, Optional

MAX_LEN = 2048


class TextPager:
    """Walks a text line by line, the way the text box pages through it.

    `begin_reached` and `end_reached` tell whether the top or bottom of the
    text has been hit; `page_length` is the number of text lines on the last
    page produced.
    """

    def __init__(self, text: str, vscroll: int = 0, hscroll: int = 0) -> None:
        self.text = text
        self.page = 0
        self.begin_reached = True
        self.end_reached = False
        self.page_length = 0
        self.hscroll = hscroll
        if vscroll:
            self.begin_reached = False
            for _ in range(vscroll):
                self.next_line()

    def next_line(self) -> str:
        """The line at the current position, which then moves to the next line."""
        self.end_reached = False
        nl = self.text.find("\n", self.page)
        if nl < 0:
            line = self.text[self.page:]
            self.page = len(self.text)
            self.end_reached = True
        else:
            line = self.text[self.page:nl]
            self.page = nl + 1
        return line[:MAX_LEN]

    def back_lines(self, n: int) -> None:
        """Move the position back by n lines, stopping at the start of the text."""
        text = self.text
        self.begin_reached = False
        for _ in range(n):
            if self.page >= len(text) and self.end_reached:
                self.end_reached = False
                continue
            if self.page == 0:
                self.begin_reached = True
                return
            self.page -= 1
            while True:
                if self.page == 0:
                    self.begin_reached = True
                    return
                self.page -= 1
                if text[self.page] == "\n":
                    break
            self.page += 1

    def page_lines(self, height: int, width: int) -> List[str]:
        """Render the next height lines as shown in a box of the given width."""
        lines: List[str] = []
        self.page_length = 0
        passed_end = False
        for _ in range(height):
            line = self.next_line()
            line = line[min(len(line), self.hscroll):]
            if width >= 2:
                line = line[: width - 2]
            lines.append(" " + line)
            if not passed_end:
                self.page_length += 1
            if self.end_reached and not passed_end:
                passed_end = True
        return lines

    def percent(self) -> int:
        """How far through the text the position is, in whole percent."""
        if not self.text:
            return 0
        return self.page * 100 // len(self.text)

    def vscroll(self) -> int:
        """Line number of the top of the last page shown."""
        saved = (self.page, self.begin_reached, self.end_reached)
        self.back_lines(self.page_length)
        top = self.page
        self.page, self.begin_reached, self.end_reached = saved

        count = 0
        s = 0
        while s < top:
            nl = self.text.find("\n", s)
            if nl < 0:
                break
            count += 1
            s = nl + 1
        return count


def _printable(ch: str) -> bool:
    return len(ch) == 1 and 0x20 <= ord(ch) < 0x7F


class LineEditor:
    """Edits one line of text shown through a box of fixed width.

    `pos` is the cursor position in the text, `show_x` the first character
    shown and `input_x` the cursor column inside the box.
    """

    def __init__(self, init: Optional[str] = None, box_width: int = 1) -> None:
        self.text = (init or "")[:MAX_LEN]
        self.box_width = box_width
        length = len(self.text)
        self.pos = length
        if length >= box_width:
            self.show_x = length - box_width + 1
            self.input_x = box_width - 1
        else:
            self.show_x = 0
            self.input_x = length

    def insert(self, ch: str) -> bool:
        """Insert a printable character at the cursor; False if the line is full."""
        if not _printable(ch):
            raise ValueError(f"not a printable character: {ch!r}")
        if len(self.text) >= MAX_LEN:
            return False
        self.text = self.text[: self.pos] + ch + self.text[self.pos:]
        self.pos += 1
        if self.input_x == self.box_width - 1:
            self.show_x += 1
        else:
            self.input_x += 1
        return True

    def backspace(self) -> bool:
        """Delete the character before the cursor; False at the start."""
        if not self.pos:
            return False
        if self.input_x == 0:
            self.show_x -= 1
        else:
            self.input_x -= 1
        self.text = self.text[: self.pos - 1] + self.text[self.pos:]
        self.pos -= 1
        return True

    def left(self) -> bool:
        """Move the cursor one character left; False at the start."""
        if self.pos <= 0:
            return False
        if self.input_x > 0:
            self.input_x -= 1
        else:
            self.show_x -= 1
        self.pos -= 1
        return True

    def right(self) -> bool:
        """Move the cursor one character right; False at the end."""
        if self.pos >= len(self.text):
            return False
        if self.input_x < self.box_width - 1:
            self.input_x += 1
        elif self.input_x == self.box_width - 1:
            self.show_x += 1
        self.pos += 1
        return True

    def visible(self) -> str:
        """The part of the text that fits in the box."""
        return self.text[self.show_x : self.show_x + self.box_width]