"""The list of items shown by menu and checklist dialogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

MAXITEMSTR = 200
_MAX_TEXT = MAXITEMSTR - 1


@dataclass
class DialogItem:
    """One entry of a dialog list: its prompt, a tag, attached data and selection."""

    text: str = ""
    tag: str = ""
    data: Any = None
    selected: bool = False

    def is_tag(self, tag: str) -> bool:
        return self.tag == tag


class ItemList:
    """An ordered list of dialog items; new text goes to the last item added."""

    def __init__(self) -> None:
        self.items: List[DialogItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[DialogItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> DialogItem:
        return self.items[index]

    def add(self, text: str, tag: str = "", data: Any = None) -> DialogItem:
        """Append a new item; its text is cut to the maximum item length."""
        item = DialogItem(text=text[:_MAX_TEXT], tag=tag, data=data)
        self.items.append(item)
        return item

    def append_text(self, text: str) -> None:
        """Add text to the end of the last item, within the maximum length."""
        if not self.items:
            raise IndexError("no item to append text to")
        item = self.items[-1]
        item.text = (item.text + text)[:_MAX_TEXT]

    def reset(self) -> None:
        """Remove every item."""
        self.items.clear()

    def activate_selected(self) -> bool:
        """True if any item is selected."""
        return any(item.selected for item in self.items)

    def selected_index(self) -> Optional[int]:
        """Index of the first selected item, or None."""
        return next(
            (i for i, item in enumerate(self.items) if item.selected), None
        )