"""The data and selection logic behind a list of selectable items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitive import Primitive, Style

ChangedHandler = Callable[[int, str, str, str], None]
SelectedHandler = Callable[[int, str, str, str], None]


@dataclass
class ListItem:
    """One entry of a list: main text, optional secondary text and shortcut."""

    main_text: str
    secondary_text: str = ""
    shortcut: str = ""
    selected: Optional[Callable[[], None]] = None


class ItemList(Primitive):
    """A primitive holding list items, the current selection and scroll offsets.

    ``changed`` is called with (index, main text, secondary text, shortcut)
    whenever the selection moves to another item. ``selected`` is called the
    same way when an item is chosen, and ``done`` when the user escapes.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[ListItem] = []
        self._current_item = 0
        self.item_offset = 0
        self.horizontal_offset = 0
        self.show_secondary_text = True
        self.wrap_around = True
        self.selected_focus_only = False
        self.highlight_full_line = False
        self.main_text_style = Style(foreground="white", background="black")
        self.secondary_text_style = Style(foreground="green", background="black")
        self.shortcut_style = Style(foreground="yellow", background="black")
        self.selected_style = Style(foreground="black", background="white")
        self.changed: Optional[ChangedHandler] = None
        self.selected: Optional[SelectedHandler] = None
        self.done: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[ListItem, ...]:
        """The items in display order."""
        return tuple(self._items)

    @property
    def current_item(self) -> int:
        """Index of the currently selected item."""
        return self._current_item

    def _notify_changed(self, index: int) -> None:
        if self.changed is not None:
            item = self._items[index]
            self.changed(index, item.main_text, item.secondary_text, item.shortcut)

    def _clamp_index(self, index: int) -> int:
        if index < 0:
            index += len(self._items)
        if index >= len(self._items):
            index = len(self._items) - 1
        return max(index, 0)

    def set_current_item(self, index: int) -> None:
        """Select an item. Negative indices count from the back; out of range values are clamped."""
        index = self._clamp_index(index)
        if index != self._current_item:
            self._notify_changed(index)
        self._current_item = index
        self._adjust_offset()

    def set_offset(self, items: int, horizontal: int) -> None:
        """Set how many items are skipped vertically and cells horizontally when drawing."""
        self.item_offset = items
        self.horizontal_offset = horizontal

    def remove_item(self, index: int) -> None:
        """Remove an item. Negative indices count from the back; out of range values are clamped."""
        if not self._items:
            return
        index = self._clamp_index(index)
        del self._items[index]
        if not self._items:
            return

        previous = self._current_item
        if self._current_item > index or self._current_item == len(self._items):
            self._current_item -= 1
        if previous == index:
            self._notify_changed(self._current_item)

    def add_item(
        self,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> None:
        """Append an item to the end of the list."""
        self.insert_item(-1, main_text, secondary_text, shortcut, selected)

    def insert_item(
        self,
        index: int,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> None:
        """Insert an item before position ``index``; -1 appends, -2 inserts before the last."""
        item = ListItem(main_text, secondary_text, shortcut, selected)
        if index < 0:
            index += len(self._items) + 1
        index = min(max(index, 0), len(self._items))

        if index <= self._current_item < len(self._items):
            self._current_item += 1

        self._items.insert(index, item)

        if len(self._items) == 1:
            self._notify_changed(0)

    def _check_index(self, index: int) -> ListItem:
        if not 0 <= index < len(self._items):
            raise IndexError("list item index out of range")
        return self._items[index]

    def get_item_text(self, index: int) -> tuple[str, str]:
        """Return (main text, secondary text) of an item."""
        item = self._check_index(index)
        return item.main_text, item.secondary_text

    def set_item_text(self, index: int, main: str, secondary: str) -> None:
        """Replace the main and secondary text of an item."""
        item = self._check_index(index)
        item.main_text = main
        item.secondary_text = secondary

    def find_items(
        self,
        main_search: str,
        secondary_search: str,
        must_contain_both: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """Return ascending indices of items whose texts contain the search strings.

        An empty search string is ignored. With ``must_contain_both`` both
        strings must be found, otherwise one of the non-empty ones suffices.
        """
        if not main_search and not secondary_search:
            return []
        if ignore_case:
            main_search = main_search.lower()
            secondary_search = secondary_search.lower()

        indices = []
        for index, item in enumerate(self._items):
            main_text, secondary_text = item.main_text, item.secondary_text
            if ignore_case:
                main_text = main_text.lower()
                secondary_text = secondary_text.lower()
            main_found = main_search in main_text
            secondary_found = secondary_search in secondary_text
            if must_contain_both:
                match = main_found and secondary_found
            else:
                match = (bool(main_search) and main_found) or (
                    bool(secondary_search) and secondary_found
                )
            if match:
                indices.append(index)
        return indices

    def clear(self) -> None:
        """Remove all items."""
        self._items = []
        self._current_item = 0

    def _adjust_offset(self) -> None:
        """Scroll vertically so that the current item stays in view."""
        _, _, _, height = self.inner_rect()
        if height == 0:
            return
        current = self._current_item
        if current < self.item_offset:
            self.item_offset = current
        elif self.show_secondary_text:
            if 2 * (current - self.item_offset) >= height - 1:
                self.item_offset = (2 * current + 3 - height) // 2
        elif current - self.item_offset >= height:
            self.item_offset = current + 1 - height