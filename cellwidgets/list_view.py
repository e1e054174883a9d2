"""A drawable, interactive list of selectable items."""

from __future__ import annotations

from typing import Optional

from .list_model import ItemList
from .primitive import (
    Align,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    print_text,
)


class ListView(ItemList):
    """A list shown as one or two rows per item, navigable by keys and mouse.

    Keys: Down/Tab and Up/Backtab move the selection, Home/End jump to the
    ends, PageDown/PageUp move by one page, Enter or Space select the current
    item, Left/Right scroll horizontally, shortcut characters select their
    item directly and Escape calls ``done``.
    """

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, y, width, height = self.inner_rect()
        _, total_height = screen.size()
        bottom_limit = min(y + height, total_height)

        show_shortcuts = any(item.shortcut for item in self._items)
        if show_shortcuts:
            x += 4
            width -= 4

        if self.horizontal_offset < 0:
            self.horizontal_offset = 0

        max_width = 0
        for index, item in enumerate(self._items):
            if index < self.item_offset:
                continue
            if y >= bottom_limit:
                break

            if show_shortcuts and item.shortcut:
                print_text(
                    screen, f"({item.shortcut})", x - 5, y, 4, Align.RIGHT, self.shortcut_style
                )

            selected = index == self._current_item and (
                not self.selected_focus_only or self.has_focus()
            )
            style = self.selected_style if selected else self.main_text_style
            printed = print_text(
                screen, item.main_text, x, y, width, Align.LEFT, style, self.horizontal_offset
            )
            max_width = max(max_width, printed)

            if selected and self.highlight_full_line:
                for column in range(printed, width):
                    screen.set_content(x + column, y, " ", style)

            y += 1
            if y >= bottom_limit:
                break

            if self.show_secondary_text:
                printed = print_text(
                    screen,
                    item.secondary_text,
                    x,
                    y,
                    width,
                    Align.LEFT,
                    self.secondary_text_style,
                    self.horizontal_offset,
                )
                max_width = max(max_width, printed)
                y += 1

        # Keep item text from scrolling out of view entirely.
        if self.horizontal_offset > 0 and max_width < width:
            self.horizontal_offset -= width - max_width
            self.draw(screen)

    def _select(self, index: int) -> None:
        item = self._items[index]
        if item.selected is not None:
            item.selected()
        if self.selected is not None:
            self.selected(index, item.main_text, item.secondary_text, item.shortcut)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if event.key is Key.ESCAPE:
            if self.done is not None:
                self.done()
            return
        if not self._items:
            return

        previous = self._current_item
        key = event.key
        last = len(self._items) - 1

        if key in (Key.TAB, Key.DOWN):
            self._current_item += 1
        elif key in (Key.BACKTAB, Key.UP):
            self._current_item -= 1
        elif key is Key.RIGHT:
            self.horizontal_offset += 2  # Two cells, to account for wide characters.
        elif key is Key.LEFT:
            self.horizontal_offset -= 2
        elif key is Key.HOME:
            self._current_item = 0
        elif key is Key.END:
            self._current_item = last
        elif key is Key.PAGE_DOWN:
            _, _, _, height = self.inner_rect()
            self._current_item = min(self._current_item + height, last)
        elif key is Key.PAGE_UP:
            _, _, _, height = self.inner_rect()
            self._current_item = max(self._current_item - height, 0)
        elif key is Key.ENTER:
            if 0 <= self._current_item < len(self._items):
                self._select(self._current_item)
        elif key is Key.RUNE:
            found = event.rune == " "
            if not found:
                for index, item in enumerate(self._items):
                    if item.shortcut == event.rune:
                        self._current_item = index
                        found = True
                        break
            if found:
                self._select(self._current_item)

        if self._current_item < 0:
            self._current_item = last if self.wrap_around else 0
        elif self._current_item >= len(self._items):
            self._current_item = 0 if self.wrap_around else last

        if self._current_item != previous and self._current_item < len(self._items):
            self._notify_changed(self._current_item)
            self._adjust_offset()

    def _index_at_point(self, x: int, y: int) -> int:
        """Return the index of the item at a screen position, or -1."""
        rect_x, rect_y, width, height = self.inner_rect()
        if rect_x < 0 or width <= 0 or y < rect_y or y >= rect_y + height:
            return -1
        index = y - rect_y
        if self.show_secondary_text:
            index //= 2
        index += self.item_offset
        if index >= len(self._items):
            return -1
        return index

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None

        consumed = False
        if action is MouseAction.LEFT_CLICK:
            set_focus(self)
            index = self._index_at_point(*event.position)
            if index != -1:
                self._select(index)
                if index != self._current_item:
                    self._notify_changed(index)
                    self._adjust_offset()
                self._current_item = index
            consumed = True
        elif action is MouseAction.SCROLL_UP:
            if self.item_offset > 0:
                self.item_offset -= 1
            consumed = True
        elif action is MouseAction.SCROLL_DOWN:
            lines = len(self._items) - self.item_offset
            if self.show_secondary_text:
                lines *= 2
            _, _, _, height = self.inner_rect()
            if lines > height:
                self.item_offset += 1
            consumed = True
        elif action is MouseAction.SCROLL_LEFT:
            self.horizontal_offset -= 1
            consumed = True
        elif action is MouseAction.SCROLL_RIGHT:
            self.horizontal_offset += 1
            consumed = True
        return consumed, None