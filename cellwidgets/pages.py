"""A container of primitives stacked on top of each other as named pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitive import KeyEvent, MouseAction, MouseEvent, Primitive, Screen, SetFocus


@dataclass
class _Page:
    name: str
    item: Primitive
    resize: bool
    visible: bool


class Pages(Primitive):
    """Named primitives laid out on top of each other, drawn back to front.

    ``changed`` is called whenever the visibility or the order of pages
    changes, which can be used to trigger a redraw.
    """

    def __init__(self) -> None:
        super().__init__()
        self._pages: list[_Page] = []
        self._set_focus: Optional[SetFocus] = None
        self.changed: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._pages)

    def _notify(self) -> None:
        if self.changed is not None:
            self.changed()

    def _find(self, name: str) -> Optional[int]:
        return next(
            (index for index, page in enumerate(self._pages) if page.name == name), None
        )

    def _refocus(self) -> None:
        self.focus(self._set_focus)

    def page_names(self, visible_only: bool = False) -> list[str]:
        """Return page names from front to back, optionally only visible ones."""
        return [
            page.name
            for page in reversed(self._pages)
            if not visible_only or page.visible
        ]

    def add_page(
        self, name: str, item: Primitive, resize: bool = True, visible: bool = True
    ) -> None:
        """Add a page in front of all others, replacing any page of the same name.

        With ``resize`` the primitive is given the container's inner area
        whenever the pages are drawn.
        """
        had_focus = self.has_focus()
        index = self._find(name)
        if index is not None:
            del self._pages[index]
        self._pages.append(_Page(name, item, resize, visible))
        self._notify()
        if had_focus:
            self._refocus()

    def add_and_switch_to_page(self, name: str, item: Primitive, resize: bool = True) -> None:
        """Add a visible page, then make it the only visible one."""
        self.add_page(name, item, resize, True)
        self.switch_to_page(name)

    def remove_page(self, name: str) -> None:
        """Remove a page. If it was the only visible page, the front page becomes visible."""
        had_focus = self.has_focus()
        index = self._find(name)
        was_visible = False
        if index is not None:
            removed = self._pages.pop(index)
            was_visible = removed.visible
            if was_visible:
                self._notify()
        if was_visible and self._pages:
            if not any(page.visible for page in self._pages[:-1]):
                self._pages[-1].visible = True
        if had_focus:
            self._refocus()

    def has_page(self, name: str) -> bool:
        """Return whether a page with this name exists."""
        return self._find(name) is not None

    def _set_visible(self, name: str, visible: bool) -> None:
        index = self._find(name)
        if index is not None:
            self._pages[index].visible = visible
            self._notify()
        if self.has_focus():
            self._refocus()

    def show_page(self, name: str) -> None:
        """Make a page visible, in addition to those already visible."""
        self._set_visible(name, True)

    def hide_page(self, name: str) -> None:
        """Make a page invisible."""
        self._set_visible(name, False)

    def switch_to_page(self, name: str) -> None:
        """Make the named page visible and all others invisible."""
        for page in self._pages:
            page.visible = page.name == name
        self._notify()
        if self.has_focus():
            self._refocus()

    def send_to_front(self, name: str) -> None:
        """Move a page to the front so that it is drawn last."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.append(page)
            if page.visible:
                self._notify()
        if self.has_focus():
            self._refocus()

    def send_to_back(self, name: str) -> None:
        """Move a page to the back so that it is drawn first."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.insert(0, page)
            if page.visible:
                self._notify()
        if self.has_focus():
            self._refocus()

    def front_page(self) -> tuple[str, Optional[Primitive]]:
        """Return (name, primitive) of the front-most visible page, or ("", None)."""
        for page in reversed(self._pages):
            if page.visible:
                return page.name, page.item
        return "", None

    def has_focus(self) -> bool:
        if any(page.item.has_focus() for page in self._pages):
            return True
        return super().has_focus()

    def focus(self, delegate: Optional[SetFocus]) -> None:
        if delegate is None:
            return
        self._set_focus = delegate
        _, top = self.front_page()
        if top is not None:
            delegate(top)
        else:
            super().focus(delegate)

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        for page in self._pages:
            if not page.visible:
                continue
            if page.resize:
                page.item.set_rect(*self.inner_rect())
            page.item.draw(screen)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        for page in self._pages:
            if page.item.has_focus():
                page.item.handle_key(event, set_focus)
                return

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        capture: Optional[Primitive] = None
        for page in reversed(self._pages):
            if not page.visible:
                continue
            consumed, capture = page.item.handle_mouse(action, event, set_focus)
            if consumed:
                return True, capture
        return False, capture

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        for page in self._pages:
            if page.item.has_focus():
                page.item.handle_paste(text, set_focus)
                return