"""A frame adding space and header/footer text around another primitive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .primitive import (
    Align,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    Style,
    print_text,
)


@dataclass
class _FrameText:
    text: str
    header: bool
    align: Align
    color: Any


class Frame(Primitive):
    """Wraps an optional primitive, with borders and lines of header/footer text."""

    def __init__(self, primitive: Optional[Primitive] = None) -> None:
        super().__init__()
        self.primitive = primitive
        self._texts: list[_FrameText] = []
        self.top = self.bottom = self.header = self.footer = 1
        self.left = self.right = 1
        self._set_focus: Optional[SetFocus] = None

    def set_primitive(self, primitive: Optional[Primitive]) -> None:
        """Replace the contained primitive, handing focus on if the old one had it."""
        had_focus = self.primitive is not None and self.primitive.has_focus()
        self.primitive = primitive
        if had_focus and self._set_focus is not None and primitive is not None:
            self._set_focus(primitive)

    def add_text(self, text: str, header: bool, align: Align, color: Any) -> None:
        """Add a line of text to the header (top down) or footer (bottom up)."""
        self._texts.append(_FrameText(text, header, Align(align), color))

    def clear(self) -> None:
        """Remove all text."""
        self._texts = []

    def set_borders(
        self, top: int, bottom: int, header: int, footer: int, left: int, right: int
    ) -> None:
        """Set border widths and the spacing between text and the contained primitive."""
        self.top, self.bottom, self.header, self.footer = top, bottom, header, footer
        self.left, self.right = left, right

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, top, width, height = self.inner_rect()
        bottom = top + height - 1
        x += self.left
        top += self.top
        bottom -= self.bottom
        width -= self.left + self.right
        if width <= 0 or top >= bottom:
            return

        rows = [0] * 6  # Header left/center/right, then footer left/center/right.
        top_max = top
        bottom_min = bottom
        for entry in self._texts:
            if entry.header:
                y = top + rows[entry.align]
                rows[entry.align] += 1
                if y >= bottom_min:
                    continue
                top_max = max(top_max, y + 1)
            else:
                y = bottom - rows[3 + entry.align]
                rows[3 + entry.align] += 1
                if y <= top_max:
                    continue
                bottom_min = min(bottom_min, y - 1)
            print_text(screen, entry.text, x, y, width, entry.align, Style(foreground=entry.color))

        if self.primitive is None:
            return
        if top_max > top:
            top = top_max + self.header
        if bottom_min < bottom:
            bottom = bottom_min - self.footer
        if top > bottom:
            return
        self.primitive.set_rect(x, top, width, bottom + 1 - top)
        self.primitive.draw(screen)

    def focus(self, delegate: SetFocus) -> None:
        self._set_focus = delegate
        if self.primitive is not None:
            delegate(self.primitive)
        else:
            super().focus(delegate)

    def has_focus(self) -> bool:
        if self.primitive is None:
            return super().has_focus()
        return self.primitive.has_focus()

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if self.primitive is not None:
            self.primitive.handle_key(event, set_focus)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        capture: Optional[Primitive] = None
        if self.primitive is not None:
            consumed, capture = self.primitive.handle_mouse(action, event, set_focus)
            if consumed:
                return True, capture
        if action is MouseAction.LEFT_DOWN:
            set_focus(self)
            return True, capture
        return False, capture

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        if self.primitive is not None:
            self.primitive.handle_paste(text, set_focus)