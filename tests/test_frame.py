from cellwidgets.frame import Frame
from cellwidgets.primitive import (
    Align,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
)


class Recorder(Primitive):
    def __init__(self):
        super().__init__()
        self.keys = []
        self.pastes = []
        self.drawn = 0

    def handle_key(self, event, set_focus):
        self.keys.append(event)

    def handle_paste(self, text, set_focus):
        self.pastes.append(text)

    def draw(self, screen):
        super().draw(screen)
        self.drawn += 1


def test_header_text_is_drawn_centered():
    frame = Frame()
    frame.set_rect(0, 0, 20, 5)
    frame.add_text("Hello", True, Align.CENTER, None)
    screen = Screen(20, 5)
    frame.draw(screen)
    row = screen.row_text(1)
    assert row.strip() == "Hello"
    left = row.index("H")
    right = len(row) - len(row.rstrip()) 
    assert abs(left - right) <= 1


def test_footer_text_drawn_above_bottom_border():
    frame = Frame()
    frame.set_rect(0, 0, 20, 5)
    frame.add_text("End", False, Align.LEFT, None)
    screen = Screen(20, 5)
    frame.draw(screen)
    assert screen.row_text(3).strip() == "End"
    assert screen.row_text(3).index("E") == frame.left


def test_clear_removes_text():
    frame = Frame()
    frame.set_rect(0, 0, 20, 5)
    frame.add_text("Hello", True, Align.LEFT, None)
    frame.clear()
    screen = Screen(20, 5)
    frame.draw(screen)
    assert all(screen.row_text(y).strip() == "" for y in range(5))


def test_primitive_fills_frame_without_borders():
    child = Recorder()
    frame = Frame(child)
    frame.set_borders(0, 0, 0, 0, 0, 0)
    frame.set_rect(0, 0, 20, 5)
    frame.draw(Screen(20, 5))
    assert child.get_rect() == (0, 0, 20, 5)
    assert child.drawn == 1


def test_primitive_placed_below_header():
    child = Recorder()
    frame = Frame(child)
    frame.set_rect(0, 0, 20, 8)
    frame.add_text("Title", True, Align.LEFT, None)
    frame.draw(Screen(20, 8))
    x, y, width, height = child.get_rect()
    assert x == frame.left
    assert width == 20 - frame.left - frame.right
    assert y == frame.top + 1 + frame.header
    assert y + height == 8 - frame.bottom


def test_no_space_skips_primitive():
    child = Recorder()
    frame = Frame(child)
    frame.set_rect(0, 0, 20, 2)
    frame.draw(Screen(20, 2))
    assert child.drawn == 0


def test_focus_delegates_to_primitive():
    child = Recorder()
    frame = Frame(child)
    received = []
    frame.focus(received.append)
    assert received == [child]


def test_focus_without_primitive_focuses_frame():
    frame = Frame()
    frame.focus(lambda p: None)
    assert frame.has_focus() is True


def test_has_focus_follows_primitive():
    child = Recorder()
    frame = Frame(child)
    assert frame.has_focus() is False
    child.focus(lambda p: None)
    assert frame.has_focus() is True


def test_set_primitive_restores_focus():
    old, new = Recorder(), Recorder()
    frame = Frame(old)
    received = []
    frame.focus(received.append)
    old.focus(lambda p: None)
    frame.set_primitive(new)
    assert frame.primitive is new
    assert received == [old, new]


def test_set_primitive_without_focus_does_not_delegate():
    old, new = Recorder(), Recorder()
    frame = Frame(old)
    received = []
    frame.focus(received.append)
    frame.set_primitive(new)
    assert received == [old]


def test_keys_and_paste_are_forwarded():
    child = Recorder()
    frame = Frame(child)
    event = KeyEvent(Key.ENTER)
    frame.handle_key(event, lambda p: None)
    frame.handle_paste("abc", lambda p: None)
    assert child.keys == [event]
    assert child.pastes == ["abc"]


def test_mouse_outside_is_not_consumed():
    frame = Frame()
    frame.set_rect(0, 0, 10, 5)
    assert frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(20, 20), lambda p: None) == (
        False,
        None,
    )


def test_click_on_frame_focuses_frame():
    frame = Frame()
    frame.set_rect(0, 0, 10, 5)
    received = []
    result = frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(0, 0), received.append)
    assert result == (True, None)
    assert received == [frame]


def test_click_on_primitive_goes_to_primitive():
    child = Recorder()
    frame = Frame(child)
    frame.set_rect(0, 0, 10, 5)
    child.set_rect(1, 1, 8, 3)
    received = []
    consumed, _ = frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(2, 2), received.append)
    assert consumed is True
    assert received == [child]


def test_scroll_on_frame_is_not_consumed():
    frame = Frame()
    frame.set_rect(0, 0, 10, 5)
    consumed, _ = frame.handle_mouse(MouseAction.SCROLL_UP, MouseEvent(1, 1), lambda p: None)
    assert consumed is False