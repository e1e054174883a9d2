import pytest

from cellwidgets.primitive import (
    Align,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    Style,
    print_text,
    string_width,
)


def test_style_copies_are_independent():
    base = Style()
    red = base.with_foreground("red")
    both = red.with_background("blue")
    assert base.foreground is None
    assert red.foreground == "red" and red.background is None
    assert both.foreground == "red" and both.background == "blue"


def test_rune_event_requires_single_character():
    with pytest.raises(ValueError):
        KeyEvent(Key.RUNE, "")
    assert KeyEvent(Key.RUNE, "x").rune == "x"


def test_mouse_event_position():
    assert MouseEvent(3, 4).position == (3, 4)


def test_screen_content_round_trip():
    screen = Screen(4, 2)
    assert screen.size() == (4, 2)
    style = Style("red", "blue")
    screen.set_content(1, 1, "z", style)
    assert screen.get_content(1, 1) == ("z", style)
    assert screen.row_text(1) == " z  "


def test_screen_ignores_writes_outside():
    screen = Screen(2, 2)
    screen.set_content(5, 5, "q", Style())
    assert screen.get_content(5, 5) == ("", Style())
    assert screen.row_text(0) == "  "


def test_screen_rejects_negative_size():
    with pytest.raises(ValueError):
        Screen(-1, 3)


def test_screen_row_out_of_range():
    with pytest.raises(IndexError):
        Screen(2, 2).row_text(2)


def test_rect_round_trip_and_inner_rect():
    p = Primitive()
    p.set_rect(2, 3, 10, 6)
    assert p.get_rect() == (2, 3, 10, 6)
    assert p.inner_rect() == (2, 3, 10, 6)
    p.set_border_padding(1, 1, 2, 2)
    assert p.inner_rect() == (4, 4, 6, 4)


def test_inner_rect_never_negative():
    p = Primitive()
    p.set_rect(0, 0, 2, 2)
    p.set_border_padding(3, 3, 3, 3)
    _, _, width, height = p.inner_rect()
    assert width == 0 and height == 0


def test_in_rect_edges():
    p = Primitive()
    p.set_rect(1, 1, 3, 2)
    assert p.in_rect(1, 1)
    assert p.in_rect(3, 2)
    assert not p.in_rect(4, 1)
    assert not p.in_rect(1, 3)
    assert not p.in_rect(0, 1)


def test_focus_and_blur():
    p = Primitive()
    assert not p.has_focus()
    p.focus(lambda other: None)
    assert p.has_focus()
    p.blur()
    assert not p.has_focus()


def test_mouse_left_down_inside_sets_focus():
    p = Primitive()
    p.set_rect(0, 0, 5, 5)
    focused = []
    result = p.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(2, 2), focused.append)
    assert result == (True, None)
    assert focused == [p]


def test_mouse_outside_is_not_consumed():
    p = Primitive()
    p.set_rect(0, 0, 5, 5)
    focused = []
    result = p.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(9, 9), focused.append)
    assert result == (False, None)
    assert focused == []


def test_draw_fills_background():
    screen = Screen(4, 4)
    p = Primitive()
    p.background_color = "blue"
    p.set_rect(1, 1, 2, 2)
    p.draw(screen)
    assert screen.get_content(1, 1)[1].background == "blue"
    assert screen.get_content(2, 2)[1].background == "blue"
    assert screen.get_content(0, 0)[1].background is None
    assert screen.get_content(3, 3)[1].background is None


def test_transparent_draw_leaves_screen():
    screen = Screen(3, 3)
    p = Primitive()
    p.background_color = "blue"
    p.transparent = True
    p.set_rect(0, 0, 3, 3)
    p.draw(screen)
    assert screen.get_content(1, 1)[1].background is None


def test_string_width():
    assert string_width("abc") == len("abc")
    assert string_width("e\u0301") == string_width("e")
    assert string_width("日本") == 4


def test_print_left():
    screen = Screen(5, 1)
    printed = print_text(screen, "ab", 0, 0, 5, Align.LEFT, Style())
    assert printed == 2
    assert screen.row_text(0) == "ab   "


def test_print_right():
    screen = Screen(5, 1)
    print_text(screen, "ab", 0, 0, 5, Align.RIGHT, Style())
    assert screen.row_text(0) == "   ab"


def test_print_center():
    screen = Screen(6, 1)
    print_text(screen, "ab", 0, 0, 6, Align.CENTER, Style())
    assert screen.row_text(0) == "  ab  "


def test_print_truncates_by_alignment():
    left = Screen(3, 1)
    assert print_text(left, "abcdef", 0, 0, 3, Align.LEFT, Style()) == 3
    assert left.row_text(0) == "abc"
    right = Screen(3, 1)
    print_text(right, "abcdef", 0, 0, 3, Align.RIGHT, Style())
    assert right.row_text(0) == "def"


def test_print_skip():
    screen = Screen(6, 1)
    printed = print_text(screen, "abcdef", 0, 0, 6, Align.LEFT, Style(), 2)
    assert printed == len("cdef")
    assert screen.row_text(0).startswith("cdef")


def test_print_zero_width_prints_nothing():
    screen = Screen(3, 1)
    assert print_text(screen, "abc", 0, 0, 0, Align.LEFT, Style()) == 0
    assert screen.row_text(0) == "   "


def test_print_wide_characters_keep_row_text():
    screen = Screen(4, 1)
    printed = print_text(screen, "日本", 0, 0, 4, Align.LEFT, Style("red"))
    assert printed == string_width("日本")
    assert screen.row_text(0) == "日本"
    assert screen.get_content(1, 0) == ("", Style("red"))