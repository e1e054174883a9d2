# cellwidgets

Widgets for terminal user interfaces, laid out and drawn onto an
in-memory character-cell `Screen`. Each widget is a `Primitive` with a
rectangle, border padding, focus handling and handlers for keys, mouse
actions and pasted text.

## Modules

- `cellwidgets.primitive`: the `Primitive` base class, the `Screen`
  (a grid of characters and styles with `size`, `get_content`,
  `set_content` and `row_text`), `Style`, `Key`, `MouseAction`, `Align`,
  `KeyEvent` and `MouseEvent`, plus `string_width` (cell width of a
  string, wide characters counting two) and `print_text` (print one row
  of aligned, clipped text and return the cells printed).
- `cellwidgets.frame`: `Frame`, which puts borders and header/footer
  lines of text around an optional contained primitive and passes
  focus, keys, mouse and paste events on to it.
- `cellwidgets.list_model`: `ListItem` and `ItemList`, the items of a
  list with main and secondary texts, shortcuts, the current selection,
  scroll offsets, `insert_item` / `remove_item` with negative and
  clamped indices, `find_items`, and `changed` / `selected` / `done`
  callbacks.
- `cellwidgets.list_view`: `ListView`, an `ItemList` that draws itself
  (one or two rows per item, shortcuts in parentheses) and reacts to
  keys (arrows, Tab/Backtab, Home/End, PageUp/PageDown, Enter, Space,
  shortcut characters, Escape) and to clicks and scrolling.
- `cellwidgets.grid_layout`: the arithmetic of a grid layout.
  `GridItem` places a primitive on rows and columns; `select_items`
  picks the items that apply to a grid size, resolving overlaps by
  their minimum grid size; `distribute` turns absolute and proportional
  row or column specifications into sizes; `positions` turns sizes into
  start offsets.
- `cellwidgets.pages`: `Pages`, a stack of named primitives whose
  visibility and order can be switched, with focus following the front
  visible page.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Example

```python
from cellwidgets.frame import Frame
from cellwidgets.list_view import ListView
from cellwidgets.pages import Pages
from cellwidgets.primitive import Align, Screen

screen = Screen(30, 10)

fruits = ListView()
fruits.show_secondary_text = False
fruits.add_item("Apple", shortcut="a")
fruits.add_item("Banana", shortcut="b")
fruits.add_item("Cherry", shortcut="c")

frame = Frame(fruits)
frame.add_text("Fruits", True, Align.CENTER, "yellow")

pages = Pages()
pages.add_page("main", frame, True, True)
pages.set_rect(0, 0, 30, 10)
pages.draw(screen)

for y in range(10):
    print(screen.row_text(y))
```

Grid sizes can be computed on their own:

```python
from cellwidgets.grid_layout import distribute, positions

sizes = distribute([30, 10, -1, -1, -2], 5, 100, 0, 0, False)
# [30, 10, 15, 15, 30]
print(positions(sizes, 0, False))
# [0, 30, 40, 55, 70]
```

Drawing only writes into the `Screen` object; reading it back with
`get_content` or `row_text` is how an application (or a test) sees
what was drawn.

## What it does not do

- There is no terminal backend: nothing here reads a real keyboard or
  mouse or paints to a terminal. Events are passed in by calling the
  `handle_*` methods, and output stays in the `Screen`.
- There is no grid widget that draws its items. `grid_layout` provides
  the selection, sizing and positioning arithmetic only.
- There are no box-drawing border characters or joining of crossing
  lines; primitives draw plain backgrounds and text.