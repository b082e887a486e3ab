# turtlekit

A small teaching toolkit. It has:

- **Turtle graphics** that write SVG drawings (`turtlekit.turtle_graphics.Turtle`,
  `turtlekit.svg.SvgFile`).
- **An interpreter** for a tiny drawing language with nested `repeat` blocks
  (`turtlekit.interpreter`).
- **Two integer list structures** with the same interface:
  `turtlekit.array_list.ArrayList` and `turtlekit.linked_list.LinkedList`.
- **Helpers** for the largest and smallest value and value counting
  (`turtlekit.stats`), and an in-place bubble sort (`turtlekit.sorting`).

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Drawing from a command file

A command file has one command per line:

```
pen down
forward 50
right 144
repeat 4
{
forward 20
left 90
}
pen up
```

- `pen down` lowers the pen; `pen` followed by anything else lifts it.
- `forward N`, `left N` and `right N` move or turn the turtle. `N` is read as
  a leading integer; if there is none it counts as 0.
- `repeat N` is followed by a `{` line, the body, and a `}` line, each brace on
  a line of its own. Blocks may be nested. The count is taken modulo 256. A
  block that is never closed ends the run.
- Lines with any other command are ignored. A known command with no argument
  (such as `forward` on its own) raises `ValueError`.

Only the first 5000 lines are read, and text after the last newline is not
treated as a line.

Run it:

```
turtlekit star.txt
```

This writes `star.txt.svg`, a 500 by 500 canvas with the origin at its centre
and the y axis pointing up. If you do not give exactly one file name,
`ex1.txt` is read. If the file cannot be opened, the command prints a message
and writes nothing.

From Python, `turtlekit.interpreter.run_file(path)` does the same and returns
the path of the SVG file; `run_lines(turtle, lines)` runs commands on a
turtle you already have, and `execute(turtle, line)` runs a single command
without `repeat` handling.

## Using the turtle directly

```python
from turtlekit.turtle_graphics import Turtle

with Turtle(500, 500, "star.svg") as t:
    for _ in range(5):
        t.forward(50)
        t.rotate_right(144)
```

The turtle starts at `(0, 0)`, facing angle 0, with its pen down. Leave out
the file name (or pass `None`) to move it without writing anything. Each move
rounds the new position to whole units, halves away from zero. The heading
`angle` always stays in `0 <= angle < 360`. Moves made with the pen down are
drawn as lines; `pen_up()` and `pen_down()` switch this.

`SvgFile(path, height, width)` can also be used on its own: `line(x1, y1, x2, y2)`
writes a line and `close()` writes the footer.

## Lists

```python
from turtlekit.array_list import ArrayList
from turtlekit.linked_list import LinkedList

items = LinkedList()
items.insert_front(1)
items.insert_end(3)
items.insert(2, 1)
print(items)          # {1, 2, 3}
print(2 in items)     # True
print(len(items))     # 3
items.bubble_sort()
items.remove_front()  # 1
```

Both lists support `insert_front`, `insert_end`, `insert(value, pos)`, `get`,
`remove_front`, `remove_end`, `remove(pos)`, `clear`, `is_empty`,
`bubble_sort`, `len()`, `in` and iteration. Positions start at 0; a position
outside the list, or removing from an empty list, raises `IndexError`.
`ArrayList` prints as `{1,2,3}` and `LinkedList` as `{1, 2, 3}`.

## Helpers

```python
from turtlekit.stats import maximum, minimum, count_values
from turtlekit.sorting import bubble_sort

values = [10, 10, -3, 11, 2, 10, 50]
maximum(values), minimum(values), count_values(values, 10)   # (50, -3, 3)
bubble_sort(values)   # sorts values in place
```

`maximum` and `minimum` raise `ValueError` when given no values.

## Tests

```
pip install .[test]
pytest
```