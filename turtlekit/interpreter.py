"""Interpreter for turtle command files, with nested ``repeat`` blocks.

A command file holds one command per line:

``pen down`` / ``pen up``
    Lower or lift the pen.
``forward N``, ``left N``, ``right N``
    Move or turn the turtle.
``repeat N`` followed by a ``{`` line, body lines and a ``}`` line
    Run the body N times. Blocks may be nested.

Lines with any other command are ignored.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

from turtlekit.turtle_graphics import Turtle

MAX_LINES = 5000
CANVAS_SIZE = 500
DEFAULT_INPUT = "ex1.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_value(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _command(line: str) -> str:
    return line.split(" ", 1)[0]


def _argument(line: str) -> str:
    """Return the text from the first space onwards, space included."""
    index = line.find(" ")
    if index < 0:
        raise ValueError(f"command has no argument: {line!r}")
    return line[index:]


def execute(turtle: Turtle, line: str) -> None:
    """Run one command line on the turtle."""
    command = _command(line)
    if command == "pen":
        if _argument(line) == " down":
            turtle.pen_down()
        else:
            turtle.pen_up()
    elif command == "forward":
        turtle.forward(parse_value(_argument(line)))
    elif command == "left":
        turtle.rotate_left(parse_value(_argument(line)))
    elif command == "right":
        turtle.rotate_right(parse_value(_argument(line)))


def _capture_block(lines: Iterator[str]) -> list[str] | None:
    """Collect the body of a braced block; None if it is never closed."""
    depth = 0
    body: list[str] = []
    for line in lines:
        if line == "{":
            depth += 1
            if depth == 1:
                continue
        elif line == "}":
            depth -= 1
            if depth < 1:
                return body
        if depth >= 1:
            body.append(line)
    return None


def run_lines(turtle: Turtle, lines: Iterable[str]) -> None:
    """Run command lines on the turtle, expanding ``repeat`` blocks."""
    remaining = iter(lines)
    for line in remaining:
        if _command(line) == "repeat":
            # The repeat count is held in a single byte.
            count = parse_value(_argument(line)) % 256
            body = _capture_block(remaining)
            if body is None:
                return
            for _ in range(count):
                run_lines(turtle, body)
        else:
            execute(turtle, line)


def _read_lines(path: str) -> Sequence[str]:
    """Read newline-terminated lines, at most MAX_LINES of them."""
    with open(path, encoding="latin-1", newline="") as handle:
        content = handle.read()
    # Text after the final newline is not a complete line and is dropped.
    return content.split("\n")[:-1][:MAX_LINES]


def run_file(path: str | os.PathLike[str]) -> str:
    """Run a command file and draw it to ``<path>.svg``; return that path."""
    source = os.fspath(path)
    lines = _read_lines(source)
    output = source + ".svg"
    with Turtle(CANVAS_SIZE, CANVAS_SIZE, output) as turtle:
        run_lines(turtle, lines)
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command file named on the command line, or ``ex1.txt``."""
    args = list(sys.argv[1:] if argv is None else argv)
    filename = args[0] if len(args) == 1 else DEFAULT_INPUT
    try:
        run_file(filename)
    except OSError:
        print(f"Can't open: {filename}")
        print("Invalid file.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())