"""Turtle graphics with integer positions and optional SVG output."""

from __future__ import annotations

import math
import os
from types import TracebackType

from turtlekit.svg import SvgFile


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Turtle:
    """A turtle starting at the origin, facing angle 0 with its pen down.

    When a filename is given, every move made with the pen down is drawn as
    a line in an SVG file of the given height and width.
    """

    def __init__(
        self,
        height: int,
        width: int,
        filename: str | os.PathLike[str] | None = None,
    ) -> None:
        self.x = 0
        self.y = 0
        self.angle = 0
        self.pen_is_down = True
        self._svg: SvgFile | None = (
            SvgFile(filename, height, width) if filename is not None else None
        )

    @property
    def writes_to_file(self) -> bool:
        """Whether moves are being recorded to an SVG file."""
        return self._svg is not None

    def pen_up(self) -> None:
        """Lift the pen so that moves draw nothing."""
        self.pen_is_down = False

    def pen_down(self) -> None:
        """Lower the pen so that moves draw lines."""
        self.pen_is_down = True

    def rotate_left(self, degrees: int) -> None:
        """Turn counterclockwise; the angle stays within [0, 360)."""
        self.angle = (self.angle + degrees) % 360

    def rotate_right(self, degrees: int) -> None:
        """Turn clockwise; the angle stays within [0, 360)."""
        self.angle = (self.angle - degrees) % 360

    def forward(self, distance: int) -> None:
        """Move along the current heading, rounding the new position."""
        x0, y0 = self.x, self.y
        radians = math.radians(self.angle)
        self.x += _round_half_away(distance * math.cos(radians))
        self.y += _round_half_away(distance * math.sin(radians))
        if self._svg is not None and self.pen_is_down:
            self._svg.line(x0, y0, self.x, self.y)

    def close(self) -> None:
        """Finish the SVG output, if any."""
        if self._svg is not None:
            self._svg.close()

    def __enter__(self) -> Turtle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()