"""Minimal SVG writer producing line drawings on a centred, y-up canvas."""

from __future__ import annotations

import os
from types import TracebackType
from typing import TextIO

_LINE_STYLE = "stroke:rgb(0,0,0);stroke-width:2"


class SvgFile:
    """An SVG document being written to disk.

    The header is written when the file is opened and the footer when it is
    closed. The coordinate system has its origin in the centre of the canvas
    with the y axis pointing up.
    """

    def __init__(self, path: str | os.PathLike[str], height: int, width: int) -> None:
        self.path = os.fspath(path)
        self.height = height
        self.width = width
        self._file: TextIO | None = open(
            self.path, "w", encoding="iso-8859-1", newline="\n"
        )
        self._write_header()

    @property
    def closed(self) -> bool:
        """Whether the footer has been written and the file closed."""
        return self._file is None

    def _stream(self) -> TextIO:
        if self._file is None:
            raise ValueError(f"SVG file {self.path!r} is already closed")
        return self._file

    def _write_header(self) -> None:
        out = self._stream()
        out.write('<?xml version="1.0" encoding="iso-8859-1"?>\n')
        out.write(
            '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 20001102//EN" '
            '"http://www.w3.org/TR/2000/CR-SVG-20001102/DTD/svg-20001102.dtd">\n'
        )
        out.write(
            '<svg version="1.1"\n'
            'xmlns="http://www.w3.org/2000/svg"\n'
            'xmlns:xlink="http://www.w3.org/1999/xlink"\n'
            f'width="{self.width}" height="{self.height}" >\n'
        )
        out.write(
            f'<g transform="translate({self.width // 2} {self.height // 2})">\n'
        )
        out.write('<g transform="scale(1 -1)">\n')
        out.write('<g id="turleGraphics">\n')

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Write a black line element from (x1, y1) to (x2, y2)."""
        self._stream().write(
            f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
            f'style="{_LINE_STYLE}" />\n'
        )

    def close(self) -> None:
        """Write the footer and close the file. Closing twice is harmless."""
        if self._file is None:
            return
        self._file.write("</g>\n</g>\n</g>\n</svg>\n")
        self._file.close()
        self._file = None

    def __enter__(self) -> SvgFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()