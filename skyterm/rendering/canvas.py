"""
Canvas — fixed-size grid of (glyph, style) cells.

A canvas belongs to one render pass: the pipeline clears it, the layers
write into it, then the host prints it (``render``/``to_text``) or blits it
(``cells``). Writes outside the grid are silently dropped so layers never
need their own bounds checks.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from rich.console import Console
from rich.style import Style
from rich.text import Text

from .styles import BLANK, BLANK_STYLE


@dataclass(slots=True)
class Cell:
    glyph: str = BLANK
    style: Style = BLANK_STYLE


class Canvas:

    def __init__(self, width: int, height: int):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.cells: List[List[Cell]] = [[Cell() for _ in range(self.width)]
                                        for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.glyph = BLANK
                cell.style = BLANK_STYLE

    def set(self, x: int, y: int, glyph: str, style: Style = BLANK_STYLE) -> None:
        if self.in_bounds(x, y):
            cell = self.cells[y][x]
            cell.glyph = glyph
            cell.style = style

    def get(self, x: int, y: int) -> Cell:
        """The cell at (x, y); a blank cell outside the grid."""
        if self.in_bounds(x, y):
            return self.cells[y][x]
        return Cell()

    def is_blank(self, x: int, y: int) -> bool:
        return self.get(x, y).glyph == BLANK

    def put_if_free(self, x: int, y: int, glyph: str, style: Style = BLANK_STYLE) -> bool:
        """
        Write only onto a blank cell or one already holding ``glyph``.
        Returns True if the cell was written.
        """
        if not self.in_bounds(x, y):
            return False
        cell = self.cells[y][x]
        if cell.glyph != BLANK and cell.glyph != glyph:
            return False
        cell.glyph = glyph
        cell.style = style
        return True

    def write_text(self, x: int, y: int, text: str, style: Style = BLANK_STYLE) -> None:
        """Write a string left to right, clipping at the edges."""
        for i, ch in enumerate(text):
            self.set(x + i, y, ch, style)

    def row_text(self, y: int) -> str:
        return "".join(c.glyph for c in self.cells[y])

    def plain(self) -> str:
        return "\n".join(self.row_text(y) for y in range(self.height))

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self.cells):
            for cell in row:
                text.append(cell.glyph, cell.style)
            if y < self.height - 1:
                text.append("\n")
        return text

    def render(self, color_system: str = "256") -> str:
        """The whole grid as one ANSI-escaped string."""
        console = Console(color_system=color_system, force_terminal=True,
                          width=max(self.width, 1), legacy_windows=False)
        with console.capture() as capture:
            console.print(self.to_text(), end="", soft_wrap=True)
        return capture.get()
