"""
Braille plotting surface.

Every terminal cell carries a 2x4 grid of braille dots, so a canvas of
W x H cells plots at (2W) x (4H). Text labels sit on top of the dots,
one character per cell.
"""

from typing import Iterable, List, Optional, Tuple

from rich.style import Style
from rich.text import Text

BRAILLE_BLANK = 0x2800

# dot bit for (column, row) inside a cell
BRAILLE_DOTS = (
    (0x01, 0x02, 0x04, 0x40),
    (0x08, 0x10, 0x20, 0x80),
)


class BrailleCanvas:
    """A fixed-size canvas mapping data coordinates onto braille cells."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: Tuple[float, float] = (-180.0, 180.0),
        y_bounds: Tuple[float, float] = (-90.0, 90.0),
    ):
        self.width = max(0, width)
        self.height = max(0, height)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self._dots: List[List[int]] = [[0] * self.width for _ in range(self.height)]
        self.labels: List[Tuple[float, float, str]] = []

    def _in_bounds(self, x: float, y: float) -> bool:
        left, right = self.x_bounds
        bottom, top = self.y_bounds
        return left <= x <= right and bottom <= y <= top

    def _scale(self, x: float, y: float, cols: int, rows: int) -> Tuple[int, int]:
        left, right = self.x_bounds
        bottom, top = self.y_bounds
        col = int((x - left) * (cols - 1) / (right - left))
        row = int((top - y) * (rows - 1) / (top - bottom))
        return col, row

    def cell_of(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """(column, row) of the cell a label at (x, y) starts in, or None."""
        if not self.width or not self.height or not self._in_bounds(x, y):
            return None
        return self._scale(x, y, self.width, self.height)

    def points(self, coords: Iterable[Tuple[float, float]]) -> None:
        if not self.width or not self.height:
            return
        for x, y in coords:
            if not self._in_bounds(x, y):
                continue
            px, py = self._scale(x, y, self.width * 2, self.height * 4)
            self._dots[py // 4][px // 2] |= BRAILLE_DOTS[px % 2][py % 4]

    def print(self, x: float, y: float, text: str) -> None:
        self.labels.append((x, y, text))

    def rows(self) -> List[str]:
        grid = [
            [chr(BRAILLE_BLANK + bits) if bits else " " for bits in row]
            for row in self._dots
        ]
        for x, y, text in self.labels:
            cell = self.cell_of(x, y)
            if cell is None:
                continue
            col, row = cell
            for offset, char in enumerate(text):
                if col + offset >= self.width:
                    break
                grid[row][col + offset] = char
        return ["".join(row) for row in grid]

    def to_text(self, style: Optional[Style] = None) -> Text:
        return Text("\n".join(self.rows()), style=style or Style(), no_wrap=True)
