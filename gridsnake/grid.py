"""
grid.py — Grid geometry.

Classes:
    GridLine    — immutable line descriptor handed to the view
    GridModel   — cell size and dimensions; builds the grid-line list
"""

from typing import NamedTuple

from .errors import InvalidDimension


class GridLine(NamedTuple):
    """One row or column boundary. Border lines are solid, the rest dashed."""
    x1: int
    y1: int
    x2: int
    y2: int
    vertical: bool
    dashed: bool


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(name, value)
    return value


# ─────────────────────────── GridModel ───────────────────────────
class GridModel:
    """
    Immutable grid of `rows` x `cols` square cells, each `cell_size` units wide.
    Coordinates are in the same units as `cell_size` (pixels for the view).
    """

    __slots__ = ("_cell_size", "_rows", "_cols")

    def __init__(self, cell_size: int, rows: int, cols: int):
        self._cell_size = _check_dimension("cell_size", cell_size)
        self._rows = _check_dimension("rows", rows)
        self._cols = _check_dimension("cols", cols)

    # ── Accessors ────────────────────────────────────────────────
    @property
    def cell_size(self) -> int:
        return self._cell_size

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def width(self) -> int:
        return self._cols * self._cell_size

    @property
    def height(self) -> int:
        return self._rows * self._cell_size

    # ── Geometry ─────────────────────────────────────────────────
    def compute_grid_lines(self) -> list[GridLine]:
        """
        Return cols+1 vertical lines followed by rows+1 horizontal lines,
        each spanning the full grid. Only the outermost line on each axis
        is solid.
        """
        lines: list[GridLine] = []
        for i in range(self._cols + 1):
            x = i * self._cell_size
            lines.append(GridLine(x, 0, x, self.height,
                                  vertical=True, dashed=0 < i < self._cols))
        for i in range(self._rows + 1):
            y = i * self._cell_size
            lines.append(GridLine(0, y, self.width, y,
                                  vertical=False, dashed=0 < i < self._rows))
        return lines

    def __eq__(self, other):
        return (
            isinstance(other, GridModel)
            and self._cell_size == other._cell_size
            and self._rows == other._rows
            and self._cols == other._cols
        )

    def __hash__(self):
        return hash((self._cell_size, self._rows, self._cols))

    def __repr__(self):
        return f"GridModel(cell_size={self._cell_size}, rows={self._rows}, cols={self._cols})"
