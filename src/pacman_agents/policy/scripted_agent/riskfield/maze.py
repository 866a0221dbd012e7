"""
Concrete board for the risk-field policy.

Maze wraps a numpy grid of CellContent codes. Cells outside the grid read as walls.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .types import BOARD_SIZE, CONTENT_TO_GLYPH, GLYPH_TO_CONTENT, Cell, CellContent

_ITEM_CODES = (CellContent.REGULAR_ITEM.value, CellContent.LARGE_ITEM.value)


class Maze:
    """Static walls plus consumable items."""

    def __init__(self, grid: np.ndarray, max_size: int = BOARD_SIZE):
        if grid.ndim != 2:
            raise ValueError(f"Maze grid must be 2-D, got shape {grid.shape}")
        if max(grid.shape) > max_size:
            raise ValueError(f"Maze grid {grid.shape} exceeds the {max_size}x{max_size} risk field")
        self.grid = grid.astype(np.int8, copy=False)

    @classmethod
    def open(cls, size: int, max_size: int = BOARD_SIZE) -> Maze:
        """Wall-free square board."""
        return cls(np.full((size, size), CellContent.EMPTY.value, dtype=np.int8), max_size=max_size)

    @classmethod
    def from_ascii(cls, text: str, max_size: int = BOARD_SIZE) -> Maze:
        """Parse an ASCII map: '#' wall, '.' item, '*' large item, ' ' or '-' empty, 'O'/'P' agent."""
        lines = [line for line in text.splitlines() if line.strip("\n")]
        if not lines:
            raise ValueError("Empty maze text")
        width = len(lines[0])
        grid = np.full((len(lines), width), CellContent.EMPTY.value, dtype=np.int8)
        for x, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Row {x} has width {len(line)}, expected {width}")
            for y, glyph in enumerate(line):
                content = GLYPH_TO_CONTENT.get(glyph)
                if content is None:
                    raise ValueError(f"Unknown glyph {glyph!r} at ({x}, {y})")
                grid[x, y] = content.value
        return cls(grid, max_size=max_size)

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self.height and 0 <= cell[1] < self.width

    def cell_contents(self, x: int, y: int) -> CellContent:
        if not self.in_bounds((x, y)):
            return CellContent.WALL
        return CellContent(int(self.grid[x, y]))

    def is_wall(self, cell: Cell) -> bool:
        return self.cell_contents(cell[0], cell[1]) is CellContent.WALL

    def holds_item(self, cell: Cell) -> bool:
        return self.cell_contents(cell[0], cell[1]).is_item

    def item_count(self) -> int:
        return int(np.isin(self.grid, _ITEM_CODES).sum())

    def item_cells(self) -> Iterator[Cell]:
        """Item positions in row-major order."""
        xs, ys = np.nonzero(np.isin(self.grid, _ITEM_CODES))
        for x, y in zip(xs.tolist(), ys.tolist()):
            yield (x, y)

    def place(self, cell: Cell, content: CellContent) -> None:
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} outside {self.height}x{self.width} maze")
        self.grid[cell[0], cell[1]] = content.value

    def consume(self, cell: Cell) -> bool:
        """Eat the item at cell, if any. Returns True if an item was eaten."""
        if not self.holds_item(cell):
            return False
        self.grid[cell[0], cell[1]] = CellContent.EMPTY.value
        return True

    def to_ascii(self) -> str:
        return "\n".join(
            "".join(CONTENT_TO_GLYPH[CellContent(int(code))] for code in row) for row in self.grid
        )
