"""
A cell on the board, addressed by row and column

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Rows are counted from the top of the canonical board (row 0 is W's back rank), columns from the left.
ROWS = 6
COLS = 6


@dataclass(frozen=True, order=True)
class BoardDelta:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < ROWS) and (0 <= self.col < COLS)

    def rotated(self) -> BoardDelta:
        """The same cell as seen from the opposite side of the board (180 degree turn)."""
        return BoardDelta(ROWS - 1 - self.row, COLS - 1 - self.col)

    def shifted(self, d_row: int, d_col: int) -> BoardDelta:
        return BoardDelta(self.row + d_row, self.col + d_col)
