"""
Cell module for Botsweeper.

Represents a single grid position: whether it hides a bot (mine), how many
of its neighbors do, and whether the player has opened or flagged it.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible player-facing states of a cell."""

    HIDDEN = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the board arena.

    Attributes:
        is_mined: Whether this cell contains a mine.
        neighboring_mines: Count of mined cells among the neighbors (0-8).
        neighbors: Arena indices of the grid-adjacent cells.
        state: Current state (hidden, open, or flagged).
    """

    is_mined: bool = False
    neighboring_mines: int = 0
    neighbors: Tuple[int, ...] = ()
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell, dropping any flag on it.

        Returns:
            True if the cell was opened, False if it was already open.
        """
        if self.state == CellState.OPEN:
            return False
        self.state = CellState.OPEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.state == CellState.OPEN:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is closed and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self, shown: bool = False) -> int:
        """
        Convert cell to the value a renderer draws.

        Args:
            shown: Draw the cell face up even if it is closed
                (cheat preview or dead board).

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Visible cell with neighboring mine count
            9: Visible mine
        """
        if self.is_open or shown:
            if self.is_mined:
                return 9
            return self.neighboring_mines
        if self.state == CellState.FLAGGED:
            return -2
        return -1
