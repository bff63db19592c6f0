"""
Board module for Botsweeper.

Implements board generation (mine placement, adjacency and neighbor
counts) and the cell-level reveal, flag and chord operations.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .cell import Cell


logger = logging.getLogger(__name__)

Shuffler = Callable[[List[Cell]], None]


# ============================================================================
# Constants
# ============================================================================

class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


@dataclass
class BoardConfig:
    """
    Configuration for a Botsweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height", "num_mines"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Coordinate Utilities
# ============================================================================

def index(width: int, x: int, y: int) -> int:
    """Arena index of column ``x``, row ``y``."""
    return y * width + x


def coords(idx: int, width: int) -> Tuple[int, int]:
    """Inverse of :func:`index`, returns ``(x, y)``."""
    y, x = divmod(idx, width)
    return x, y


def neighbor_indices(x: int, y: int, width: int, height: int) -> Tuple[int, ...]:
    """Arena indices of the cells around (x, y), clipped at the edges."""
    neighbors = []
    for n_y in range(max(0, y - 1), min(height, y + 2)):
        for n_x in range(max(0, x - 1), min(width, x + 2)):
            if n_x == x and n_y == y:
                continue
            neighbors.append(index(width, n_x, n_y))
    return tuple(neighbors)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    A width x height grid of cells stored as a flat arena.

    Neighbor relations are integer indices into ``cells``. Use
    :func:`build_board` or :meth:`Board.from_mines` to create one.
    """

    def __init__(self, width: int, height: int, cells: List[Cell]) -> None:
        if len(cells) != width * height:
            raise ValueError("Cell count does not match board dimensions")
        self.width = width
        self.height = height
        self.cells = cells
        self.exploded = False
        self._link_neighbors()

    def _link_neighbors(self) -> None:
        """Compute neighbor lists and counts once mine placement is final."""
        for idx, cell in enumerate(self.cells):
            x, y = coords(idx, self.width)
            cell.neighbors = neighbor_indices(x, y, self.width, self.height)
            cell.neighboring_mines = sum(
                1 for n in cell.neighbors if self.cells[n].is_mined
            )

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions to mine.

        Returns:
            Fully linked board with no cell open or flagged.
        """
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")
        mined: Set[int] = set()
        for x, y in mines:
            if not (0 <= x < width and 0 <= y < height):
                raise OutOfBoundsError(x, y, width, height)
            mined.add(index(width, x, y))
        cells = [Cell(is_mined=i in mined) for i in range(width * height)]
        return cls(width, height, cells)

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_mined)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_flagged)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        """Arena index of (x, y), rejecting positions off the board."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return index(self.width, x, y)

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    # ========================================================================
    # Mutating Operations
    # ========================================================================

    def open_cell(self, idx: int, flood: bool = True) -> List[int]:
        """
        Open the cell at ``idx`` and flood through zero-count cells.

        A flag on any opened cell is dropped. Opening a mined cell marks
        the board as exploded; the flood still carries on from it if its
        count is zero.

        Args:
            idx: Arena index of the cell to open.
            flood: Propagate into neighbors of zero-count cells.

        Returns:
            Indices opened by this call, in opening order.
        """
        if not 0 <= idx < self.size:
            x, y = coords(idx, self.width)
            raise OutOfBoundsError(x, y, self.width, self.height)
        opened: List[int] = []
        stack = [idx]
        while stack:
            current = stack.pop()
            cell = self.cells[current]
            if not cell.open():
                continue
            opened.append(current)
            if cell.is_mined:
                self.exploded = True
            if flood and cell.neighboring_mines == 0:
                stack.extend(
                    n for n in cell.neighbors if not self.cells[n].is_open
                )
        return opened

    def open(self, x: int, y: int, flood: bool = True) -> List[int]:
        """Reveal (x, y) on direct player action; flagged cells stay shut."""
        idx = self.index_of(x, y)
        if self.cells[idx].is_flagged:
            return []
        return self.open_cell(idx, flood)

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag at (x, y).

        Returns:
            True if flag was toggled, False if the cell is open.
        """
        return self.cells[self.index_of(x, y)].toggle_flag()

    def count_flagged_neighbors(self, x: int, y: int) -> int:
        cell = self.cells[self.index_of(x, y)]
        return sum(1 for n in cell.neighbors if self.cells[n].is_flagged)

    def clear(self, x: int, y: int, flood: bool = True) -> List[int]:
        """
        Chord: open every unflagged neighbor of an open cell.

        Only fires when the number of flagged neighbors equals the cell's
        neighboring mine count exactly. Wrong flags can still open a mine.

        Returns:
            Indices opened, empty when the chord did not fire.
        """
        cell = self.cells[self.index_of(x, y)]
        if not cell.is_open:
            return []
        if self.count_flagged_neighbors(x, y) != cell.neighboring_mines:
            return []

        opened: List[int] = []
        for n in cell.neighbors:
            if not self.cells[n].is_flagged:
                opened.extend(self.open_cell(n, flood))
        return opened


# ============================================================================
# Board Construction
# ============================================================================

def build_board(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
    shuffle: Optional[Shuffler] = None,
) -> Board:
    """
    Build a fresh board with mines spread uniformly at random.

    The first ``mine_count`` cells are mined and the whole sequence is then
    shuffled, so the board always holds exactly that many mines. There is no
    safe zone around the first click.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Mines to place, capped at the number of cells.
        rng: Random source for the shuffle (default: module ``random``).
        shuffle: Replacement for the in-place shuffle of the cell list.

    Returns:
        Fully linked board with no cell open or flagged.
    """
    if width < 1 or height < 1:
        raise ValueError("Board dimensions must be positive")
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")

    size = width * height
    mines = min(mine_count, size)
    cells = [Cell(is_mined=i < mines) for i in range(size)]

    if shuffle is None:
        shuffle = (rng or random).shuffle
    shuffle(cells)

    logger.debug("Built %dx%d board with %d mines", width, height, mines)
    return Board(width, height, cells)
