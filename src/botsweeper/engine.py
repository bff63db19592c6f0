"""
Game engine for Botsweeper.

Owns the live board together with the game state, the cursor and the
cheat preview flag, and gates player commands on the game state.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .board import Board, BoardConfig, build_board
from .cell import Cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    ALIVE = auto()
    DEAD = auto()


@dataclass
class Rules:
    """
    Optional gameplay rules.

    Attributes:
        flood_reveal: Opening a zero-count cell opens its neighbors too.
        chord_clear: Chord-clear on an open, flag-satisfied cell is allowed.
    """

    flood_reveal: bool = True
    chord_clear: bool = True


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    A single game of Botsweeper.

    Builds its board on creation and replaces it wholesale on restart.
    Once a mine is opened the game is dead and only restarting is
    accepted.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rules: Rules = field(default_factory=Rules)
    rng: Optional[random.Random] = field(default=None, repr=False)
    board: Board = field(init=False, repr=False)
    cursor_x: int = field(default=0, init=False)
    cursor_y: int = field(default=0, init=False)
    cheat: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Build the first board after dataclass creation."""
        self.board = self._new_board()

    def _new_board(self) -> Board:
        return build_board(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            rng=self.rng,
        )

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def restart(self) -> None:
        """Discard the board and deal a new one with the same settings."""
        self.board = self._new_board()
        self.cursor_x = 0
        self.cursor_y = 0
        logger.debug("Restarted %dx%d game", self.config.width, self.config.height)

    def start(self, width: int, height: int, num_mines: int) -> None:
        """
        Start over on a board of a new size.

        The cursor keeps its position where it still fits and the cheat
        preview is switched off.
        """
        self.config = BoardConfig(width, height, num_mines)
        self.board = self._new_board()
        self.cursor_x = min(self.cursor_x, width - 1)
        self.cursor_y = min(self.cursor_y, height - 1)
        self.cheat = False
        logger.debug("Started %dx%d game with %d mines", width, height, num_mines)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self.board.exploded:
            return GameState.DEAD
        return GameState.ALIVE

    @property
    def is_alive(self) -> bool:
        return self.state == GameState.ALIVE

    @property
    def is_dead(self) -> bool:
        return self.state == GameState.DEAD

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_x, self.cursor_y

    @property
    def flags_placed(self) -> int:
        return self.board.flag_count

    @property
    def mines_remaining(self) -> int:
        """Mines left to find, going by the flags placed."""
        return self.board.mine_count - self.board.flag_count

    def cell(self, x: int, y: int) -> Cell:
        return self.board.cell(x, y)

    def set_cheat(self, enabled: bool) -> None:
        """Toggle the reveal preview. Never touches the board."""
        self.cheat = enabled

    # ========================================================================
    # Player Commands
    # ========================================================================

    def reveal(self, x: int, y: int) -> List[int]:
        """
        Reveal a cell on direct player action.

        Flagged cells are left shut. If the reveal opens a mine the game
        is lost.

        Returns:
            Arena indices opened by this action.
        """
        if self.is_dead:
            return []
        opened = self.board.open(x, y, flood=self.rules.flood_reveal)
        self._check_loss(opened)
        return opened

    def flag(self, x: int, y: int) -> bool:
        """Toggle the flag at (x, y). Returns True if the flag changed."""
        if self.is_dead:
            return False
        return self.board.flag(x, y)

    def clear(self, x: int, y: int) -> List[int]:
        """
        Chord-clear around an open cell.

        Returns:
            Arena indices opened, empty when the chord did not fire.
        """
        if self.is_dead or not self.rules.chord_clear:
            return []
        opened = self.board.clear(x, y, flood=self.rules.flood_reveal)
        self._check_loss(opened)
        return opened

    def _check_loss(self, opened: List[int]) -> None:
        if opened and self.board.exploded:
            logger.info(
                "Mine opened, game over after %d cells in the last move",
                len(opened),
            )

    # ========================================================================
    # Cursor
    # ========================================================================

    def set_cursor(self, x: int, y: int) -> bool:
        """
        Place the cursor, clamped to the board.

        Returns:
            False while dead (cursor does not move), True otherwise.
        """
        if self.is_dead:
            return False
        self.cursor_x = max(0, min(self.config.width - 1, x))
        self.cursor_y = max(0, min(self.config.height - 1, y))
        return True

    def move_cursor(self, dx: int, dy: int) -> bool:
        return self.set_cursor(self.cursor_x + dx, self.cursor_y + dy)

    def reveal_at_cursor(self) -> List[int]:
        return self.reveal(self.cursor_x, self.cursor_y)

    def flag_at_cursor(self) -> bool:
        return self.flag(self.cursor_x, self.cursor_y)

    def clear_at_cursor(self) -> List[int]:
        return self.clear(self.cursor_x, self.cursor_y)
