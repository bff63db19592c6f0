"""
Input controller for Botsweeper.

Translates discrete keyboard and mouse events into game commands. Key
codes follow the DOM ``KeyboardEvent.code`` names; mouse buttons are
0 (primary), 1 (middle) and 2 (secondary).
"""
from dataclasses import dataclass

from .engine import Game


# ============================================================================
# Constants
# ============================================================================

CELL_SIZE = 24

KEY_MOVES = {
    "ArrowDown": (0, 1),
    "ArrowUp": (0, -1),
    "ArrowLeft": (-1, 0),
    "ArrowRight": (1, 0),
}

KEY_OPEN = "Space"
KEY_FLAG = "KeyF"
KEY_CLEAR = "KeyG"
KEY_RESTART = "KeyR"
KEY_CHEAT = "KeyC"

BUTTON_OPEN = 0
BUTTON_CLEAR = 1
BUTTON_FLAG = 2


# ============================================================================
# Controller
# ============================================================================

@dataclass
class Controller:
    """
    Maps input events onto a game.

    Attributes:
        game: The game receiving commands.
        opening: The open button (Space or primary mouse) is held down.
        show_cursor: Draw the keyboard cursor; hidden while the mouse
            drives the cursor.
    """

    game: Game
    opening: bool = False
    show_cursor: bool = True

    def start(self, width: int, height: int, num_mines: int) -> None:
        """Start over on a board of a new size, releasing the open button."""
        self.opening = False
        self.game.start(width, height, num_mines)

    def key_down(self, code: str) -> None:
        """Handle a key press."""
        if code == KEY_CHEAT:
            self.game.set_cheat(True)
        elif code == KEY_RESTART:
            self.game.restart()
        self.show_cursor = True

        if self.game.is_dead:
            return

        if code in KEY_MOVES:
            self.game.move_cursor(*KEY_MOVES[code])
        elif code == KEY_OPEN:
            self.opening = True
        elif code == KEY_FLAG:
            self.game.flag_at_cursor()
        elif code == KEY_CLEAR:
            self.game.clear_at_cursor()

    def key_up(self, code: str) -> None:
        """Handle a key release. Releasing Space opens the cursor cell."""
        if code == KEY_CHEAT:
            self.game.set_cheat(False)

        if self.game.is_dead:
            return

        if code == KEY_OPEN:
            self.opening = False
            self.game.reveal_at_cursor()

    def mouse_move(self, px_x: int, px_y: int) -> None:
        """Move the cursor to the cell under a pixel offset."""
        if self.game.is_dead:
            return
        self.game.set_cursor(px_x // CELL_SIZE, px_y // CELL_SIZE)
        self.show_cursor = False

    def mouse_down(self, button: int) -> None:
        if self.game.is_dead:
            return
        if button == BUTTON_OPEN:
            self.opening = True
        elif button == BUTTON_CLEAR:
            self.game.clear_at_cursor()
        elif button == BUTTON_FLAG:
            self.game.flag_at_cursor()

    def mouse_up(self, button: int) -> None:
        if self.game.is_dead:
            return
        if button == BUTTON_OPEN:
            self.opening = False
            self.game.reveal_at_cursor()

    def is_pressed(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) should be drawn pushed down."""
        return self.opening and self.game.cursor == (x, y)
