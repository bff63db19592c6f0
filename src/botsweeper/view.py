"""
View helpers for Botsweeper.

Turns the state of a game into what a frontend draws each frame: a numpy
observation grid and a plain text rendering.
"""
from typing import Optional

import numpy as np

from .controller import Controller
from .engine import Game


HIDDEN = -1
FLAGGED = -2
MINE = 9


def observe(game: Game) -> np.ndarray:
    """
    Get the visible board as a numpy array.

    Closed cells are shown face up while the cheat preview is held or
    once the game is dead.

    Returns:
        2D array (height x width) where:
            -1 = hidden
            -2 = flagged
            0-8 = visible with neighboring mine count
            9 = visible mine
    """
    board = game.board
    shown = game.cheat or game.is_dead
    obs = np.zeros((board.height, board.width), dtype=np.int8)
    for idx, cell in enumerate(board.cells):
        y, x = divmod(idx, board.width)
        obs[y, x] = cell.to_observation(shown)
    return obs


def render_ansi(game: Game, controller: Optional[Controller] = None) -> str:
    """
    Render the visible board as text.

    ``.`` hidden, ``F`` flag, ``*`` mine, blank for zero, digits for
    counts. The keyboard cursor is bracketed; a held open button shows
    the cursor cell as ``_``.
    """
    obs = observe(game)
    show_cursor = controller is None or controller.show_cursor
    lines = []

    for y in range(obs.shape[0]):
        row_str = ""
        for x in range(obs.shape[1]):
            val = obs[y, x]
            if game.board.cells[y * obs.shape[1] + x].is_flagged:
                glyph = "F"
            elif controller is not None and controller.is_pressed(x, y) and val == HIDDEN:
                glyph = "_"
            elif val == HIDDEN:
                glyph = "."
            elif val == MINE:
                glyph = "*"
            elif val == 0:
                glyph = " "
            else:
                glyph = str(val)

            if show_cursor and game.cursor == (x, y):
                row_str += f"[{glyph}]"
            else:
                row_str += f" {glyph} "
        lines.append(row_str.rstrip())

    return "\n".join(lines)


def status_line(game: Game) -> str:
    """One-line summary shown under the board."""
    state = "DEAD" if game.is_dead else "ALIVE"
    cheat = " | cheat" if game.cheat else ""
    return (
        f"{state} | mines left: {game.mines_remaining} | "
        f"cursor: {game.cursor_x},{game.cursor_y}{cheat}"
    )
