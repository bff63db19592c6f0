"""
Botsweeper game module.

Provides the board engine (generation, reveal, flag, chord-clear), the game
state machine and a headless controller and view for frontends.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    OutOfBoundsError,
    build_board,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .engine import Game, GameState, Rules
from .controller import Controller
from .view import observe, render_ansi

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "OutOfBoundsError",
    "build_board",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Game",
    "GameState",
    "Rules",
    "Controller",
    "observe",
    "render_ansi",
]
