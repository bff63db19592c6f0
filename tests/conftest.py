"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from botsweeper import Board, BoardConfig, Cell, Controller, Game, Rules


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for flood testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with one mine in the bottom-right corner.

    Opening (0, 0) floods everything except the mine.
    """
    return Board.from_mines(5, 5, [(4, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mined=True)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def game() -> Game:
    """Seeded 9x9 game with 10 mines."""
    return Game(BoardConfig(9, 9, 10), rng=random.Random(1234))


@pytest.fixture
def rigged_game() -> Game:
    """5x5 game whose board is replaced with a mine at (4, 4)."""
    game = Game(BoardConfig(5, 5, 1), rng=random.Random(0))
    game.board = Board.from_mines(5, 5, [(4, 4)])
    return game


@pytest.fixture
def controller(rigged_game: Game) -> Controller:
    return Controller(rigged_game)


@pytest.fixture
def single_cell_rules() -> Rules:
    """Rules with flood and chord switched off."""
    return Rules(flood_reveal=False, chord_clear=False)
