"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from emoji_minesweeper import (
    Board,
    BoardConfig,
    Cell,
    DisplayConfig,
    InputHandler,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 15 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def wall_board() -> Board:
    """
    Create a 5x5 board with a column of mines in column 2.

    Column 0 is all zeros, column 1 is the numbered border.
    """
    return Board.from_layout(BoardConfig(5, 5, 5), [2, 7, 12, 17, 22])


@pytest.fixture
def tiny_board() -> Board:
    """Create a 2x2 board with one mine at the bottom right."""
    return Board.from_layout(BoardConfig(2, 2, 1), [3])


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a mine in the middle and no first-click safety."""
    return Board.from_layout(BoardConfig(3, 3, 1), [4])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0, 0)


# ============================================================================
# Input Fixtures
# ============================================================================

@pytest.fixture
def display() -> DisplayConfig:
    """40x40 pixel cells."""
    return DisplayConfig(cell_width=40, cell_height=40)


@pytest.fixture
def wall_input(wall_board: Board, display: DisplayConfig) -> InputHandler:
    """Input handler bound to the wall board."""
    return InputHandler(wall_board, display)
