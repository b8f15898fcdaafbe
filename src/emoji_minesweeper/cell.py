"""
Cell module for Emoji Minesweeper.

Represents individual tiles on the game board with their fixed position,
their state (hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        row: Row index, fixed at generation.
        column: Column index, fixed at generation.
        identifier: Sequential id in row-major creation order, fixed.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    row: int
    column: int
    identifier: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell from a direct action.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def force_reveal(self) -> bool:
        """
        Reveal this cell regardless of a flag.

        Used by cascades and end-of-game reveals.

        Returns:
            True if a flag was cleared in the process.
        """
        was_flagged = self.state == CellState.FLAGGED
        self.state = CellState.REVEALED
        return was_flagged

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED
