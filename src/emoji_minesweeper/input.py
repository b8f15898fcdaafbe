"""
Pointer input handling.

Maps pixel coordinates to cells and dispatches reveal and flag actions
to the board.
"""
from enum import IntEnum
from typing import Optional

from .board import Board
from .cell import Cell
from .renderer import DEFAULT_DISPLAY, DisplayConfig, cell_rect


class Button(IntEnum):
    """Mouse buttons, numbered as pygame reports them."""

    PRIMARY = 1
    SECONDARY = 3


class InputHandler:
    """Translates pointer presses into board actions."""

    def __init__(
        self, board: Board, display: DisplayConfig = DEFAULT_DISPLAY
    ) -> None:
        self.board = board
        self.display = display

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """
        Find the cell under a pixel position.

        Edges are exclusive, so a point on a grid line hits nothing. If
        more than one cell matched, the first in identifier order wins.
        """
        for cell in self.board.cells():
            left, top, width, height = cell_rect(cell, self.display)
            if left < x < left + width and top < y < top + height:
                return cell
        return None

    def press(self, x: int, y: int, button: int) -> bool:
        """
        Handle a button press at a pixel position.

        Args:
            x: Horizontal pixel coordinate.
            y: Vertical pixel coordinate.
            button: Mouse button number.

        Returns:
            True if the board changed, False for misses and rejected actions.
        """
        cell = self.cell_at(x, y)
        if cell is None:
            return False
        if button == Button.SECONDARY:
            return self.board.flag(cell.row, cell.column)
        if button == Button.PRIMARY:
            # flags protect a cell from a stray reveal
            if cell.is_flagged:
                return False
            return self.board.reveal(cell.row, cell.column)
        return False
