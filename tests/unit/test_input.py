"""
Unit tests for pointer input handling.
"""
import pytest
from emoji_minesweeper import Board, Button, InputHandler


class TestHitTesting:
    """Test mapping pixel coordinates to cells."""

    def test_point_inside_cell(self, wall_input: InputHandler) -> None:
        cell = wall_input.cell_at(60, 20)
        assert (cell.row, cell.column) == (0, 1)

    def test_point_in_last_cell(self, wall_input: InputHandler) -> None:
        cell = wall_input.cell_at(199, 199)
        assert cell.identifier == 24

    @pytest.mark.parametrize("x, y", [(40, 20), (20, 40), (0, 0)])
    def test_grid_lines_hit_nothing(
        self, wall_input: InputHandler, x: int, y: int
    ) -> None:
        """Cell edges are exclusive."""
        assert wall_input.cell_at(x, y) is None

    @pytest.mark.parametrize("x, y", [(-5, 10), (10, 210), (500, 500)])
    def test_outside_board_hits_nothing(
        self, wall_input: InputHandler, x: int, y: int
    ) -> None:
        assert wall_input.cell_at(x, y) is None


class TestPress:
    """Test reveal and flag dispatch."""

    def test_secondary_toggles_flag(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        assert wall_input.press(20, 20, Button.SECONDARY) is True
        assert wall_board.get_cell(0, 0).is_flagged is True
        assert wall_board.flagged_count == 1

        assert wall_input.press(20, 20, Button.SECONDARY) is True
        assert wall_board.get_cell(0, 0).is_hidden is True
        assert wall_board.flagged_count == 0

    def test_primary_on_flag_is_noop(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        """Flagged cells are protected from reveal."""
        wall_input.press(20, 20, Button.SECONDARY)
        assert wall_input.press(20, 20, Button.PRIMARY) is False
        assert wall_board.get_cell(0, 0).is_flagged is True
        assert wall_board.first_click_taken is False

    def test_primary_reveals(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        assert wall_input.press(20, 20, Button.PRIMARY) is True
        assert wall_board.get_cell(4, 1).is_revealed is True

    def test_secondary_on_revealed_rejected(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        wall_input.press(60, 20, Button.PRIMARY)
        assert wall_input.press(60, 20, Button.SECONDARY) is False
        assert wall_board.flagged_count == 0

    def test_primary_on_mine_loses(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        wall_input.press(100, 20, Button.PRIMARY)
        assert wall_board.is_lost is True

    def test_miss_is_noop(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        assert wall_input.press(300, 300, Button.PRIMARY) is False
        assert wall_input.press(40, 40, Button.SECONDARY) is False
        assert wall_board.first_click_taken is False

    def test_other_buttons_ignored(
        self, wall_input: InputHandler, wall_board: Board
    ) -> None:
        assert wall_input.press(20, 20, 2) is False
        assert all(cell.is_hidden for cell in wall_board.cells())
