"""
Unit tests for frame building and text rendering.
"""
import pytest
from emoji_minesweeper import Board, BoardConfig, DisplayConfig, render_frame
from emoji_minesweeper import renderer
from emoji_minesweeper.renderer import render_text


def tile_glyphs(board: Board, display: DisplayConfig):
    return render_frame(board, display)[:board.config.total_cells]


def status_glyphs(board: Board, display: DisplayConfig):
    return render_frame(board, display)[board.config.total_cells:]


class TestDisplayConfig:
    """Test display configuration."""

    def test_surface_size(self, display: DisplayConfig) -> None:
        assert display.surface_size(BoardConfig(10, 10, 15)) == (400, 440)

    def test_non_positive_size_raises_error(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            DisplayConfig(cell_width=0)


class TestTiles:
    """Test per-cell glyph selection."""

    def test_fresh_board_all_hidden(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        tiles = tile_glyphs(wall_board, display)
        assert len(tiles) == 25
        assert all(glyph.text == renderer.HIDDEN for glyph in tiles)

    def test_tiles_at_cell_positions(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        tiles = tile_glyphs(wall_board, display)
        assert (tiles[7].x, tiles[7].y) == (80, 40)
        assert tiles[7].size == 38

    def test_flag_and_digits(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        wall_board.flag(0, 4)
        wall_board.reveal(0, 0)
        tiles = tile_glyphs(wall_board, display)
        assert tiles[0].text == renderer.DIGITS[0]
        assert tiles[1].text == renderer.DIGITS[2]
        assert tiles[6].text == renderer.DIGITS[3]
        assert tiles[4].text == renderer.FLAG
        assert tiles[2].text == renderer.HIDDEN

    def test_loss_shows_detonation_and_face(self, display: DisplayConfig) -> None:
        """The clicked mine detonates; the zero glyph becomes the lost face."""
        board = Board.from_layout(BoardConfig(3, 4, 2), [0, 1])
        board.reveal(0, 0)
        tiles = tile_glyphs(board, display)
        assert tiles[0].text == renderer.DETONATION
        assert tiles[1].text == renderer.MINE
        assert tiles[3].text == renderer.LOST
        assert renderer.DIGITS[0] not in [glyph.text for glyph in tiles]

    def test_win_shows_face(self, display: DisplayConfig) -> None:
        board = Board.from_layout(BoardConfig(1, 4, 1), [0])
        board.reveal(0, 3)
        tiles = tile_glyphs(board, display)
        assert board.is_won is True
        assert tiles[3].text == renderer.WON
        assert tiles[1].text == renderer.DIGITS[1]
        assert tiles[0].text == renderer.MINE

    def test_render_does_not_mutate(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        wall_board.reveal(0, 0)
        before = [(cell.state, cell.is_mine) for cell in wall_board.cells()]
        render_frame(wall_board, display)
        after = [(cell.state, cell.is_mine) for cell in wall_board.cells()]
        assert after == before


class TestStatus:
    """Test status indicators."""

    def test_mine_indicator_is_fixed(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        wall_board.flag(0, 2)
        status = status_glyphs(wall_board, display)
        texts = [glyph.text for glyph in status]
        assert texts == [
            renderer.MINE, "05", renderer.RELOAD, renderer.FLAG, "01",
        ]

    def test_flag_count_normal_color(
        self, tiny_board: Board, display: DisplayConfig
    ) -> None:
        tiny_board.flag(0, 0)
        assert status_glyphs(tiny_board, display)[-1].color == renderer.TEXT_COLOR

    def test_over_flagging_warns(
        self, tiny_board: Board, display: DisplayConfig
    ) -> None:
        tiny_board.flag(0, 0)
        tiny_board.flag(0, 1)
        counter = status_glyphs(tiny_board, display)[-1]
        assert counter.text == "02"
        assert counter.color == renderer.WARNING_COLOR

    def test_status_below_board(
        self, wall_board: Board, display: DisplayConfig
    ) -> None:
        status = status_glyphs(wall_board, display)
        assert all(glyph.y >= 200 for glyph in status)


class TestRenderText:
    """Test emoji text output."""

    def test_text_grid_and_status(self, tiny_board: Board) -> None:
        tiny_board.flag(1, 1)
        lines = render_text(tiny_board).split("\n")
        assert lines[0] == renderer.HIDDEN * 2
        assert lines[1] == renderer.HIDDEN + renderer.FLAG
        assert lines[2] == f"{renderer.MINE} 01  {renderer.FLAG} 01"
