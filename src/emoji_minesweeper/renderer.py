"""
Renderer for Emoji Minesweeper.

Frames are built as a list of glyph draw commands from a read of the
board state, then blitted onto a pygame surface. Building a frame never
mutates the board.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

import pygame

from .board import Board, BoardConfig
from .cell import Cell


# ============================================================================
# Glyphs and Colours
# ============================================================================

WON = "😄"
LOST = "😵"
HIDDEN = "🔲"
MINE = "💣"
DETONATION = "💥"
FLAG = "🚩"
RELOAD = "🔄"
DIGITS = ("⬜️", "1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣", "6️⃣", "7️⃣", "8️⃣")

BACKGROUND = (255, 255, 255)
TEXT_COLOR = (15, 15, 15)
WARNING_COLOR = (248, 49, 47)

STATUS_TEXT_SIZE = 24
FONT_NAMES = "segoeuiemoji,notocoloremoji,applecoloremoji,arial"


@dataclass
class DisplayConfig:
    """
    Pixel layout of the game window.

    Attributes:
        cell_width: Width of one tile in pixels.
        cell_height: Height of one tile in pixels.
        status_height: Height of the indicator strip below the board.
        fps: Frame rate of the window loop.
    """

    cell_width: int = 40
    cell_height: int = 40
    status_height: int = 40
    fps: int = 30

    def __post_init__(self) -> None:
        """Validate display values after initialization."""
        if min(self.cell_width, self.cell_height,
               self.status_height, self.fps) < 1:
            raise ValueError("Display dimensions must be positive")

    def surface_size(self, config: BoardConfig) -> Tuple[int, int]:
        """Window size for a board of the given configuration."""
        width = config.columns * self.cell_width
        height = config.rows * self.cell_height + self.status_height
        return width, height


DEFAULT_DISPLAY = DisplayConfig()


@dataclass(frozen=True)
class Glyph:
    """A piece of text to draw with its top-left corner at (x, y)."""

    text: str
    x: int
    y: int
    size: int
    color: Tuple[int, int, int] = TEXT_COLOR
    bold: bool = False


# ============================================================================
# Layout
# ============================================================================

def cell_rect(cell: Cell, display: DisplayConfig) -> Tuple[int, int, int, int]:
    """Screen bounds of a cell as (x, y, width, height)."""
    return (
        cell.column * display.cell_width,
        cell.row * display.cell_height,
        display.cell_width,
        display.cell_height,
    )


def reload_rect(
    config: BoardConfig, display: DisplayConfig
) -> Tuple[int, int, int, int]:
    """Screen bounds of the reload control in the status strip."""
    width, _ = display.surface_size(config)
    top = config.rows * display.cell_height
    return (
        (width - STATUS_TEXT_SIZE) // 2,
        top,
        STATUS_TEXT_SIZE + 8,
        display.status_height,
    )


# ============================================================================
# Frame Building
# ============================================================================

def digit_glyphs(board: Board) -> Tuple[str, ...]:
    """Digit glyphs for the current state; zero becomes the face when over."""
    if board.is_won:
        return (WON,) + DIGITS[1:]
    if board.is_lost:
        return (LOST,) + DIGITS[1:]
    return DIGITS


def cell_glyph(cell: Cell, board: Board, digits: Tuple[str, ...]) -> str:
    """Pick the glyph that represents a cell."""
    if cell.is_revealed:
        if cell.is_mine:
            return DETONATION if cell is board.detonated else MINE
        return digits[cell.adjacent_mines]
    if cell.is_flagged:
        return FLAG
    return HIDDEN


def render_frame(board: Board, display: DisplayConfig) -> List[Glyph]:
    """
    Build the draw commands for one frame.

    Args:
        board: Board to draw.
        display: Pixel layout.

    Returns:
        Glyphs for every cell followed by the status indicators.
    """
    digits = digit_glyphs(board)
    tile_size = display.cell_height - 2
    frame = []
    for cell in board.cells():
        x, y, _, _ = cell_rect(cell, display)
        frame.append(Glyph(cell_glyph(cell, board, digits), x, y, tile_size))

    width, _ = display.surface_size(board.config)
    status_y = (
        board.config.rows * display.cell_height
        + (display.status_height - STATUS_TEXT_SIZE) // 2
    )
    flag_color = (
        WARNING_COLOR if board.flagged_count > board.mine_count else TEXT_COLOR
    )
    reload_x, _, _, _ = reload_rect(board.config, display)
    frame.extend([
        Glyph(MINE, 5, status_y, STATUS_TEXT_SIZE),
        Glyph(f"{board.mine_count:02d}", 40, status_y, STATUS_TEXT_SIZE,
              bold=True),
        Glyph(RELOAD, reload_x, status_y, STATUS_TEXT_SIZE),
        Glyph(FLAG, width - 63, status_y, STATUS_TEXT_SIZE),
        Glyph(f"{board.flagged_count:02d}", width - 28, status_y,
              STATUS_TEXT_SIZE, color=flag_color, bold=True),
    ])
    return frame


def render_text(board: Board) -> str:
    """Render the board as lines of emoji with a status line."""
    digits = digit_glyphs(board)
    lines = []
    for row in range(board.config.rows):
        lines.append("".join(
            cell_glyph(board.get_cell(row, col), board, digits)
            for col in range(board.config.columns)
        ))
    lines.append(
        f"{MINE} {board.mine_count:02d}  {FLAG} {board.flagged_count:02d}"
    )
    return "\n".join(lines)


# ============================================================================
# Pygame Output
# ============================================================================

class PygameRenderer:
    """Draws frames onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, display: DisplayConfig) -> None:
        self.surface = surface
        self.display = display
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        """Load a font once per size and weight."""
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(FONT_NAMES, size, bold=bold)
        return self._fonts[key]

    def draw(self, board: Board) -> None:
        """Clear the surface and draw the current frame."""
        self.surface.fill(BACKGROUND)
        for glyph in render_frame(board, self.display):
            label = self._font(glyph.size, glyph.bold).render(
                glyph.text, True, glyph.color
            )
            self.surface.blit(label, (glyph.x, glyph.y))
