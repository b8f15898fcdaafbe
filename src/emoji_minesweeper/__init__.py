"""
Emoji Minesweeper.

Provides board logic, pointer input handling, emoji rendering and a
pygame window for playing Minesweeper.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, DEFAULT_BOARD
from .renderer import (
    DisplayConfig,
    DEFAULT_DISPLAY,
    Glyph,
    PygameRenderer,
    render_frame,
    render_text,
)
from .input import Button, InputHandler

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_BOARD",
    "DisplayConfig",
    "DEFAULT_DISPLAY",
    "Glyph",
    "PygameRenderer",
    "render_frame",
    "render_text",
    "Button",
    "InputHandler",
]
