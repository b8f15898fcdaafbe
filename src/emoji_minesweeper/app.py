"""
Pygame window loop for Emoji Minesweeper.
"""
import logging
from typing import Optional

import pygame

from .board import Board
from .input import Button, InputHandler
from .renderer import DEFAULT_DISPLAY, DisplayConfig, PygameRenderer, reload_rect

logger = logging.getLogger(__name__)


class MinesweeperApp:
    """
    Owns the window and drives one board.

    Events are drained and the frame is redrawn once per tick while the
    game is in progress. After a win or loss a single final frame is drawn
    and the loop idles until the board is reset or the window closes.
    """

    def __init__(
        self, board: Board, display: DisplayConfig = DEFAULT_DISPLAY
    ) -> None:
        self.board = board
        self.display = display
        self.input = InputHandler(board, display)
        self.window: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.renderer: Optional[PygameRenderer] = None
        self.halt = False
        self._terminal_drawn = False

    def _init_pygame(self) -> None:
        """Open the window sized to the board."""
        pygame.init()
        self.window = pygame.display.set_mode(
            self.display.surface_size(self.board.config)
        )
        pygame.display.set_caption("Minesweeper Emoji")
        self.clock = pygame.time.Clock()
        self.renderer = PygameRenderer(self.window, self.display)

    def reset(self) -> None:
        """Start a new game on the same board."""
        self.board.reset()
        self._terminal_drawn = False
        logger.debug("New game started")

    def on_reload(self, x: int, y: int) -> bool:
        """Check if a pixel position lies on the reload glyph."""
        left, top, width, height = reload_rect(self.board.config, self.display)
        return left < x < left + width and top < y < top + height

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event."""
        if event.type == pygame.QUIT:
            self.halt = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_r:
                self.reset()
            elif event.key == pygame.K_ESCAPE:
                self.halt = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # wheel ticks arrive as buttons 4 and 5
            if event.button == Button.PRIMARY and self.on_reload(*event.pos):
                self.reset()
            elif self.board.is_playing:
                self.input.press(event.pos[0], event.pos[1], event.button)

    def should_draw(self) -> bool:
        """Whether the current tick needs a redraw."""
        if self.board.is_playing:
            return True
        return not self._terminal_drawn

    def draw_frame(self) -> bool:
        """
        Draw the board if this tick needs it.

        Returns:
            True if a frame was drawn.
        """
        if not self.should_draw():
            return False
        self.renderer.draw(self.board)
        if not self.board.is_playing:
            self._terminal_drawn = True
        return True

    def run(self) -> None:
        """Run until the window is closed."""
        self._init_pygame()
        try:
            while not self.halt:
                for event in pygame.event.get():
                    self.handle_event(event)
                if self.draw_frame():
                    pygame.display.flip()
                self.clock.tick(self.display.fps)
        finally:
            self.close()

    def close(self) -> None:
        """Shut pygame down if the window is open."""
        if self.window is not None:
            pygame.quit()
            self.window = None
