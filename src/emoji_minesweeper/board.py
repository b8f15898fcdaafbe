"""
Board module for Emoji Minesweeper.

Implements the game board with mine placement, cell revealing,
and game state management. A Board is a complete game session: it owns
the grid, the counters and the random source, so independent games never
share state.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Deque, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellState

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 10
    columns: int = 10
    num_mines: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 1:
            raise ValueError("Number of mines must be positive")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.columns


DEFAULT_BOARD = BoardConfig(10, 10, 15)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    first_click_safety: bool = True
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _first_click: bool = True
    _flagged_count: int = 0
    _detonated: Optional[Cell] = None
    mine_ids: InitVar[Optional[Iterable[int]]] = None

    def __post_init__(self, mine_ids: Optional[Iterable[int]]) -> None:
        """Generate the grid after dataclass creation."""
        self._generate(mine_ids)

    @classmethod
    def from_layout(
        cls,
        config: BoardConfig,
        mine_ids: Iterable[int],
        first_click_safety: bool = False,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board with mines at known identifiers.

        Args:
            config: Board configuration; num_mines must match the layout.
            mine_ids: Identifiers of the cells holding mines.
            first_click_safety: Whether the first reveal may move a mine.
            rng: Random source used for relocation and later resets.

        Returns:
            A board in playing state with the given layout.
        """
        return cls(
            config,
            rng=rng or random.Random(),
            first_click_safety=first_click_safety,
            mine_ids=mine_ids,
        )

    # ========================================================================
    # Board Generation (Low-level)
    # ========================================================================

    def _generate(self, mine_ids: Optional[Iterable[int]] = None) -> None:
        """
        Build a fresh grid, place mines and compute counts.

        Args:
            mine_ids: Fixed mine layout; drawn at random when omitted.
        """
        self._init_grid()
        if mine_ids is None:
            chosen = self._allocate_mine_ids()
            source = "Generated"
        else:
            chosen = self._check_layout(set(mine_ids))
            source = "Loaded"
        for identifier in chosen:
            self._cell_by_id(identifier).is_mine = True
        self._calculate_adjacent_mines()
        self._game_state = GameState.PLAYING
        self._first_click = True
        self._flagged_count = 0
        self._detonated = None
        logger.debug(
            "%s %dx%d board with mines at %s",
            source, self.config.rows, self.config.columns, sorted(chosen),
        )

    def _init_grid(self) -> None:
        """Create the grid, numbering cells in row-major order."""
        columns = self.config.columns
        self._grid = [
            [Cell(row, col, row * columns + col) for col in range(columns)]
            for row in range(self.config.rows)
        ]

    def _allocate_mine_ids(self) -> Set[int]:
        """
        Choose mine identifiers by rejection sampling.

        Identifiers are drawn from [1, total - 1], so cell 0 never
        receives a mine at generation time.
        """
        last_id = self.config.total_cells - 1
        chosen: Set[int] = set()
        while len(chosen) < self.config.num_mines:
            target = self.rng.randint(1, last_id)
            if target not in chosen:
                chosen.add(target)
        return chosen

    def _check_layout(self, mine_ids: Set[int]) -> Set[int]:
        """Validate a fixed mine layout against the configuration."""
        total = self.config.total_cells
        if len(mine_ids) != self.config.num_mines:
            raise ValueError(
                f"Layout has {len(mine_ids)} mines, "
                f"config expects {self.config.num_mines}"
            )
        if any(not 0 <= identifier < total for identifier in mine_ids):
            raise ValueError(f"Mine identifiers must be in [0, {total})")
        return mine_ids

    def _calculate_adjacent_mines(self) -> None:
        """
        Calculate adjacent mine counts for all cells.

        Sums the eight shifted copies of the zero-padded mine grid; the
        unshifted copy is skipped so a mine never counts itself.
        """
        rows, columns = self.config.rows, self.config.columns
        padded = np.pad(self.mine_grid().astype(np.int8), 1)
        counts = np.zeros((rows, columns), dtype=np.int8)
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                counts += padded[
                    1 + delta_row:1 + delta_row + rows,
                    1 + delta_col:1 + delta_col + columns,
                ]
        for cell in self.cells():
            cell.adjacent_mines = int(counts[cell.row, cell.column])

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors, center excluded.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _cell_by_id(self, identifier: int) -> Cell:
        """Look up a cell by its row-major identifier."""
        row, col = divmod(identifier, self.config.columns)
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first reveal, a mine under the target is moved elsewhere.
        If cell is empty (0 adjacent mines), reveals neighbors transitively.
        If cell is a mine, game is lost.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if reveal was successful, False otherwise.
        """
        if not self._can_reveal(row, col):
            return False

        cell = self._grid[row][col]
        if self._first_click:
            self._handle_first_click(cell)

        if cell.is_mine:
            self._lose(cell)
            return True

        self._cascade(cell)
        self._check_win_condition()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        cell = self._grid[row][col]
        return cell.state == CellState.HIDDEN

    def _handle_first_click(self, cell: Cell) -> None:
        """Move a mine away from the first revealed cell."""
        self._first_click = False
        if self.first_click_safety and cell.is_mine:
            self._relocate_mine(cell)
            self._calculate_adjacent_mines()

    def _relocate_mine(self, cell: Cell) -> None:
        """Move the mine in cell to a random other unmined cell."""
        cell.is_mine = False
        total = self.config.total_cells
        while True:
            target = self._cell_by_id(self.rng.randrange(total))
            if target is not cell and not target.is_mine:
                target.is_mine = True
                break
        logger.debug(
            "Moved mine from cell %d to cell %d",
            cell.identifier, target.identifier,
        )

    def _cascade(self, start: Cell) -> None:
        """
        Reveal start and flood outward from zero-count cells.

        Every cell is revealed before it is queued, so each cell enters
        the queue at most once.
        """
        start.reveal()
        queue: Deque[Cell] = deque([start])
        while queue:
            cell = queue.popleft()
            if cell.adjacent_mines != 0:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(
                cell.row, cell.column
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.is_revealed:
                    self._reveal_one(neighbor)
                    queue.append(neighbor)

    def _reveal_one(self, cell: Cell) -> None:
        """Reveal a cascaded cell, uncounting any flag it carried."""
        if cell.force_reveal():
            self._flagged_count -= 1

    def _reveal_all(self) -> None:
        """Open every cell at the end of a game."""
        for cell in self.cells():
            cell.force_reveal()

    def _lose(self, cell: Cell) -> None:
        """End the game on a detonated mine."""
        self._detonated = cell
        self._game_state = GameState.LOST
        self._reveal_all()
        logger.info("Game lost on cell %d", cell.identifier)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self.hidden_safe_count == 0:
            self._game_state = GameState.WON
            self._reveal_all()
            logger.info("Game won")

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flagged_count += 1 if cell.is_flagged else -1
        return True

    def reset(self) -> None:
        """Discard all state and generate a new game."""
        self._generate()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def first_click_taken(self) -> bool:
        return not self._first_click

    @property
    def flagged_count(self) -> int:
        """Number of cells currently flagged."""
        return self._flagged_count

    @property
    def mine_count(self) -> int:
        """Configured number of mines."""
        return self.config.num_mines

    @property
    def detonated(self) -> Optional[Cell]:
        """The mine that ended the game, if any."""
        return self._detonated

    @property
    def hidden_safe_count(self) -> int:
        """Number of unmined cells not yet revealed."""
        return sum(
            1 for cell in self.cells()
            if not cell.is_mine and not cell.is_revealed
        )

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in identifier order."""
        for grid_row in self._grid:
            yield from grid_row

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_grid(self) -> np.ndarray:
        """
        Get mine positions as a boolean array.

        Returns:
            2D numpy array of shape (rows, columns), True where mined.
        """
        grid = np.zeros((self.config.rows, self.config.columns), dtype=bool)
        for cell in self.cells():
            grid[cell.row, cell.column] = cell.is_mine
        return grid
