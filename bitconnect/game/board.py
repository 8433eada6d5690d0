"""
board.py - Bit-packed board representation for Connect Four

The board is stored column by column in MASK_HEIGHT = HEIGHT + 1 bits per
column, row 0 at the bottom:

  .  .  .  .  .  .  .    <- sentinel row, never set by legal play
  5 12 19 26 33 40 47
  4 11 18 25 32 39 46
  3 10 17 24 31 38 45
  2  9 16 23 30 37 44
  1  8 15 22 29 36 43
  0  7 14 21 28 35 42

Two integers describe a position: `occupied` holds every stone and
`to_move_complement` holds the stones of the player to move. XOR-ing them
gives the stones of the player who just moved.
"""

from typing import Optional

import numpy as np

from bitconnect.utils import WIDTH, HEIGHT, MASK_HEIGHT, Player

# Shifts for the four line directions
VERTICAL = 1
HORIZONTAL = MASK_HEIGHT
DIAGONAL_UP = MASK_HEIGHT + 1    # bottom-left to top-right
DIAGONAL_DOWN = MASK_HEIGHT - 1  # top-left to bottom-right
DIRECTION_SHIFTS = (VERTICAL, HORIZONTAL, DIAGONAL_UP, DIAGONAL_DOWN)


def bottom_mask(column: int) -> int:
    """Bit of the lowest cell of a column."""
    return 1 << (column * MASK_HEIGHT)


def top_mask(column: int) -> int:
    """Bit of the highest playable cell of a column."""
    return bottom_mask(column) << (HEIGHT - 1)


def column_mask(column: int) -> int:
    """All playable bits of a column."""
    return ((1 << HEIGHT) - 1) << (column * MASK_HEIGHT)


def cell_mask(column: int, row: int) -> int:
    return 1 << (column * MASK_HEIGHT + row)


def has_alignment(position: int) -> bool:
    """
    Check a stone set for four in a row.

    For every direction the set is AND-ed with itself shifted by one step,
    which keeps cells starting a pair, then that result is AND-ed with itself
    shifted by two steps, which keeps cells starting a run of four. The empty
    sentinel row stops runs from wrapping between columns.

    Args:
        position: Bitset of one player's stones

    Returns:
        True if any four of the stones are aligned
    """
    for shift in DIRECTION_SHIFTS:
        m = position & (position >> shift)
        if m & (m >> (2 * shift)):
            return True
    return False


class BitBoard:
    """
    Represents a Connect Four board as two bitsets.

    The board trusts its caller: `play` does not check `can_play`, so
    dropping a stone into a full column carries into the neighbouring column.
    """

    WIDTH = WIDTH
    HEIGHT = HEIGHT
    MASK_HEIGHT = MASK_HEIGHT

    __slots__ = ('occupied', 'to_move_complement')

    def __init__(self, occupied: int = 0, to_move_complement: int = 0):
        self.occupied = occupied
        self.to_move_complement = to_move_complement

    def copy(self) -> 'BitBoard':
        """Create an independent copy of the board."""
        return BitBoard(self.occupied, self.to_move_complement)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, BitBoard):
            return NotImplemented
        return (self.occupied == other.occupied
                and self.to_move_complement == other.to_move_complement)

    def __hash__(self):
        return hash((self.occupied, self.to_move_complement))

    def __repr__(self):
        return f"BitBoard(occupied={self.occupied:#x}, to_move_complement={self.to_move_complement:#x})"

    def can_play(self, column: int) -> bool:
        """True if the column holds fewer than HEIGHT stones."""
        return self.occupied & top_mask(column) == 0

    def play(self, column: int) -> bool:
        """
        Drop a stone for the player to move.

        Args:
            column: Column index, must satisfy can_play(column)

        Returns:
            True if the move completes four in a row for its player
        """
        self.to_move_complement ^= self.occupied
        self.occupied |= self.occupied + bottom_mask(column)
        return self.alignment()

    def alignment(self) -> bool:
        """Check whether the player who just moved has four in a row."""
        return has_alignment(self.occupied ^ self.to_move_complement)

    @property
    def current_position(self) -> int:
        """Stones of the player to move."""
        return self.to_move_complement

    @property
    def last_mover_position(self) -> int:
        """Stones of the player who just moved."""
        return self.occupied ^ self.to_move_complement

    @property
    def num_stones(self) -> int:
        return bin(self.occupied).count('1')

    def column_height(self, column: int) -> int:
        return bin(self.occupied & column_mask(column)).count('1')

    def cell(self, column: int, row: int) -> Optional[bool]:
        """
        Look up a single cell.

        Returns:
            None if empty, True if the stone belongs to the player to move,
            False if it belongs to the player who just moved
        """
        bit = cell_mask(column, row)
        if not self.occupied & bit:
            return None
        return bool(self.to_move_complement & bit)

    def to_grid(self, player_to_move: Player) -> np.ndarray:
        """
        Expand the board into a 2D array.

        Args:
            player_to_move: Tag of the player whose stones are in
                `to_move_complement`

        Returns:
            int8 array of shape (HEIGHT, WIDTH), top row first, holding 0 for
            empty cells and the Player value of the owner otherwise
        """
        grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        other = player_to_move.other()
        for col in range(WIDTH):
            for row in range(HEIGHT):
                owner = self.cell(col, row)
                if owner is not None:
                    grid[HEIGHT - 1 - row, col] = (player_to_move if owner else other).value
        return grid
