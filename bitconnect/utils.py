"""
utils.py - Constants, enumerations and rendering helpers for bitconnect

This module provides the board geometry, the player and outcome enumerations,
and the canonical ASCII rendering shared by the engine and the CLI.
"""

from enum import Enum, auto

# Board geometry
WIDTH = 7
HEIGHT = 6
MASK_HEIGHT = HEIGHT + 1  # one sentinel bit above every column
NUM_CELLS = WIDTH * HEIGHT

# Glyph pair used by the renderer; the first glyph marks the player to move
# when that player is Player.ONE.
GLYPHS = ('X', '0')
EMPTY_GLYPH = ' '


class Player(Enum):
    """The two symmetric player tags."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        return Player(3 - self.value)

    def __str__(self):
        return GLYPHS[self.value - 1]


class Outcome(Enum):
    """Absolute game outcome cached by the engine."""
    UNFINISHED = auto()
    WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != Outcome.UNFINISHED


class RelativeOutcome(Enum):
    """Game outcome seen from one player's side."""
    UNFINISHED = auto()
    WIN = auto()
    LOSE = auto()
    DRAW = auto()


def glyphs_for(player_to_move: Player):
    """
    Get the glyph pair for a position.

    Args:
        player_to_move: The player whose turn it is

    Returns:
        (c1, c2) where c1 marks the stones of the player to move
    """
    if player_to_move == Player.ONE:
        return GLYPHS
    return GLYPHS[1], GLYPHS[0]


def render_board_ascii(occupied: int, to_move_stones: int, player_to_move: Player) -> str:
    """
    Render a bit-packed position as ASCII art.

    The header numbers columns from 1, rows are drawn top to bottom between
    '|' delimiters, and the footer is a dashed line followed by the glyph of
    the player to move.

    Args:
        occupied: Bitset of all occupied cells
        to_move_stones: Bitset of the stones owned by the player to move
        player_to_move: The player whose turn it is

    Returns:
        ASCII representation of the board
    """
    c1, c2 = glyphs_for(player_to_move)
    result = ''.join(' ' + str(col + 1) for col in range(WIDTH))

    for row in range(HEIGHT - 1, -1, -1):
        line = '\n|'
        for col in range(WIDTH):
            cell = 1 << (row + col * MASK_HEIGHT)
            if not occupied & cell:
                line += EMPTY_GLYPH
            elif to_move_stones & cell:
                line += c1
            else:
                line += c2
            line += '|'
        result += line

    result += '\n' + '-' * (2 * WIDTH + 1) + ' ' + c1
    return result
