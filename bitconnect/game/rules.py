"""
rules.py - Game state management and Gymnasium environment for Connect Four

This module provides:
1. The Game protocol a search algorithm is written against
2. GameEngine, the turn/outcome state machine over a BitBoard
3. A gymnasium-compatible environment wrapping GameEngine
"""

from typing import Any, Dict, List, Optional, Protocol, Tuple, TypeVar

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from bitconnect.debug import debug
from bitconnect.game.board import BitBoard
from bitconnect.utils import (WIDTH, HEIGHT, NUM_CELLS, Player, Outcome,
                              RelativeOutcome, render_board_ascii)

G = TypeVar('G', bound='Game')


class Game(Protocol):
    """
    Capabilities a two-player, perfect-information, finite-action game
    offers to a search algorithm.

    Implementations must be cheap to copy; a search explores futures by
    copying the game and playing moves on the copy.
    """

    def legal_actions(self) -> List[int]:
        ...

    def play(self, action: int) -> None:
        ...

    def player_to_move(self) -> Player:
        ...

    def relative_outcome(self, player: Player) -> RelativeOutcome:
        ...

    def copy(self: G) -> G:
        ...


class GameEngine:
    """
    Connect Four rules on top of a BitBoard.

    Tracks whose turn it is and how many moves were played, and caches the
    outcome after each move. Once the outcome is a win or a draw the engine
    must not be played further; like BitBoard.play, play() does not check.
    """

    __slots__ = ('_board', '_player', '_moves', '_outcome', '_winner')

    def __init__(self):
        self._board = BitBoard()
        self._player = Player.ONE
        self._moves = 0
        self._outcome = Outcome.UNFINISHED
        self._winner: Optional[Player] = None

    def copy(self) -> 'GameEngine':
        """Create an independent copy of the game."""
        new_game = GameEngine.__new__(GameEngine)
        new_game._board = self._board.copy()
        new_game._player = self._player
        new_game._moves = self._moves
        new_game._outcome = self._outcome
        new_game._winner = self._winner
        return new_game

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def board(self) -> BitBoard:
        return self._board

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    def is_terminal(self) -> bool:
        return self._outcome.is_game_over()

    def can_play(self, action: int) -> bool:
        return self._board.can_play(action)

    def legal_actions(self) -> List[int]:
        """Columns that can take another stone, in ascending order."""
        return [col for col in range(WIDTH) if self._board.can_play(col)]

    def play(self, action: int) -> None:
        """
        Drop a stone for the player to move and update the outcome.

        Args:
            action: Column index; can_play(action) must be true and the game
                must not be over
        """
        won = self._board.play(action)
        self._moves += 1
        mover = self._player
        self._player = mover.other()

        if won and self._outcome == Outcome.UNFINISHED:
            self._outcome = Outcome.WIN
            self._winner = mover
            debug.debug(f"Player {mover.name} wins with column {action} on move {self._moves}", "engine")
        elif self._moves >= NUM_CELLS:
            self._outcome = Outcome.DRAW
            debug.debug(f"Board full after {self._moves} moves, draw", "engine")

    def player_to_move(self) -> Player:
        return self._player

    def relative_outcome(self, player: Player) -> RelativeOutcome:
        """
        Outcome from the point of view of `player`.

        Args:
            player: The viewing player

        Returns:
            WIN or LOSE if the game was won, otherwise DRAW or UNFINISHED
        """
        if self._outcome == Outcome.UNFINISHED:
            return RelativeOutcome.UNFINISHED
        if self._outcome == Outcome.DRAW:
            return RelativeOutcome.DRAW
        if self._winner == player:
            return RelativeOutcome.WIN
        return RelativeOutcome.LOSE

    def render(self) -> str:
        return render_board_ascii(self._board.occupied,
                                  self._board.current_position,
                                  self._player)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameEngine(moves={self._moves}, player={self._player.name}, "
                f"outcome={self._outcome.name}, winner={self._winner and self._winner.name})")


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same env; the reward of each step is given
    to the player who made the move.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 reward_win: float = 1.0,
                 reward_draw: float = 0.1,
                 reward_invalid_move: float = -0.5,
                 reward_step: float = -0.01):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: One of metadata['render_modes'] or None
            reward_win: Reward for the move that wins the game
            reward_draw: Reward for the move that fills the board
            reward_invalid_move: Reward for a rejected action
            reward_step: Reward for any other move
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(WIDTH)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(HEIGHT, WIDTH), dtype=np.int8
        )

        self.game = GameEngine()
        self.render_mode = render_mode

        self.reward_win = reward_win
        self.reward_draw = reward_draw
        self.reward_invalid_move = reward_invalid_move
        self.reward_step = reward_step

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        self.game = GameEngine()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play one move for the player to move.

        Args:
            action: Column to drop a stone in (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        action = int(action)
        if not self.is_valid_action(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        mover = self.game.player_to_move()
        self.game.play(action)
        result = self.game.relative_outcome(mover)

        if result == RelativeOutcome.WIN:
            debug.info(f"Game over: player {mover.name} wins", "env")
            reward = self.reward_win
        elif result == RelativeOutcome.DRAW:
            debug.info("Game over: draw", "env")
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, self.game.is_terminal(), False, self._get_info()

    def is_valid_action(self, action: int) -> bool:
        return (0 <= action < WIDTH
                and not self.game.is_terminal()
                and self.game.can_play(action))

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.board.to_grid(self.game.player_to_move())

    def _get_info(self) -> Dict[str, Any]:
        winner = self.game.winner
        return {
            'legal_actions': self.game.legal_actions(),
            'player_to_move': self.game.player_to_move().value,
            'outcome': self.game.outcome.name,
            'winner': winner.value if winner else None,
            'moves': self.game.moves,
        }
