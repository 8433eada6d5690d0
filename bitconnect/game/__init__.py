"""
bitconnect.game - Core game mechanics for Connect Four

This package contains the bitboard representation, the game engine and
its reinforcement-learning environment.
"""

from bitconnect.game.board import BitBoard
from bitconnect.game.rules import Game, GameEngine, ConnectFourEnv

__all__ = ['BitBoard', 'Game', 'GameEngine', 'ConnectFourEnv']
