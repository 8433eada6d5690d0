"""
bitconnect - Bit-packed Connect Four rule engine

This package provides the authoritative Connect Four rules: a bitboard with
constant-time win detection, the turn and outcome state machine built on it,
and the small game interface a search algorithm drives.
"""

# Version number
__version__ = '0.1.0'
