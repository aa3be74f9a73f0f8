"""Gomoku_Engine package exports."""

from .Move import Move
from .Board import Board
from .Game import Game, GameResult
from .Player import Player, ScriptedPlayer
from .engine.errors import BoardError, OutOfBoundsError, BoardConsistencyError
from .engine.win_detection import Winner

# Subpackages for rules, helpers
from . import engine, utils

__all__ = [
    "Move",
    "Board",
    "Game",
    "GameResult",
    "Player",
    "ScriptedPlayer",
    "BoardError",
    "OutOfBoundsError",
    "BoardConsistencyError",
    "Winner",
    "engine",
    "utils",
]
