"""Exceptions raised by the board engine."""


class BoardError(Exception):
    """Base class for board engine errors."""


class OutOfBoundsError(BoardError, ValueError):
    """Coordinates fall outside the board."""

    def __init__(self, x, y, width, height):
        super().__init__(f"Invalid position {x}, {y} (board is {width}x{height})")
        self.x = x
        self.y = y


class BoardConsistencyError(BoardError, RuntimeError):
    """Occupancy and history disagree. Indicates a bug in the engine itself."""
