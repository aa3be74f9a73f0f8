"""Board state, move history, turn rotation and win checking for N-in-a-row games."""

import logging

try:
    from Move import Move
    from engine import win_detection
    from engine.errors import BoardConsistencyError, OutOfBoundsError
    from engine.events import EventEmitter
except ImportError:
    from Gomoku_Engine.Move import Move
    from Gomoku_Engine.engine import win_detection
    from Gomoku_Engine.engine.errors import BoardConsistencyError, OutOfBoundsError
    from Gomoku_Engine.engine.events import EventEmitter


LOGGER = logging.getLogger(__name__)


class Board:
    def __init__(self, width, height, win_length=5, player_symbols="XO"):
        _check_size(width, height)
        _check_win_length(win_length)
        # tuple() splits a string into its characters: "XO" -> ("X", "O")
        symbols = tuple(player_symbols)
        if len(symbols) < 2:
            raise ValueError("at least two player symbols are required")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"player symbols must be distinct, got {symbols!r}")

        self.width = width
        self.height = height
        self.win_length = win_length
        self.player_symbols = symbols
        self._history = []
        self._occupancy = {}
        self.events = EventEmitter()

    # --- observers ---

    def on(self, event, callback):
        return self.events.on(event, callback)

    def off(self, event, callback=None):
        self.events.off(event, callback)

    # --- state ---

    @property
    def history(self):
        return tuple(self._history)

    @property
    def move_count(self):
        return len(self._history)

    @property
    def current_player_index(self):
        return len(self._history) % len(self.player_symbols)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and (x, y) not in self._occupancy

    def is_full(self):
        return len(self._occupancy) >= self.width * self.height

    # --- configuration ---

    def resize(self, width, height):
        """Change board dimensions. Drops every move on the board."""
        _check_size(width, height)
        self.clear()
        self.width = width
        self.height = height

    def set_win_condition(self, win_length):
        """Set the run length required to win; callers must re-query get_winner()."""
        _check_win_length(win_length)
        self.win_length = win_length
        self.events.fire("win_length_changed", win_length)
        self.events.fire("change")

    # --- moves ---

    def play(self, x, y):
        """
        Interactive entry point. Playing on the most recent move takes it back;
        anything else is a regular placement for the current player.
        Returns True if the board changed.
        """
        existing = self.get_position(x, y)
        if existing is not None and existing is self.get_last_played_position():
            self.undo_last_move()
            return True
        return self.place_symbol(x, y)

    def place_symbol(self, x, y, symbol=None):
        """
        Place a symbol at (x, y). Returns False if the cell is already taken.
        Raises OutOfBoundsError off the board.
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

        if self.get_position(x, y) is not None:
            LOGGER.debug("Rejected move at (%d, %d): cell occupied", x, y)
            return False

        if symbol is None:
            symbol = self.get_next_move_symbol()
        elif symbol not in self.player_symbols:
            raise ValueError(f"unknown symbol {symbol!r}; expected one of {self.player_symbols}")

        move = Move(x, y, symbol)
        if (x, y) in self._occupancy:
            raise BoardConsistencyError(f"Position {x}, {y} is already occupied")
        self._occupancy[(x, y)] = move
        self._history.append(move)

        self.events.fire("play", move)
        self.events.fire("change")
        return True

    def undo_last_move(self):
        """Take back the most recent move and return it (None on an empty board)."""
        last = self.get_last_played_position()
        if last is None:
            return None

        if self._occupancy.pop(last.cell, None) is not last:
            raise BoardConsistencyError(f"History and occupancy disagree at {last.x}, {last.y}")
        self._history.pop()
        LOGGER.debug("Undid %s at (%d, %d)", last.symbol, last.x, last.y)

        self.events.fire("remove", last)
        self.events.fire("change")
        return last

    def clear(self):
        self._history = []
        self._occupancy = {}
        LOGGER.debug("Board cleared")
        self.events.fire("clear")
        self.events.fire("change")

    # --- queries ---

    def get_position(self, x, y):
        return self._occupancy.get((x, y))

    def get_last_played_position(self):
        if not self._history:
            return None
        return self._history[-1]

    def get_next_move_symbol(self):
        return self.player_symbols[self.current_player_index]

    def get_winner(self):
        """Return Winner(symbol, sequence) for the first winning run found, else None."""
        return win_detection.find_winner(self)


def _check_size(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"board dimensions must be positive, got {width}x{height}")


def _check_win_length(win_length):
    if win_length < 2:
        raise ValueError(f"win length must be at least 2, got {win_length}")
