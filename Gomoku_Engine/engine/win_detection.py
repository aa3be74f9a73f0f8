"""Winning-run detection: memoized scan of every move along four axes."""

from __future__ import annotations

from typing import NamedTuple, Optional

try:
    from Move import Move
except ImportError:
    from Gomoku_Engine.Move import Move


# (name, negative step, positive step); order fixes the tie-break between axes.
AXES = (
    ("horizontal", (-1, 0), (1, 0)),
    ("vertical", (0, -1), (0, 1)),
    ("main_diagonal", (-1, -1), (1, 1)),
    ("anti_diagonal", (-1, 1), (1, -1)),
)


class Winner(NamedTuple):
    symbol: str
    sequence: list[tuple[int, int]]


def _walk(board, move: Move, dx: int, dy: int, axis: str, visited: set) -> tuple[int, int]:
    """Follow same-symbol neighbours from `move` in (dx, dy); return the far end."""
    x, y = move.x, move.y
    neighbour = board.get_position(x + dx, y + dy)
    while neighbour is not None and neighbour.symbol == move.symbol:
        visited.add((neighbour, axis))
        x += dx
        y += dy
        neighbour = board.get_position(x + dx, y + dy)
    return x, y


def run_through(board, move: Move, axis_index: int, visited: set) -> Optional[list[tuple[int, int]]]:
    """
    Return the cells of the run containing `move` along one axis, ordered from
    the negative end to the positive end. Returns None when this move was
    already covered by an earlier walk on the same axis during this pass.
    """
    axis, (ndx, ndy), (pdx, pdy) = AXES[axis_index]
    if (move, axis) in visited:
        return None
    visited.add((move, axis))

    start = _walk(board, move, ndx, ndy, axis, visited)
    end = _walk(board, move, pdx, pdy, axis, visited)

    cells = [start]
    x, y = start
    while (x, y) != end:
        x += pdx
        y += pdy
        cells.append((x, y))
    return cells


def find_winner(board) -> Optional[Winner]:
    """Scan moves in history order; first qualifying run wins."""
    visited: set[tuple[Move, str]] = set()
    for move in board.history:
        for axis_index in range(len(AXES)):
            cells = run_through(board, move, axis_index, visited)
            if cells is not None and len(cells) >= board.win_length:
                return Winner(move.symbol, cells)
    return None
