"""Lightweight logging utilities for matches and board events."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def attach_board_logger(board, log=log_event):
    """Report placements, take-backs and resets of `board` through `log`."""
    board.on("play", lambda move: log(f"Placed {move.symbol} at ({move.x}, {move.y})"))
    board.on("remove", lambda move: log(f"Removed {move.symbol} at ({move.x}, {move.y})"))
    board.on("clear", lambda: log("Board cleared"))
    board.on("win_length_changed", lambda n: log(f"Win length set to {n}"))
