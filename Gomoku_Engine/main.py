"""Entry point: load settings, build a board, replay moves through Game and report the outcome."""

import logging
from pathlib import Path

import yaml

try:
    from utils.cli import build_parser, parse_args
    from utils.logger import attach_board_logger, log_event
    from Board import Board
    from Game import Game
    from Player import ScriptedPlayer
except ImportError:
    from Gomoku_Engine.utils.cli import build_parser, parse_args
    from Gomoku_Engine.utils.logger import attach_board_logger, log_event
    from Gomoku_Engine.Board import Board
    from Gomoku_Engine.Game import Game
    from Gomoku_Engine.Player import ScriptedPlayer


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULTS = {
    "width": 15,
    "height": 15,
    "win_length": 5,
    "player_symbols": "XO",
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Engine/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML; a missing file means built-in defaults."""
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logging.getLogger(__name__).warning("Settings file %s not found; using defaults", path)
        return {}


def build_board(args, settings):
    def pick(arg_value, key):
        if arg_value is not None:
            return arg_value
        return settings.get(key, DEFAULTS[key])

    return Board(
        width=pick(args.width, "width"),
        height=pick(args.height, "height"),
        win_length=pick(args.win_length, "win_length"),
        player_symbols=symbols_from(pick(args.symbols, "player_symbols")),
    )


def symbols_from(value):
    """A string splits into characters ("XO"); a YAML list is taken element by element."""
    if isinstance(value, str):
        return tuple(value)
    return tuple(str(symbol) for symbol in value)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    settings = load_settings(args.settings)
    try:
        board = build_board(args, settings)
    except ValueError as exc:
        build_parser().error(str(exc))
    attach_board_logger(board)

    # One shared script replays the interleaved sequence for every symbol.
    script = ScriptedPlayer(None, args.moves)
    players = {symbol: script for symbol in board.player_symbols}

    game = Game(board, players, logger=log_event)
    result = game.play()

    if result.status == "win":
        print(f"{result.winner.symbol} wins: {' '.join(f'{x},{y}' for x, y in result.winner.sequence)}")
    elif result.status == "draw":
        print("Draw")
    elif result.status == "disqualified":
        print(f"{result.disqualified} disqualified")
    else:
        print(f"No winner yet; next to move: {board.get_next_move_symbol()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
