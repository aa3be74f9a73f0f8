"""CLI options for board geometry, players, and the move sequence to replay."""


def parse_move_list(text):
    """Parse "x,y x,y ..." into [(x, y), ...]; raises ValueError on malformed input."""
    moves = []
    for token in text.split():
        try:
            x_str, y_str = token.split(",")
            moves.append((int(x_str), int(y_str)))
        except ValueError as exc:
            raise ValueError(f"Invalid move '{token}'; expected 'x,y'") from exc
    return moves


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="N-in-a-row rules engine (replay a move sequence)")
    parser.add_argument("--width", type=int, help="Board width (default from settings)")
    parser.add_argument("--height", type=int, help="Board height (default from settings)")
    parser.add_argument("--win-length", type=int, help="Run length required to win")
    parser.add_argument("--symbols", help="Player symbols in turn order, e.g. XO")
    parser.add_argument("--moves", default="", help="Moves to replay in play order, e.g. '0,0 0,1 1,0'")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging from the engine")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.moves = parse_move_list(args.moves)
    except ValueError as exc:
        parser.error(str(exc))
    return args
