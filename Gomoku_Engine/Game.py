"""Turn loop driving a Board with one Player per symbol."""

from typing import NamedTuple, Optional

try:
    from Board import Board
    from engine.errors import OutOfBoundsError
    from engine.win_detection import Winner
except ImportError:
    from Gomoku_Engine.Board import Board
    from Gomoku_Engine.engine.errors import OutOfBoundsError
    from Gomoku_Engine.engine.win_detection import Winner


class GameResult(NamedTuple):
    status: str  # "win", "draw", "disqualified" or "unfinished"
    winner: Optional[Winner] = None
    disqualified: Optional[str] = None


class Game:
    def __init__(self, board: Board, players, logger=print):
        missing = [s for s in board.player_symbols if s not in players]
        if missing:
            raise ValueError(f"no player for symbol(s) {', '.join(missing)}")
        self.board = board
        self.players = players
        self.logger = logger

    def play(self) -> GameResult:
        """Run until a win, a full board, a bad move, or a player with no move left."""
        board = self.board
        while True:
            winner = board.get_winner()
            if winner is not None:
                self.logger(f"Winner: {winner.symbol} {winner.sequence}")
                return GameResult("win", winner=winner)

            if board.is_full():
                self.logger("Result: Draw (board full)")
                return GameResult("draw")

            symbol = board.get_next_move_symbol()
            move = self.players[symbol].next_move(board)
            if move is None:
                self.logger(f"Stopped: no move from {symbol} after {board.move_count} moves")
                return GameResult("unfinished")

            x, y = move
            try:
                placed = board.place_symbol(x, y)
            except OutOfBoundsError as exc:
                self.logger(f"Disqualification: {symbol} - {exc}")
                return GameResult("disqualified", disqualified=symbol)
            if not placed:
                self.logger(f"Disqualification: {symbol} - cell {x}, {y} already occupied")
                return GameResult("disqualified", disqualified=symbol)

            self.logger(f"Move {board.move_count}: {symbol} {move}")
