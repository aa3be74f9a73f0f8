"""Player interface for anything that feeds moves into a board."""


class Player:
    def __init__(self, symbol):
        self.symbol = symbol

    def next_move(self, board):
        """Return (x, y) for the next move, or None when the player has nothing to play."""
        raise NotImplementedError


class ScriptedPlayer(Player):
    """Plays a fixed move sequence; can be shared by several symbols to replay a game."""

    def __init__(self, symbol, moves):
        super().__init__(symbol)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            return None
        mv = self._moves[self._idx]
        self._idx += 1
        return mv
