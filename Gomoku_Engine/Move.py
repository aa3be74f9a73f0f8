"""A single placed symbol on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    symbol: str

    @property
    def cell(self) -> tuple[int, int]:
        return self.x, self.y
