# Per-slot data holder for the 2x7 board
from __future__ import annotations
from dataclasses import dataclass

PLAYERS = ("player1", "player2")
REGULAR = "regular"
STORE = "store"


@dataclass(eq=False)
class Slot:
    owner: str = "player1"
    kind: str = REGULAR
    index: int = 0       # position on the owner's side, 0..6
    pieces: int = 0

    def is_store(self) -> bool:
        return self.kind == STORE

    def label(self) -> str:
        return f"{self.owner} {self.kind} {self.index}"

    def pieces_string(self) -> str:
        return f"{self.pieces}".rjust(2)
