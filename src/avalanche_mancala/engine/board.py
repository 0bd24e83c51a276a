# Avalanche Mancala board engine
# Flat 14-slot layout:
#   0..5  player1 regular   6  player1 store
#   7..12 player2 regular   13 player2 store
# Positions (ints) are the slot identity shared between a board and its clones.

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from avalanche_mancala.engine.errors import (
    ConfigurationError,
    RunawaySowingError,
    SlotLookupError,
)
from avalanche_mancala.engine.slot import PLAYERS, REGULAR, STORE, Slot

logger = logging.getLogger(__name__)

NUM_SLOTS = 14
SLOTS_PER_SIDE = 7
STANDARD_LAYOUT = [4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0]
DEFAULT_MAX_LAPS = 10_000


@dataclass
class SowResult:
    last_position: Optional[int]   # None when the start slot was empty
    laps: int                      # 1 + number of avalanche re-sows
    free_turn: bool = False
    follow_up: Optional[int] = None  # move picked by the free-turn search


class Board:
    def __init__(
        self,
        chain_free_turns: bool = False,
        max_clone_depth: Optional[int] = None,
        max_laps: Optional[int] = DEFAULT_MAX_LAPS,
    ):
        self.slots: List[Slot] = []
        self.clone_depth = 0
        self.chain_free_turns = chain_free_turns
        self.max_clone_depth = max_clone_depth
        self.max_laps = max_laps

        for owner in PLAYERS:
            for i in range(SLOTS_PER_SIDE):
                kind = STORE if i == SLOTS_PER_SIDE - 1 else REGULAR
                self.slots.append(Slot(owner=owner, kind=kind, index=i))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def populate(self, counts: Sequence[int]) -> None:
        """
        Set every slot's piece count, in position order.
        Input is fully validated first; a rejected call leaves the board as it was.
        """
        counts = list(counts)
        if len(counts) != NUM_SLOTS:
            raise ConfigurationError(
                f"Invalid counts to set board: expected {NUM_SLOTS} values, got {len(counts)}"
            )
        for i, c in enumerate(counts):
            if isinstance(c, bool) or not isinstance(c, int) or c < 0:
                raise ConfigurationError(f"Invalid piece count {c!r} at position {i}")

        for slot in self.slots:
            slot.pieces = 0
        for slot, c in zip(self.slots, counts):
            slot.pieces = c

    def clone(self) -> "Board":
        board = Board(
            chain_free_turns=self.chain_free_turns,
            max_clone_depth=self.max_clone_depth,
            max_laps=self.max_laps,
        )
        board.populate(self.counts())
        board.clone_depth = self.clone_depth + 1
        return board

    def counts(self) -> List[int]:
        return [s.pieces for s in self.slots]

    def total_pieces(self) -> int:
        return sum(s.pieces for s in self.slots)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def slot(self, position: int) -> Slot:
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position < NUM_SLOTS:
            raise SlotLookupError(f"No slot at position {position!r}")
        return self.slots[position]

    def score(self, player: str) -> int:
        store = next((s for s in self.slots if s.owner == player and s.is_store()), None)
        if store is None:
            raise SlotLookupError(f"Error getting score for player {player!r}")
        return store.pieces

    def slot_position(self, slot: Slot) -> int:
        for i, s in enumerate(self.slots):
            if s is slot:
                return i
        raise SlotLookupError("Error finding slot position: slot belongs to another board")

    def label(self, position: int) -> str:
        return self.slot(position).label()

    def legal_moves(self, player: str) -> List[int]:
        return [
            i for i, s in enumerate(self.slots)
            if s.owner == player and s.kind == REGULAR and s.pieces > 0
        ]

    def has_moves(self, player: str) -> bool:
        return any(s.owner == player and s.kind == REGULAR and s.pieces for s in self.slots)

    # ------------------------------------------------------------------
    # Sowing
    # ------------------------------------------------------------------

    def sow(self, start: Union[int, Slot], player: str) -> SowResult:
        """
        Pick up every piece of `start` and drop one per following slot,
        skipping the opponent's store.

        Ending in a non-store slot that now holds more than one piece is an
        avalanche: that slot is picked up and sown again. Ending in the mover's
        own store while the mover still has pieces earns a free turn, which runs
        the best-move search on this board (and applies its answer when
        `chain_free_turns` is set).
        """
        if isinstance(start, Slot):
            position = self.slot_position(start)
        else:
            position = start
            self.slot(position)  # range check
        if not self.slots[position].pieces:
            return SowResult(last_position=None, laps=0)

        laps = 0
        while True:
            laps += 1
            if self.max_laps is not None and laps > self.max_laps:
                raise RunawaySowingError(
                    f"Avalanche from position {position} exceeded {self.max_laps} laps"
                )

            slot = self.slots[position]
            pieces = slot.pieces
            slot.pieces = 0

            while pieces:
                position = (position + 1) % NUM_SLOTS
                slot = self.slots[position]
                # opponent's store is passed over
                if slot.kind == REGULAR or slot.owner == player:
                    slot.pieces += 1
                    pieces -= 1

            if slot.is_store() and slot.owner == player and self.has_moves(player):
                logger.debug("free turn for %s at clone depth %d", player, self.clone_depth)
                follow_up = self._free_turn(player)
                return SowResult(position, laps, free_turn=True, follow_up=follow_up)

            if not slot.is_store() and slot.pieces > 1:
                logger.debug("avalanche at %s (%d pieces)", slot.label(), slot.pieces)
                continue

            return SowResult(position, laps)

    def _free_turn(self, player: str) -> Optional[int]:
        follow_up = self.find_best_move(player)
        if self.chain_free_turns and follow_up is not None:
            self.sow(follow_up, player)
        return follow_up

    # ------------------------------------------------------------------
    # Best-move search
    # ------------------------------------------------------------------

    def score_after(self, position: int, player: str) -> int:
        """Score `player` would hold after sowing `position` on a clone of this board."""
        board = self.clone()
        board.sow(position, player)
        return board.score(player)

    def find_best_move(self, player: str) -> Optional[int]:
        """
        Position of the move that leaves `player` with the highest store count.
        Candidates are tried in ascending position order and ties go to the
        later one. Returns None when the player has no legal move.
        """
        best_score = self.score(player)
        candidates = self.legal_moves(player)

        if self.max_clone_depth is not None and self.clone_depth > self.max_clone_depth:
            logger.warning(
                "clone depth %d exceeds %d, skipping search for %s",
                self.clone_depth, self.max_clone_depth, player,
            )
            return candidates[0] if candidates else None

        choice = None
        for position in candidates:
            score = self.score_after(position, player)
            if score >= best_score:
                best_score, choice = score, position
        return choice

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render(self) -> str:
        cells = [s.pieces_string() for s in self.slots]
        return " ".join(cells[:SLOTS_PER_SIDE]) + "\n   " + " ".join(cells[SLOTS_PER_SIDE:])

    def __str__(self) -> str:
        return self.render()
