# Greedy one-ply agent (BOARD-BASED, free turns resolved by the board itself)
from __future__ import annotations
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

from avalanche_mancala.engine.board import Board

# ------------------------- utilities -------------------------

def _score_candidate(args: Tuple[Board, int, str]) -> int:
    board, position, player = args
    return board.score_after(position, player)

# ------------------------- ranking -------------------------

def rank_moves(board: Board, player: str, workers: Optional[int] = None) -> List[Tuple[int, int]]:
    """
    (position, resulting score) for every legal move of `player`, ascending by position.
    With workers > 1 candidates are scored in a process pool; each one runs on its
    own clone so the result does not depend on scheduling.
    """
    board.score(player)  # unknown player -> SlotLookupError
    moves = board.legal_moves(player)
    if not workers or workers <= 1 or len(moves) <= 1:
        return [(mv, board.score_after(mv, player)) for mv in moves]

    with ProcessPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order
        scores = list(executor.map(_score_candidate, [(board, mv, player) for mv in moves]))
    return list(zip(moves, scores))

def choose_from_ranking(ranking: List[Tuple[int, int]], baseline: int) -> Optional[int]:
    """Same overwrite-on-tie rule as Board.find_best_move."""
    best, choice = baseline, None
    for position, score in ranking:
        if score >= best:
            best, choice = score, position
    return choice

# Public helpers -------------------------------------------------------

def choose_move(board: Board, player: str, workers: Optional[int] = None) -> Optional[int]:
    """Best move for `player`; identical to board.find_best_move(player) for any worker count."""
    return choose_from_ranking(rank_moves(board, player, workers), board.score(player))
