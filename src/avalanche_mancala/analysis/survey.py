# Greedy-move survey over random positions
from __future__ import annotations
import argparse
import random
import time
from typing import Dict, List, Optional

import pandas as pd
from tqdm import tqdm

from avalanche_mancala.agents.greedy import choose_from_ranking, rank_moves
from avalanche_mancala.engine.board import Board, NUM_SLOTS, SLOTS_PER_SIDE
from avalanche_mancala.engine.errors import RunawaySowingError
from avalanche_mancala.engine.slot import PLAYERS
from avalanche_mancala.io.settings import board_options, configure_logging

REGULAR_POSITIONS = [i for i in range(NUM_SLOTS) if (i + 1) % SLOTS_PER_SIDE]

def random_counts(rng: random.Random, pieces: int) -> List[int]:
    """Scatter `pieces` over the 12 regular slots; both stores start empty."""
    counts = [0] * NUM_SLOTS
    for _ in range(pieces):
        counts[rng.choice(REGULAR_POSITIONS)] += 1
    return counts

def survey_position(board: Board, player: str, workers: Optional[int] = None) -> Dict:
    start = time.time()
    row = {
        "Player": player,
        "Counts": " ".join(str(c) for c in board.counts()),
        "Candidates": len(board.legal_moves(player)),
        "Move": None,
        "Label": None,
        "Best_Score": board.score(player),
        "Error": None,
    }
    try:
        ranking = rank_moves(board, player, workers=workers)
    except RunawaySowingError as e:
        row["Error"] = str(e)
    else:
        move = choose_from_ranking(ranking, board.score(player))
        if move is not None:
            row["Move"] = move
            row["Label"] = board.label(move)
            row["Best_Score"] = dict(ranking)[move]
    row["Time_Seconds"] = round(time.time() - start, 4)
    return row

def run_survey(num_boards: int = 100, seed: int = 0, pieces: int = 24,
               workers: Optional[int] = None, options: Optional[Dict] = None) -> pd.DataFrame:
    rng = random.Random(seed)
    options = board_options() if options is None else options
    results = []
    for board_id in tqdm(range(num_boards), desc="Positions", leave=False):
        counts = random_counts(rng, pieces)
        for player in PLAYERS:
            board = Board(**options)
            board.populate(counts)
            row = survey_position(board, player, workers=workers)
            row["Board"] = board_id
            results.append(row)
    return pd.DataFrame(results)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Survey greedy moves over random boards")
    parser.add_argument("--boards", type=int, default=100)
    parser.add_argument("--pieces", type=int, default=24)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--out", default="survey_results.csv")
    args = parser.parse_args()

    configure_logging()
    df = run_survey(args.boards, seed=args.seed, pieces=args.pieces, workers=args.workers)
    df.to_csv(args.out, index=False)

    print("\nSummary Statistics:")
    print(df.groupby("Player")["Best_Score"].describe())
