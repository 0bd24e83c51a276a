"""
Command line entry point: seed a board and print the move chosen for a player.

    avalanche-mancala                                  # standard opening, player1
    avalanche-mancala --player player2 --counts 0 0 5 0 0 1 0 0 0 0 0 0 0 0
    avalanche-mancala --rank                           # show every candidate score
"""
import argparse
import sys
from typing import List, Optional

from avalanche_mancala.agents.greedy import choose_from_ranking, rank_moves
from avalanche_mancala.engine.board import Board, STANDARD_LAYOUT
from avalanche_mancala.engine.errors import MancalaError
from avalanche_mancala.engine.slot import PLAYERS
from avalanche_mancala.io.settings import board_options, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avalanche-mancala",
        description="Pick the greedy best move on an avalanche Mancala board.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--player", choices=PLAYERS, default="player1")
    parser.add_argument(
        "--counts", type=int, nargs="+", default=None, metavar="N",
        help="14 piece counts in position order (default: standard opening)",
    )
    parser.add_argument("--chain-free-turns", action="store_true", default=None,
                        help="apply the follow-up move found on a free turn")
    parser.add_argument("--max-clone-depth", type=int, default=None,
                        help="stop searching below this clone depth")
    parser.add_argument("--rank", action="store_true", help="print every candidate move")
    parser.add_argument("--workers", type=int, default=None,
                        help="score candidates in a process pool (with --rank)")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        options = board_options()
        if args.chain_free_turns is not None:
            options["chain_free_turns"] = True
        if args.max_clone_depth is not None:
            options["max_clone_depth"] = args.max_clone_depth

        board = Board(**options)
        board.populate(args.counts if args.counts is not None else STANDARD_LAYOUT)
        print(board.render())

        if args.rank:
            ranking = rank_moves(board, args.player, workers=args.workers)
            for position, score in ranking:
                print(f"  {board.label(position)}: {score}")
            move = choose_from_ranking(ranking, board.score(args.player))
        else:
            move = board.find_best_move(args.player)
    except MancalaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(board.label(move) if move is not None else "no move")
    return 0


if __name__ == "__main__":
    sys.exit(main())
