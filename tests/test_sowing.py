# tests/test_sowing.py
import random

import pytest

from avalanche_mancala.engine.board import Board, STANDARD_LAYOUT
from avalanche_mancala.engine.errors import RunawaySowingError, SlotLookupError
from conftest import seeded

EMPTY = [0] * 14

def _with(**pieces):
    counts = list(EMPTY)
    for pos, n in pieces.items():
        counts[int(pos[1:])] = n
    return counts

def test_move_one_piece_to_next_slot():
    b = seeded(_with(p0=1))
    b.sow(0, "player1")
    assert b.counts() == _with(p1=1)

def test_move_two_pieces_to_next_slots():
    b = seeded(_with(p0=2))
    result = b.sow(0, "player1")
    assert b.counts() == _with(p1=1, p2=1)
    assert result.last_position == 2
    assert result.laps == 1
    assert not result.free_turn

def test_skips_opponent_store():
    b = seeded(_with(p11=2))
    b.sow(11, "player1")
    assert b.counts() == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0]

def test_drops_into_own_store():
    b = seeded(_with(p12=2))
    b.sow(12, "player2")
    assert b.counts() == _with(p13=1, p0=1)

def test_player1_skips_player2_store_but_player2_does_not():
    b = seeded(_with(p5=9))
    b.sow(5, "player1")
    assert b.score("player2") == 0
    assert b.total_pieces() == 9

def test_avalanche_when_ending_on_populated_slot():
    b = seeded(_with(p0=1, p1=1))
    result = b.sow(0, "player1")
    assert b.counts() == [0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]
    assert result.laps == 2
    assert result.last_position == 3

def test_sow_accepts_member_slot(board):
    board.populate(_with(p0=2))
    board.sow(board.slots[0], "player1")
    assert board.counts() == _with(p1=1, p2=1)

def test_sow_rejects_foreign_slot(board):
    board.populate(_with(p0=2))
    with pytest.raises(SlotLookupError):
        board.sow(board.clone().slots[0], "player1")

def test_sow_empty_slot_is_noop(board):
    board.populate(STANDARD_LAYOUT)
    result = board.sow(6, "player1")
    assert board.counts() == STANDARD_LAYOUT
    assert result.last_position is None and result.laps == 0

def test_free_turn_runs_search_for_same_player(monkeypatch):
    b = seeded(_with(p0=1, p5=1))
    calls = []
    monkeypatch.setattr(b, "find_best_move", lambda player: calls.append(player) or 0)
    result = b.sow(5, "player1")
    assert calls == ["player1"]
    assert result.free_turn and result.follow_up == 0
    # follow-up is not applied by default
    assert b.counts() == _with(p0=1, p6=1)

def test_no_free_turn_when_mover_has_no_pieces_left(monkeypatch):
    b = seeded(_with(p5=1))
    monkeypatch.setattr(b, "find_best_move", lambda player: pytest.fail("search ran"))
    result = b.sow(5, "player1")
    assert not result.free_turn
    assert b.score("player1") == 1

def test_chained_free_turn_applies_follow_up():
    b = seeded([0, 0, 5, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0], chain_free_turns=True)
    result = b.sow(5, "player1")
    assert result.free_turn and result.follow_up == 2
    assert b.counts() == [0, 0, 0, 1, 1, 1, 2, 1, 0, 0, 0, 0, 0, 0]

def test_chained_free_turns_run_until_turn_ends():
    b = seeded([0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0], chain_free_turns=True)
    b.sow(5, "player1")
    assert b.counts() == _with(p6=3)

@pytest.mark.parametrize("start", range(6))
def test_standard_opening_moves(start):
    expected = {
        0: [1, 4, 1, 10, 1, 1, 5, 3, 0, 2, 9, 2, 9, 0],
        1: [7, 1, 2, 1, 8, 3, 4, 7, 1, 7, 0, 7, 0, 0],
        2: [4, 4, 0, 5, 5, 5, 1, 4, 4, 4, 4, 4, 4, 0],
        3: [9, 2, 9, 1, 4, 1, 6, 1, 1, 9, 3, 0, 2, 0],
        4: [1, 6, 6, 6, 0, 1, 3, 6, 1, 6, 6, 0, 6, 0],
        5: [5, 0, 5, 5, 5, 1, 2, 5, 5, 0, 5, 5, 5, 0],
    }
    b = seeded(STANDARD_LAYOUT)
    b.sow(start, "player1")
    assert b.counts() == expected[start]

def test_pieces_are_conserved():
    rng = random.Random(7)
    for _ in range(40):
        counts = [rng.randint(0, 3) for _ in range(14)]
        player = rng.choice(["player1", "player2"])
        b = seeded(counts)
        for pos in b.legal_moves(player):
            c = b.clone()
            c.sow(pos, player)
            assert c.total_pieces() == sum(counts)
            assert c.score(player) >= b.score(player)

def test_lap_ceiling():
    b = seeded(_with(p0=1, p1=1), max_laps=1)
    with pytest.raises(RunawaySowingError):
        b.sow(0, "player1")
