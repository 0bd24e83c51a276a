# src/avalanche_mancala/api/routes.py
from flask import current_app
from flask_smorest import Blueprint, abort
from marshmallow import Schema, fields, validate, EXCLUDE

from avalanche_mancala.agents.greedy import choose_from_ranking, rank_moves
from avalanche_mancala.engine.board import Board, NUM_SLOTS, STANDARD_LAYOUT
from avalanche_mancala.engine.errors import MancalaError
from avalanche_mancala.engine.slot import PLAYERS

bp = Blueprint("mancala", __name__, url_prefix="/api")

# ---------- Schemas ----------
class BoardReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    counts = fields.List(fields.Integer(strict=True, validate=validate.Range(min=0)),
                         required=True, validate=validate.Length(equal=NUM_SLOTS))
    player = fields.String(load_default="player1", validate=validate.OneOf(PLAYERS))

class SowReqSchema(BoardReqSchema):
    position = fields.Integer(required=True, validate=validate.Range(min=0, max=NUM_SLOTS - 1))

class CandidateSchema(Schema):
    position = fields.Integer()
    label    = fields.String()
    score    = fields.Integer()

class BestMoveRespSchema(Schema):
    move       = fields.Integer(allow_none=True)
    label      = fields.String(allow_none=True)
    score      = fields.Integer()
    candidates = fields.List(fields.Nested(CandidateSchema))

class SowRespSchema(Schema):
    counts        = fields.List(fields.Integer())
    score         = fields.Integer()
    last_position = fields.Integer(allow_none=True)
    laps          = fields.Integer()
    free_turn     = fields.Boolean()
    follow_up     = fields.Integer(allow_none=True)
# -----------------------------

def _board(counts) -> Board:
    board = Board(**current_app.config["BOARD_OPTIONS"])
    try:
        board.populate(counts)
    except MancalaError as e:
        abort(400, message=str(e))
    return board

@bp.route("/health")
@bp.response(200, Schema.from_dict({"status": fields.String(), "settings": fields.Dict()})())
def health():
    return {"status": "ok", "settings": current_app.config["BOARD_OPTIONS"]}

@bp.route("/newboard", methods=["POST"])
@bp.response(200, Schema.from_dict({"counts": fields.List(fields.Integer())})())
def newboard():
    return {"counts": list(STANDARD_LAYOUT)}

@bp.route("/best-move", methods=["POST"])
@bp.arguments(BoardReqSchema)
@bp.response(200, BestMoveRespSchema)
def best_move(req):
    board = _board(req["counts"])
    player = req["player"]
    try:
        ranking = rank_moves(board, player)
    except MancalaError as e:
        abort(400, message=str(e))
    baseline = board.score(player)
    move = choose_from_ranking(ranking, baseline)
    return {
        "move": move,
        "label": board.label(move) if move is not None else None,
        "score": max([baseline] + [s for _, s in ranking]),
        "candidates": [
            {"position": p, "label": board.label(p), "score": s} for p, s in ranking
        ],
    }

@bp.route("/sow", methods=["POST"])
@bp.arguments(SowReqSchema)
@bp.response(200, SowRespSchema)
def sow(req):
    board = _board(req["counts"])
    player, position = req["player"], req["position"]
    acts = board.legal_moves(player)
    if position not in acts:
        abort(400, message=f"Illegal move for {player}. Legal: {acts}")
    try:
        result = board.sow(position, player)
    except MancalaError as e:
        abort(400, message=str(e))
    return {
        "counts": board.counts(),
        "score": board.score(player),
        "last_position": result.last_position,
        "laps": result.laps,
        "free_turn": result.free_turn,
        "follow_up": result.follow_up,
    }
