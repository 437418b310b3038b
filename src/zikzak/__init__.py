"""
ZiK-ZaK-Zoo - verifiable TicTacToe against a seeded random opponent.

A game is recorded as "seed,human_moves..."; the verifier replays it,
re-deriving every opponent move from the seed, and answers one question:
did the human win?
"""

from .game import Board, Cell, WIN_LINES
from .rng import SimpleRNG
from .transcript import Transcript, TranscriptError, parse_transcript, format_transcript
from .verify import Outcome, ReplayResult, replay, verify_player_win, opponent_move, non_empty_cells
from .guest import run_guest
from .session import GameRound, SessionAborted, play_game, play_interactive
from .eval import EvalConfig, eval_parity, play_random_game, check_parity

__version__ = "0.1.0"
__all__ = [
    "Board",
    "Cell",
    "WIN_LINES",
    "SimpleRNG",
    "Transcript",
    "TranscriptError",
    "parse_transcript",
    "format_transcript",
    "Outcome",
    "ReplayResult",
    "replay",
    "verify_player_win",
    "opponent_move",
    "non_empty_cells",
    "run_guest",
    "GameRound",
    "SessionAborted",
    "play_game",
    "play_interactive",
    "EvalConfig",
    "eval_parity",
    "play_random_game",
    "check_parity",
]
