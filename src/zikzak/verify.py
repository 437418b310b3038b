"""
Replay verifier.

Rebuilds a whole game from a transcript: human moves come from the
transcript, opponent moves are re-derived from the seed. The only thing
that leaves `verify_player_win` is a bool; every failure reads as False.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NewType, Optional, Tuple

from .game import Board, Cell
from .rng import SimpleRNG
from .transcript import Transcript, TranscriptError, parse_transcript

# Empty-cell indices, ascending, guaranteed to hold at least one entry
NonEmptyCells = NewType("NonEmptyCells", Tuple[int, ...])


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WIN = "human_win"
    OPPONENT_WIN = "opponent_win"
    DRAW = "draw"
    INVALID = "invalid"


@dataclass
class ReplayResult:
    outcome: Outcome
    board: Board
    opponent_moves: List[int] = field(default_factory=list)

    @property
    def human_won(self) -> bool:
        return self.outcome is Outcome.HUMAN_WIN


def non_empty_cells(board: Board) -> Optional[NonEmptyCells]:
    """Empty cells of `board`, or None when the board is full."""
    cells = board.empty_cells()
    if not cells:
        return None
    return NonEmptyCells(tuple(cells))


def opponent_move(candidates: NonEmptyCells, rng: SimpleRNG) -> int:
    """Pick the opponent's cell. Indexes by position in `candidates`."""
    return candidates[rng.pick_in_range(0, len(candidates) - 1)]


def replay(transcript: Transcript) -> ReplayResult:
    """
    Replay a parsed transcript move by move.

    Stops at the first terminal outcome; moves after it are ignored.
    """
    rng = SimpleRNG(transcript.seed)
    board = Board()
    result = ReplayResult(outcome=Outcome.IN_PROGRESS, board=board)

    for move in transcript.moves:
        if not board.apply(move, Cell.HUMAN):
            result.outcome = Outcome.INVALID
            return result

        if board.winner() == Cell.HUMAN:
            result.outcome = Outcome.HUMAN_WIN
            return result

        candidates = non_empty_cells(board)
        if candidates is None:
            result.outcome = Outcome.DRAW
            return result

        position = opponent_move(candidates, rng)
        board.apply(position, Cell.OPPONENT)
        result.opponent_moves.append(position)

        if board.winner() == Cell.OPPONENT:
            result.outcome = Outcome.OPPONENT_WIN
            return result

    return result


def verify_player_win(text: str) -> bool:
    """True iff `text` replays to a human win. Never raises on bad input."""
    try:
        transcript = parse_transcript(text)
    except TranscriptError:
        return False
    return replay(transcript).human_won
