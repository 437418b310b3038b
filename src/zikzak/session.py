"""
Live game against the seeded opponent.

Uses the same Board, SimpleRNG and opponent_move as the verifier, so the
transcript recorded here replays to the same game.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .game import Board, Cell, N_CELLS
from .rng import SimpleRNG
from .transcript import format_transcript
from .verify import Outcome, non_empty_cells, opponent_move


class SessionAborted(Exception):
    """Player closed input before the game finished."""


@dataclass
class GameRound:
    seed: int
    player_moves: List[int] = field(default_factory=list)
    opponent_moves: List[int] = field(default_factory=list)
    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def transcript(self) -> str:
        return format_transcript(self.seed, self.player_moves)


def prompt_human_move(
    board: Board,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Ask until the player names an empty cell."""
    while True:
        try:
            line = read_line("Enter your move (0-8): ")
        except (EOFError, KeyboardInterrupt) as e:
            raise SessionAborted() from e
        try:
            num = int(line.strip())
        except ValueError:
            num = None
        if num is not None and 0 <= num < N_CELLS and board.cell(num) == Cell.EMPTY:
            return num
        write("Invalid move. Please enter a number between 0 and 8 for an empty cell.")


def play_game(
    rng: SimpleRNG,
    get_human_move: Callable[[Board], int],
    show: Optional[Callable[[str], None]] = None,
) -> GameRound:
    """
    Play one game, human first.

    Args:
        rng: fresh generator; its current state is recorded as the seed
        get_human_move: returns the human's cell for the given board
        show: receives board renderings and result messages (silent if None)
    """
    board = Board()
    game = GameRound(seed=rng.state)

    def emit(text: str):
        if show is not None:
            show(text)

    while True:
        emit(board.render() + "\n")
        move = get_human_move(board)
        if not board.apply(move, Cell.HUMAN):
            emit("Invalid move. Try again.")
            continue
        game.player_moves.append(move)

        if board.winner() == Cell.HUMAN:
            game.outcome = Outcome.HUMAN_WIN
            emit(board.render() + "\n")
            emit("You win!")
            return game

        candidates = non_empty_cells(board)
        if candidates is None:
            game.outcome = Outcome.DRAW
            emit(board.render() + "\n")
            emit("It's a draw!")
            return game

        position = opponent_move(candidates, rng)
        board.apply(position, Cell.OPPONENT)
        game.opponent_moves.append(position)
        emit(f"Computer plays: {position}")

        if board.winner() == Cell.OPPONENT:
            game.outcome = Outcome.OPPONENT_WIN
            emit(board.render() + "\n")
            emit("Computer wins!")
            return game


def play_interactive(
    rng: SimpleRNG,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameRound:
    """Terminal game. Raises SessionAborted on EOF or Ctrl-C."""
    write("Welcome to ZiK-ZaK-Zoo!")
    write("You are Z (play first). Cells are numbered 0-8:")
    return play_game(
        rng,
        lambda board: prompt_human_move(board, read_line, write),
        show=write,
    )
