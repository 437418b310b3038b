"""
Parity evaluation.

Plays games with a random human against the seeded opponent through the
live session engine, then replays each recorded transcript through the
verifier and counts any disagreement.
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np
from tqdm.auto import trange

from .rng import MASK64, SimpleRNG
from .session import GameRound, play_game
from .transcript import parse_transcript
from .verify import Outcome, replay, verify_player_win


@dataclass
class EvalConfig:
    """Parity run configuration."""

    # Seed for the random human (numpy)
    seed: int = 0

    # Number of games
    games: int = 1000

    # Opponent seed of game g is rng_seed_base + g (mod 2**64)
    rng_seed_base: int = 1


def play_random_game(seed: int, np_rng: np.random.Generator) -> GameRound:
    """One game where the human picks a uniformly random empty cell."""
    rng = SimpleRNG(seed)
    return play_game(rng, lambda board: int(np_rng.choice(board.empty_cells())))


def check_parity(game: GameRound) -> bool:
    """Does the verifier rebuild exactly the game that was played?"""
    result = replay(parse_transcript(game.transcript))
    return (
        result.outcome is game.outcome
        and result.opponent_moves == game.opponent_moves
        and verify_player_win(game.transcript) == (game.outcome is Outcome.HUMAN_WIN)
    )


def eval_parity(config: EvalConfig, progress: bool = True) -> Dict[str, float]:
    """
    Run `config.games` random games and verify every transcript.

    Returns:
        dict with human_w / draw / human_l rates, games, mismatches
    """
    np_rng = np.random.default_rng(config.seed)
    counts = {Outcome.HUMAN_WIN: 0, Outcome.DRAW: 0, Outcome.OPPONENT_WIN: 0}
    mismatches = 0

    for g in trange(config.games, desc="Parity", disable=not progress):
        game = play_random_game((config.rng_seed_base + g) & MASK64, np_rng)
        counts[game.outcome] += 1
        if not check_parity(game):
            mismatches += 1

    total = max(1, config.games)
    return {
        "games": config.games,
        "human_w": counts[Outcome.HUMAN_WIN] / total,
        "draw": counts[Outcome.DRAW] / total,
        "human_l": counts[Outcome.OPPONENT_WIN] / total,
        "mismatches": mismatches,
    }
