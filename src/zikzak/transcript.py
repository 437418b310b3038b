"""
Transcript wire format: "<seed>,<move_0>,<move_1>,...".

Seed and moves are base-10 unsigned integers, optionally with a leading
"+". Only the human's moves are recorded; the opponent's are recomputed
from the seed.
"""

import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from .rng import MASK64

_UINT = re.compile(r"\+?[0-9]+\Z", re.ASCII)


class TranscriptError(ValueError):
    """Malformed transcript text."""


@dataclass(frozen=True)
class Transcript:
    seed: int
    moves: Tuple[int, ...] = ()

    def __str__(self) -> str:
        return format_transcript(self.seed, self.moves)


def _parse_u64(token: str) -> int:
    if not _UINT.match(token):
        raise TranscriptError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > MASK64:
        raise TranscriptError(f"does not fit in 64 bits: {token!r}")
    return value


def parse_transcript(text: str) -> Transcript:
    """
    Parse a transcript string.

    Move range is not checked here; replay rejects out-of-range moves.

    Raises:
        TranscriptError: seed or any move token is not a u64
    """
    if not isinstance(text, str):
        raise TranscriptError("transcript must be a string")
    seed_tok, *move_toks = text.split(",")
    seed = _parse_u64(seed_tok)
    moves = tuple(_parse_u64(tok) for tok in move_toks)
    return Transcript(seed=seed, moves=moves)


def format_transcript(seed: int, moves: Sequence[int]) -> str:
    return ",".join([str(seed)] + [str(m) for m in moves])
