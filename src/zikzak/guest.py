"""
Entry point for running the verifier inside a proving environment.

The host supplies the transcript as the single private input and commits
the returned bool as the single public output. Producing and checking the
proof is the host's business.
"""

from typing import Callable, Protocol

from .verify import verify_player_win


class GuestIO(Protocol):
    def read_private_input(self) -> str: ...

    def write_output(self, output: bool) -> None: ...


def run_guest(
    read_private_input: Callable[[], str],
    write_output: Callable[[bool], None],
) -> bool:
    """Read one transcript, verify it, write one bool."""
    result = verify_player_win(read_private_input())
    write_output(result)
    return result


def run_with(io: GuestIO) -> bool:
    return run_guest(io.read_private_input, io.write_output)
