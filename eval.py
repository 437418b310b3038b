#!/usr/bin/env python3
"""
Play, verify and parity-check ZiK-ZaK-Zoo games.

Usage:
    python eval.py --play                  # Interactive game, then verify it
    python eval.py --verify 1,0,1,2        # Verify a transcript
    python eval.py --games 1000            # Random-human parity run
    python eval.py --games 1000 --report runs/parity.json
"""

import sys
import json
import argparse
from dataclasses import asdict
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from zikzak import (
    EvalConfig,
    SessionAborted,
    SimpleRNG,
    eval_parity,
    play_interactive,
    verify_player_win,
)


def play(seed=None):
    """Play one game and hand the transcript to the verifier."""
    rng = SimpleRNG.from_clock() if seed is None else SimpleRNG(seed)
    try:
        game = play_interactive(rng)
    except SessionAborted:
        print("\nGame aborted")
        return

    print("\nGame Round Data:")
    print(f"Seed used: {game.seed}")
    print(f"Player moves: {game.player_moves}")
    print(f"Transcript: {game.transcript}")

    print("Verifying game...")
    output = verify_player_win(game.transcript)
    print(f"Wow it's {output} that you won at ZiK-ZaK-ZoO!")


def main():
    parser = argparse.ArgumentParser(description="ZiK-ZaK-Zoo verifiable TicTacToe")
    parser.add_argument("--play", action="store_true", help="Play interactive game")
    parser.add_argument("--verify", type=str, default=None, help="Transcript to verify")
    parser.add_argument("--games", type=int, default=1000, help="Number of parity games")
    parser.add_argument("--seed", type=int, default=None, help="Opponent seed (play) / first seed (parity)")
    parser.add_argument("--human-seed", type=int, default=0, help="Random human seed (parity)")
    parser.add_argument("--report", type=str, default=None, help="Write parity results as JSON")

    args = parser.parse_args()

    if args.seed is not None and not 0 <= args.seed < 2**64:
        print(f"Seed must be an unsigned 64-bit integer: {args.seed}")
        return

    if args.play:
        play(args.seed)
        return

    if args.verify is not None:
        print(verify_player_win(args.verify))
        return

    config = EvalConfig(
        seed=args.human_seed,
        games=args.games,
        rng_seed_base=1 if args.seed is None else args.seed,
    )

    print("\n=== Parity ===")
    print(f"{config.games} games, opponent seeds from {config.rng_seed_base}")
    results = eval_parity(config)
    print(f"  Human wins:   {results['human_w']:.2%}")
    print(f"  Draws:        {results['draw']:.2%}")
    print(f"  Human losses: {results['human_l']:.2%}")
    print(f"  Mismatches:   {results['mismatches']}")

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w") as f:
            json.dump({"config": asdict(config), "results": results}, f, indent=2)
        print(f"Report saved: {report_path}")


if __name__ == "__main__":
    main()
