# apps/cli/play.py
"""
Play one round in the terminal.

Deals a hand, starts the clock, reads one answer, and prints the score the
same way the web game would: quickness x difficulty x length squared.

Usage:
    python -m apps.cli.play --seed 42 --show-words 20
    python -m apps.cli.play --letters "gardenpils"
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

from packages.engine.errors import InvalidHand, MissingResource
from packages.engine.letters import Hand
from packages.game import Settings, WordGame


def main():
    env = Settings.from_env()

    ap = argparse.ArgumentParser(description="lettergrid: play one round")
    ap.add_argument("--dictionary", default=str(env.dictionary_path),
                    help="path to the newline-delimited word list")
    ap.add_argument("--seed", type=int, help="RNG seed for the dealt hand")
    ap.add_argument("--letters", help="play a fixed hand instead of dealing one")
    ap.add_argument("--show-words", type=int, default=10, metavar="K",
                    help="after scoring, list the K longest feasible words (0 = none)")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    game = WordGame(replace(env, dictionary_path=Path(args.dictionary)), seed=args.seed)
    try:
        game.warm()
        hand = Hand.parse(args.letters) if args.letters else game.generate_hand()
    except (MissingResource, InvalidHand) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    index = game.get_or_build_index(hand)

    print(f"\n  {hand}\n")
    print(f"Difficulty x{index.score_multiplier:.2f} | {index.total_count()} words possible")
    start = time.monotonic()
    try:
        answer = input("Your word: ")
    except EOFError:
        answer = ""
    elapsed = int(time.monotonic() - start)

    result = game.score_round(answer, hand, elapsed)
    print(f"\n{result.message}")
    print(f"'{result.answer}' in {elapsed}s -> {result.score} points "
          f"(quickness x{result.quickness_multiplier}, difficulty x{result.score_multiplier})")

    if args.show_words > 0:
        best = index.all()[: args.show_words]
        print(f"\nLongest possible ({index.longest_length()} letters): {', '.join(index.longest())}")
        print("Top words: " + ", ".join(best))


if __name__ == "__main__":
    main()
