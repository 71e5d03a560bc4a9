# apps/cli/survey.py
"""
CLI entry point for difficulty surveys.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Deals a batch of seeded hands and builds each feasibility index.
  3) Writes:
       - CSV:  one row per hand (word count, longest words, potential, multiplier)
       - JSON: manifest with config, dictionary report, multiplier percentiles

Use it to retune MultiplierConfig: the percentiles show how the configured
bounds spread real hands across the min..max multiplier range.

Usage:
    python -m apps.cli.survey --hands 500 --seed 7 --dictionary words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import asdict, replace
from pathlib import Path
from typing import Dict, List

import numpy as np

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from packages.datasets import validate_dictionary, pretty_summary
from packages.engine.multiplier import score_potential
from packages.game import Settings, WordGame
from packages.game.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.hands import HandGenerator

logger = logging.getLogger("survey")


def _survey_hand(game: WordGame, seed: int) -> Dict:
    """Deal one hand from `seed` and describe its word universe."""
    game.generator.reseed(seed)
    hand = game.generate_hand()
    index = game.get_or_build_index(hand)
    return {
        "seed": seed,
        "hand": hand.letters.upper(),
        "total_words": index.total_count(),
        "longest_length": index.longest_length(),
        "longest": index.longest(),
        "score_potential": score_potential(index.all()),
        "score_multiplier": index.score_multiplier,
    }


def summarize(rows: List[Dict]) -> Dict:
    """Percentile summary of multipliers and word counts across the batch."""
    if not rows:
        return {"hands": 0}
    mult = np.array([r["score_multiplier"] for r in rows], dtype=float)
    words = np.array([r["total_words"] for r in rows], dtype=float)
    q = (5, 25, 50, 75, 95)
    return {
        "hands": len(rows),
        "empty_hands": int(np.sum(words == 0)),
        "multiplier_mean": float(np.mean(mult)),
        "multiplier_percentiles": dict(zip(map(str, q), np.percentile(mult, q).round(3).tolist())),
        "word_count_percentiles": dict(zip(map(str, q), np.percentile(words, q).round(1).tolist())),
    }


def main():
    """
    Parse CLI args, validate the dictionary, survey hands with progress, write outputs.
    """
    env = Settings.from_env()

    ap = argparse.ArgumentParser(description="lettergrid: survey hand difficulty")
    ap.add_argument("--dictionary", default=str(env.dictionary_path),
                    help="path to the newline-delimited word list")
    ap.add_argument("--hands", type=int, default=200, help="number of hands to deal")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--min-multiplier", type=float, default=env.multiplier.min_multiplier)
    ap.add_argument("--max-multiplier", type=float, default=env.multiplier.max_multiplier)
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["passed"]:
        print("Dictionary validation failed: " + "; ".join(rep["issues"]), file=sys.stderr)
        sys.exit(1)

    settings = replace(
        env,
        dictionary_path=Path(args.dictionary),
        multiplier=replace(env.multiplier,
                           min_multiplier=args.min_multiplier,
                           max_multiplier=args.max_multiplier),
    )
    game = WordGame(settings, generator=HandGenerator())
    game.warm()
    logger.info("surveying %d hands from seed %d", args.hands, args.seed)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"

    seeds = [args.seed + i for i in range(args.hands)]
    iterator = tqdm(seeds, ncols=80, desc="Surveying", unit="hand") if mode == "bar" else seeds

    rows: List[Dict] = []
    start = time.time()
    last_print = 0.0
    for idx, seed in enumerate(iterator, 1):
        rows.append(_survey_hand(game, seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.hands):
                pct = 100.0 * idx / max(1, args.hands)
                sys.stderr.write(f"\r[{idx}/{args.hands}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    summary = summarize(rows)
    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "multiplier_config": asdict(settings.multiplier),
        "dictionary": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"Median multiplier: {summary['multiplier_percentiles']['50']}"
          if rows else "No hands surveyed.")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
