"""
Normalize a raw word list into game-ready form.

Features:
- Applies the game's normalization (lowercase, a–z only) and drops empty results.
- Removes duplicates, preserving first-seen order by default.
- Optional --max-length to drop words no hand can ever spell.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_wordlist --in raw_words.txt \
        --out packages/datasets/data/words.txt --max-length 10
"""

import argparse

from packages.datasets.dictionary import normalize_lines
from packages.datasets.io import read_lines, write_lines


def unique_preserve_order(words) -> list[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--max-length", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    lines = read_lines(args.inp)
    words = normalize_lines(lines)
    if args.max_length:
        words = [w for w in words if len(w) <= args.max_length]

    out = unique_preserve_order(words)
    if args.sort:
        out = sorted(out)

    outp = write_lines(out, args.out or args.inp)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
