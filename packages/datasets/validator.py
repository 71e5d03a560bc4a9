"""
Dictionary validator for the letter-grid game.

What this module does:
- Inspect a raw word list before it is loaded into the game.
- Count raw lines, words surviving normalization, and unique words.
- Flag lines normalization drops entirely or changes (case, punctuation).
- Count words longer than a hand (they can never be played).
- Compute SHA-256 of the raw file for run manifests.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine.letters import HAND_SIZE, normalize_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one word list."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    raw_lines: int         # lines in the file
    count: int             # words left after normalization
    unique_count: int      # distinct normalized words
    dropped_lines: int     # lines that normalized to nothing
    altered_lines: int     # lines normalization changed but kept
    too_long: int          # words longer than a hand
    playable: int          # distinct words short enough to ever be feasible
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str | Path, max_length: int = HAND_SIZE) -> Dict:
    """
    Validate a dictionary word list.

    Parameters
    ----------
    path : str | Path
        Newline-delimited word list.
    max_length : int
        Longest playable word (a hand's size).

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport. `passed` requires the file to exist
        and contain at least one playable word; altered or dropped lines are
        reported as issues but do not fail the check, since the loader
        normalizes them anyway.
    """
    p = Path(path)
    if not p.is_file():
        rep = DictionaryReport(str(path), False, 0, 0, 0, 0, 0, 0, 0, "",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    raw = p.read_text(encoding="utf-8", errors="replace").splitlines()

    words: List[str] = []
    dropped = altered = 0
    for line in raw:
        w = normalize_word(line)
        if not w:
            dropped += 1
            continue
        if w != line.strip():
            altered += 1
        words.append(w)

    unique = set(words)
    playable = sum(1 for w in unique if len(w) <= max_length)
    too_long = sum(1 for w in words if len(w) > max_length)

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 words after normalization")
    elif playable == 0:
        issues.append(f"no words of length <= {max_length}")
    if dropped:
        issues.append(f"{dropped} line(s) normalize to nothing")
    if altered:
        issues.append(f"{altered} line(s) changed by normalization")
    if len(words) != len(unique):
        issues.append(f"{len(words) - len(unique)} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        raw_lines=len(raw),
        count=len(words),
        unique_count=len(unique),
        dropped_lines=dropped,
        altered_lines=altered,
        too_long=too_long,
        playable=playable,
        sha256=_sha256_file(p),
        passed=playable > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=370105 (uniq=370105, playable=151263, sha=abc123def456) | dropped=0 altered=12 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"playable={report['playable']}, sha={sha}) "
        f"| dropped={report['dropped_lines']} altered={report['altered_lines']} "
        f"| {status}"
    )
