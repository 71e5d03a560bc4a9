"""
I/O utilities for survey runs and round logs.

Responsibilities:
- write_csv:      one row per surveyed hand (or scored round) into a tidy CSV.
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence
import csv
import json
import subprocess
import datetime as dt

SURVEY_FIELDS = (
    "seed", "hand", "total_words", "longest_length", "longest",
    "score_potential", "score_multiplier",
)


def write_csv(rows: List[Dict], path: str, fields: Sequence[str] = SURVEY_FIELDS) -> str:
    """
    Serialize rows (dicts) to CSV with a fixed column order.

    Sequence values (e.g. the tuple of longest words) are joined with spaces;
    floats are rounded to 4 places. Missing keys become empty cells.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(fields), extrasaction="ignore")
        w.writeheader()

        for r in rows:
            row = {}
            for k in fields:
                v = r.get(k, "")
                if isinstance(v, (list, tuple)):
                    v = " ".join(str(x) for x in v)
                elif isinstance(v, float):
                    v = round(v, 4)
                row[k] = v
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (hands, seed, dictionary, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - multiplier_config, summary
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
