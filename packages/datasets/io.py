from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine.errors import MissingResource


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines (line endings removed).
    Undecodable bytes are replaced rather than aborting the whole load.
    Raises MissingResource if the path doesn't exist.
    """
    p = Path(p)
    if not p.is_file():
        raise MissingResource(f"Word list file not found: {p}")
    return p.read_text(encoding="utf-8", errors="replace").splitlines()


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
