from __future__ import annotations
from pathlib import Path
from typing import Iterable

def parse_references(lines: Iterable[str]) -> list[str]:
    """Trimmed references in input order; blank and ``#`` lines are skipped."""
    out = []
    for line in lines:
        ref = line.strip()
        if ref and not ref.startswith("#"):
            out.append(ref)
    return out

def read_reference_file(path: str | Path) -> list[str]:
    with open(path, encoding="utf-8", errors="replace") as fh:
        return parse_references(fh)
