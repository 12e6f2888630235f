"""Noise suppression and per-reference de-duplication.

Every candidate produced by the catalogue passes through here before it
becomes a :class:`~jsreader.findings.Finding`.  A :class:`ScanSession` is
created for exactly one reference and thrown away afterwards; it is never
shared between references or workers.
"""

from __future__ import annotations

from typing import Iterable

from .findings import Category

# Lower-cased substrings that mark a match as noise.
EXCLUDED_MARKERS = (
    "w3.org/",
    "schema.org/",
    ".min.js",
    "localhost",
    "127.0.0.1",
)

DEDUP_SCOPES = ("value", "category")


def is_excluded(value: str, markers: Iterable[str] = EXCLUDED_MARKERS) -> bool:
    """Return True if ``value`` looks like documentation, minified asset or loopback noise."""
    lowered = value.lower()
    return any(m in lowered for m in markers)


class ScanSession:
    """Tracks what has already been reported for one reference.

    With the default ``scope="value"`` the first category to claim a value
    wins and the value is never reported again for this reference; with
    ``scope="category"`` a value may be reported once per category.
    """

    def __init__(self, scope: str = "value"):
        if scope not in DEDUP_SCOPES:
            raise ValueError(f"unknown dedup scope {scope!r} (expected one of {', '.join(DEDUP_SCOPES)})")
        self.scope = scope
        self._seen: set[tuple[str, str] | str] = set()

    def _key(self, category: Category, value: str) -> tuple[str, str] | str:
        return (str(category), value) if self.scope == "category" else value

    def admit(self, category: Category, value: str) -> bool:
        """Return True the first time a candidate is seen and it is not noise."""
        if is_excluded(value):
            return False
        key = self._key(category, value)
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __len__(self) -> int:
        return len(self._seen)
