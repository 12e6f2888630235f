from __future__ import annotations
import threading
from pathlib import Path
from typing import IO, Optional

from rich.console import Console
from rich.text import Text

from .findings import Category, Finding

LOG_HEADER = "=== JS Parser Results ===\n\n"

STYLES: dict[Category, str] = {
    Category.S3_BUCKET: "red",
    Category.FIREBASE_URL: "yellow",
    Category.FIREBASE_STORAGE: "yellow",
    Category.FIREBASE_API: "yellow",
    Category.API_ENDPOINT: "green",
    Category.GRAPHQL: "cyan",
    Category.AUTH_ENDPOINT: "purple",
    Category.URL_IN_VARIABLE: "blue",
    Category.TELEGRAM_TOKEN: "color(208)",
    Category.API_SUBDOMAIN: "color(6)",
    Category.API_VERSION: "color(13)",
    Category.API_COMPONENT: "magenta",
}


def plain_entry(f: Finding) -> str:
    """Uncoloured block written to the results file."""
    entry = f"[{f.tag}] {f.value}\n"
    if f.rationale:
        entry += f"Details: {f.rationale}\n"
    if f.source:
        entry += f"Source: {f.source}\n"
    return entry + "\n"


class Reporter:
    """The one place that writes to the console and the optional results file.

    Console writes share one lock so a finding block, a status line and an
    error line never interleave; the results file has its own lock.
    """

    def __init__(self, console: Console | None = None, output_file: str | Path | None = None, quiet: bool = False):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.output_file = Path(output_file) if output_file else None
        self.quiet = quiet
        self._lock = threading.Lock()
        self._file_lock = threading.Lock()
        self._fh: Optional[IO[str]] = None

    def open(self) -> "Reporter":
        """Create (truncate) the results file and write its header.

        Raises OSError if the file cannot be created.
        """
        if self.output_file is not None and self._fh is None:
            self._fh = self.output_file.open("w", encoding="utf-8")
            self._write_file(LOG_HEADER)
        return self

    def close(self) -> None:
        with self._file_lock:
            if self._fh is not None:
                self._fh.close()
                self._fh = None

    def __enter__(self) -> "Reporter":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def finding(self, f: Finding) -> None:
        block = Text.assemble((f"[{f.tag}]", STYLES.get(f.category, "white")), " ", (f.value, "white"))
        with self._lock:
            self.console.print(block)
            if f.rationale:
                self.console.print(Text.assemble("   ", ("Details:", "white"), f" {f.rationale}"))
            if f.source:
                self.console.print(Text.assemble("   ", ("Source:", "white"), f" {f.source}"))
            self.console.print()
        if self._fh is not None:
            self._write_file(plain_entry(f))

    def status(self, msg: str) -> None:
        if self.quiet:
            return
        with self._lock:
            self.console.print(Text.assemble(("[STATUS]", "blue"), f" {msg}"))

    def error(self, source: str, msg: str) -> None:
        with self._lock:
            self.console.print(Text.assemble(("[ERROR]", "red"), f" {source} - {msg}"))

    def _write_file(self, entry: str) -> None:
        try:
            with self._file_lock:
                if self._fh is None:
                    return
                self._fh.write(entry)
                self._fh.flush()
        except OSError as exc:
            self.error("Output", f"Failed to write to output file: {exc}")
