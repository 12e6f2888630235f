from __future__ import annotations
import asyncio
import sys
from typing import Optional
import typer
from pydantic import ValidationError
from .config import Settings
from .engine import run_scan
from .report import Reporter
from .utils import parse_references, read_reference_file

app = typer.Typer(add_completion=False)


def _stdin_is_piped() -> bool:
    return sys.stdin is not None and not sys.stdin.isatty()


@app.command()
def scan(
    ctx: typer.Context,
    threads: Optional[int] = typer.Option(None, "-t", "--threads", min=1, help="Number of threads to use"),
    input_file: Optional[str] = typer.Option(None, "-i", "--input", help="Path to file with list of JS URLs (one per line)"),
    js_file: Optional[str] = typer.Option(None, "-f", "--file", help="Path or URL of a single JS file to analyze"),
    pipe: bool = typer.Option(False, "-p", "--pipe", help="Enable pipe mode (read from stdin). A piped stdin is only used automatically when neither -f nor -i is given"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Output file to save results (.txt)"),
    dedup_scope: Optional[str] = typer.Option(None, "--dedup-scope", help="value (default: one report per value) or category (one per category and value)"),
):
    """Scan JavaScript files or URLs for exposed endpoints, buckets and tokens."""
    from_stdin = pipe or (not js_file and not input_file and _stdin_is_piped())
    overrides: dict = {}
    if threads:
        overrides["THREADS"] = threads
    if output:
        overrides["OUTPUT_FILE"] = output
    if from_stdin:
        overrides["PIPE_MODE"] = True
    if dedup_scope:
        overrides["DEDUP_SCOPE"] = dedup_scope
    try:
        s = Settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    reporter = Reporter(output_file=s.OUTPUT_FILE, quiet=s.PIPE_MODE)
    try:
        reporter.open()
    except OSError as exc:
        reporter.error("Output", f"Failed to create output file: {exc}")
        raise typer.Exit(code=1)

    with reporter:
        if from_stdin:
            try:
                references = parse_references(sys.stdin)
            except OSError as exc:
                reporter.error("stdin", f"Error reading from stdin: {exc}")
                raise typer.Exit(code=1)
        elif js_file:
            references = [js_file]
        elif input_file:
            try:
                references = read_reference_file(input_file)
            except OSError as exc:
                reporter.error(input_file, f"Error opening input file: {exc}")
                raise typer.Exit(code=1)
        else:
            reporter.error("Args", "You must specify input source (-f, -i, or pipe)")
            reporter.console.print(ctx.get_help(), markup=False)
            raise typer.Exit(code=1)

        if not references:
            reporter.error("Input", "No JS files to analyze")
            raise typer.Exit(code=1)

        reporter.status(f"Found {len(references)} JS files to analyze")
        reporter.status(f"Using {s.THREADS} threads")
        if s.OUTPUT_FILE:
            reporter.status(f"Saving results to: {s.OUTPUT_FILE}")

        summary = asyncio.run(run_scan(references, s, reporter))
        reporter.status(
            f"Done: {summary.references} files scanned, {summary.findings} findings, {summary.errors} errors"
        )
