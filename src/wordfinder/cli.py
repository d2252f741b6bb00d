"""Command line interface for WordFinder."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wordfinder.config import STRATEGIES, AppConfig
from wordfinder.models import SearchRequest
from wordfinder.search.dispatcher import SearchDispatcher
from wordfinder.search.log_writer import read_log_directory


console = Console()
app = typer.Typer(help="WordFinder - multi-threaded whole-word search across documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def search(
    root: Path = typer.Argument(..., help="Directory to search recursively."),
    word: str = typer.Argument(..., help="Word to look for (case-insensitive, whole word)."),
    log_dir: Path = typer.Argument(..., help="Directory receiving the per-worker logs."),
    workers: int = typer.Option(AppConfig().worker_count, "--workers", "-w", help="Worker threads"),
    timeout: float = typer.Option(AppConfig().shutdown_timeout, help="Shutdown grace period in seconds"),
    strategy: str = typer.Option(AppConfig().strategy, help=f"Partition strategy: {', '.join(STRATEGIES)}"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search a directory tree for a word."""
    _setup_logging(verbose)
    try:
        config = AppConfig(worker_count=workers, shutdown_timeout=timeout, strategy=strategy)
        request = SearchRequest(root=root, word=word, log_directory=log_dir)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    report = SearchDispatcher(config).run(request)
    if report.not_directory:
        console.print("[yellow]Provided path is not a directory.[/yellow]")
        return

    if not report.found:
        console.print(f"[yellow]No occurrences found for the specified string: {request.word}[/yellow]")
    else:
        console.print(
            f"Found [bold]{report.total}[/bold] occurrences of '{request.word}' "
            f"in {report.matched} file(s)."
        )
    console.print(
        f"Scanned: {report.scanned}, failed: {report.failed}, "
        f"workers: {report.slices_dispatched}, log files: {len(report.log_files)}"
    )
    if report.timed_out:
        console.print("[red]Search timed out; results are partial.[/red]")


@app.command()
def report(
    log_dir: Path = typer.Argument(..., help="Directory containing per-worker logs."),
    prefix: str = typer.Option(AppConfig().log_file_prefix, help="Log file name prefix"),
    suffix: str = typer.Option(AppConfig().log_file_suffix, help="Log file name suffix"),
) -> None:
    """Summarize the occurrence logs of a previous search."""
    entries = read_log_directory(log_dir, prefix=prefix, suffix=suffix)
    if not entries:
        console.print("[yellow]No log entries found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Occurrences", justify="right")
    table.add_column("File")
    for entry in entries:
        table.add_row(str(entry.count), str(entry.path))

    console.print(table)
    console.print(f"Total: {sum(entry.count for entry in entries)} occurrences in {len(entries)} file(s)")
