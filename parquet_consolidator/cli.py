"""Command-line interface for parquet_consolidator."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parquet_consolidator._exceptions import ConsolidatorError
from parquet_consolidator._logging import configure_cli_logging
from parquet_consolidator.report import ConsolidationReport

app = typer.Typer(
    name="parquet-consolidator",
    help="Consolidate multiple parquet files sharing a schema into a single file.",
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        from parquet_consolidator import __version__

        console.print(f"parquet-consolidator {__version__}")
        raise typer.Exit()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    input: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="Parquet file or directory to read from.",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Destination parquet file (overwritten if present).",
        ),
    ],
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Descend into subdirectories."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show per-file progress."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Consolidate parquet files from INPUT into a single OUTPUT file."""
    from parquet_consolidator.consolidate import consolidate

    configure_cli_logging(verbose)

    if verbose:
        console.print(f"[blue]Consolidating {escape(str(input))} -> {escape(str(output))}[/blue]")
        console.print(f"[dim]Recursive: {recursive}[/dim]")

    try:
        report = consolidate(input, output, recursive=recursive, verbose=verbose)
    except ConsolidatorError as e:
        stage = f" during {e.stage}" if e.stage else ""
        err_console.print(f"[red]Error{stage}: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=e.exit_code) from e

    if verbose:
        _print_report(report)

    console.print(
        f"[green]Successfully consolidated {report.files_written} files "
        f"({report.total_rows:,} rows) into {escape(str(report.output_path))}[/green]"
    )


def _print_report(report: ConsolidationReport) -> None:
    table = Table(title="Consolidation Results")
    table.add_column("File", style="cyan")
    table.add_column("Rows", style="green", justify="right")
    table.add_column("Batches", style="green", justify="right")

    for trace in report.files:
        table.add_row(escape(str(trace.path)), f"{trace.rows:,}", str(trace.batches))

    table.add_section()
    table.add_row("Total", f"{report.total_rows:,}", str(report.total_batches))

    console.print()
    console.print(table)
    console.print(f"[dim]Bytes written: {report.total_bytes_written:,}[/dim]")
    console.print(f"[dim]Duration: {report.duration_seconds:.2f}s[/dim]")
