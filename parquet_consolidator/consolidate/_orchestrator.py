"""
Main consolidation orchestrator.

Coordinates the sequential pipeline:
1. Discovering: list parquet files under the input path
2. Validating: check the output path, then every file's schema
3. Writing: stream each file batch by batch into one writer
4. Done: seal and return the report

Any ConsolidatorError moves the run to FAILED; the error carries the
stage it failed in and is re-raised. Nothing is retried.
"""

from pathlib import Path
from typing import Any

from parquet_consolidator._exceptions import (
    ConsolidatorError,
    InvalidArgumentsError,
    NoMatchingFilesError,
)
from parquet_consolidator._logging import get_logger
from parquet_consolidator.config import ConsolidationConfig
from parquet_consolidator.consolidate._context import RunContext
from parquet_consolidator.consolidate._streamer import stream_batches
from parquet_consolidator.consolidate._validation import validate_schemas
from parquet_consolidator.consolidate._writer import (
    ConsolidationWriter,
    check_output_path,
)
from parquet_consolidator.discovery import find_parquet_files
from parquet_consolidator.report import ConsolidationReport, FileTrace, Stage

logger = get_logger(__name__)


def consolidate(
    input_path: str | Path,
    output_path: str | Path,
    recursive: bool = False,
    verbose: bool = False,
    **options: Any,
) -> ConsolidationReport:
    """
    Consolidate all parquet files under input_path into output_path.

    Args:
        input_path: Parquet file or directory
        output_path: Destination file (replaced only on success)
        recursive: Descend into subdirectories
        verbose: Log per-file progress at INFO level instead of DEBUG.
            Nothing is printed unless logging is configured, either by
            parquet_consolidator.verbose() or by the CLI.
        **options: Extra ConsolidationConfig fields (batch_size, compression)

    Returns:
        Sealed ConsolidationReport

    Raises:
        InvalidArgumentsError: If options are invalid
        InputNotFoundError: If input_path does not exist
        NoMatchingFilesError: If no parquet files were found
        OutputPathInvalidError: If output_path cannot be written
        SchemaReadError: If a footer cannot be read
        SchemaMismatchError: If any file differs from the first file's schema
        ReadError: If a file fails mid-stream
        WriteError: If writing the output fails

    Examples:
        >>> report = consolidate("data/", "merged.parquet", recursive=True)
        >>> report.total_rows
        500
    """
    config = ConsolidationConfig.create(
        input_path=Path(input_path),
        output_path=Path(output_path),
        recursive=recursive,
        verbose=verbose,
        **options,
    )
    return run(config)


def run(config: ConsolidationConfig) -> ConsolidationReport:
    """Run the pipeline for an already-built config."""
    context = RunContext(config=config)

    try:
        _check_distinct_paths(config)

        _enter(context, Stage.DISCOVERING)
        context.files = tuple(_discover(context))

        _enter(context, Stage.VALIDATING)
        check_output_path(config.output_path, context)
        schema = validate_schemas(context.files, context)

        _enter(context, Stage.WRITING)
        with ConsolidationWriter(schema, context) as writer:
            for index, path in enumerate(context.files):
                _write_file(writer, path, index, context)
            context.bytes_written = writer.finalize()

    except ConsolidatorError as e:
        e.stage = context.stage.value
        logger.debug(f"Run failed during {context.stage.value}: {e}")
        context.stage = Stage.FAILED
        raise

    _enter(context, Stage.DONE)
    report = context.seal()
    context.progress(report.summary())
    return report


def _enter(context: RunContext, stage: Stage) -> None:
    if context.stage.is_terminal:
        raise RuntimeError(
            f"Cannot enter {stage.value}, run already {context.stage.value}"
        )
    logger.debug(f"Stage: {context.stage.value} -> {stage.value}")
    context.stage = stage


def _check_distinct_paths(config: ConsolidationConfig) -> None:
    if config.input_path.resolve() == config.output_path.resolve():
        raise InvalidArgumentsError(
            f"Input and output must differ, both resolve to {config.input_path}"
        )


def _discover(context: RunContext) -> list[Path]:
    """Find input files, excluding a previous output living under the input dir."""
    config = context.config
    files = find_parquet_files(config.input_path, recursive=config.recursive)

    output = config.output_path.resolve()
    kept = [f for f in files if f.resolve() != output]
    if len(kept) != len(files):
        context.progress(f"Skipping output file found among inputs: {config.output_path}")
    if not kept:
        # Only the previous output matched
        raise NoMatchingFilesError(config.input_path)

    context.progress(f"Found {len(kept)} parquet files in {config.input_path}")
    return kept


def _write_file(
    writer: ConsolidationWriter, path: Path, index: int, context: RunContext
) -> None:
    """Pull one batch, push it, repeat until the file is exhausted."""
    rows = 0
    batches = 0

    for batch in stream_batches(path, context):
        writer.append(batch)
        rows += batch.num_rows
        batches += 1

    context.traces.append(FileTrace(path=path, rows=rows, batches=batches))

    context.progress(
        f"[{index + 1}/{len(context.files)}] {path}: "
        f"{rows:,} rows in {batches} batches"
    )
