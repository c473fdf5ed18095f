"""
Consolidated output writer.

Owns the only output handle of a run. Batches go to a sibling
'<output>.in-progress' file; finalize() closes it and atomically replaces
the output path. A run that never finalizes leaves no file behind and an
existing output untouched.

Usage:
    check_output_path(output, context)
    with ConsolidationWriter(schema, context) as writer:
        for batch in batches:
            writer.append(batch)
        writer.finalize()
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import pyarrow as pa
import pyarrow.parquet as pq

from parquet_consolidator._constants import IN_PROGRESS_SUFFIX
from parquet_consolidator._exceptions import (
    OutputPathInvalidError,
    SchemaMismatchError,
    WriteError,
)
from parquet_consolidator._logging import get_logger
from parquet_consolidator.schema import TableSchema

if TYPE_CHECKING:
    from parquet_consolidator.consolidate._context import RunContext

logger = get_logger(__name__)


def check_output_path(output: Path, context: "RunContext") -> None:
    """
    Validate the output location before any input data is read.

    Raises:
        OutputPathInvalidError: If the parent is missing, not a directory or
            not writable, or if output is an existing directory
    """
    parent = output.parent

    if output.is_dir():
        raise OutputPathInvalidError(output, "path is an existing directory")
    if not parent.exists():
        raise OutputPathInvalidError(output, f"parent directory does not exist: {parent}")
    if not parent.is_dir():
        raise OutputPathInvalidError(output, f"parent is not a directory: {parent}")
    if not os.access(parent, os.W_OK | os.X_OK):
        raise OutputPathInvalidError(output, f"parent directory is not writable: {parent}")

    logger.debug(f"Output path OK: {output} (compression={context.config.compression})")


class ConsolidationWriter:
    """
    Append-only parquet writer bound to the reference schema.

    Every appended batch must conform to the reference schema exactly;
    the file becomes valid only after finalize() succeeds.
    """

    def __init__(self, schema: TableSchema, context: "RunContext") -> None:
        self.schema = schema
        self.output_path = context.config.output_path
        self.temp_path = self.output_path.with_name(
            self.output_path.name + IN_PROGRESS_SUFFIX
        )
        self._compression = context.config.compression
        self._writer: Optional[pq.ParquetWriter] = None
        self._finalized = False
        self.rows_written = 0
        self.batches_written = 0

    def open(self) -> "ConsolidationWriter":
        if self._writer is not None:
            raise RuntimeError("Writer already open")

        try:
            self._writer = pq.ParquetWriter(
                self.temp_path,
                self.schema.to_arrow(),
                compression=self._compression,
            )
        except (pa.ArrowException, OSError) as e:
            raise WriteError(self.output_path, e) from e

        logger.debug(f"Opened writer on {self.temp_path}")
        return self

    def append(self, batch: pa.RecordBatch) -> None:
        """
        Write one batch.

        Raises:
            SchemaMismatchError: If batch does not conform to the reference schema
            WriteError: On I/O failure
        """
        if self._writer is None or self._finalized:
            raise RuntimeError("Writer is not open")

        batch_schema = TableSchema(batch.schema)
        diffs = self.schema.diff(batch_schema)
        if diffs:
            raise SchemaMismatchError(self.output_path, self.schema, batch_schema, diffs)

        try:
            self._writer.write_batch(batch)
        except (pa.ArrowException, OSError) as e:
            raise WriteError(self.output_path, e) from e

        self.rows_written += batch.num_rows
        self.batches_written += 1

    def finalize(self) -> int:
        """
        Flush, close and move the temp file onto the output path.

        Returns:
            Size of the consolidated file in bytes

        Raises:
            WriteError: If closing or renaming fails
        """
        if self._writer is None or self._finalized:
            raise RuntimeError("Writer is not open")

        try:
            self._writer.close()
            self._writer = None
            os.replace(self.temp_path, self.output_path)
        except (pa.ArrowException, OSError) as e:
            self.abort()
            raise WriteError(self.output_path, e) from e

        self._finalized = True
        size = self.output_path.stat().st_size
        logger.debug(
            f"Finalized {self.output_path}: {self.rows_written} rows, "
            f"{self.batches_written} batches, {size} bytes"
        )
        return size

    def abort(self) -> None:
        """Close the writer (if open) and delete the in-progress file."""
        if self._writer is not None:
            try:
                self._writer.close()
            except (pa.ArrowException, OSError) as e:
                logger.debug(f"Ignoring close error during abort: {e}")
            self._writer = None

        if self.temp_path.exists():
            self.temp_path.unlink()
            logger.debug(f"Removed incomplete output {self.temp_path}")

    @property
    def finalized(self) -> bool:
        return self._finalized

    def __enter__(self) -> "ConsolidationWriter":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._finalized:
            self.abort()
