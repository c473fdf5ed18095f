"""
Run statistics for consolidation.

FileTrace records one input file's contribution. ConsolidationReport is
the sealed summary returned by consolidate(); it is frozen once built.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Stage(str, Enum):
    """Pipeline state: INIT -> DISCOVERING -> VALIDATING -> WRITING -> DONE."""

    INIT = "init"
    DISCOVERING = "discovering"
    VALIDATING = "validating"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (Stage.DONE, Stage.FAILED)


class FileTrace(BaseModel):
    """Rows and batches copied from one input file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    rows: int
    batches: int


class ConsolidationReport(BaseModel):
    """Summary of a completed consolidation run."""

    model_config = ConfigDict(frozen=True)

    output_path: Path
    reference_schema: str
    files_found: int
    files_validated: int
    files_written: int
    total_rows: int
    total_batches: int
    total_bytes_written: int
    duration_seconds: float
    files: tuple[FileTrace, ...] = ()

    def summary(self) -> str:
        """
        One-line description of the run.

        Example:
            >>> report.summary()
            'Consolidated 3 files (250 rows, 4,210 bytes) into merged.parquet'
        """
        return (
            f"Consolidated {self.files_written} files "
            f"({self.total_rows:,} rows, {self.total_bytes_written:,} bytes) "
            f"into {self.output_path}"
        )
