"""
Per-run context threaded through every pipeline stage.

Holds the immutable config plus the mutable run state (stage, discovered
files, reference schema, counters). Created once per run by the
orchestrator; there is no module-level state.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from parquet_consolidator._logging import get_logger
from parquet_consolidator.config import ConsolidationConfig
from parquet_consolidator.report import ConsolidationReport, FileTrace, Stage
from parquet_consolidator.schema import TableSchema

logger = get_logger(__name__)


@dataclass
class RunContext:
    config: ConsolidationConfig
    stage: Stage = Stage.INIT
    files: tuple[Path, ...] = ()
    reference_schema: Optional[TableSchema] = None
    files_validated: int = 0
    traces: list[FileTrace] = field(default_factory=list)
    bytes_written: int = 0
    started_at: float = field(default_factory=time.perf_counter)

    @property
    def total_rows(self) -> int:
        return sum(t.rows for t in self.traces)

    @property
    def total_batches(self) -> int:
        return sum(t.batches for t in self.traces)

    def progress(self, message: str) -> None:
        """Log a progress line at INFO for verbose runs, DEBUG otherwise."""
        level = logging.INFO if self.config.verbose else logging.DEBUG
        logger.log(level, message)

    def seal(self) -> ConsolidationReport:
        """Build the frozen report for a completed run."""
        return ConsolidationReport(
            output_path=self.config.output_path,
            reference_schema=repr(self.reference_schema),
            files_found=len(self.files),
            files_validated=self.files_validated,
            files_written=len(self.traces),
            total_rows=self.total_rows,
            total_batches=self.total_batches,
            total_bytes_written=self.bytes_written,
            duration_seconds=time.perf_counter() - self.started_at,
            files=tuple(self.traces),
        )
