"""
Exception hierarchy for parquet_consolidator.

All consolidation errors inherit from ConsolidatorError.
Every error is terminal for a run; nothing is retried internally.

Usage:
    from parquet_consolidator._exceptions import ConsolidatorError, SchemaMismatchError

    try:
        parquet_consolidator.consolidate("data/", "merged.parquet")
    except SchemaMismatchError as e:
        # Field-level diff is in the message and in e.diffs
        print(e)
    except ConsolidatorError as e:
        # Catch-all, e.stage tells where the run stopped
        sys.exit(e.exit_code)
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from parquet_consolidator.schema import FieldDiff, TableSchema


class ConsolidatorError(Exception):
    """Base exception for all consolidation errors."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Filled in by the orchestrator when the error crosses a stage boundary
        self.stage: Optional[str] = None


class InvalidArgumentsError(ConsolidatorError):
    """
    Run configuration is invalid.

    Raised when:
    - batch_size is not positive
    - compression codec is unknown
    - input and output resolve to the same path
    """

    exit_code = 2


class InputNotFoundError(ConsolidatorError):
    """Input path does not exist."""

    exit_code = 3

    def __init__(self, path: Path) -> None:
        super().__init__(f"Input path not found: {path}")
        self.path = path


class NoMatchingFilesError(ConsolidatorError):
    """
    Discovery produced no parquet files.

    Raised when:
    - Input directory has no .parquet files (at the scanned depth)
    - Input is a regular file without a .parquet extension
    - Input is neither a regular file nor a directory (FIFO, device)
    """

    exit_code = 4

    def __init__(self, path: Path, message: Optional[str] = None) -> None:
        super().__init__(message or f"No parquet files found in {path}")
        self.path = path


class DiscoveryError(ConsolidatorError):
    """
    Input directory tree could not be listed.

    Raised when:
    - A directory under the input is not readable (permissions)
    - The filesystem fails while listing entries
    """

    exit_code = 10

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to list directory {path}: {cause}")
        self.path = path
        self.cause = cause


class SchemaReadError(ConsolidatorError):
    """Parquet footer could not be read (corrupt file, bad magic, I/O)."""

    exit_code = 5

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read schema from {path}: {cause}")
        self.path = path
        self.cause = cause


class SchemaMismatchError(ConsolidatorError):
    """
    File schema differs from the reference schema.

    The reference is the schema of the first discovered file.
    Compatibility requires equal length and, per position,
    equal name, type and nullability.

    Examples:
        - "Field 2: type mismatch (expected double, got float)"
        - "Field 3: unexpected extra field 'extra: string'"
    """

    exit_code = 6

    def __init__(
        self,
        path: Path,
        expected: "TableSchema",
        actual: "TableSchema",
        diffs: list["FieldDiff"],
    ) -> None:
        lines = "\n".join(f"  - {d.describe()}" for d in diffs)
        super().__init__(
            f"Schema mismatch in {path}\n"
            f"\n"
            f"Expected: {expected}\n"
            f"Actual:   {actual}\n"
            f"\n"
            f"Differences:\n{lines}"
        )
        self.path = path
        self.expected = expected
        self.actual = actual
        self.diffs = diffs


class ReadError(ConsolidatorError):
    """Corrupt data or I/O failure while streaming batches from a file."""

    exit_code = 7

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read batches from {path}: {cause}")
        self.path = path
        self.cause = cause


class OutputPathInvalidError(ConsolidatorError):
    """
    Output path cannot be written.

    Raised when:
    - Parent directory does not exist
    - Parent directory is not writable
    - Output path is an existing directory
    """

    exit_code = 8

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid output path {path}: {reason}")
        self.path = path
        self.reason = reason


class WriteError(ConsolidatorError):
    """I/O failure while writing the consolidated file (disk full, permissions)."""

    exit_code = 9

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause
