import importlib.metadata as _metadata
import logging

from parquet_consolidator._exceptions import (
    ConsolidatorError,
    DiscoveryError,
    InputNotFoundError,
    InvalidArgumentsError,
    NoMatchingFilesError,
    OutputPathInvalidError,
    ReadError,
    SchemaMismatchError,
    SchemaReadError,
    WriteError,
)
from parquet_consolidator._logging import configure_logging, silence_logging
from parquet_consolidator.config import ConsolidationConfig
from parquet_consolidator.consolidate import consolidate, run
from parquet_consolidator.discovery import find_parquet_files, is_parquet_file
from parquet_consolidator.report import ConsolidationReport, FileTrace, Stage
from parquet_consolidator.schema import Field, FieldDiff, TableSchema

__version__ = _metadata.version("parquet-consolidator")


def verbose(level=True):
    """
    Enable/disable verbose logging for consolidation runs.

    Args:
        level: Logging level to enable:
            - True or "info": Show INFO and above (per-file progress)
            - "debug": Show DEBUG and above (per-batch detail)
            - False: Disable all logging

    Example:
        >>> import parquet_consolidator
        >>> parquet_consolidator.verbose("debug")
        >>> parquet_consolidator.consolidate("data/", "merged.parquet")
    """
    if level is False:
        silence_logging()
    elif level is True or level == "info":
        configure_logging(level=logging.INFO)
    elif level == "debug":
        configure_logging(level=logging.DEBUG)
    else:
        raise ValueError(
            f"Invalid verbose level: {level}. " "Use True, 'info', 'debug', or False."
        )


__all__ = [
    "ConsolidationConfig",
    "ConsolidationReport",
    "ConsolidatorError",
    "DiscoveryError",
    "Field",
    "FieldDiff",
    "FileTrace",
    "InputNotFoundError",
    "InvalidArgumentsError",
    "NoMatchingFilesError",
    "OutputPathInvalidError",
    "ReadError",
    "SchemaMismatchError",
    "SchemaReadError",
    "Stage",
    "TableSchema",
    "WriteError",
    "consolidate",
    "find_parquet_files",
    "is_parquet_file",
    "run",
    "verbose",
]
