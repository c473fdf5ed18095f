"""
Parquet file discovery.

Walks an input path (single file or directory, optionally recursive) and
returns a sorted list of parquet files. Nothing is opened here, entries
are only listed.

Rules:
- Extension match is case-insensitive (.parquet, .PARQUET)
- Hidden entries (leading '.') are skipped, hidden dirs are not descended
- Symbolic links are skipped, both to files and to directories
- Results are sorted by path components so runs are reproducible
"""

import os
from pathlib import Path

from parquet_consolidator._constants import HIDDEN_PREFIX, PARQUET_EXTENSION
from parquet_consolidator._exceptions import (
    DiscoveryError,
    InputNotFoundError,
    NoMatchingFilesError,
)
from parquet_consolidator._logging import get_logger

logger = get_logger(__name__)


def is_parquet_file(path: str | os.PathLike) -> bool:
    """
    Check if a path has a parquet extension.

    Examples:
        >>> is_parquet_file("data.parquet")
        True
        >>> is_parquet_file("DATA.PARQUET")
        True
        >>> is_parquet_file("data.csv")
        False
    """
    return Path(path).suffix.lower() == PARQUET_EXTENSION


def find_parquet_files(root: str | os.PathLike, recursive: bool = False) -> list[Path]:
    """
    Find all parquet files under root.

    Args:
        root: Parquet file or directory
        recursive: Descend into subdirectories at any depth

    Returns:
        Sorted list of parquet file paths (never empty)

    Raises:
        InputNotFoundError: If root does not exist
        NoMatchingFilesError: If root is a non-parquet file, not a regular
            file or directory, or nothing matched
        DiscoveryError: If a directory under root cannot be listed
    """
    root = Path(root)

    if not root.exists():
        raise InputNotFoundError(root)

    if root.is_file():
        if not is_parquet_file(root):
            raise NoMatchingFilesError(
                root, f"Input file is not a parquet file: {root}"
            )
        logger.debug(f"Input is a single parquet file: {root}")
        return [root]

    if not root.is_dir():
        raise NoMatchingFilesError(
            root, f"Input is not a parquet file or directory: {root}"
        )

    files = sorted(_walk(root, recursive))

    if not files:
        raise NoMatchingFilesError(root)

    logger.debug(f"Discovered {len(files)} parquet files in {root} (recursive={recursive})")
    return files


def _walk(directory: Path, recursive: bool) -> list[Path]:
    """Collect matching files in directory, descending if recursive."""
    found: list[Path] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name.startswith(HIDDEN_PREFIX) or entry.is_symlink():
                    continue

                if entry.is_dir(follow_symlinks=False):
                    if recursive:
                        found.extend(_walk(Path(entry.path), recursive))
                elif entry.is_file(follow_symlinks=False) and is_parquet_file(entry.name):
                    found.append(Path(entry.path))
    except OSError as e:
        raise DiscoveryError(directory, e) from e

    return found
