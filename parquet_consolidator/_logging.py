"""
Logging for parquet_consolidator.

Every module logs under the "parquet_consolidator" namespace. Importing
the package installs no handler. Records are printed only once the CLI
calls configure_cli_logging(), the user calls parquet_consolidator.verbose(),
or the application configures the logging module itself.

Levels:
    DEBUG    stage transitions, discovery and writer detail
    INFO     per-file progress and the run summary of verbose runs
    WARNING  CLI default, a successful run logs nothing at this level
"""

import logging
from typing import Optional

LOGGER_NAMESPACE = "parquet_consolidator"

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

SILENT = logging.CRITICAL + 1


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger inside the package namespace.

    Names already under the namespace are kept, "__main__" maps to the
    namespace itself and anything else becomes a child of it.
    """
    if name == "__main__":
        return logging.getLogger(LOGGER_NAMESPACE)
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def level_for_verbosity(verbose: bool) -> int:
    return logging.INFO if verbose else logging.WARNING


def configure_logging(
    level: int = logging.INFO, fmt: Optional[str] = None
) -> logging.Logger:
    """
    Print namespace records at or above level to stderr.

    The stream handler is installed on the first call only. Later calls
    move the logger and all of its handlers to the new level, so a run can
    switch from WARNING to DEBUG. Records do not propagate to the root
    logger and are never printed twice.
    """
    namespace = logging.getLogger(LOGGER_NAMESPACE)

    if not namespace.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
        namespace.addHandler(stream)

    namespace.setLevel(level)
    for handler in namespace.handlers:
        handler.setLevel(level)
    namespace.propagate = False

    return namespace


def configure_cli_logging(verbose: bool) -> logging.Logger:
    """Configure logging for one command-line run."""
    return configure_logging(level_for_verbosity(verbose))


def silence_logging() -> None:
    """Drop every namespace record, CRITICAL included."""
    logging.getLogger(LOGGER_NAMESPACE).setLevel(SILENT)
