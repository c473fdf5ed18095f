"""
Global constants for parquet_consolidator.

Organized by: File Discovery, Streaming, Output.
"""

# File Discovery
PARQUET_EXTENSION = ".parquet"
"""Parquet file extension (matched case-insensitively)."""

HIDDEN_PREFIX = "."
"""Entries starting with this prefix are skipped during discovery."""


# Streaming
DEFAULT_BATCH_SIZE = 65_536
"""
Maximum rows per record batch pulled from an input file.

Peak memory of a run is proportional to one batch, not to file size.
Matches pyarrow's default iter_batches() size.
"""


# Output
DEFAULT_COMPRESSION = "snappy"
"""Compression codec for the consolidated file."""

SUPPORTED_COMPRESSIONS = ("snappy", "gzip", "brotli", "zstd", "lz4", "none")
"""Codecs accepted by pyarrow.parquet.ParquetWriter ('none' writes uncompressed)."""

IN_PROGRESS_SUFFIX = ".in-progress"
"""Suffix of the temporary file written before the final atomic rename."""
