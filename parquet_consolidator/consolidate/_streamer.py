"""
Lazy record batch streaming from a single parquet file.

The file is opened when iteration starts and closed as soon as the
generator is exhausted, closed or fails. Only one batch is alive at a
time, so memory is bounded by batch_size rather than file size.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterator

import pyarrow as pa
import pyarrow.parquet as pq

from parquet_consolidator._exceptions import ReadError
from parquet_consolidator._logging import get_logger

if TYPE_CHECKING:
    from parquet_consolidator.consolidate._context import RunContext

logger = get_logger(__name__)


def stream_batches(path: Path, context: "RunContext") -> Iterator[pa.RecordBatch]:
    """
    Yield record batches of path in on-disk order.

    Raises:
        ReadError: On corrupt data or I/O failure while reading
    """
    batch_size = context.config.batch_size

    try:
        parquet_file = pq.ParquetFile(path)
    except (pa.ArrowException, OSError) as e:
        raise ReadError(path, e) from e

    with parquet_file:
        logger.debug(
            f"Streaming {path}: {parquet_file.metadata.num_rows} rows in "
            f"{parquet_file.num_row_groups} row groups (batch_size={batch_size})"
        )
        batches = parquet_file.iter_batches(batch_size=batch_size, use_threads=False)

        while True:
            # Only reader errors are wrapped; errors raised by the consumer
            # at the yield point propagate untouched.
            try:
                batch = next(batches)
            except StopIteration:
                return
            except (pa.ArrowException, OSError) as e:
                raise ReadError(path, e) from e

            yield batch
