"""
Schema validation before consolidation.

Reads only parquet footers. The first file's schema becomes the
reference; every later file must match it exactly (name, type and
nullability per position). Stops at the first mismatch.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import pyarrow as pa
import pyarrow.parquet as pq

from parquet_consolidator._exceptions import SchemaMismatchError, SchemaReadError
from parquet_consolidator._logging import get_logger
from parquet_consolidator.schema import TableSchema

if TYPE_CHECKING:
    from parquet_consolidator.consolidate._context import RunContext

logger = get_logger(__name__)


def read_schema(path: Path) -> TableSchema:
    """
    Read a parquet file's schema from its footer.

    Raises:
        SchemaReadError: If the footer is missing, corrupt or unreadable
    """
    try:
        return TableSchema(pq.read_schema(path))
    except (pa.ArrowException, OSError) as e:
        raise SchemaReadError(path, e) from e


def validate_schemas(files: Sequence[Path], context: "RunContext") -> TableSchema:
    """
    Check every file against the first file's schema.

    Returns:
        Reference schema (also stored on context)

    Raises:
        SchemaReadError: If any footer cannot be read
        SchemaMismatchError: On the first incompatible file
    """
    reference: TableSchema | None = None

    for path in files:
        schema = read_schema(path)

        if reference is None:
            reference = schema
            context.reference_schema = reference
            logger.debug(f"Reference schema from {path}: {reference}")
        elif not reference.is_compatible(schema):
            raise SchemaMismatchError(path, reference, schema, reference.diff(schema))

        context.files_validated += 1
        context.progress(f"Validated schema: {path}")

    if reference is None:
        raise ValueError("validate_schemas() requires at least one file")

    logger.debug(f"All {len(files)} schemas compatible")
    return reference
