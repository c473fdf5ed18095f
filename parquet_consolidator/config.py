"""
Run configuration for consolidation.

ConsolidationConfig is built once at run start and never mutated.
Use ConsolidationConfig.create() to get InvalidArgumentsError instead of
pydantic's ValidationError.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from parquet_consolidator._constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_COMPRESSION,
    SUPPORTED_COMPRESSIONS,
)
from parquet_consolidator._exceptions import InvalidArgumentsError


class ConsolidationConfig(BaseModel):
    """
    Options for a single consolidation run.

    Attributes:
        input_path: File or directory to read from
        output_path: Destination file (replaced on success)
        recursive: Descend into subdirectories during discovery
        verbose: Log per-file progress at INFO level
        batch_size: Maximum rows per streamed record batch
        compression: Parquet codec for the output ('none' disables it)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_path: Path
    output_path: Path
    recursive: bool = False
    verbose: bool = False
    batch_size: int = DEFAULT_BATCH_SIZE
    compression: str = DEFAULT_COMPRESSION

    @field_validator("batch_size")
    @classmethod
    def _check_batch_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"batch_size must be positive, got {value}")
        return value

    @field_validator("compression")
    @classmethod
    def _check_compression(cls, value: str) -> str:
        codec = value.lower()
        if codec not in SUPPORTED_COMPRESSIONS:
            raise ValueError(
                f"Unknown compression '{value}'. "
                f"Available: {list(SUPPORTED_COMPRESSIONS)}"
            )
        return codec

    @classmethod
    def create(cls, **kwargs: Any) -> "ConsolidationConfig":
        """
        Build a config, mapping validation failures to InvalidArgumentsError.

        Raises:
            InvalidArgumentsError: If any option is invalid
        """
        try:
            return cls(**kwargs)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidArgumentsError(f"Invalid arguments: {details}") from e
