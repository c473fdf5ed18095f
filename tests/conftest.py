"""Pytest fixtures for parquet_consolidator tests."""

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

STANDARD_SCHEMA = pa.schema(
    [
        pa.field("id", pa.int32(), nullable=False),
        pa.field("name", pa.string(), nullable=False),
        pa.field("value", pa.float64(), nullable=False),
    ]
)

EXTRA_COLUMN_SCHEMA = STANDARD_SCHEMA.append(pa.field("extra", pa.string()))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (no pipeline runs)")
    config.addinivalue_line("markers", "integration: end-to-end pipeline and CLI tests")
    config.addinivalue_line("markers", "slow: large data (memory sampling)")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def make_table(start: int, end: int, schema: pa.Schema = STANDARD_SCHEMA) -> pa.Table:
    """Rows id=start..end-1 with name_<id> and value=id*1.5, extra columns filled."""
    ids = list(range(start, end))
    columns = {
        "id": pa.array(ids, type=pa.int32()),
        "name": pa.array([f"name_{i}" for i in ids], type=pa.string()),
        "value": pa.array([i * 1.5 for i in ids], type=pa.float64()),
    }
    arrays = []
    for field in schema:
        if field.name in columns:
            arrays.append(columns[field.name].cast(field.type))
        else:
            arrays.append(pa.array([f"{field.name}_{i}" for i in ids], type=field.type))
    return pa.Table.from_arrays(arrays, schema=schema)


@pytest.fixture
def write_parquet():
    """
    Factory writing a test parquet file.

    Usage:
        write_parquet(path, 0, 10)
        write_parquet(path, 0, 10, schema=EXTRA_COLUMN_SCHEMA, row_group_size=3)
    """

    def _write(
        path: Path,
        start: int,
        end: int,
        schema: pa.Schema = STANDARD_SCHEMA,
        row_group_size: int | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        pq.write_table(make_table(start, end, schema), path, row_group_size=row_group_size)
        return path

    return _write


@pytest.fixture
def input_dir(tmp_path, write_parquet) -> Path:
    """Three standard files: a (0-10), b (10-25), c (25-30)."""
    root = tmp_path / "input"
    write_parquet(root / "a.parquet", 0, 10)
    write_parquet(root / "b.parquet", 10, 25)
    write_parquet(root / "c.parquet", 25, 30)
    return root


@pytest.fixture
def nested_dir(tmp_path, write_parquet) -> Path:
    """
    Layout:
        nested/top.parquet        (0-5)
        nested/notes.txt
        nested/sub/mid.parquet    (5-10)
        nested/sub/deep/low.parquet (10-20)
    """
    root = tmp_path / "nested"
    write_parquet(root / "top.parquet", 0, 5)
    write_parquet(root / "sub" / "mid.parquet", 5, 10)
    write_parquet(root / "sub" / "deep" / "low.parquet", 10, 20)
    (root / "notes.txt").write_text("not parquet")
    return root


@pytest.fixture
def output_path(tmp_path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out / "consolidated.parquet"


@pytest.fixture
def context(tmp_path):
    """RunContext with small batches and an output under tmp_path."""
    from parquet_consolidator.config import ConsolidationConfig
    from parquet_consolidator.consolidate._context import RunContext

    config = ConsolidationConfig(
        input_path=tmp_path,
        output_path=tmp_path / "ctx_output.parquet",
        batch_size=4,
    )
    return RunContext(config=config)


@pytest.fixture(autouse=True)
def reset_logging():
    import logging

    logger = logging.getLogger("parquet_consolidator")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    original_propagate = logger.propagate
    yield
    logger.handlers = original_handlers
    logger.level = original_level
    logger.propagate = original_propagate
