"""Unit tests for lazy batch streaming."""

import types

import pyarrow as pa
import pytest

from parquet_consolidator._exceptions import ReadError
from parquet_consolidator.consolidate._streamer import stream_batches


class TestStreamBatches:

    def test_is_lazy_generator(self, tmp_path, context):
        # Nothing is opened until iteration starts
        gen = stream_batches(tmp_path / "does_not_exist.parquet", context)
        assert isinstance(gen, types.GeneratorType)

        with pytest.raises(ReadError):
            next(gen)

    def test_batches_bounded_by_batch_size(self, tmp_path, write_parquet, context):
        path = write_parquet(tmp_path / "a.parquet", 0, 10)

        batches = list(stream_batches(path, context))

        assert [b.num_rows for b in batches] == [4, 4, 2]

    def test_preserves_on_disk_order(self, tmp_path, write_parquet, context):
        path = write_parquet(tmp_path / "a.parquet", 0, 23, row_group_size=5)

        table = pa.Table.from_batches(list(stream_batches(path, context)))

        assert table.column("id").to_pylist() == list(range(23))
        assert table.column("name").to_pylist() == [f"name_{i}" for i in range(23)]

    def test_empty_file_yields_no_rows(self, tmp_path, write_parquet, context):
        path = write_parquet(tmp_path / "empty.parquet", 0, 0)
        assert sum(b.num_rows for b in stream_batches(path, context)) == 0

    def test_non_restartable(self, tmp_path, write_parquet, context):
        path = write_parquet(tmp_path / "a.parquet", 0, 5)
        gen = stream_batches(path, context)

        assert sum(b.num_rows for b in gen) == 5
        assert list(gen) == []

    def test_corrupt_file_raises_read_error(self, tmp_path, context):
        path = tmp_path / "bad.parquet"
        path.write_bytes(b"garbage")

        with pytest.raises(ReadError) as exc_info:
            list(stream_batches(path, context))

        assert exc_info.value.path == path
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_consumer_errors_not_wrapped(self, tmp_path, write_parquet, context):
        path = write_parquet(tmp_path / "a.parquet", 0, 10)
        gen = stream_batches(path, context)
        next(gen)

        with pytest.raises(OSError, match="consumer failed"):
            gen.throw(OSError("consumer failed"))

    def test_file_closed_when_generator_closed(
        self, tmp_path, write_parquet, context, monkeypatch
    ):
        import pyarrow.parquet as pq

        closed = []
        original_exit = pq.ParquetFile.__exit__

        def tracking_exit(self, *args):
            closed.append(True)
            return original_exit(self, *args)

        monkeypatch.setattr(pq.ParquetFile, "__exit__", tracking_exit)

        path = write_parquet(tmp_path / "a.parquet", 0, 10)
        gen = stream_batches(path, context)
        next(gen)
        assert closed == []

        gen.close()
        assert closed == [True]
