"""Tests for parquet_consolidator.__init__ public API."""

import pytest

import parquet_consolidator


class TestPublicApi:

    @pytest.mark.parametrize("name", parquet_consolidator.__all__)
    def test_exported_names_exist(self, name):
        assert hasattr(parquet_consolidator, name)

    def test_version_is_set(self):
        assert isinstance(parquet_consolidator.__version__, str)
        assert parquet_consolidator.__version__


class TestVerbose:
    """verbose() logging configuration."""

    @pytest.mark.parametrize("level", [True, False, "info", "debug"])
    def test_valid_levels_accepted(self, level):
        parquet_consolidator.verbose(level)

    @pytest.mark.parametrize("invalid", ["warning", "error", 42, None, []])
    def test_invalid_level_raises_valueerror(self, invalid):
        with pytest.raises(ValueError) as exc_info:
            parquet_consolidator.verbose(invalid)

        assert "Invalid verbose level" in str(exc_info.value)
