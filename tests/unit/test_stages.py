"""Unit tests for pipeline stage transitions and progress logging."""

import logging

import pytest

from parquet_consolidator.consolidate._orchestrator import _enter
from parquet_consolidator.report import Stage


class TestStage:

    @pytest.mark.parametrize("stage", [Stage.DONE, Stage.FAILED])
    def test_terminal_stages(self, stage):
        assert stage.is_terminal

    @pytest.mark.parametrize(
        "stage", [Stage.INIT, Stage.DISCOVERING, Stage.VALIDATING, Stage.WRITING]
    )
    def test_running_stages(self, stage):
        assert not stage.is_terminal


class TestEnter:

    def test_moves_to_next_stage(self, context):
        _enter(context, Stage.DISCOVERING)
        assert context.stage is Stage.DISCOVERING

    @pytest.mark.parametrize("terminal", [Stage.DONE, Stage.FAILED])
    def test_terminal_run_cannot_restart(self, context, terminal):
        context.stage = terminal

        with pytest.raises(RuntimeError, match=f"run already {terminal.value}"):
            _enter(context, Stage.WRITING)

        assert context.stage is terminal


class TestProgress:

    @pytest.fixture(autouse=True)
    def _propagate(self):
        logging.getLogger("parquet_consolidator").propagate = True

    def test_quiet_context_logs_debug(self, context, caplog):
        with caplog.at_level(logging.DEBUG, logger="parquet_consolidator"):
            context.progress("step")

        assert [r.levelno for r in caplog.records] == [logging.DEBUG]

    def test_verbose_context_logs_info(self, context, caplog):
        context.config = context.config.model_copy(update={"verbose": True})

        with caplog.at_level(logging.DEBUG, logger="parquet_consolidator"):
            context.progress("step")

        assert [r.levelno for r in caplog.records] == [logging.INFO]
