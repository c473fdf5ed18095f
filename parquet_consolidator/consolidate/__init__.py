"""
Consolidate many same-schema parquet files into one.

Public API:
    consolidate(input_path, output_path, recursive, verbose) -> ConsolidationReport
        Discovers, validates and streams inputs into a single output file.
    run(config) -> ConsolidationReport
        Same pipeline for an already-built ConsolidationConfig.

Internal modules (not exported):
    _context: Per-run state threaded through every stage
    _validation: Footer-only schema checks against the first file's schema
    _streamer: Lazy per-file record batch generator
    _writer: Output path checks and the single output writer
    _orchestrator: Stage sequencing and report building

Architecture:
    consolidate() runs a strictly sequential pipeline:
    1. Discovery: list parquet files (discovery.py)
    2. Validation: check output path and all schemas (_writer.py, _validation.py)
    3. Writing: pull one batch, push it, repeat (_streamer.py, _writer.py)
    4. Done: seal ConsolidationReport (_orchestrator.py)
"""

from parquet_consolidator.consolidate._orchestrator import consolidate, run

__all__ = ["consolidate", "run"]
