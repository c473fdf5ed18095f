from parquet_consolidator.cli import app

app(prog_name="parquet-consolidator")
