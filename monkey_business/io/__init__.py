"""I/O layer: agent-notes decoding, Parquet schemas, and output paths."""

from monkey_business.io.notes import load_population, parse_expression, parse_notes

__all__ = ["load_population", "parse_expression", "parse_notes"]
