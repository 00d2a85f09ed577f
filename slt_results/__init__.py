"""
slt-results: canonical sqllogictest output for Arrow query results.

Converts an Arrow schema and record batches into a string row matrix and
per-column type tags that can be diffed against expectation files.
"""

from .core import (
    NormalizerConfig,
    classify,
    convert_batches,
    convert_query_output,
    convert_schema_to_types,
    load_config,
)
from .domain import (
    ColumnType,
    NormalizationError,
    Rows,
    SchemaMismatchError,
    StatementComplete,
    UnsupportedCellEncodingError,
)

__all__ = [
    "ColumnType",
    "NormalizationError",
    "NormalizerConfig",
    "Rows",
    "SchemaMismatchError",
    "StatementComplete",
    "UnsupportedCellEncodingError",
    "classify",
    "convert_batches",
    "convert_query_output",
    "convert_schema_to_types",
    "load_config",
]
