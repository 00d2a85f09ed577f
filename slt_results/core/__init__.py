"""
Core layer: result normalization.

Pure transformations, no I/O besides config loading:
- classify: physical type -> column category
- cells: canonical cell strings
- expand: multi-line row expansion
- convert: schema check + batch conversion
"""

from .cells import cell_to_string, column_formatter
from .classify import classify, convert_schema_to_types
from .config import NormalizerConfig, load_config
from .convert import convert_batches, convert_query_output, schema_contains
from .expand import expand_row

__all__ = [
    # classify
    "classify",
    "convert_schema_to_types",
    # cells
    "cell_to_string",
    "column_formatter",
    # expand
    "expand_row",
    # convert
    "convert_batches",
    "convert_query_output",
    "schema_contains",
    # config
    "NormalizerConfig",
    "load_config",
]
