"""Domain layer: constants, errors and schemas."""

from .errors import (
    ConfigError,
    ErrorCodes,
    NormalizationError,
    SchemaMismatchError,
    UnsupportedCellEncodingError,
)
from .schemas import (
    ColumnType,
    QueryOutput,
    Rows,
    StatementComplete,
    types_from_string,
    types_to_string,
)

__all__ = [
    # errors
    "NormalizationError",
    "SchemaMismatchError",
    "UnsupportedCellEncodingError",
    "ConfigError",
    "ErrorCodes",
    # schemas
    "ColumnType",
    "QueryOutput",
    "Rows",
    "StatementComplete",
    "types_to_string",
    "types_from_string",
]
