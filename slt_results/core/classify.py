"""
Type classifier: Arrow physical type -> ColumnType.

The category is display-only (expectation-file tags); cell rendering
switches on the physical type directly, see cells.py.
"""

from collections.abc import Callable, Iterable

import pyarrow as pa

from slt_results.domain.schemas import ColumnType


def is_utf8(data_type: pa.DataType) -> bool:
    """string, large_string or string_view."""
    return (
        pa.types.is_string(data_type)
        or pa.types.is_large_string(data_type)
        or pa.types.is_string_view(data_type)
    )


def is_binary(data_type: pa.DataType) -> bool:
    """binary, large_binary, fixed_size_binary or binary_view."""
    return (
        pa.types.is_binary(data_type)
        or pa.types.is_large_binary(data_type)
        or pa.types.is_fixed_size_binary(data_type)
        or pa.types.is_binary_view(data_type)
    )


def _is_float_like(data_type: pa.DataType) -> bool:
    return pa.types.is_floating(data_type) or pa.types.is_decimal(data_type)


def _is_date_or_time(data_type: pa.DataType) -> bool:
    return pa.types.is_date(data_type) or pa.types.is_time(data_type)


# Checked in order; first match wins
_CATEGORIES: list[tuple[Callable[[pa.DataType], bool], ColumnType]] = [
    (pa.types.is_boolean, ColumnType.BOOLEAN),
    (pa.types.is_integer, ColumnType.INTEGER),
    (_is_float_like, ColumnType.FLOAT),
    (is_utf8, ColumnType.TEXT),
    (_is_date_or_time, ColumnType.DATETIME),
    (pa.types.is_timestamp, ColumnType.TIMESTAMP),
]


def classify(data_type: pa.DataType) -> ColumnType:
    """
    Map a physical type to its column category.

    Total: anything unrecognized is OTHER, so new engine types never fail.

    Args:
        data_type: Arrow data type of the column

    Returns:
        ColumnType
    """
    if pa.types.is_dictionary(data_type):
        # dictionary string types read as text
        if pa.types.is_integer(data_type.index_type) and is_utf8(data_type.value_type):
            return ColumnType.TEXT
        return ColumnType.OTHER

    for predicate, category in _CATEGORIES:
        if predicate(data_type):
            return category

    return ColumnType.OTHER


def convert_schema_to_types(fields: pa.Schema | Iterable[pa.Field]) -> list[ColumnType]:
    """Column categories for a schema, in column order."""
    return [classify(f.type) for f in fields]
