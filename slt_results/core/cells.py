"""
Cell canonicalization for sqllogictest-style comparisons.

Every cell becomes a string that is stable across engines and platforms:
- NULL -> "NULL", empty string -> "(empty)"
- NaN has no sign; infinities are spelled out
- floats and decimals are rounded to a fixed number of fractional digits
  (ROUND_HALF_EVEN) and printed without trailing zeros or exponent

See https://duckdb.org/dev/sqllogictest/result_verification#null-values-and-empty-strings
"""

import logging
import math
from collections.abc import Callable
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Any

import numpy as np
import pyarrow as pa
import pyarrow.compute as pc

from slt_results.core.classify import is_binary, is_utf8
from slt_results.domain.constants import (
    DEFAULT_ROUND_DIGITS,
    EMPTY_STR,
    FALSE_STR,
    INFINITY_STR,
    MIN_DECIMAL_PRECISION,
    NAN_STR,
    NEG_INFINITY_STR,
    NUL_ESCAPE,
    NULL_STR,
    TRUE_STR,
)
from slt_results.domain.errors import UnsupportedCellEncodingError

logger = logging.getLogger(__name__)

CellFormatter = Callable[[int], str]

# =============================================================================
# Scalar Renderers
# =============================================================================


def bool_to_str(value: bool) -> str:
    return TRUE_STR if value else FALSE_STR


def varchar_to_str(value: str) -> str:
    """
    Sanitize a text cell.

    Empty strings are marked so they are not confused with NULL.
    NUL characters are escaped so web diff viewers render them.
    """
    if not value:
        return EMPTY_STR
    return value.rstrip("\n").replace("\x00", NUL_ESCAPE)


def big_decimal_to_str(value: Decimal, round_digits: int | None = None) -> str:
    """
    Round a Decimal and print it in plain, normalized form.

    Args:
        value: finite Decimal
        round_digits: fractional digits to keep (None = 12)

    Returns:
        e.g. Decimal("1.000000000000400") -> "1"
    """
    if round_digits is None:
        round_digits = DEFAULT_ROUND_DIGITS

    # wide enough for the integer part plus the kept fraction
    precision = max(MIN_DECIMAL_PRECISION, value.adjusted() + round_digits + 2)
    context = Context(prec=precision, rounding=ROUND_HALF_EVEN)

    rounded = value.quantize(Decimal(1).scaleb(-round_digits), context=context)
    if rounded.is_zero():
        # no negative zero
        return "0"
    return format(rounded.normalize(context), "f")


def float_to_str(value: Any, round_digits: int | None = None) -> str:
    """
    Canonical text for a float of any width.

    Accepts Python floats and numpy float16/float32 scalars; str() of a
    numpy scalar is the shortest text that round-trips at its own width.
    """
    if math.isnan(value):
        # The sign of NaN differs between platforms
        return NAN_STR
    if math.isinf(value):
        return INFINITY_STR if value > 0 else NEG_INFINITY_STR
    return big_decimal_to_str(Decimal(str(value)), round_digits)


def decimal_to_str(value: Decimal, round_digits: int | None = None) -> str:
    """
    Canonical text for a fixed-point decimal.

    The scaled plain text (e.g. "1.00" for scale 2) goes through the
    same rounding as floats, so FLOAT 1.0 and DECIMAL 1.00 both give "1".
    """
    return big_decimal_to_str(Decimal(format(value, "f")), round_digits)


# =============================================================================
# Column Formatters
# =============================================================================


def _is_list_like(data_type: pa.DataType) -> bool:
    return (
        pa.types.is_list(data_type)
        or pa.types.is_large_list(data_type)
        or pa.types.is_fixed_size_list(data_type)
        or pa.types.is_list_view(data_type)
        or pa.types.is_large_list_view(data_type)
    )


# (predicate, renderer(value, round_digits)); first match wins
_RENDERERS: list[tuple[Callable[[pa.DataType], bool], Callable[[Any, int], str]]] = [
    (pa.types.is_boolean, lambda value, digits: bool_to_str(value)),
    (pa.types.is_integer, lambda value, digits: str(value)),
    # half floats print through float32, matching Arrow engines
    (pa.types.is_float16, lambda value, digits: float_to_str(np.float32(np.float16(value)), digits)),
    (pa.types.is_float32, lambda value, digits: float_to_str(np.float32(value), digits)),
    (pa.types.is_float64, lambda value, digits: float_to_str(float(value), digits)),
    (pa.types.is_decimal, decimal_to_str),
    (is_utf8, lambda value, digits: varchar_to_str(value)),
    (is_binary, lambda value, digits: value.hex()),
]


def _null_formatter(column: pa.Array, round_digits: int) -> CellFormatter:
    return lambda row: NULL_STR


def _dictionary_formatter(column: pa.DictionaryArray, round_digits: int) -> CellFormatter:
    keys = column.indices.to_pylist()
    resolve = column_formatter(column.dictionary, round_digits)

    def format_cell(row: int) -> str:
        key = keys[row]
        if key is None:
            return NULL_STR
        return resolve(key)

    return format_cell


def display_value(value: Any, data_type: pa.DataType) -> str:
    """
    Arrow display text for a Python value of `data_type`.

    Lists print as "[1, 2]", structs and maps as "{a: 1, b: x}",
    binary as hex. Nested nulls print as an empty string.
    """
    if value is None:
        return ""

    if pa.types.is_dictionary(data_type):
        return display_value(value, data_type.value_type)

    if is_binary(data_type):
        return value.hex()

    if pa.types.is_boolean(data_type):
        return bool_to_str(value)

    if _is_list_like(data_type):
        items = ", ".join(display_value(v, data_type.value_type) for v in value)
        return f"[{items}]"

    if pa.types.is_map(data_type):
        entries = ", ".join(
            f"{display_value(k, data_type.key_type)}: {display_value(v, data_type.item_type)}"
            for k, v in value
        )
        return f"{{{entries}}}"

    if pa.types.is_struct(data_type):
        fields = [data_type.field(i) for i in range(data_type.num_fields)]
        entries = ", ".join(f"{f.name}: {display_value(value[f.name], f.type)}" for f in fields)
        return f"{{{entries}}}"

    return str(value)


def _render_default(column: pa.Array) -> list[Any]:
    """Cast to string where pyarrow supports it, otherwise display per value."""
    try:
        return pc.cast(column, pa.string()).to_pylist()
    except pa.ArrowNotImplementedError:
        logger.debug(f"No string cast for {column.type}, rendering values")
    except pa.ArrowException as e:
        logger.warning(f"No default formatting for type {column.type}: {e}")
        raise UnsupportedCellEncodingError(column.type, cause=e) from e

    try:
        return [display_value(v, column.type) for v in column.to_pylist()]
    except (pa.ArrowException, ValueError) as e:
        logger.warning(f"No default formatting for type {column.type}: {e}")
        raise UnsupportedCellEncodingError(column.type, cause=e) from e


def _default_formatter(column: pa.Array, round_digits: int) -> CellFormatter:
    """Engine default rendering, computed on first valid cell."""
    rendered: list[Any] = []

    def format_cell(row: int) -> str:
        if not column[row].is_valid:
            return NULL_STR
        if not rendered:
            rendered.extend(_render_default(column))
        return rendered[row]

    return format_cell


def column_formatter(column: pa.Array, round_digits: int = DEFAULT_ROUND_DIGITS) -> CellFormatter:
    """
    Build a row -> canonical string function for one column.

    The physical type is inspected once per column; the returned
    function only reads values.

    Args:
        column: Arrow array (one batch column)
        round_digits: fractional digits kept for floats and decimals

    Returns:
        Callable taking a row index

    Raises:
        UnsupportedCellEncodingError: (when called) the type has no
            default rendering
    """
    data_type = column.type

    if pa.types.is_null(data_type):
        return _null_formatter(column, round_digits)

    if pa.types.is_dictionary(data_type):
        return _dictionary_formatter(column, round_digits)

    for predicate, render in _RENDERERS:
        if predicate(data_type):
            values = column.to_pylist()

            def format_cell(row: int, render: Callable[[Any, int], str] = render) -> str:
                value = values[row]
                if value is None:
                    return NULL_STR
                return render(value, round_digits)

            return format_cell

    return _default_formatter(column, round_digits)


def cell_to_string(column: pa.Array, row: int, round_digits: int = DEFAULT_ROUND_DIGITS) -> str:
    """
    Canonical string for a single cell.

    Convenience wrapper; converting whole batches should build one
    formatter per column with column_formatter().
    """
    return column_formatter(column, round_digits)(row)
