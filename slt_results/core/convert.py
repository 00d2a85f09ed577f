"""
Result conversion: Arrow schema + record batches -> canonical rows.

Flow per query:
1. every batch schema must be contained in the declared schema
2. each cell is canonicalized (cells.py)
3. multi-line last cells are expanded into extra rows (expand.py)

Any error aborts the whole conversion; no partial rows are returned.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import pyarrow as pa

from slt_results.core.cells import column_formatter
from slt_results.core.classify import convert_schema_to_types
from slt_results.core.config import NormalizerConfig
from slt_results.core.expand import expand_row
from slt_results.domain.errors import SchemaMismatchError
from slt_results.domain.schemas import QueryOutput, Rows, StatementComplete

logger = logging.getLogger(__name__)

# =============================================================================
# Schema Compatibility
# =============================================================================


def _metadata_contains(expected: dict[Any, Any] | None, actual: dict[Any, Any] | None) -> bool:
    """Every key/value of `actual` is present in `expected`."""
    if not actual:
        return True
    expected = expected or {}
    return all(expected.get(k) == v for k, v in actual.items())


def field_contains(expected: pa.Field, actual: pa.Field) -> bool:
    """
    Whether `expected` can hold the values of `actual`.

    Names and types must be equal; a nullable batch field needs a
    nullable declared field; metadata of `actual` must be a subset.
    """
    return (
        expected.name == actual.name
        and expected.type == actual.type
        and (expected.nullable or not actual.nullable)
        and _metadata_contains(expected.metadata, actual.metadata)
    )


def schema_contains(expected: pa.Schema, actual: pa.Schema) -> bool:
    """Whether the batch schema `actual` is contained in `expected`."""
    if len(expected) != len(actual):
        return False
    if not _metadata_contains(expected.metadata, actual.metadata):
        return False
    return all(field_contains(e, a) for e, a in zip(expected, actual))


# =============================================================================
# Batch Conversion
# =============================================================================


def _convert_batch(batch: pa.RecordBatch, config: NormalizerConfig) -> Iterator[list[str]]:
    formatters = [column_formatter(col, config.round_digits) for col in batch.columns]

    for row in range(batch.num_rows):
        cells = [fmt(row) for fmt in formatters]
        if config.expand_multiline:
            yield from expand_row(cells)
        else:
            yield cells


def convert_batches(
    schema: pa.Schema,
    batches: Iterable[pa.RecordBatch],
    config: NormalizerConfig | None = None,
) -> list[list[str]]:
    """
    Convert record batches to rows of canonical strings.

    Args:
        schema: declared query schema
        batches: record batches in result order
        config: normalizer options (None = defaults)

    Returns:
        Row matrix, batch order and row order preserved

    Raises:
        SchemaMismatchError: a batch schema is not contained in `schema`
        UnsupportedCellEncodingError: a column type cannot be rendered
    """
    config = config or NormalizerConfig()
    rows: list[list[str]] = []

    for index, batch in enumerate(batches):
        if not schema_contains(schema, batch.schema):
            logger.warning(f"Schema mismatch in batch {index}")
            raise SchemaMismatchError(expected=schema, actual=batch.schema)

        before = len(rows)
        rows.extend(_convert_batch(batch, config))
        logger.debug(
            f"Converted batch {index}: {batch.num_rows} rows -> {len(rows) - before} output rows"
        )

    return rows


def convert_query_output(
    schema: pa.Schema,
    batches: Iterable[pa.RecordBatch],
    config: NormalizerConfig | None = None,
) -> QueryOutput:
    """
    Column types and rows for one query.

    A result with neither columns nor rows is a completed statement.
    """
    types = convert_schema_to_types(schema)
    rows = convert_batches(schema, batches, config)

    if not rows and not types:
        return StatementComplete(0)
    return Rows(types=types, rows=rows)
