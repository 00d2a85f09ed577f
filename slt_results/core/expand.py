"""
Row expansion for multi-line cells (explain plans and the like).

Transforms a row such as:

    ["logical_plan", "Sort: d.b ASC NULLS LAST\\n  Projection: d.b, MAX(d.a) AS max_a"]

into one row per line of the last cell:

    ["logical_plan"]
    ["01)Sort: d.b ASC NULLS LAST"]
    ["02)--Projection: d.b, MAX(d.a) AS max_a"]

Leading whitespace becomes "-" because sqllogictest ignores whitespace
differences (https://github.com/apache/datafusion/issues/6328); line numbers
keep plan diffs reviewable.
"""

from collections.abc import Iterator

from slt_results.domain.constants import INDENT_MARKER


def format_line(line_num: int, line: str) -> str:
    """'  b' on line 2 -> '02)--b'."""
    content = line.lstrip()
    prefix = INDENT_MARKER * (len(line) - len(content))
    return f"{line_num:02}){prefix}{content}"


def expand_row(row: list[str]) -> Iterator[list[str]]:
    """
    Yield the row, expanding a multi-line last cell into extra rows.

    Only the last cell is checked. When it spans several lines the row
    is yielded first without it, then one single-cell row per line.
    """
    if not row:
        yield row
        return

    *head, cell = row
    lines = cell.split("\n")

    # no newlines in last cell
    if len(lines) < 2:
        yield row
        return

    yield head
    for idx, line in enumerate(lines, start=1):
        yield [format_line(idx, line)]
