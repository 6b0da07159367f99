from typing import Any, List, NamedTuple, Optional

from grid_normalizer import is_blank


class Subgrid(NamedTuple):
    rows: List[List[Any]]
    header_depth: int
    entries: int
    width: int


def _column_span(grid: List[List[Any]], row: int, column: int) -> int:
    """Count columns from `column` up to the next non-blank top header."""
    top_headers = grid[0]
    width = 0
    for c in range(column, len(grid[row])):
        if c > column and not is_blank(top_headers[c]):
            break
        width += 1
    return width


def extract_subgrid(
    grid: List[List[Any]],
    header_depth: int,
    row: int,
    column: int,
    max_entries: Optional[int] = None,
) -> Subgrid:
    """
    Carve out the region of the nested list or object starting at (row, column).

    Rows run downward until the next non-blank id cell (column 0) or until
    `max_entries` rows were taken. Columns run rightward until the next
    non-blank top header. Sub-header rows 1..header_depth-1 over the same
    columns are put in front, so the result is a grid of header depth
    header_depth - 1.
    """
    sub_depth = max(header_depth - 1, 0)
    if not grid or row >= len(grid) or column >= len(grid[0]):
        return Subgrid(rows=[], header_depth=sub_depth, entries=0, width=0)

    width = _column_span(grid, row, column)
    entries = []
    for r in range(row, len(grid)):
        if r > row and not is_blank(grid[r][0]):
            break
        entries.append(grid[r][column:column + width])
        if max_entries is not None and len(entries) >= max_entries:
            break

    sub_headers = []
    for i in range(1, header_depth):
        if i < len(grid):
            sub_headers.append(grid[i][column:column + width])
        else:
            sub_headers.append([""] * width)

    return Subgrid(
        rows=sub_headers + entries,
        header_depth=sub_depth,
        entries=len(entries),
        width=width,
    )
