import json
import logging
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from grid_normalizer import cell_text, is_blank, normalize_grid
from header_classifier import Annotation, classify_header
from subgrid_extractor import extract_subgrid
from value_coercer import coerce_value, is_empty_value

ProgressFn = Callable[[float], None]


class BuildMode(Enum):
    ARRAY = "array"
    OBJECT = "object"


class Cursor(NamedTuple):
    """Data rows and columns consumed by one build, folded into the caller's position."""

    rows: int
    columns: int


def _top_header(grid: List[List[Any]], header_depth: int, column: int) -> str:
    # A grid without header rows (nested list at depth 0) has only bare values.
    if header_depth < 1:
        return ""
    return cell_text(grid[0][column])


def _nested_value(
    grid: List[List[Any]],
    header_depth: int,
    row: int,
    column: int,
    annotation: Annotation,
) -> Tuple[Any, Cursor]:
    """Build the list or object whose region starts at (row, column)."""
    if annotation is Annotation.LIST:
        sub = extract_subgrid(grid, header_depth, row, column)
        mode = BuildMode.ARRAY
    else:
        sub = extract_subgrid(grid, header_depth, row, column, max_entries=1)
        mode = BuildMode.OBJECT

    logging.debug(
        "Nested %s at row %d, column %d: %d entries x %d columns",
        annotation.value, row, column, sub.entries, sub.width,
    )
    if sub.entries == 0:
        return None, Cursor(rows=0, columns=sub.width)
    return build_tree(sub.rows, sub.header_depth, mode)


def _attach(
    result: Any, entry: dict, header: str, key: str, value: Any, mode: BuildMode
) -> None:
    """Place a built value on the current entry, or positionally for bare columns."""
    if is_empty_value(value):
        return

    if is_blank(header):
        if mode is BuildMode.ARRAY:
            result.append(value)
        else:
            logging.debug("Dropping value without a header inside an object: %r", value)
        return

    if key in entry:
        logging.warning(
            "Json entry already exists: (%s), couldn't add value: (%s)...",
            key, json.dumps(value, ensure_ascii=False),
        )
        return
    entry[key] = value


def build_tree(
    grid: List[List[Any]],
    header_depth: int,
    mode: BuildMode,
    on_progress: Optional[ProgressFn] = None,
) -> Tuple[Any, Cursor]:
    """
    Walk a rectangular grid and build a JSON array (ARRAY) or object (OBJECT).

    Data rows start at `header_depth`. Annotated columns are extracted into a
    subgrid and built recursively; the returned Cursor tells this frame how
    many columns to jump and how many continuation rows the nested region
    already used.

    Returns:
        (value, Cursor(rows, columns)) where the cursor covers this whole grid.
    """
    result: Any = [] if mode is BuildMode.ARRAY else {}
    width = len(grid[0]) if grid else 0
    total_rows = len(grid)

    r = header_depth
    while r < total_rows:
        row = grid[r]
        entry = {} if mode is BuildMode.ARRAY else result
        row_span = 1

        c = 0
        while c < width:
            if is_blank(row[c]) and is_blank(row[0]):
                c += 1
                continue

            header = _top_header(grid, header_depth, c)
            annotation, key = classify_header(header)
            if annotation is Annotation.NONE:
                value = coerce_value(row[c])
                c += 1
            else:
                value, consumed = _nested_value(grid, header_depth, r, c, annotation)
                c += max(consumed.columns, 1)
                row_span = max(row_span, consumed.rows)

            _attach(result, entry, header, key, value, mode)

        if mode is BuildMode.ARRAY and entry:
            result.append(entry)

        r += row_span
        if on_progress:
            on_progress(min(r, total_rows) / total_rows)

    return result, Cursor(rows=max(total_rows - header_depth, 0), columns=width)


def convert(
    grid: List[List[Any]],
    header_depth: int = 1,
    on_progress: Optional[ProgressFn] = None,
) -> list:
    """Convert a fetched range into a JSON array, one object per record."""
    if header_depth < 1:
        logging.warning("Header depth %s is below 1, using 1 instead", header_depth)
        header_depth = 1

    rows = normalize_grid(grid)
    if len(rows) <= header_depth:
        logging.warning("No data found!")
        return []

    data, _ = build_tree(rows, header_depth, BuildMode.ARRAY, on_progress=on_progress)
    if not data:
        logging.warning("No data found!")
    return data
