from typing import Any, Iterable, List


def cell_text(value: Any) -> str:
    """Return the text form of a raw cell value ('' for None)."""
    if value is None:
        return ""
    return str(value)


def is_blank(value: Any) -> bool:
    """True for None, '' and whitespace-only cells."""
    return not cell_text(value).strip()


def normalize_grid(rows: Iterable[Iterable[Any]]) -> List[List[Any]]:
    """
    Turn jagged rows into a rectangular grid.

    Every row is copied and padded at the end with '' up to the width of the
    widest row. An empty input gives an empty grid.
    """
    grid = [list(row) for row in (rows or [])]
    width = max((len(row) for row in grid), default=0)
    for row in grid:
        if len(row) < width:
            row.extend([""] * (width - len(row)))
    return grid
