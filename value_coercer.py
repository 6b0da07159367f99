import math
import re
from typing import Any, Union

from grid_normalizer import cell_text

Scalar = Union[int, float, bool, str]

_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")
# Invariant format: '.' decimal separator, no thousands separators.
_FLOAT = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")


def _parse_int(text: str):
    if _INTEGER.match(text):
        return int(text.strip())
    return None


def _parse_float(text: str):
    if not _FLOAT.match(text):
        return None
    number = float(text.strip())
    if not math.isfinite(number):
        return None
    return number


def _parse_bool(text: str):
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def coerce_value(raw: Any) -> Scalar:
    """
    Convert a raw cell into a typed scalar.

    Tried in order: integer, float, boolean, and finally the cell text itself.
    An empty cell comes back as '' and is left for the emptiness filter.
    """
    text = cell_text(raw)
    for parse in (_parse_int, _parse_float, _parse_bool):
        value = parse(text)
        if value is not None:
            return value
    return text


def is_empty_value(value: Any) -> bool:
    """True for values that must never be attached to the output tree."""
    if value is None:
        return True
    if isinstance(value, (list, dict, str)):
        return len(value) == 0
    return False
