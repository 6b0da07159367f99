import re
from enum import Enum
from typing import Optional, Tuple

OBJECT_TAG = re.compile(r"\((obj)\)")
LIST_TAG = re.compile(r"\((list)\)")
_WHITESPACE = re.compile(r"\s+")


class Annotation(Enum):
    NONE = "none"
    OBJECT = "object"
    LIST = "list"


def annotation_of(header: Optional[str]) -> Annotation:
    """Detect the structural tag of a header; (obj) wins over (list)."""
    header = header or ""
    if OBJECT_TAG.search(header):
        return Annotation.OBJECT
    if LIST_TAG.search(header):
        return Annotation.LIST
    return Annotation.NONE


def clean_header(header: Optional[str]) -> str:
    """Strip all whitespace and the (list)/(obj) tags from a header."""
    key = _WHITESPACE.sub("", header or "")
    key = LIST_TAG.sub("", key)
    return OBJECT_TAG.sub("", key)


def classify_header(header: Optional[str]) -> Tuple[Annotation, str]:
    """Return (annotation, clean key) for a raw header cell."""
    return annotation_of(header), clean_header(header)
