"""
Placeholder markers: ``?`` plus an optional one-character type suffix.

    ?   default (value rendered by its Python type)
    ?d  integer
    ?f  float
    ?a  array (list -> values, mapping -> `key` = value pairs)
    ?#  identifier(s)
"""

from enum import Enum

MARKER = "?"


class MarkerType(str, Enum):
    DEFAULT = "default"
    INT = "int"
    FLOAT = "float"
    ARRAY = "array"
    IDENTIFIER = "identifier"


_SUFFIXES: dict[str, MarkerType] = {
    "d": MarkerType.INT,
    "f": MarkerType.FLOAT,
    "a": MarkerType.ARRAY,
    "#": MarkerType.IDENTIFIER,
}


def marker_at(template: str, pos: int) -> tuple[MarkerType, int]:
    """Return (type, width) of the marker whose ``?`` is at *pos*."""
    suffix = template[pos + 1 : pos + 2]
    marker_type = _SUFFIXES.get(suffix)
    if marker_type is None:
        return MarkerType.DEFAULT, 1
    return marker_type, 2


def parse_markers(template: str) -> list[MarkerType]:
    """
    List marker types in template order.

    Conditional braces are ignored: every ``?`` in the raw text is counted,
    the same way the conditional resolver counts them.
    """
    types: list[MarkerType] = []
    pos = template.find(MARKER)
    while pos != -1:
        marker_type, width = marker_at(template, pos)
        types.append(marker_type)
        pos = template.find(MARKER, pos + width)
    return types
