"""
Value formatting for placeholder markers.

Each ``format_*`` function turns one argument into an escaped SQL literal for
its marker type. ``None`` maps to ``NULL`` everywhere except ``?a``, which
requires a list or mapping.

String escaping follows MySQL's backslash convention (the same characters
``mysql_real_escape_string`` handles), so literals are meant for MySQL /
MariaDB or servers running with backslash escapes enabled.
"""

import math
from collections.abc import Callable, Mapping
from typing import Any

from sqlbuild.core.errors import InvalidArgumentError, UnsupportedTypeError
from sqlbuild.sentinel import is_skip
from sqlbuild.sql.parser import MarkerType

_SQL_BACKSLASH_ESCAPE = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        '"': '\\"',
        "\x00": "\\0",
        "\n": "\\n",
        "\r": "\\r",
        "\x1a": "\\Z",
    }
)

NULL = "NULL"


# ---------------------------------------------------------------------------
# Escaping helpers
# ---------------------------------------------------------------------------


def escape_string(value: str) -> str:
    """Backslash-escape quotes, backslashes and control characters."""
    return value.translate(_SQL_BACKSLASH_ESCAPE)


def quote_string(value: str) -> str:
    return f"'{escape_string(value)}'"


def quote_identifier(name: Any) -> str:
    """Wrap *name* in backticks. Backslash-escaped; embedded backticks doubled."""
    if isinstance(name, bool) or not isinstance(name, (str, int)):
        raise UnsupportedTypeError(
            f"Identifier must be str or int, got {type(name).__name__}"
        )
    return "`" + escape_string(str(name)).replace("`", "``") + "`"


def _is_list_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_associative(value: Mapping) -> bool:
    """True unless the keys are exactly 0..n-1 in iteration order."""
    return list(value.keys()) != list(range(len(value)))


def _format_number(value: float) -> str:
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Float value {value!r} has no SQL literal")
    return repr(value)


# ---------------------------------------------------------------------------
# Marker formatters
# ---------------------------------------------------------------------------


def format_value(value: Any) -> str:
    """
    Default ``?`` rule.

    None -> NULL, bool -> 1/0, int/float -> number, str -> quoted and escaped.
    Anything else raises UnsupportedTypeError.
    """
    if value is None:
        return NULL
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_number(float(value))
    if isinstance(value, str):
        return quote_string(value)
    if is_skip(value):
        raise UnsupportedTypeError(
            "skip() value used outside a conditional block"
        )
    raise UnsupportedTypeError(f"Unsupported value type: {type(value).__name__}")


def format_int(value: Any) -> str:
    """``?d``: None -> NULL; otherwise truncated toward zero."""
    if value is None:
        return NULL
    if isinstance(value, (bool, int)):
        return str(int(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Cannot convert {value!r} to integer")
        return str(int(value))
    if isinstance(value, str):
        s = value.strip()
        try:
            return str(int(s))
        except ValueError:
            pass
        try:
            x = float(s)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid integer: {value!r}") from e
        if not math.isfinite(x):
            raise InvalidArgumentError(f"Cannot convert {value!r} to integer")
        return str(int(x))
    raise InvalidArgumentError(
        f"Cannot convert {type(value).__name__} to integer"
    )


def format_float(value: Any) -> str:
    """
    ``?f``: None -> NULL; otherwise ``float(value)`` rendered with ``repr``.

    ``repr`` gives the shortest text that round-trips, independent of locale.
    Very large or small magnitudes use exponent form (``1e+20``), which SQL
    accepts as a numeric literal.
    """
    if value is None:
        return NULL
    if isinstance(value, (bool, int, float)):
        return _format_number(float(value))
    if isinstance(value, str):
        try:
            x = float(value.strip())
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid number: {value!r}") from e
        return _format_number(x)
    raise InvalidArgumentError(f"Cannot convert {type(value).__name__} to float")


def format_array(value: Any) -> str:
    """
    ``?a``: list/tuple -> ``v1, v2``; associative mapping -> ```k` = v`` pairs.

    A mapping keyed exactly 0..n-1 is treated like a list.
    """
    if isinstance(value, Mapping):
        if _is_associative(value):
            return ", ".join(
                f"{quote_identifier(k)} = {format_value(v)}" for k, v in value.items()
            )
        return ", ".join(format_value(v) for v in value.values())
    if _is_list_like(value):
        return ", ".join(format_value(v) for v in value)
    raise InvalidArgumentError(
        f"Expected a list or mapping for ?a, got {type(value).__name__}"
    )


def format_identifier(value: Any) -> str:
    """``?#``: one backtick-quoted name, or a comma-joined list of them."""
    if isinstance(value, Mapping):
        value = list(value.values())
    if _is_list_like(value):
        return ", ".join(quote_identifier(v) for v in value)
    if value is None:
        return NULL
    return quote_identifier(value)


SQL_FORMATTERS: dict[MarkerType, Callable[[Any], str]] = {
    MarkerType.DEFAULT: format_value,
    MarkerType.INT: format_int,
    MarkerType.FLOAT: format_float,
    MarkerType.ARRAY: format_array,
    MarkerType.IDENTIFIER: format_identifier,
}
