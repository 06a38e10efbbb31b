"""
Static checks for query templates — spot conditional blocks that won't behave.

Conditional blocks do not nest and are matched from ``{`` to the nearest
``}``. The resolver does not try to repair templates that break this rule;
this checker reports them so template authors can fix them.

Usage::

    warnings = check_template_safety(template)
    # [{"kind": "nested_block", "line": 3, "message": "..."}]
"""

from typing import Any

from sqlbuild.sql.parser import MARKER


def _warning(kind: str, line: int, message: str) -> dict[str, Any]:
    return {"kind": kind, "line": line, "message": message}


def check_template_safety(template: str) -> list[dict[str, Any]]:
    """Analyse a query template and return warnings about its ``{...}`` blocks.

    Each warning is a dict with ``kind``, ``line``, and ``message`` keys.
    Kinds: ``unclosed_block``, ``unmatched_brace``, ``nested_block``,
    ``empty_block``.

    An empty list means no issues detected.
    """
    warnings: list[dict[str, Any]] = []
    line = 1
    open_line: int | None = None
    markers = 0
    nested = False

    for ch in template:
        if ch == "\n":
            line += 1
        elif ch == "{":
            if open_line is None:
                open_line, markers, nested = line, 0, False
            elif not nested:
                nested = True
                warnings.append(
                    _warning(
                        "nested_block",
                        line,
                        "Nested '{' inside a conditional block; blocks do not nest "
                        "and the block will end at the first '}'.",
                    )
                )
        elif ch == MARKER and open_line is not None:
            markers += 1
        elif ch == "}":
            if open_line is None:
                warnings.append(
                    _warning(
                        "unmatched_brace",
                        line,
                        "'}' without an opening '{'; it is kept as literal text.",
                    )
                )
                continue
            if markers == 0:
                warnings.append(
                    _warning(
                        "empty_block",
                        open_line,
                        "Conditional block has no placeholders, so skip() can "
                        "never drop it; it is always kept.",
                    )
                )
            open_line = None

    if open_line is not None:
        warnings.append(
            _warning(
                "unclosed_block",
                open_line,
                "'{' is never closed; it is kept as literal text.",
            )
        )
    return warnings
