"""
Conditional blocks: ``{ ... }`` fragments kept or dropped per call.

A fragment is dropped (braces, body and its arguments) when any argument that
belongs to it is the skip sentinel; otherwise only the braces are removed.

Fragments do not nest. Matching runs from a ``{`` to the nearest following
``}``, so ``{a {b} c}`` yields the fragment ``{a {b}`` followed by the plain
text `` c}``. Braces inside string values passed as arguments are not
affected since arguments are only substituted afterwards.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sqlbuild.sentinel import is_skip
from sqlbuild.sql.parser import MARKER

_log = logging.getLogger(__name__)

_BLOCK_PATTERN = re.compile(r"\{(.*?)\}", re.DOTALL)


@dataclass(frozen=True)
class Fragment:
    """One ``{...}`` match, located against the original template."""

    start: int
    end: int
    body: str
    arg_start: int
    arg_count: int


def find_fragments(template: str) -> tuple[Fragment, ...]:
    """Locate every fragment and its argument span in one pass over *template*."""
    fragments: list[Fragment] = []
    for match in _BLOCK_PATTERN.finditer(template):
        fragments.append(
            Fragment(
                start=match.start(),
                end=match.end(),
                body=match.group(1),
                arg_start=template.count(MARKER, 0, match.start()),
                arg_count=match.group(0).count(MARKER),
            )
        )
    return tuple(fragments)


def resolve_conditional_blocks(
    template: str,
    args: Sequence[Any],
    fragments: Sequence[Fragment] | None = None,
) -> tuple[str, tuple[Any, ...]]:
    """
    Return (template, args) with every fragment resolved.

    *fragments* may be passed pre-computed (see ``find_fragments``); they must
    come from the same *template*. *args* is not modified.
    """
    if fragments is None:
        fragments = find_fragments(template)
    if not fragments:
        return template, tuple(args)

    parts: list[str] = []
    dropped: set[int] = set()
    pos = 0
    for fragment in fragments:
        parts.append(template[pos : fragment.start])
        span = range(fragment.arg_start, fragment.arg_start + fragment.arg_count)
        if any(is_skip(args[i]) for i in span if i < len(args)):
            _log.debug(
                "Dropping conditional block at offset %d (%d argument(s))",
                fragment.start,
                fragment.arg_count,
            )
            dropped.update(span)
        else:
            parts.append(fragment.body)
        pos = fragment.end
    parts.append(template[pos:])

    kept_args = tuple(arg for i, arg in enumerate(args) if i not in dropped)
    return "".join(parts), kept_args
