"""
Query builder: conditional blocks, then typed ``?`` placeholders.

    build_query("SELECT ?# FROM t WHERE id = ?d{ AND name = ?}", ["name", 7, skip()])
    -> "SELECT `name` FROM t WHERE id = 7"

Arguments are consumed strictly left to right through an explicit cursor. The
search for the next ``?`` always resumes after the previous replacement, so a
``?`` inside a substituted value is never taken for a marker.

Performance: the fragment layout of a template (``find_fragments``) is cached
in an LRU dict keyed by the template source hash, so repeated calls with the
same template skip the brace scan.
"""

import hashlib
import logging
import threading
from collections import OrderedDict
from collections.abc import Sequence
from typing import Any

from sqlbuild.core.config import settings
from sqlbuild.core.errors import (
    InvalidArgumentError,
    NotEnoughArgumentsError,
    QueryBuildError,
    TooManyArgumentsError,
)
from sqlbuild.sentinel import Skip, skip
from sqlbuild.sql.conditional import Fragment, find_fragments, resolve_conditional_blocks
from sqlbuild.sql.filters import SQL_FORMATTERS
from sqlbuild.sql.parser import MARKER, marker_at

_log = logging.getLogger(__name__)

_template_cache: OrderedDict[str, tuple[Fragment, ...]] = OrderedDict()
_cache_lock = threading.Lock()


def _preview(template: str) -> str:
    limit = settings.ERROR_PREVIEW_LENGTH
    return template[:limit] + "..." if len(template) > limit else template


def _fragments_cached(template: str) -> tuple[Fragment, ...]:
    """Return the fragment layout of *template* from cache or scan & cache it."""
    max_size = settings.TEMPLATE_CACHE_SIZE
    if max_size <= 0:
        return find_fragments(template)
    key = hashlib.md5(template.encode(), usedforsecurity=False).hexdigest()
    with _cache_lock:
        fragments = _template_cache.get(key)
        if fragments is not None:
            _template_cache.move_to_end(key)
            return fragments
    _log.debug("Template cache miss (%d chars)", len(template))
    fragments = find_fragments(template)
    with _cache_lock:
        _template_cache[key] = fragments
        while len(_template_cache) > max_size:
            _template_cache.popitem(last=False)
    return fragments


def clear_template_cache() -> None:
    with _cache_lock:
        _template_cache.clear()


def substitute_placeholders(template: str, args: Sequence[Any]) -> str:
    """
    Replace each ``?`` marker with the next argument, formatted by marker type.

    Raises TooManyArgumentsError / NotEnoughArgumentsError when the marker
    count and the argument count differ, and the formatter's error when an
    argument does not fit its marker.
    """
    parts: list[str] = []
    cursor = 0
    for index, value in enumerate(args):
        pos = template.find(MARKER, cursor)
        if pos == -1:
            raise TooManyArgumentsError(
                f"Too many arguments provided: {len(args)} given, "
                f"only {index} placeholder(s) in query. "
                f"Template preview:\n{_preview(template)}"
            )
        marker_type, width = marker_at(template, pos)
        try:
            literal = SQL_FORMATTERS[marker_type](value)
        except QueryBuildError as e:
            raise type(e)(
                f"{e} (argument {index}, placeholder {template[pos : pos + width]!r} "
                f"at offset {pos})"
            ) from e
        parts.append(template[cursor:pos])
        parts.append(literal)
        cursor = pos + width

    if template.find(MARKER, cursor) != -1:
        missing = template.count(MARKER, cursor)
        raise NotEnoughArgumentsError(
            f"Not enough arguments provided: {len(args)} given, "
            f"{missing} placeholder(s) left unfilled. "
            f"Template preview:\n{_preview(template)}"
        )
    parts.append(template[cursor:])
    return "".join(parts)


class QueryBuilder:
    """Builds literal SQL strings from ``?`` templates and argument lists."""

    def build(self, template: str, args: Sequence[Any] = ()) -> str:
        """Resolve ``{...}`` blocks in *template*, then substitute *args*."""
        if isinstance(args, (str, bytes)):
            raise InvalidArgumentError(
                f"Arguments must be a list or tuple, got {type(args).__name__}"
            )
        fragments = _fragments_cached(template)
        resolved, resolved_args = resolve_conditional_blocks(template, args, fragments)
        sql = substitute_placeholders(resolved, resolved_args)
        if settings.LOG_QUERIES:
            _log.debug("Built query: %s", sql)
        return sql

    def skip(self) -> Skip:
        """Value that drops the conditional block it is passed to."""
        return skip()


_default_builder = QueryBuilder()


def build_query(template: str, args: Sequence[Any] = ()) -> str:
    """Build one SQL string; see ``QueryBuilder.build``."""
    return _default_builder.build(template, args)
