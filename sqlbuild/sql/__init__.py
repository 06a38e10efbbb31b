"""
SQL query templating: ``?`` placeholders and ``{...}`` conditional blocks.

Exports: QueryBuilder, build_query, parse_markers, check_template_safety.
"""

from sqlbuild.sql.parser import MarkerType, parse_markers
from sqlbuild.sql.safety import check_template_safety
from sqlbuild.sql.template_engine import QueryBuilder, build_query, clear_template_cache

__all__ = [
    "MarkerType",
    "QueryBuilder",
    "build_query",
    "check_template_safety",
    "clear_template_cache",
    "parse_markers",
]
