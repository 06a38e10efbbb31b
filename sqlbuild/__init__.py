"""
sqlbuild - printf-style SQL query building.

    from sqlbuild import build_query, skip

    build_query("SELECT * FROM ?# WHERE id IN (?a){ AND status = ?}", ["users", [1, 2], skip()])
    # "SELECT * FROM `users` WHERE id IN (1, 2)"
"""

from sqlbuild.core.errors import (
    InvalidArgumentError,
    NotEnoughArgumentsError,
    QueryBuildError,
    TooManyArgumentsError,
    UnsupportedTypeError,
)
from sqlbuild.database import Database, DatabaseInterface
from sqlbuild.sentinel import SKIP, skip
from sqlbuild.sql import (
    MarkerType,
    QueryBuilder,
    build_query,
    check_template_safety,
    clear_template_cache,
    parse_markers,
)

__version__ = "0.1.0"
__all__ = [
    # Building
    "build_query",
    "skip",
    "SKIP",
    "QueryBuilder",
    "Database",
    "DatabaseInterface",
    # Template inspection
    "MarkerType",
    "parse_markers",
    "check_template_safety",
    "clear_template_cache",
    # Errors
    "QueryBuildError",
    "TooManyArgumentsError",
    "NotEnoughArgumentsError",
    "InvalidArgumentError",
    "UnsupportedTypeError",
]
