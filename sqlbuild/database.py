"""
Database facade: a DB-API connection paired with the query builder.

This package never executes SQL. ``Database`` only keeps the caller's
connection next to ``build_query`` / ``skip`` so application code can hand the
built string to ``connection.cursor().execute(...)`` itself.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from sqlbuild.sentinel import Skip
from sqlbuild.sql.template_engine import QueryBuilder


class DatabaseInterface(Protocol):
    def build_query(self, template: str, args: Sequence[Any] = ()) -> str: ...

    def skip(self) -> Skip: ...


class Database:
    """Holds *connection* (any DB-API 2.0 object, unused here) and builds queries."""

    def __init__(self, connection: Any, builder: QueryBuilder | None = None) -> None:
        self.connection = connection
        self._builder = builder or QueryBuilder()

    def build_query(self, template: str, args: Sequence[Any] = ()) -> str:
        return self._builder.build(template, args)

    def skip(self) -> Skip:
        return self._builder.skip()
