"""Unit tests for the Database facade."""

from unittest.mock import MagicMock

from sqlbuild import SKIP, Database, DatabaseInterface


def test_build_query() -> None:
    db = Database(MagicMock())
    assert db.build_query("SELECT ?# FROM t WHERE id = ?d", ["name", 1]) == (
        "SELECT `name` FROM t WHERE id = 1"
    )


def test_skip() -> None:
    db = Database(MagicMock())
    assert db.skip() is SKIP
    assert db.build_query("SELECT 1{ AND a = ?}", [db.skip()]) == "SELECT 1"


def test_connection_untouched() -> None:
    conn = MagicMock()
    db = Database(conn)
    db.build_query("SELECT ?", [1])
    assert db.connection is conn
    assert conn.mock_calls == []


def test_satisfies_interface() -> None:
    db: DatabaseInterface = Database(None)
    assert db.build_query("SELECT ?d", [2]) == "SELECT 2"
