"""Unit tests for sql.conditional."""

from sqlbuild.sentinel import SKIP
from sqlbuild.sql.conditional import Fragment, find_fragments, resolve_conditional_blocks


class TestFindFragments:
    def test_no_blocks(self):
        assert find_fragments("SELECT ? FROM t") == ()

    def test_argument_span(self):
        (f,) = find_fragments("SELECT ?, ?d FROM t WHERE 1{ AND a = ? AND b IN (?a)}")
        assert f.arg_start == 2
        assert f.arg_count == 2
        assert f.body == " AND a = ? AND b IN (?a)"

    def test_offsets_against_original(self):
        t = "?{a?}?{b?}"
        first, second = find_fragments(t)
        assert (first.start, first.end, first.arg_start) == (1, 5, 1)
        assert (second.start, second.end, second.arg_start) == (6, 10, 3)

    def test_multiline_block(self):
        (f,) = find_fragments("SELECT 1 {\nAND a = ?\n}")
        assert f.body == "\nAND a = ?\n"
        assert f.arg_count == 1

    def test_nested_braces_end_at_first_close(self):
        (f,) = find_fragments("{a {b} c}")
        assert f == Fragment(start=0, end=6, body="a {b", arg_start=0, arg_count=0)

    def test_unclosed_brace_is_not_a_block(self):
        assert find_fragments("SELECT '{' , ?") == ()


class TestResolveConditionalBlocks:
    def test_no_blocks_passthrough(self):
        assert resolve_conditional_blocks("SELECT ?", [1]) == ("SELECT ?", (1,))

    def test_kept_block_loses_braces(self):
        t, args = resolve_conditional_blocks("WHERE 1=1 {AND x = ?}", [5])
        assert t == "WHERE 1=1 AND x = ?"
        assert args == (5,)

    def test_dropped_block_removed_with_arguments(self):
        t, args = resolve_conditional_blocks("WHERE 1=1 {AND x = ?}", [SKIP])
        assert t == "WHERE 1=1 "
        assert args == ()

    def test_any_skip_in_span_drops_block(self):
        t, args = resolve_conditional_blocks("? {AND a = ? AND b = ?} ?", [1, 2, SKIP, 4])
        assert t == "?  ?"
        assert args == (1, 4)

    def test_skip_outside_span_does_not_drop(self):
        t, args = resolve_conditional_blocks("?{ AND a = ?}", [SKIP, 2])
        assert t == "? AND a = ?"
        assert args == (SKIP, 2)

    def test_first_dropped_second_kept(self):
        t, args = resolve_conditional_blocks("SELECT ?{ AND a = ?}{ AND b = ?}", [1, SKIP, 3])
        assert t == "SELECT ? AND b = ?"
        assert args == (1, 3)

    def test_first_kept_second_dropped(self):
        t, args = resolve_conditional_blocks("SELECT ?{ AND a = ?}{ AND b = ?}", [1, 2, SKIP])
        assert t == "SELECT ? AND a = ?"
        assert args == (1, 2)

    def test_both_dropped(self):
        t, args = resolve_conditional_blocks("?{ a ?}{ b ?} ?", [1, SKIP, SKIP, 4])
        assert t == "? ?"
        assert args == (1, 4)

    def test_block_without_markers_always_kept(self):
        t, args = resolve_conditional_blocks("SELECT 1{ FOR UPDATE}", [])
        assert t == "SELECT 1 FOR UPDATE"
        assert args == ()

    def test_short_argument_list(self):
        t, args = resolve_conditional_blocks("? { AND a = ?}", [1])
        assert t == "?  AND a = ?"
        assert args == (1,)

    def test_input_not_mutated(self):
        args = [1, SKIP]
        resolve_conditional_blocks("?{ AND a = ?}", args)
        assert args == [1, SKIP]

    def test_precomputed_fragments(self):
        template = "?{ AND a = ?}"
        fragments = find_fragments(template)
        assert resolve_conditional_blocks(template, [1, SKIP], fragments) == ("?", (1,))
