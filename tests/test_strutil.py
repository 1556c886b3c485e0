import pytest

from fillit.strutil import (
    compare,
    compare_n,
    equal,
    equal_n,
    find,
    find_within,
    index_of,
    join,
    last_index_of,
    lcat,
    map_chars,
    map_chars_indexed,
    split_words,
    substring,
    trim,
)


class TestSplitWords:
    def test_drops_empty_pieces(self):
        assert split_words("**ab***cd*", "*") == ["ab", "cd"]

    def test_only_separators(self):
        assert split_words("\n\n\n", "\n") == []

    def test_block_lines(self):
        block = "....\n.##.\n.##.\n....\n"
        rows = split_words(block, "\n")
        assert rows == ["....", ".##.", ".##.", "...."]

    def test_no_piece_contains_separator(self):
        for word in split_words("a,b,,c,,,d", ","):
            assert "," not in word and word

    def test_bad_separator(self):
        with pytest.raises(ValueError):
            split_words("abc", "ab")


class TestTrim:
    def test_strips_whitespace(self):
        assert trim(" \t\nhello world\n\t ") == "hello world"

    def test_all_whitespace(self):
        assert trim(" \n\t ") == ""

    def test_keeps_other_whitespace(self):
        assert trim("\vabc\v") == "\vabc\v"

    def test_idempotent(self):
        once = trim("  x y  ")
        assert trim(once) == once


class TestFind:
    def test_found_slice_matches(self):
        hay, needle = "abababc", "abc"
        idx = find(hay, needle)
        assert hay[idx:idx + len(needle)] == needle

    def test_first_occurrence(self):
        idx = find("xaxa", "xa")
        assert idx == 0

    def test_missing(self):
        assert find("hello", "world") is None

    def test_empty_needle(self):
        assert find("hello", "") == 0

    def test_within_limit(self):
        hay, needle = "foo bar baz", "bar"
        idx = find_within(hay, needle, len(hay))
        assert hay[idx:idx + len(needle)] == needle

    def test_within_limit_too_short(self):
        assert find_within("foo bar baz", "bar", 6) is None

    def test_within_empty_needle(self):
        assert find_within("abc", "", 0) == 0

    def test_within_negative_limit(self):
        with pytest.raises(ValueError):
            find_within("abc", "a", -1)


class TestCompare:
    def test_equal(self):
        assert compare("same", "same") == 0

    def test_sign(self):
        assert compare("abc", "abd") < 0
        assert compare("abd", "abc") > 0

    def test_prefix_shorter_sorts_first(self):
        assert compare("ab", "abc") == -ord("c")
        assert compare("abc", "ab") == ord("c")

    def test_antisymmetric(self):
        for a, b in [("a", "b"), ("hello", "help"), ("", "x")]:
            assert compare(a, b) == -compare(b, a)

    def test_compare_n_ignores_tail(self):
        assert compare_n("abcX", "abcY", 3) == 0
        assert compare_n("abcX", "abcY", 4) == ord("X") - ord("Y")

    def test_compare_n_zero(self):
        assert compare_n("a", "b", 0) == 0

    def test_equal_and_none(self):
        assert equal("x", "x") is True
        assert equal("x", "y") is False
        assert equal(None, "x") is False

    def test_equal_n(self):
        assert equal_n("hello", "help", 3) is True
        assert equal_n("hello", "help", 4) is False
        assert equal_n("a", None, 1) is False


class TestSubstring:
    def test_piece_of_block(self):
        text = "....\n.##.\n"
        assert substring(text, 5, 4) == ".##."

    def test_length_clamped(self):
        assert substring("abc", 1, 10) == "bc"

    def test_negative(self):
        with pytest.raises(ValueError):
            substring("abc", -1, 2)

    def test_join_round_trip(self):
        text = "tetromino"
        for cut in range(len(text) + 1):
            assert join(substring(text, 0, cut), substring(text, cut, len(text))) == text


class TestIndexOf:
    def test_first_and_last(self):
        text = "a.b.c"
        assert text[index_of(text, ".")] == "."
        assert index_of(text, ".") < last_index_of(text, ".")
        assert text[last_index_of(text, ".")] == "."

    def test_missing(self):
        assert index_of("abc", "z") is None
        assert last_index_of("abc", "z") is None

    def test_nul_is_end(self):
        assert index_of("abc", "\0") == 3
        assert last_index_of("abc", "\0") == 3

    def test_bad_char(self):
        with pytest.raises(ValueError):
            index_of("abc", "")


class TestLcat:
    def test_fits(self):
        assert lcat("foo", "bar", 10) == ("foobar", 6)

    def test_truncated(self):
        result, wanted = lcat("foo", "bar", 5)
        assert len(result) == 4
        assert result == "foob"
        assert wanted == 6

    def test_no_room(self):
        assert lcat("foobar", "xy", 3) == ("foobar", 5)


class TestMap:
    def test_map_chars(self):
        assert map_chars("abc", str.upper) == "ABC"

    def test_map_preserves_length(self):
        text = "#..#"
        assert len(map_chars(text, lambda c: c * 1)) == len(text)

    def test_map_indexed(self):
        result = map_chars_indexed("....", lambda i, c: "#" if i % 2 else c)
        assert result == ".#.#"
        assert map_chars_indexed("", lambda i, c: c) == ""