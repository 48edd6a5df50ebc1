import re

import pytest

from cwdfs import GlobPattern, InvalidPatternError, compile_glob
from cwdfs._glob import glob_to_regex


# ------------------------------------------------------------------
# glob_to_regex(): emitted fragments
# ------------------------------------------------------------------


def test_star_becomes_non_separator_run():
    assert glob_to_regex("*") == "^(?=[^.])[^/]*$"


def test_question_mark_becomes_single_non_separator():
    assert glob_to_regex("a?") == "^(?=[^.])a[^/]$"


def test_leading_dot_drops_hidden_guard():
    assert glob_to_regex(".*") == "^\\.[^/]*$"


def test_braces_become_alternation_group():
    assert glob_to_regex("{a,b}") == "^(?=[^.])(a|b)$"


def test_comma_outside_braces_is_literal():
    assert glob_to_regex("a,b") == "^(?=[^.])a,b$"


def test_regex_specials_are_escaped():
    assert glob_to_regex("a.b(c)|+^$@%") == "^(?=[^.])a\\.b\\(c\\)\\|\\+\\^\\$\\@\\%$"


def test_slash_adds_hidden_guard_for_next_segment():
    assert glob_to_regex("a/*") == "^(?=[^.])a/(?=[^.])[^/]*$"


def test_slash_before_dot_has_no_guard():
    assert glob_to_regex("a/.b") == "^(?=[^.])a/\\.b$"


def test_escape_emits_literal_next_char():
    assert glob_to_regex("a\\*") == "^(?=[^.])a\\*$"


# ------------------------------------------------------------------
# GlobPattern.match()
# ------------------------------------------------------------------


def test_star_txt_matches_plain_names():
    p = compile_glob("*.txt")
    assert p.match("notes.txt")
    assert p.match(".txt") is False
    assert p.match("notes.txt.bak") is False


def test_star_txt_rejects_hidden_file():
    assert compile_glob("*.txt").match(".hidden.txt") is False


def test_dot_star_accepts_hidden_file():
    p = compile_glob(".*")
    assert p.match(".hidden")
    assert p.match("visible") is False


def test_brace_alternation():
    p = compile_glob("{foo,bar}.txt")
    assert p.match("foo.txt")
    assert p.match("bar.txt")
    assert p.match("baz.txt") is False


def test_nested_braces():
    p = compile_glob("{a,b{c,d}}.log")
    assert {n for n in ["a.log", "bc.log", "bd.log", "b.log"] if p.match(n)} == {
        "a.log",
        "bc.log",
        "bd.log",
    }


def test_empty_alternative():
    p = compile_glob("file{,.bak}")
    assert p.match("file")
    assert p.match("file.bak")


def test_question_mark_matches_exactly_one_char():
    p = compile_glob("?.txt")
    assert p.match("a.txt")
    assert p.match("ab.txt") is False
    assert p.match(".txt") is False


def test_star_does_not_cross_separator():
    assert compile_glob("*").match("a/b") is False


def test_multi_segment_pattern_guards_each_segment():
    p = compile_glob("src/*.py")
    assert p.match("src/mod.py")
    assert p.match("src/.hidden.py") is False


def test_multi_segment_pattern_with_explicit_dot_segment():
    p = compile_glob("src/.*")
    assert p.match("src/.env")


def test_escaped_wildcard_is_literal():
    p = compile_glob("a\\*b")
    assert p.match("a*b")
    assert p.match("axb") is False


def test_escaped_brace_is_literal():
    p = compile_glob("\\{x\\}")
    assert p.match("{x}")


def test_character_class_passes_through():
    p = compile_glob("[ac].txt")
    assert p.match("a.txt")
    assert p.match("c.txt")
    assert p.match("b.txt") is False


def test_match_is_anchored_at_both_ends():
    p = compile_glob("b")
    assert p.match("abc") is False
    assert p.match("b\n") is False


def test_plus_and_dollar_are_literal():
    p = compile_glob("c++$")
    assert p.match("c++$")
    assert p.match("cc") is False


# ------------------------------------------------------------------
# GlobPattern attributes
# ------------------------------------------------------------------


def test_pattern_attributes():
    p = compile_glob(".*rc")
    assert isinstance(p, GlobPattern)
    assert p.pattern == ".*rc"
    assert p.dot_sensitive is True
    assert isinstance(p.regex, re.Pattern)
    assert compile_glob("*rc").dot_sensitive is False


def test_compile_returns_fresh_object_each_call():
    assert compile_glob("*.txt") is not compile_glob("*.txt")


def test_repr_shows_source_pattern():
    assert repr(compile_glob("*.py")) == "GlobPattern('*.py')"


# ------------------------------------------------------------------
# malformed patterns
# ------------------------------------------------------------------


def test_unclosed_brace_raises():
    with pytest.raises(InvalidPatternError, match="unclosed"):
        compile_glob("{a,b")


def test_unmatched_close_brace_raises():
    with pytest.raises(InvalidPatternError, match="unmatched"):
        compile_glob("a}{b")


def test_dangling_escape_raises():
    with pytest.raises(InvalidPatternError, match="dangling"):
        compile_glob("abc\\")


def test_unclosed_character_class_raises():
    with pytest.raises(InvalidPatternError) as exc_info:
        compile_glob("[abc")
    assert exc_info.value.pattern == "[abc"


def test_invalid_pattern_error_is_value_error():
    with pytest.raises(ValueError):
        compile_glob("}")
