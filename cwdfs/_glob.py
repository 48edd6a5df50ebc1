"""Shell-glob to regular-expression translation.

Supported syntax: ``*`` and ``?`` (never crossing ``/``), ``{a,b}``
alternation (nestable), ``\\`` escapes and ``[...]`` character classes,
which are handed to :mod:`re` untouched.

Names starting with ``.`` are hidden: they only match when the pattern
itself starts with a literal ``.``. After every ``/`` the same rule applies
to the next path segment unless that segment starts with ``.`` in the
pattern.
"""

from __future__ import annotations

import re

from ._exceptions import InvalidPatternError

_HIDDEN_GUARD = "(?=[^.])"
_REGEX_SPECIALS = frozenset(".()|+^$@%")


def glob_to_regex(pattern: str) -> str:
    """Translate *pattern* into an anchored regular-expression source."""
    out: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "\\":
            if i + 1 >= n:
                raise InvalidPatternError(pattern, "dangling escape at end of pattern")
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if c == "/":
            nxt = pattern[i + 1] if i + 1 < n else ""
            out.append("/" if nxt == "." else "/" + _HIDDEN_GUARD)
        elif c == "*":
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "{":
            depth += 1
            out.append("(")
        elif c == "}":
            depth -= 1
            if depth < 0:
                raise InvalidPatternError(pattern, f"unmatched '}}' at index {i}")
            out.append(")")
        elif c == "," and depth > 0:
            out.append("|")
        elif c in _REGEX_SPECIALS:
            out.append("\\" + c)
        else:
            out.append(c)
        i += 1

    if depth != 0:
        raise InvalidPatternError(pattern, f"{depth} unclosed '{{'")
    prefix = "" if pattern.startswith(".") else _HIDDEN_GUARD
    return "^" + prefix + "".join(out) + "$"


class GlobPattern:
    """A compiled glob. Immutable; build with :func:`compile_glob`."""

    __slots__ = ("_pattern", "_regex")

    def __init__(self, pattern: str, regex: re.Pattern[str]) -> None:
        self._pattern = pattern
        self._regex = regex

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    @property
    def dot_sensitive(self) -> bool:
        """True when the pattern starts with ``.`` and may match hidden names."""
        return self._pattern.startswith(".")

    def match(self, name: str) -> bool:
        return self._regex.fullmatch(name) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self._pattern!r})"


def compile_glob(pattern: str) -> GlobPattern:
    source = glob_to_regex(pattern)
    try:
        regex = re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    return GlobPattern(pattern, regex)
