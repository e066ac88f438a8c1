"""Glob patterns for paths: ``*``, ``?``, ``**``, classes and alternatives.

``*`` and ``?`` also match ``/``. ``**`` used as a whole path component
matches any number of directories, including none.
"""

from __future__ import annotations

import functools
import re

GLOB_CHARS = frozenset("*?[{")


class GlobError(ValueError):
    """Raised for a malformed glob pattern."""


def has_glob_chars(value: str) -> bool:
    """True if ``value`` holds any glob metacharacter."""
    return any(char in GLOB_CHARS for char in value)


def _class_regex(pattern: str, start: int, negators: str) -> tuple[str, int]:
    """Translate a bracket class whose body begins at ``start``.

    Returns the regex class and the index just past the closing ``]``.
    """
    index = start
    negate = False
    if index < len(pattern) and pattern[index] in negators:
        negate = True
        index += 1
    items: list[str] = []
    first = True
    while True:
        if index >= len(pattern):
            raise GlobError(f"unclosed character class in glob: {pattern!r}")
        char = pattern[index]
        if char == "]" and not first:
            break
        first = False
        if index + 2 < len(pattern) and pattern[index + 1] == "-" and pattern[index + 2] != "]":
            low, high = char, pattern[index + 2]
            if low > high:
                raise GlobError(f"invalid range '{low}-{high}' in glob: {pattern!r}")
            items.append(f"{re.escape(low)}-{re.escape(high)}")
            index += 3
        else:
            items.append(re.escape(char))
            index += 1
    prefix = "^" if negate else ""
    return f"[{prefix}{''.join(items)}]", index + 1


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into an anchored regular expression string."""
    parts: list[str] = []
    index, length = 0, len(pattern)
    in_alternation = False
    while index < length:
        char = pattern[index]
        if char == "\\":
            if index + 1 >= length:
                raise GlobError(f"dangling escape in glob: {pattern!r}")
            parts.append(re.escape(pattern[index + 1]))
            index += 2
        elif char == "*":
            end = index
            while end < length and pattern[end] == "*":
                end += 1
            recursive = end - index >= 2
            at_end = end == length or pattern[end] == "/"
            after_slash = bool(parts) and parts[-1] == "/"
            if recursive and at_end and index == 0:
                if end == length:
                    parts.append(".*")
                else:
                    parts.append("(?:/?|.*/)")
                    end += 1
            elif recursive and at_end and after_slash:
                parts.pop()
                if end == length:
                    parts.append("/.*")
                else:
                    parts.append("(?:/|/.*/)")
                    end += 1
            else:
                parts.append(".*")
            index = end
        elif char == "?":
            parts.append(".")
            index += 1
        elif char == "[":
            regex, index = _class_regex(pattern, index + 1, "!^")
            parts.append(regex)
        elif char == "{":
            if in_alternation:
                raise GlobError(f"nested alternatives are not allowed in glob: {pattern!r}")
            in_alternation = True
            parts.append("(?:")
            index += 1
        elif char == "}":
            if not in_alternation:
                raise GlobError(f"unopened alternatives in glob: {pattern!r}")
            in_alternation = False
            parts.append(")")
            index += 1
        elif char == "," and in_alternation:
            parts.append("|")
            index += 1
        else:
            parts.append(re.escape(char))
            index += 1
    if in_alternation:
        raise GlobError(f"unclosed alternatives in glob: {pattern!r}")
    return "(?s)^" + "".join(parts) + r"\Z"


@functools.lru_cache(maxsize=256)
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(glob_to_regex(pattern))


def glob_match(pattern: str, text: str) -> bool:
    """True if the whole of ``text`` matches the glob ``pattern``."""
    return _compiled(pattern).match(text) is not None