"""Predicates answered from a file's name, path and metadata."""

from __future__ import annotations

import functools
import re
import string

from .base import FileContext, MatchResult, PredicateEvaluator, PredicateKey
from .globmatch import GlobError, _class_regex, glob_match, has_glob_chars
from .sizetime import parse_and_compare_size, parse_and_compare_time

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_FOLD)


class ExtEvaluator(PredicateEvaluator):
    """Matches the file extension, ignoring ASCII case; dotfiles have none."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        extension = context.path.suffix[1:]
        return MatchResult.boolean(_ascii_lower(extension) == _ascii_lower(value))


@functools.lru_cache(maxsize=256)
def _name_pattern(value: str) -> re.Pattern[str]:
    parts: list[str] = []
    index, length = 0, len(value)
    while index < length:
        char = value[index]
        if char == "*":
            end = index
            while end < length and value[end] == "*":
                end += 1
            count = end - index
            if count == 1:
                parts.append(".*")
            else:
                starts_component = index == 0 or value[index - 1] == "/"
                ends_component = end == length or value[end] == "/"
                if count > 2 or not (starts_component and ends_component):
                    raise GlobError(
                        f"Invalid glob pattern '{value}': "
                        "recursive wildcards must form a single path component"
                    )
                if end < length:
                    parts.append("(?:.*/)?")
                    end += 1
                else:
                    parts.append(".*")
            index = end
        elif char == "?":
            parts.append(".")
            index += 1
        elif char == "[":
            try:
                regex, index = _class_regex(value, index + 1, "!")
            except GlobError as exc:
                raise GlobError(f"Invalid glob pattern '{value}': {exc}") from None
            parts.append(regex)
        else:
            parts.append(re.escape(char))
            index += 1
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


class NameEvaluator(PredicateEvaluator):
    """Matches the file name against a case-insensitive glob."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        if not value:
            raise GlobError("Invalid glob pattern: cannot be empty.")
        pattern = _name_pattern(value)
        return MatchResult.boolean(pattern.fullmatch(context.path.name) is not None)


class PathEvaluator(PredicateEvaluator):
    """Matches the full path: a glob if the value has glob characters, else a substring."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        path_str = str(context.path)
        if has_glob_chars(value):
            return MatchResult.boolean(glob_match(value, path_str))
        return MatchResult.boolean(value in path_str)


class SizeEvaluator(PredicateEvaluator):
    """Compares the file size with a query such as ``>10kb``."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        size = context.path.stat().st_size
        return MatchResult.boolean(parse_and_compare_size(size, value))


class ModifiedEvaluator(PredicateEvaluator):
    """Compares the modification time with a query such as ``>2d`` or a date."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        modified = context.path.stat().st_mtime
        return MatchResult.boolean(parse_and_compare_time(modified, value))