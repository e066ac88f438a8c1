"""Predicates that look at a file's text line by line."""

from __future__ import annotations

import re
from typing import Callable, Iterator

from .base import FileContext, Hunk, MatchResult, PredicateEvaluator, PredicateKey


def _lines(content: str) -> Iterator[str]:
    """Split on ``\\n`` dropping a final empty line and trailing ``\\r``."""
    pieces = content.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


def _line_hunks(content: str, accept: Callable[[str], bool]) -> MatchResult:
    hunks = []
    offset = 0
    for row, line in enumerate(_lines(content)):
        length = len(line.encode("utf-8"))
        if accept(line):
            hunks.append(Hunk(offset, offset + length, row, 0, row, length))
        offset += length + 1
    return MatchResult.from_hunks(hunks)


class ContainsEvaluator(PredicateEvaluator):
    """Case-insensitive substring search; each matching line is a hunk."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        needle = value.lower()
        return _line_hunks(context.get_content(), lambda line: needle in line.lower())


class MatchesEvaluator(PredicateEvaluator):
    """Regular-expression search; each matching line is a hunk."""

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        pattern = re.compile(value)
        return _line_hunks(context.get_content(), lambda line: pattern.search(line) is not None)