"""The ``in:`` predicate: is the file directly inside a given directory?"""

from __future__ import annotations

from pathlib import Path

from .base import FileContext, MatchResult, PredicateEvaluator, PredicateKey
from .globmatch import glob_match, has_glob_chars


def _parent_of(path: Path) -> Path | None:
    parent = path.parent
    if parent == path or not parent.parts:
        return None
    return parent


class InPathEvaluator(PredicateEvaluator):
    """Matches the directory that holds the file.

    A value with glob characters is matched against the parent directory
    relative to the search root. Any other value names one directory,
    absolute or relative to the root, which must be the file's own parent;
    ancestors further up do not count.
    """

    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        if has_glob_chars(value):
            return MatchResult.boolean(self._glob_parent(context, value))
        return MatchResult.boolean(self._exact_parent(context, value))

    @staticmethod
    def _glob_parent(context: FileContext, pattern: str) -> bool:
        parent = _parent_of(context.path)
        if parent is None:
            return False
        try:
            relative = parent.relative_to(context.root)
        except ValueError:
            relative = parent
        return glob_match(pattern, relative.as_posix())

    @staticmethod
    def _exact_parent(context: FileContext, value: str) -> bool:
        target = Path(value)
        if not target.is_absolute():
            target = context.root / target
        if not target.is_dir():
            return False
        try:
            canonical_target = target.resolve(strict=True)
        except OSError:
            return False
        parent = _parent_of(context.path)
        if parent is None:
            return False
        try:
            canonical_parent = parent.resolve(strict=True)
        except OSError:
            return False
        return canonical_parent == canonical_target