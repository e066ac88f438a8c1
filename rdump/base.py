"""Core types shared by all predicate evaluators."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable


class PredicateKey(str, enum.Enum):
    """Every predicate name understood in a query."""

    EXT = "ext"
    NAME = "name"
    PATH = "path"
    IN = "in"
    SIZE = "size"
    MODIFIED = "modified"
    CONTAINS = "contains"
    MATCHES = "matches"
    DEF = "def"
    FUNC = "func"
    IMPORT = "import"
    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"
    INTERFACE = "interface"
    TRAIT = "trait"
    TYPE = "type"
    IMPL = "impl"
    MACRO = "macro"
    COMMENT = "comment"
    STR = "str"
    CALL = "call"
    COMPONENT = "component"
    ELEMENT = "element"
    HOOK = "hook"
    CUSTOM_HOOK = "customhook"
    PROP = "prop"


@dataclass(frozen=True)
class Hunk:
    """A span of a file: byte offsets plus zero-based row/column positions."""

    start_byte: int
    end_byte: int
    start_row: int
    start_column: int
    end_row: int
    end_column: int


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a predicate: either a plain boolean or a list of hunks."""

    value: bool = False
    hunks: tuple[Hunk, ...] | None = None

    @classmethod
    def boolean(cls, value: bool) -> "MatchResult":
        return cls(value=bool(value))

    @classmethod
    def from_hunks(cls, hunks: Iterable[Hunk]) -> "MatchResult":
        return cls(hunks=tuple(hunks))

    @property
    def is_hunks(self) -> bool:
        return self.hunks is not None

    def is_match(self) -> bool:
        """True for a true boolean or for a non-empty set of hunks."""
        if self.hunks is not None:
            return bool(self.hunks)
        return self.value


@dataclass
class FileContext:
    """A file under evaluation, with its content loaded lazily and cached."""

    path: Path
    root: Path
    _content: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.root = Path(self.root)

    def get_content(self) -> str:
        """Return the file's text, reading it on first use."""
        if self._content is None:
            self._content = self.path.read_text(encoding="utf-8")
        return self._content


class PredicateEvaluator(abc.ABC):
    """Interface implemented by every predicate."""

    @abc.abstractmethod
    def evaluate(self, context: FileContext, key: PredicateKey, value: str) -> MatchResult:
        """Evaluate the predicate ``key:value`` against ``context``."""