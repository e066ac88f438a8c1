"""Lookup tables from predicate keys to the evaluators that answer them."""

from __future__ import annotations

from .base import PredicateEvaluator, PredicateKey
from .content import ContainsEvaluator, MatchesEvaluator
from .in_path import InPathEvaluator
from .metadata import (
    ExtEvaluator,
    ModifiedEvaluator,
    NameEvaluator,
    PathEvaluator,
    SizeEvaluator,
)


def create_metadata_predicate_registry() -> dict[PredicateKey, PredicateEvaluator]:
    """Evaluators that need only the path and file metadata, for pre-filtering."""
    return {
        PredicateKey.EXT: ExtEvaluator(),
        PredicateKey.NAME: NameEvaluator(),
        PredicateKey.PATH: PathEvaluator(),
        PredicateKey.IN: InPathEvaluator(),
        PredicateKey.SIZE: SizeEvaluator(),
        PredicateKey.MODIFIED: ModifiedEvaluator(),
    }


def create_predicate_registry() -> dict[PredicateKey, PredicateEvaluator]:
    """All available evaluators: the metadata ones plus the content searches."""
    registry = create_metadata_predicate_registry()
    registry[PredicateKey.CONTAINS] = ContainsEvaluator()
    registry[PredicateKey.MATCHES] = MatchesEvaluator()
    return registry