import pytest

from rdump.base import FileContext, Hunk, MatchResult, PredicateEvaluator, PredicateKey


def test_boolean_match_result():
    assert MatchResult.boolean(True).is_match() is True
    assert MatchResult.boolean(False).is_match() is False
    assert MatchResult.boolean(True).is_hunks is False


def test_hunk_match_result():
    hunk = Hunk(0, 5, 0, 0, 0, 5)
    result = MatchResult.from_hunks([hunk])
    assert result.is_match() is True
    assert result.hunks == (hunk,)
    assert MatchResult.from_hunks([]).is_match() is False
    assert MatchResult.from_hunks([]).is_hunks is True


def test_predicate_key_lookup():
    assert PredicateKey("customhook") is PredicateKey.CUSTOM_HOOK
    assert PredicateKey("ext") is PredicateKey.EXT
    with pytest.raises(ValueError):
        PredicateKey("nonexistent")


def test_file_context_reads_and_caches(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("first", encoding="utf-8")
    ctx = FileContext(path, tmp_path)
    assert ctx.get_content() == "first"
    path.write_text("second", encoding="utf-8")
    assert ctx.get_content() == "first"


def test_file_context_converts_paths(tmp_path):
    ctx = FileContext(str(tmp_path / "x.rs"), str(tmp_path))
    assert ctx.path == tmp_path / "x.rs"
    assert ctx.root == tmp_path


def test_file_context_missing_file(tmp_path):
    ctx = FileContext(tmp_path / "missing.txt", tmp_path)
    with pytest.raises(FileNotFoundError):
        ctx.get_content()


def test_evaluator_is_abstract():
    with pytest.raises(TypeError):
        PredicateEvaluator()


def test_evaluator_subclass(tmp_path):
    class Always(PredicateEvaluator):
        def evaluate(self, context, key, value):
            return MatchResult.boolean(value == "yes")

    ctx = FileContext(tmp_path / "f", tmp_path)
    assert Always().evaluate(ctx, PredicateKey.NAME, "yes").is_match() is True
    assert Always().evaluate(ctx, PredicateKey.NAME, "no").is_match() is False