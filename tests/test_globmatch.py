import re

import pytest

from rdump.globmatch import GlobError, glob_match, glob_to_regex, has_glob_chars


@pytest.mark.parametrize(
    "value, expected",
    [
        ("**/src", True),
        ("s?c", True),
        ("[ab]", True),
        ("{a,b}", True),
        ("project/src", False),
        ("", False),
    ],
)
def test_has_glob_chars(value, expected):
    assert has_glob_chars(value) is expected


FULL_PATH = "/home/user/project/src/main.rs"


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("**/main.rs", True),
        ("/home/user/project/src/*.rs", True),
        ("*.rs", True),
        ("**/*.rs", True),
        ("**/*.ts", False),
    ],
)
def test_full_path_patterns(pattern, expected):
    assert glob_match(pattern, FULL_PATH) is expected


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("**/src", "project_a/src", True),
        ("**/src", "project_b/source", False),
        ("**/src", "other/src", True),
        ("project_*/src", "project_b/source", False),
        ("project_*/src", "other/src", False),
        ("**/project_a/s?c", "project_a/src", True),
        ("**/project_a/s?c", "project_b/source", False),
        ("**/test", "project_a/src", False),
        ("**/so*ce", "project_a/src", False),
        ("**/so*ce", "project_b/source", True),
        ("project_a/*", "project_a/src", True),
        ("project_b/*", "project_a/src", False),
        ("src/*", "src/api", True),
        ("src/*", "lib/auth", False),
        ("lib/**", "lib/deep/down", True),
        ("lib/d*p/**", "lib/deep/down", True),
        ("lib/**", "lib/auth", True),
        ("lib/**", "src/api", False),
        ("dist/*", "src/api", False),
    ],
)
def test_relative_directory_patterns(pattern, text, expected):
    assert glob_match(pattern, text) is expected


def test_recursive_prefix_matches_zero_directories():
    assert glob_match("**/src", "src")


def test_zero_or_more_in_middle():
    assert glob_match("lib/**/utils", "lib/utils")
    assert glob_match("lib/**/utils", "lib/deep/down/utils")
    assert not glob_match("lib/**/utils", "libutils")


def test_alternatives():
    assert glob_match("*.{rs,toml}", "Cargo.toml")
    assert glob_match("*.{rs,toml}", "main.rs")
    assert not glob_match("*.{rs,toml}", "main.py")


def test_character_classes():
    assert glob_match("[a-c]x", "bx")
    assert not glob_match("[a-c]x", "dx")
    assert glob_match("[!a-c]x", "dx")
    assert not glob_match("[!a-c]x", "ax")


def test_literal_characters_are_escaped():
    assert glob_match("a.b+c", "a.b+c")
    assert not glob_match("a.b", "axb")


def test_escape_makes_metacharacter_literal():
    assert glob_match(r"a\*b", "a*b")
    assert not glob_match(r"a\*b", "axxb")


def test_match_is_case_sensitive():
    assert not glob_match("*.RS", "main.rs")


@pytest.mark.parametrize("pattern", ["[abc", "{a,b", "a}", "{a,{b}}", "abc\\", "[z-a]"])
def test_malformed_patterns_raise(pattern):
    with pytest.raises(GlobError):
        glob_match(pattern, "anything")


def test_glob_error_is_value_error():
    with pytest.raises(ValueError):
        glob_to_regex("[")


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("**/src", "a/b/src"),
        ("src/*", "src/api"),
        ("*.{rs,go}", "x.go"),
        ("**/*.ts", "/home/user/project/src/main.rs"),
    ],
)
def test_regex_agrees_with_glob_match(pattern, text):
    compiled = re.compile(glob_to_regex(pattern))
    assert (compiled.match(text) is not None) is glob_match(pattern, text)