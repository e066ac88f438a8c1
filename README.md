# rdump

Predicates that decide whether a single file matches a condition. Each
predicate looks at one aspect of a file. It can look at metadata: the
extension, the name, the path, the parent directory, the size or the
modification time. It can also look at content: a case-insensitive
substring, or a regular expression matched line by line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Concepts

- `rdump.base.FileContext(path, root)` holds the path of a file and the
  root directory of the search. `get_content()` reads the file as UTF-8
  on first use and keeps the text.
- `rdump.base.PredicateKey` is a string enum of predicate names, for
  example `PredicateKey.EXT == "ext"`.
- Every evaluator is a `rdump.base.PredicateEvaluator`. Its
  `evaluate(context, key, value)` method returns a
  `rdump.base.MatchResult`.
- A `MatchResult` holds one of two things. It can hold a plain boolean,
  built with `MatchResult.boolean(...)`. It can instead hold a tuple of
  `Hunk` ranges, built with `MatchResult.from_hunks(...)`. `is_hunks`
  tells which kind it is. `is_match()` is true for a true boolean, or
  when there is at least one hunk.
- A `Hunk` has `start_byte`, `end_byte`, `start_row`, `start_column`,
  `end_row` and `end_column`. Rows count from zero. Byte offsets are
  counted in UTF-8.

## Usage

```python
from pathlib import Path

from rdump.base import FileContext, PredicateKey
from rdump.registry import create_predicate_registry

registry = create_predicate_registry()
context = FileContext(Path("src/main.rs"), Path("."))

result = registry[PredicateKey.EXT].evaluate(context, PredicateKey.EXT, "rs")
print(result.is_match())

hits = registry[PredicateKey.CONTAINS].evaluate(context, PredicateKey.CONTAINS, "todo")
for hunk in hits.hunks:
    print(hunk.start_row + 1)
```

`rdump.registry.create_predicate_registry()` maps these eight keys to
evaluators: `ext`, `name`, `path`, `in`, `size`, `modified`, `contains`
and `matches`.

`create_metadata_predicate_registry()` maps only the first six keys.
Those predicates never read the file's content, so the registry suits a
quick first filtering pass.

The evaluators can also be used directly:

| Module             | Classes                                                                                  |
|--------------------|------------------------------------------------------------------------------------------|
| `rdump.metadata`   | `ExtEvaluator`, `NameEvaluator`, `PathEvaluator`, `SizeEvaluator`, `ModifiedEvaluator`   |
| `rdump.in_path`    | `InPathEvaluator`                                                                        |
| `rdump.content`    | `ContainsEvaluator`, `MatchesEvaluator`                                                  |

## Predicate values

| Predicate  | Value                                                                                                         |
|------------|---------------------------------------------------------------------------------------------------------------|
| `ext`      | an extension, compared without regard to ASCII case (`rs`, `TOML`). Dotfiles such as `.bashrc` have no extension. |
| `name`     | a glob on the file name, compared without regard to case (`*.rs`). It must not be empty.                      |
| `path`     | a glob on the full path if the value contains any of `* ? [ {`; otherwise a plain substring of the path.      |
| `in`       | a glob on the parent directory, relative to the root; or a single directory, absolute or relative to the root, that must be the file's own parent. |
| `size`     | an optional `>`, `<` or `=` (the default is `=`), then a number and an optional unit: `b`, `k`/`kb`, `m`/`mb` or `g`/`gb`. The units are powers of 1024. |
| `modified` | an optional `>`, `<` or `=`, then either a relative age (`30s`, `5m`, `2h`, `1d`, `1w`, `1y`) or a local date `YYYY-MM-DD` or `YYYY-MM-DD HH:MM:SS`. |
| `contains` | a substring, matched without regard to case. Each matching line gives one hunk.                               |
| `matches`  | a Python regular expression, searched in each line. Each matching line gives one hunk.                        |

For `modified`, `>1h` means the file was modified within the last hour,
and `<1h` means it was modified earlier than that. `=YYYY-MM-DD` matches
any time on that day, in local time.

## Helpers

- `rdump.sizetime` provides `parse_and_compare_size(file_size, query)`
  and `parse_and_compare_time(modified_time, query)`. The
  `modified_time` argument is a POSIX timestamp. The module also
  provides `parse_relative_time(time_str)`, which returns a `timedelta`,
  and `parse_absolute_time(time_str)`, which returns a timestamp.
- `rdump.globmatch` provides `glob_match(pattern, text)`,
  `glob_to_regex(pattern)` and `has_glob_chars(value)`.
  - In these path globs, `*` and `?` also match `/`.
  - `**` used as a whole path component matches any number of
    directories.
  - `[...]` classes and `{a,b}` alternatives are supported.

## Errors

A value that cannot be used raises an error rather than counting as
"no match":

- An empty or malformed glob raises `rdump.globmatch.GlobError`, which
  is a subclass of `ValueError`.
- A bad size or time query raises `ValueError`. For example, an unknown
  date format gives `Invalid date format: '...'`.
- An invalid regular expression raises `re.error`.
- A file that does not exist raises `OSError` from `size`, `modified`
  and the content predicates.

The `in` predicate is the exception: a target that does not exist, or
that is not a directory, simply gives no match.

## What this package does not do

This package has no command-line program. It does not walk directory
trees, parse query expressions that combine predicates with `&`, `|`
and `!`, format or print results, or manage saved queries.

It also has no code-aware predicates. `PredicateKey` has names such as
`def`, `func`, `class`, `call`, `comment` and `hook`, but no evaluator
handles them, and the registries do not contain them.