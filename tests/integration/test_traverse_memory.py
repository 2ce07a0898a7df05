import pytest
from shglob import (
    MatchOptions,
    MisplacedRecursiveWildcardError,
    Paths,
    UnterminatedCharacterClassError,
    traverse,
    traverse_with,
)

from tests.helpers.tree import GLOB_CASES


@pytest.mark.parametrize("pattern, expected", GLOB_CASES)
def test_reference_tree(ref_memfs, pattern, expected):
    assert list(traverse(pattern, fs=ref_memfs)) == expected


@pytest.mark.parametrize(
    "doubled, single", [("r/**/**", "r/**"), ("**/**/*.md", "**/*.md")]
)
def test_consecutive_recursive_components_collapse(ref_memfs, doubled, single):
    assert list(traverse(doubled, fs=ref_memfs)) == list(traverse(single, fs=ref_memfs))


def test_returns_lazy_iterator(ref_memfs):
    paths = traverse("r/**", fs=ref_memfs)
    assert isinstance(paths, Paths)
    assert iter(paths) is paths
    assert next(paths) == "r/another"

    # r/one has not been listed yet, so a new entry there still shows up.
    ref_memfs.touch("r/one/zzz.md")
    assert "r/one/zzz.md" in list(paths)


def test_exhausted_iterator_stays_exhausted(ref_memfs):
    paths = traverse("xyz/*", fs=ref_memfs)
    assert len(list(paths)) == 3
    assert list(paths) == []


def test_absolute_pattern(ref_memfs):
    assert list(traverse("/xyz/*", fs=ref_memfs)) == ["/xyz/x", "/xyz/y", "/xyz/z"]
    assert list(traverse("/nope/*", fs=ref_memfs)) == []


def test_leading_dot_specials(ref_memfs):
    # Directory listings never contain "." and "..", so they are offered
    # separately and come out first.
    assert list(traverse(".*", fs=ref_memfs)) == ["..", "."]


def test_hidden_entries(memfs):
    memfs.import_tree(["d/.hidden", "d/shown"])
    assert list(traverse("d/*", fs=memfs)) == ["d/.hidden", "d/shown"]

    strict = MatchOptions(require_literal_leading_dot=True)
    assert list(traverse_with("d/*", strict, fs=memfs)) == ["d/shown"]
    assert list(traverse_with("d/.h*", strict, fs=memfs)) == ["d/.hidden"]


def test_case_insensitive(ref_memfs):
    options = MatchOptions(case_sensitive=False)
    assert list(traverse_with("[A]A?/*", options, fs=ref_memfs)) == [
        "aaa/apple",
        "aaa/orange",
        "aaa/tomato",
    ]
    assert list(traverse("[A]A?/*", fs=ref_memfs)) == []


def test_literal_component_is_looked_up_as_written(ref_memfs):
    # Without metacharacters the name goes straight to the filesystem, which
    # decides case on its own.
    options = MatchOptions(case_sensitive=False)
    assert list(traverse_with("XYZ/[X]", options, fs=ref_memfs)) == []


def test_unreadable_directory_is_skipped(ref_memfs):
    ref_memfs.set_readable("xyz", False)
    assert list(traverse("xyz/*", fs=ref_memfs)) == []
    assert list(traverse("*/?", fs=ref_memfs)) == []
    assert list(traverse("???", fs=ref_memfs)) == ["aaa", "bbb", "ccc", "xyz"]


def test_literal_component_does_not_list(ref_memfs):
    ref_memfs.set_readable("aaa", False)
    assert list(traverse("aaa/apple", fs=ref_memfs)) == ["aaa/apple"]
    assert list(traverse("aaa/*", fs=ref_memfs)) == []


def test_undecodable_name_is_skipped(memfs):
    memfs.import_tree(["d/ok", "d/bad\udcff"])
    assert list(traverse("d/*", fs=memfs)) == ["d/ok"]


def test_directories_come_before_later_siblings(memfs):
    memfs.import_tree(["a/x/1", "a/y", "b/2"])
    assert list(traverse("**", fs=memfs)) == ["a", "a/x", "a/x/1", "a/y", "b", "b/2"]


def test_pattern_error_before_any_io(memfs):
    with pytest.raises(MisplacedRecursiveWildcardError) as excinfo:
        traverse("a/**b", fs=memfs)
    assert excinfo.value.pos == 4


def test_component_error_position(memfs):
    # "[/]" is a valid class for string matching, but while walking the
    # separator splits it into two broken components.
    with pytest.raises(UnterminatedCharacterClassError) as excinfo:
        traverse("a[/]b", fs=memfs)
    assert excinfo.value.pos == 1

    with pytest.raises(UnterminatedCharacterClassError) as excinfo:
        traverse("/x/a[/]b", fs=memfs)
    assert excinfo.value.pos == 4
