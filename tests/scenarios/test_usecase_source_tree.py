"""Source tree use case: find modules in a project checkout."""
from itertools import islice

import pytest
from shglob import MatchOptions, MemoryFileSystem, compile, traverse, traverse_with

PROJECT = [
    ".git/HEAD",
    ".git/refs/",
    "README.md",
    "src/pkg/.scratch.py",
    "src/pkg/__init__.py",
    "src/pkg/core.py",
    "src/pkg/sub/util.py",
    "tests/test_core.py",
    "tests/data/",
]


@pytest.fixture
def project():
    mfs = MemoryFileSystem()
    mfs.import_tree(PROJECT)
    return mfs


def test_all_modules(project):
    """Every .py file, depth first, in name order."""
    assert list(traverse("**/*.py", fs=project)) == [
        "src/pkg/.scratch.py",
        "src/pkg/__init__.py",
        "src/pkg/core.py",
        "src/pkg/sub/util.py",
        "tests/test_core.py",
    ]


def test_skip_hidden_modules(project):
    """Hidden files need an explicit leading dot in the pattern."""
    options = MatchOptions(require_literal_leading_dot=True)
    assert list(traverse_with("src/**/*.py", options, fs=project)) == [
        "src/pkg/__init__.py",
        "src/pkg/core.py",
        "src/pkg/sub/util.py",
    ]
    assert list(traverse_with("src/**/.*.py", options, fs=project)) == [
        "src/pkg/.scratch.py",
    ]


def test_first_match_only(project):
    """Stopping early never reaches the later, unreadable directory."""
    project.set_readable("tests", False)
    assert list(islice(traverse("**/*.py", fs=project), 2)) == [
        "src/pkg/.scratch.py",
        "src/pkg/__init__.py",
    ]


def test_directories_only(project):
    assert list(traverse("*/*/", fs=project)) == [
        ".git/refs",
        "src/pkg",
        "tests/data",
    ]


def test_filter_results_with_second_pattern(project):
    """Compiled patterns can post-filter traversal results."""
    exclude = compile("tests/**")
    kept = [p for p in traverse("**/*.py", fs=project) if not exclude.matches(p)]
    assert kept == [
        "src/pkg/.scratch.py",
        "src/pkg/__init__.py",
        "src/pkg/core.py",
        "src/pkg/sub/util.py",
    ]
