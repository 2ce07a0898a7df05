import dataclasses

import pytest
from shglob import MatchOptions, default_options


def test_defaults():
    options = default_options()
    assert options == MatchOptions()
    assert options.case_sensitive
    assert not options.require_literal_separator
    assert not options.require_literal_leading_dot
    assert not options.tilde_expansion


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MatchOptions().case_sensitive = False


def test_for_traversal_forces_literal_separator():
    options = MatchOptions(case_sensitive=False, require_literal_leading_dot=True)
    walked = options.for_traversal()
    assert walked.require_literal_separator
    assert not walked.case_sensitive
    assert walked.require_literal_leading_dot
    assert not options.require_literal_separator


def test_for_traversal_keeps_instance_when_already_set():
    options = MatchOptions(require_literal_separator=True)
    assert options.for_traversal() is options
