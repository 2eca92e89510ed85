"""Tests for edit distance and similarity."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from autoline.distance import distance, similarity


def test_identical_strings():
    for word in ["", "a", "hello", "автокоррекция"]:
        assert distance(word, word) == 0


def test_kitten_sitting():
    assert distance("kitten", "sitting") == 3
    assert distance("sitting", "kitten") == 3


def test_empty_side_is_length():
    assert distance("", "hello") == 5
    assert distance("hello", "") == 5


def test_single_edits():
    assert distance("cat", "cats") == 1   # insertion
    assert distance("cats", "cat") == 1   # deletion
    assert distance("cat", "cut") == 1    # substitution
    assert distance("ab", "ba") == 2      # no transposition shortcut


def test_symmetry():
    pairs = [("flaw", "lawn"), ("gumbo", "gambol"), ("", "abc"), ("hello", "helllo")]
    for a, b in pairs:
        assert distance(a, b) == distance(b, a)


def test_similarity_exact_match_is_one():
    assert similarity("hello", "hello") == 1.0
    assert similarity("hello", "helllo") < 1.0


def test_similarity_uses_shorter_length():
    assert similarity("hello", "helllo") == pytest.approx(0.8)
    assert similarity("abc", "abd") == pytest.approx(1 - 1 / 3)


def test_similarity_can_be_negative():
    assert similarity("a", "xyz") < 0


def test_similarity_rejects_empty():
    with pytest.raises(AssertionError):
        similarity("", "word")
    with pytest.raises(AssertionError):
        similarity("word", "")


if __name__ == '__main__':
    sys.exit(pytest.main([__file__]))
