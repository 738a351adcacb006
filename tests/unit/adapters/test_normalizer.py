"""Tests for dataset record normalization."""

import math

from app.adapters.json_loader.normalizer import (
    clean_string,
    parse_coordinate,
    parse_flag,
    parse_tags,
)


def test_clean_string():
    assert clean_string("  abc  ") == "abc"
    assert clean_string("   ") is None
    assert clean_string(None) is None
    assert clean_string(42) is None


def test_parse_coordinate_numbers_and_strings():
    assert parse_coordinate(-1.409358) == -1.409358
    assert parse_coordinate(12) == 12.0
    assert parse_coordinate(" 43.238 ") == 43.238
    assert parse_coordinate("43,238") == 43.238


def test_parse_coordinate_rejects_garbage():
    assert parse_coordinate(None) is None
    assert parse_coordinate("") is None
    assert parse_coordinate("north") is None
    assert parse_coordinate(True) is None
    assert parse_coordinate([1.0]) is None
    assert parse_coordinate(math.nan) is None
    assert parse_coordinate("inf") is None


def test_parse_tags_keeps_order():
    assert parse_tags(["b", "a", "b"]) == ("b", "a", "b")
    assert parse_tags([]) == ()


def test_parse_tags_rejects_non_string_lists():
    assert parse_tags("a,b") is None
    assert parse_tags(["a", 1]) is None
    assert parse_tags(None) is None


def test_parse_flag():
    assert parse_flag(True) is True
    assert parse_flag(False) is False
    assert parse_flag("TRUE") is True
    assert parse_flag(" false ") is False
    assert parse_flag("yes") is None
    assert parse_flag(1) is None
    assert parse_flag(None) is None
