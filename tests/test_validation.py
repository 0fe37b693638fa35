"""Tests for core.validation."""

import pytest

from core.exceptions import ConfigurationError, ItemStructureError
from core.validation import (
    check_item_structure,
    split_valid_items,
    validate_language_codenames,
)


def test_valid_language_list():
    assert validate_language_codenames(["en-US", "cs-CZ"]) == ["en-US", "cs-CZ"]


@pytest.mark.parametrize("value", [[], None, "en-US", ["en-US", ""], ["en-US", 3], ["en", "en"]])
def test_invalid_language_list(value):
    with pytest.raises(ConfigurationError):
        validate_language_codenames(value)


def test_item_structure_ok():
    check_item_structure({"system": {"codename": "a"}, "elements": {}})


@pytest.mark.parametrize("item", [
    None,
    {"elements": {}},
    {"system": {}, "elements": {}},
    {"system": {"codename": "a"}},
    {"system": {"codename": "a"}, "elements": []},
])
def test_item_structure_violations(item):
    with pytest.raises(ItemStructureError):
        check_item_structure(item)


def test_split_valid_items():
    good = {"system": {"codename": "a"}, "elements": {}}
    bad = {"system": {}, "elements": {}}
    valid, malformed = split_valid_items([bad, good])
    assert valid == [good]
    assert malformed[0][0] is bad
    assert isinstance(malformed[0][1], ItemStructureError)
