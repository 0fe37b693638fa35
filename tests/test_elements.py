"""Tests for core.elements."""

import pytest

from core.elements import (
    Element,
    LinkedItemsElement,
    RichTextElement,
    parse_element,
    parse_elements,
)
from core.exceptions import ItemStructureError


def test_modular_content_parsed_as_linked_items():
    element = parse_element("author", {"type": "modular_content", "name": "Author", "value": ["a", "b"]})

    assert isinstance(element, LinkedItemsElement)
    assert element.type == "linked_items"
    assert element.to_node_field() == {
        "name": "Author",
        "type": "linked_items",
        "value": ["a", "b"],
        "linkedItemCodenames": ["a", "b"],
    }


def test_rich_text_parsed_with_codenames_and_images():
    raw = {
        "type": "rich_text",
        "name": "Body",
        "value": "<p>Hi</p>",
        "images": {"i1": {"image_id": "i1"}},
        "links": {},
        "modular_content": ["tweet_1"],
    }
    element = parse_element("body", raw)

    assert isinstance(element, RichTextElement)
    field = element.to_node_field()
    assert field["linkedItemCodenames"] == ["tweet_1"]
    assert field["images"] == [{"image_id": "i1"}]
    assert field["resolvedHtml"] == "<p>Hi</p>"


def test_precomputed_resolved_html_is_kept():
    raw = {"type": "rich_text", "value": "<p>x</p>", "resolvedHtml": "<p>resolved</p>", "images": []}
    assert parse_element("body", raw).resolved_html == "<p>resolved</p>"


def test_other_kinds_are_plain_elements():
    element = parse_element("price", {"type": "number", "name": "Price", "value": 8.5})
    assert type(element) is Element
    assert element.to_node_field() == {"name": "Price", "type": "number", "value": 8.5}


def test_name_defaults_to_key():
    assert parse_element("title", {"type": "text", "value": "x"}).name == "title"


@pytest.mark.parametrize("raw", [None, "text", {}, {"name": "x"}])
def test_element_without_type_rejected(raw):
    with pytest.raises(ItemStructureError):
        parse_element("x", raw)


def test_malformed_codename_list_rejected():
    with pytest.raises(ItemStructureError):
        parse_element("author", {"type": "modular_content", "value": "a,b"})


def test_parse_elements_keeps_order():
    elements = parse_elements({
        "b": {"type": "text", "value": "1"},
        "a": {"type": "text", "value": "2"},
    })
    assert list(elements) == ["b", "a"]


def test_parse_elements_requires_mapping():
    with pytest.raises(ItemStructureError):
        parse_elements(["not", "a", "mapping"])


@pytest.mark.parametrize("raw", [
    {"type": "rich_text", "value": 5},
    {"type": "rich_text", "value": 5, "resolvedHtml": ""},
    {"type": "rich_text", "value": "<p>x</p>", "links": ["oops"]},
    {"type": "rich_text", "value": "<p>x</p>", "resolvedHtml": "<p>x</p>", "links": ["oops"]},
    {"type": "rich_text", "value": "<p>x</p>", "images": 3},
])
def test_malformed_rich_text_rejected(raw):
    with pytest.raises(ItemStructureError):
        parse_element("body", raw)
