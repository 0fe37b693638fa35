"""Tests for core.rich_text."""

import pytest

from core.exceptions import ItemStructureError
from core.rich_text import get_images, resolve_html, resolve_html_and_include_images


@pytest.fixture
def body_element(fake_client):
    return fake_client.get_items("default")[0]["elements"]["body"]


def test_linked_item_placeholder_becomes_wrapper(body_element):
    html = resolve_html(body_element)
    assert "<object" not in html
    assert 'class="kc-linked-item-wrapper"' in html
    assert 'data-codename="tweet_1"' in html


def test_item_link_annotated_from_link_map(body_element):
    html = resolve_html(body_element)
    assert 'data-url-slug="john-doe"' in html
    assert 'data-type="author"' in html


def test_unknown_item_link_left_alone():
    element = {"type": "rich_text", "value": '<a data-item-id="nope" href="">x</a>', "links": {}}
    assert resolve_html(element) == '<a data-item-id="nope" href="">x</a>'


def test_empty_value_resolves_to_empty_string():
    assert resolve_html({"type": "rich_text", "value": ""}) == ""


def test_images_as_list(body_element):
    images = get_images(body_element)
    assert isinstance(images, list)
    assert images[0]["url"] == "https://assets.example.com/beans.jpg"


def test_resolve_html_and_include_images_only_touches_rich_text(fake_client):
    items = fake_client.get_items("default")
    resolve_html_and_include_images(items)

    body = items[0]["elements"]["body"]
    assert "kc-linked-item-wrapper" in body["resolvedHtml"]
    assert isinstance(body["images"], list)
    assert "resolvedHtml" not in items[0]["elements"]["title"]


@pytest.mark.parametrize("element", [
    {"type": "rich_text", "value": 5},
    {"type": "rich_text", "value": ["<p>x</p>"]},
    {"type": "rich_text", "value": "<p>x</p>", "links": ["oops"]},
])
def test_malformed_element_rejected(element):
    with pytest.raises(ItemStructureError):
        resolve_html(element)


def test_non_mapping_images_rejected():
    with pytest.raises(ItemStructureError):
        get_images({"type": "rich_text", "images": "img1"})


def test_already_listed_images_pass_through():
    assert get_images({"images": [{"image_id": "a"}]}) == [{"image_id": "a"}]
