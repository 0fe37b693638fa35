"""
Elements — Typed content item elements, parsed once at the fetch boundary.

Raw Delivery API elements are loosely shaped dicts whose meaning depends on
their "type" key. parse_element() turns each one into a concrete Element
subclass so later stages never dig through raw dicts for optional keys:

  LinkedItemsElement   "modular_content" elements (ordered item codenames)
  RichTextElement      "rich_text" elements (HTML, inline item codenames,
                       resolved HTML, images, item links)
  Element              every other kind (text, number, date_time, asset,
                       multiple_choice, taxonomy, url_slug, custom)

The Delivery API calls linked items elements "modular_content"; nodes expose
them under the kind name "linked_items".

to_node_field() converts an element back into the plain dict stored on the
item node, using the field names the host graph layer queries
(linkedItemCodenames, resolvedHtml, ...).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .exceptions import ItemStructureError
from .rich_text import RICH_TEXT, get_images, get_links, resolve_html

LINKED_ITEMS = "linked_items"
RAW_LINKED_ITEMS = "modular_content"


@dataclass
class Element:
    name: str
    type: str
    value: Any

    def to_node_field(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "value": self.value}


@dataclass
class LinkedItemsElement(Element):
    linked_item_codenames: List[str] = field(default_factory=list)

    def to_node_field(self) -> Dict[str, Any]:
        node_field = super().to_node_field()
        node_field["linkedItemCodenames"] = list(self.linked_item_codenames)
        return node_field


@dataclass
class RichTextElement(Element):
    linked_item_codenames: List[str] = field(default_factory=list)
    resolved_html: str = ""
    images: List[Dict[str, Any]] = field(default_factory=list)
    links: Dict[str, Any] = field(default_factory=dict)

    def to_node_field(self) -> Dict[str, Any]:
        node_field = super().to_node_field()
        node_field["linkedItemCodenames"] = list(self.linked_item_codenames)
        node_field["resolvedHtml"] = self.resolved_html
        node_field["images"] = list(self.images)
        node_field["links"] = dict(self.links)
        return node_field


def _codename_list(value: Any, element_name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
        raise ItemStructureError(
            f"Element {element_name} must list item codenames, got: {value!r}"
        )
    return list(value)


def parse_element(key: str, raw: Any) -> Element:
    """Parse one raw API element into its typed form.

    Args:
        key: The element codename (key in the item's elements mapping).
        raw: The raw element dict.

    Raises:
        ItemStructureError: If the element has no type or one of its fields
            has the wrong shape.
    """
    if not isinstance(raw, dict) or not raw.get("type"):
        raise ItemStructureError(f"Element {key} has no type")

    name = raw.get("name", key)
    kind = raw["type"]

    if kind in (RAW_LINKED_ITEMS, LINKED_ITEMS):
        codenames = _codename_list(raw.get("value"), key)
        return LinkedItemsElement(
            name=name,
            type=LINKED_ITEMS,
            value=codenames,
            linked_item_codenames=codenames,
        )

    if kind == RICH_TEXT:
        html = raw.get("value") or ""
        if not isinstance(html, str):
            raise ItemStructureError(f"Element {key} value must be HTML text, got: {html!r}")
        resolved_html = raw["resolvedHtml"] if "resolvedHtml" in raw else resolve_html(raw)
        return RichTextElement(
            name=name,
            type=RICH_TEXT,
            value=html,
            linked_item_codenames=_codename_list(raw.get("modular_content"), key),
            resolved_html=resolved_html,
            images=get_images(raw),
            links=dict(get_links(raw)),
        )

    return Element(name=name, type=kind, value=raw.get("value"))


def parse_elements(raw_elements: Any) -> Dict[str, Element]:
    """Parse an item's whole elements mapping, preserving key order."""
    if not isinstance(raw_elements, dict):
        raise ItemStructureError("Item elements must be a mapping")
    return {key: parse_element(key, raw) for key, raw in raw_elements.items()}
