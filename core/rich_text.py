"""
Rich Text — Resolves rich-text element HTML and surfaces embedded images.

The Delivery API returns rich-text values as HTML in which inline content
items appear as placeholder objects and links to other items carry only the
target item ID:

    <object type="application/kenticocloud" data-type="item"
            data-rel="link" data-codename="coffee_beans"></object>
    <a data-item-id="80c7074b-..." href="">Read more</a>

The element also carries lookup maps for those references:

    "modular_content": ["coffee_beans"],
    "links":  {"80c7074b-...": {"codename": "about_us", "type": "page", "url_slug": "about"}},
    "images": {"14mio": {"image_id": "14mio", "url": "https://...", "description": null}}

resolve_html() rewrites the placeholders into plain wrapper elements that a
site template can pick up, and annotates item links with the target's codename
and URL slug. It is a pure transform of a single element and runs before any
cross-item decoration.
"""

from typing import Any, Dict, List

from bs4 import BeautifulSoup

from .exceptions import ItemStructureError

RICH_TEXT = "rich_text"
LINKED_ITEM_OBJECT_TYPE = "application/kenticocloud"
LINKED_ITEM_WRAPPER_CLASS = "kc-linked-item-wrapper"


def resolve_html(element: Dict[str, Any]) -> str:
    """Render a raw rich-text element's HTML with references resolved.

    Args:
        element: The raw rich-text element dict from the Delivery API.

    Returns:
        The resolved HTML string. Empty string for an empty value.

    Raises:
        ItemStructureError: If the value is not a string or the link map is
            not a mapping.
    """
    html = element.get("value") or ""
    if not isinstance(html, str):
        raise ItemStructureError(f"Rich text value must be a string, got {type(html).__name__}")
    links = get_links(element)
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")

    for placeholder in soup.find_all("object", attrs={"type": LINKED_ITEM_OBJECT_TYPE}):
        wrapper = soup.new_tag("div")
        wrapper["class"] = LINKED_ITEM_WRAPPER_CLASS
        wrapper["data-codename"] = placeholder.get("data-codename", "")
        wrapper["data-rel"] = placeholder.get("data-rel", "link")
        placeholder.replace_with(wrapper)

    for anchor in soup.find_all("a", attrs={"data-item-id": True}):
        link = links.get(anchor["data-item-id"])
        if not isinstance(link, dict):
            continue
        anchor["data-codename"] = link.get("codename", "")
        anchor["data-type"] = link.get("type", "")
        if link.get("url_slug"):
            anchor["data-url-slug"] = link["url_slug"]

    return str(soup)


def get_links(element: Dict[str, Any]) -> Dict[str, Any]:
    links = element.get("links") or {}
    if not isinstance(links, dict):
        raise ItemStructureError(f"Rich text links must be a mapping, got {type(links).__name__}")
    return links


def get_images(element: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the element's image map as a plain list, in API order.

    A list is accepted as-is, so already resolved elements pass through.
    """
    images = element.get("images") or {}
    if isinstance(images, dict):
        return list(images.values())
    if isinstance(images, list):
        return list(images)
    raise ItemStructureError(f"Rich text images must be a mapping, got {type(images).__name__}")


def resolve_html_and_include_images(items: List[Dict[str, Any]]) -> None:
    """Add resolvedHtml and an images list to every rich-text element.

    Operates in place on raw API item records, before they are parsed into
    node records.

    Raises:
        ItemStructureError: If a rich-text element is malformed. Elements
            resolved before the failing one keep their new fields.
    """
    for item in items:
        elements = item.get("elements") if isinstance(item, dict) else None
        if not isinstance(elements, dict):
            continue
        for element in elements.values():
            if isinstance(element, dict) and element.get("type") == RICH_TEXT:
                element["resolvedHtml"] = resolve_html(element)
                element["images"] = get_images(element)
