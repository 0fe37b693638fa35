"""
Decorators — The four passes that turn codename references into relation fields.

Run in this order; later passes read fields written by earlier ones:

  language_variants.py   otherLanguages___NODE between variants of one item
  type_items.py          contentItems___NODE on types, contentType___NODE on items
  linked_items.py        <element>.linked_items___NODE for linked items elements
  rich_text_links.py     <element>.linked_items___NODE for rich-text elements

Every decorator takes a ContentNodeSet and returns (new_set, DecorationReport).
"""

from .language_variants import decorate_items_with_language_variants
from .type_items import decorate_type_nodes_with_item_links
from .linked_items import decorate_item_nodes_with_linked_items_links
from .rich_text_links import decorate_item_nodes_with_rich_text_linked_items_links

DECORATION_PASSES = (
    decorate_items_with_language_variants,
    decorate_type_nodes_with_item_links,
    decorate_item_nodes_with_linked_items_links,
    decorate_item_nodes_with_rich_text_linked_items_links,
)
