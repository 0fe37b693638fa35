"""
Rich Text Links Decorator — Relation fields for items embedded in rich text.

Rich-text elements list the items placed inline in their HTML under
linkedItemCodenames. For each such element this pass first declares the
relation field "<element>.linked_items___NODE" as an empty list, then appends
the IDs of the matching same-language items. Items with no inline references
therefore still get a deterministic, empty field.

The pass runs after the linked items decorator but resolves its own list per
element; there is no deduplication against explicit linked items elements.

Structure checks: the language partition is validated once and malformed
items are logged and reported as skipped; each remaining item is checked
again right before it is decorated, so an item made malformed by an earlier
pass is skipped on its own without aborting the batch.
"""

import logging
from typing import Any, Dict, Tuple

from ..exceptions import ItemStructureError
from ..node_set import ContentNodeSet, DecorationReport
from ..normalize import add_linked_items_links, index_by_codename, resolve_codenames, set_path
from ..rich_text import RICH_TEXT
from ..validation import check_item_structure, split_valid_items

logger = logging.getLogger(__name__)


def decorate_item_nodes_with_rich_text_linked_items_links(
    node_set: ContentNodeSet,
) -> Tuple[ContentNodeSet, DecorationReport]:
    """Write <element>.linked_items___NODE for every rich-text element."""
    decorated = node_set.copy()
    report = DecorationReport("rich_text_links")

    for language, nodes in decorated.partitions():
        valid_nodes, malformed = split_valid_items(nodes)
        for item_node, error in malformed:
            logger.error("Skipping malformed %s item: %s", language, error)
            report.record_skipped(item_node, language, error)

        index = index_by_codename(valid_nodes)
        for item_node in valid_nodes:
            try:
                decorate_item_node_with_rich_text_linked_items_links(item_node, index)
            except (ItemStructureError, KeyError, TypeError) as e:
                logger.error("Could not resolve rich text links of %s: %s",
                             item_node["system"]["codename"], e)
                report.record_skipped(item_node, language, e)
                continue
            report.record_decorated(item_node, language)

    return decorated, report


def decorate_item_node_with_rich_text_linked_items_links(
    item_node: Dict[str, Any],
    same_language_index: Dict[str, Dict[str, Any]],
) -> None:
    """Add "<element>.linked_items___NODE" to each rich-text element of item_node.

    Raises:
        ItemStructureError: If item_node lacks system.codename or elements.
    """
    check_item_structure(item_node)

    for element_name, element in list(item_node["elements"].items()):
        if not isinstance(element, dict) or element.get("type") != RICH_TEXT:
            continue

        link_property_name = f"{element_name}.linked_items___NODE"
        codenames = element.get("linkedItemCodenames")
        if not isinstance(codenames, list):
            codenames = []

        set_path(item_node["elements"], link_property_name, [])
        add_linked_items_links(
            item_node,
            resolve_codenames(codenames, same_language_index),
            link_property_name,
        )
