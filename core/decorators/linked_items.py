"""
Linked Items Decorator — Resolves linked items elements into relation fields.

For every item and every element of kind "linked_items", the element's
linkedItemCodenames are looked up among the items of the same language only
and the matching node IDs are written to the element's linked_items___NODE
field, in reference order. Codenames with no matching item are dropped;
a codename listed twice yields its ID once.

Each language partition is validated once up front. Malformed items are
reported as skipped and are neither decorated nor linkable. A failure while
decorating one item is logged and reported; the other items continue.
"""

import logging
from typing import Any, Dict, List, Tuple

from ..elements import LINKED_ITEMS
from ..node_set import ContentNodeSet, DecorationReport
from ..normalize import index_by_codename, resolve_codenames
from ..validation import split_valid_items

logger = logging.getLogger(__name__)

LINK_FIELD = "linked_items___NODE"


def decorate_item_nodes_with_linked_items_links(
    node_set: ContentNodeSet,
) -> Tuple[ContentNodeSet, DecorationReport]:
    """Write linked_items___NODE on every linked items element."""
    decorated = node_set.copy()
    report = DecorationReport("linked_items")

    for language, nodes in decorated.partitions():
        valid_nodes, malformed = split_valid_items(nodes)
        for item_node, error in malformed:
            logger.error("Skipping malformed %s item: %s", language, error)
            report.record_skipped(item_node, language, error)

        index = index_by_codename(valid_nodes)
        for item_node in valid_nodes:
            try:
                decorate_item_node_with_linked_items_links(item_node, index)
            except Exception as e:
                logger.error("Could not resolve linked items of %s: %s",
                             item_node["system"]["codename"], e)
                report.record_skipped(item_node, language, e)
                continue
            report.record_decorated(item_node, language)

    return decorated, report


def decorate_item_node_with_linked_items_links(
    item_node: Dict[str, Any],
    same_language_index: Dict[str, Dict[str, Any]],
) -> None:
    for element in item_node["elements"].values():
        if element.get("type") != LINKED_ITEMS:
            continue
        codenames: List[str] = element.get("linkedItemCodenames") or []
        linked_nodes = resolve_codenames(codenames, same_language_index)
        element[LINK_FIELD] = [node["id"] for node in linked_nodes]
