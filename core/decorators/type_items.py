"""
Type/Item Decorator — Links content types to the items that instantiate them.

Each type node gets contentItems___NODE: the IDs of every item node, across
all languages, whose system.type is the type's codename. Each matching item
gets the reverse contentType___NODE pointing at its type node. A type with
no items gets an empty list.

Both fields are assigned, so the pass can be re-run without duplicating IDs.
Malformed item nodes are left out of the lookup; the item passes report them.
"""

import logging
from typing import Tuple

from ..node_set import ContentNodeSet, DecorationReport
from ..validation import split_valid_items

logger = logging.getLogger(__name__)

TYPE_FIELD = "contentItems___NODE"
ITEM_FIELD = "contentType___NODE"


def decorate_type_nodes_with_item_links(
    node_set: ContentNodeSet,
) -> Tuple[ContentNodeSet, DecorationReport]:
    """Set contentItems___NODE on every type node."""
    decorated = node_set.copy()
    report = DecorationReport("type_items")
    all_items, _ = split_valid_items(decorated.all_items())

    for type_node in decorated.type_nodes:
        try:
            type_codename = type_node["system"]["codename"]
            item_ids = []
            for item_node in all_items:
                if item_node["system"].get("type") != type_codename:
                    continue
                if item_node["id"] not in item_ids:
                    item_ids.append(item_node["id"])
                item_node[ITEM_FIELD] = type_node["id"]

            type_node[TYPE_FIELD] = item_ids
        except Exception as e:
            logger.error("Could not link items to type %s: %s", type_node.get("id", "?"), e)
            report.record_skipped(type_node, None, e)
            continue

        report.record_decorated(type_node)

    return decorated, report
