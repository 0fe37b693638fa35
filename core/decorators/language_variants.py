"""
Language Variants Decorator — Links the language variants of each item.

The same logical item exists once per language, with a shared
system.codename and a per-language node ID. For every default-language item
this pass collects the matching node from each other language and gives every
variant an otherLanguages___NODE list with the IDs of all the other variants.
The default item therefore points at its translations and each translation
points back at the default item and at its sibling translations.

The field is assigned rather than appended, so running the pass again over
its own output changes nothing. An item with no translations ends up with an
empty list; a translation with no default-language counterpart keeps
whatever it had (empty, as created by the item fetcher).

Every partition is validated first. Malformed nodes are reported as skipped
and are never matched as variants.
"""

import logging
from typing import Tuple

from ..node_set import ContentNodeSet, DecorationReport
from ..normalize import index_by_codename
from ..validation import split_valid_items

logger = logging.getLogger(__name__)

FIELD = "otherLanguages___NODE"


def decorate_items_with_language_variants(
    node_set: ContentNodeSet,
) -> Tuple[ContentNodeSet, DecorationReport]:
    """Set otherLanguages___NODE on every variant of every default item."""
    decorated = node_set.copy()
    report = DecorationReport("language_variants")

    valid_by_language = {}
    for language, nodes in decorated.partitions():
        valid_nodes, malformed = split_valid_items(nodes)
        for item_node, error in malformed:
            logger.error("Skipping malformed %s item: %s", language, error)
            report.record_skipped(item_node, language, error)
        valid_by_language[language] = valid_nodes

    default_items = valid_by_language.pop(decorated.default_language)
    by_language = {
        language: index_by_codename(nodes)
        for language, nodes in valid_by_language.items()
    }

    for item_node in default_items:
        try:
            codename = item_node["system"]["codename"]
            variants = [item_node]
            for language_nodes in by_language.values():
                variant = language_nodes.get(codename)
                if variant is not None:
                    variants.append(variant)

            for variant in variants:
                variant[FIELD] = [other["id"] for other in variants if other is not variant]
        except Exception as e:
            logger.error("Could not link language variants for item %s: %s",
                         item_node.get("id", "?"), e)
            report.record_skipped(item_node, decorated.default_language, e)
            continue

        report.record_decorated(item_node, decorated.default_language)

    return decorated, report
