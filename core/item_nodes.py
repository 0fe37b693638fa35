"""
Item Nodes — Fetches content items per language and turns them into host nodes.

Each raw item is passed through rich_text.resolve_html_and_include_images()
on its own, then every element is parsed into its typed form
(elements.parse_elements) and written back onto the node as a plain field
dict.

Node IDs are derived from "kentico-cloud-item-{codename}-{language}", so the
same logical item gets a distinct node per language while keeping the shared
system.codename that the language variant decorator matches on.

Items whose system block or elements cannot be parsed (including malformed
rich-text fields) are logged and left out of the partition; the rest of the
language is still created.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from . import rich_text
from .elements import parse_elements
from .exceptions import ItemStructureError
from .node_set import DecorationReport
from .normalize import create_kc_artifact_node

logger = logging.getLogger(__name__)


def get_from_default_language(
    client,
    default_language_codename: str,
    create_node_id: Callable[[str], str],
    report: Optional[DecorationReport] = None,
) -> List[Dict[str, Any]]:
    """Create item nodes for the default language."""
    return _get_language_item_nodes(client, default_language_codename, create_node_id, report)


def get_from_non_default_languages(
    client,
    non_default_language_codenames: List[str],
    create_node_id: Callable[[str], str],
    report: Optional[DecorationReport] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    """Create item nodes for every non-default language.

    Returns:
        {language_codename: [item nodes]}, in the configured language order.
    """
    return {
        language: _get_language_item_nodes(client, language, create_node_id, report)
        for language in non_default_language_codenames
    }


def _get_language_item_nodes(client, language, create_node_id, report):
    raw_items = client.get_items(language)

    nodes = []
    for raw_item in raw_items:
        try:
            nodes.append(create_item_node(create_node_id, raw_item, language))
        except ItemStructureError as e:
            logger.error("Skipping %s item: %s", language, e)
            if report is not None:
                report.record_skipped(raw_item, language, e)
            continue
        if report is not None:
            report.record_created(raw_item, language)

    logger.info("Prepared %d item nodes for language %s", len(nodes), language)
    return nodes


def create_item_node(
    create_node_id: Callable[[str], str],
    raw_item: Dict[str, Any],
    language_codename: str,
) -> Dict[str, Any]:
    """Convert one raw Delivery API item into a host node.

    Raises:
        ItemStructureError: If system.codename or system.type is missing,
            or an element cannot be parsed.
    """
    if not callable(create_node_id):
        raise TypeError("create_node_id is not a function.")

    raw_system = raw_item.get("system") if isinstance(raw_item, dict) else None
    if not isinstance(raw_system, dict) or not raw_system.get("codename") or not raw_system.get("type"):
        raise ItemStructureError("Item has no system.codename or system.type")

    rich_text.resolve_html_and_include_images([raw_item])

    system = dict(raw_system)
    codename = system["codename"]
    system.setdefault("language", language_codename)

    elements = parse_elements(raw_item.get("elements") or {})
    record = {
        "system": system,
        "elements": {key: element.to_node_field() for key, element in elements.items()},
    }

    node_id = create_node_id(f"kentico-cloud-item-{codename}-{language_codename}")
    return create_kc_artifact_node(
        node_id,
        record,
        "item",
        system["type"],
        {"otherLanguages___NODE": [], "contentType___NODE": None},
    )
