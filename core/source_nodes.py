"""
Source Nodes — The host-facing entry point of the connector.

source_nodes() is what the host framework calls to pull content in. It runs
the whole pipeline against an already configured delivery client:

  1. Validate the language list (fatal on error, before any request)
  2. Fetch content types
  3. Fetch default-language items, then each other language's items
  4. Fetch taxonomies (optional)
  5. Run the four decoration passes in order
  6. Create nodes: types, taxonomies, default items, other languages

It returns a SourceResult with the final node set, node counts and every
fetch/decoration report so callers can inspect what was skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from . import item_nodes, taxonomy_nodes, type_nodes
from .decorators import DECORATION_PASSES
from .node_emitter import create_nodes
from .node_set import ContentNodeSet, DecorationReport
from .validation import validate_language_codenames

logger = logging.getLogger(__name__)


@dataclass
class SourceResult:
    node_set: ContentNodeSet
    reports: List[DecorationReport] = field(default_factory=list)
    created: Dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return sum(len(report.skipped) for report in self.reports)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "created": dict(self.created),
            "reports": [report.to_dict() for report in self.reports],
        }


def fetch_node_set(
    client,
    language_codenames: List[str],
    create_node_id: Callable[[str], str],
    include_taxonomies: bool = True,
) -> Tuple[ContentNodeSet, List[DecorationReport]]:
    """Fetch and normalize everything into an undecorated ContentNodeSet."""
    language_codenames = validate_language_codenames(language_codenames)
    default_language = language_codenames[0]

    item_report = DecorationReport("item_nodes")
    taxonomy_report = DecorationReport("taxonomy_nodes")

    content_type_nodes = type_nodes.get(client, create_node_id)
    logger.info("Prepared %d content type nodes", len(content_type_nodes))

    default_items = item_nodes.get_from_default_language(
        client, default_language, create_node_id, item_report
    )
    language_items = item_nodes.get_from_non_default_languages(
        client, language_codenames[1:], create_node_id, item_report
    )

    taxonomies = []
    if include_taxonomies:
        taxonomies = taxonomy_nodes.get(client, create_node_id, taxonomy_report)
        logger.info("Prepared %d taxonomy nodes", len(taxonomies))

    node_set = ContentNodeSet(
        default_language=default_language,
        default_items=default_items,
        language_items=language_items,
        type_nodes=content_type_nodes,
        taxonomy_nodes=taxonomies,
    )
    return node_set, [item_report, taxonomy_report]


def decorate(node_set: ContentNodeSet) -> Tuple[ContentNodeSet, List[DecorationReport]]:
    """Run every decoration pass in order over a node set."""
    reports = []
    for decoration_pass in DECORATION_PASSES:
        node_set, report = decoration_pass(node_set)
        if report.skipped:
            logger.warning("%s skipped %d item(s)", report.decorator, len(report.skipped))
        reports.append(report)
    return node_set, reports


def emit(node_set: ContentNodeSet, create_node: Callable[[Dict[str, Any]], Any]) -> Dict[str, int]:
    """Create every node of the set, batch by batch."""
    logger.info("Creating content type nodes.")
    created = {"types": create_nodes(node_set.type_nodes, create_node)}

    logger.info("Creating taxonomy nodes.")
    created["taxonomies"] = create_nodes(node_set.taxonomy_nodes, create_node)

    logger.info("Creating content item nodes for default language.")
    created[f"items_{node_set.default_language}"] = create_nodes(node_set.default_items, create_node)

    logger.info("Creating content item nodes for non-default languages.")
    for language, nodes in node_set.language_items.items():
        created[f"items_{language}"] = create_nodes(nodes, create_node)

    return created


def source_nodes(
    client,
    create_node: Callable[[Dict[str, Any]], Any],
    create_node_id: Callable[[str], str],
    language_codenames: List[str],
    include_taxonomies: bool = True,
) -> SourceResult:
    """Fetch, decorate and create all Kontent nodes.

    Args:
        client: A KontentDeliveryClient (or anything with the same methods).
        create_node: Host API method for node creation.
        create_node_id: Host function generating a node ID from a seed.
        language_codenames: Ordered language codenames; the first is the
            default language.
        include_taxonomies: Whether to fetch and create taxonomy nodes.

    Raises:
        ConfigurationError: If language_codenames is empty or malformed.
        DeliveryApiError: If a Delivery API request fails.
    """
    logger.info("Generating Kontent nodes for projectId: %s", getattr(client, "project_id", "?"))
    logger.info("Provided language codenames: %s", language_codenames)

    node_set, reports = fetch_node_set(client, language_codenames, create_node_id, include_taxonomies)
    node_set, decoration_reports = decorate(node_set)
    reports.extend(decoration_reports)

    created = emit(node_set, create_node)
    logger.info("Kontent nodes generation finished.")

    return SourceResult(node_set=node_set, reports=reports, created=created)
