"""
Taxonomy Nodes — Fetches taxonomy groups and turns them into host nodes.

Taxonomies are independent of items and types, so these nodes are never
decorated. A taxonomy that cannot be converted is logged and skipped; the
rest are still created.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .node_set import DecorationReport
from .normalize import create_kc_artifact_node, param_case

logger = logging.getLogger(__name__)


def get(
    client,
    create_node_id: Callable[[str], str],
    report: Optional[DecorationReport] = None,
) -> List[Dict[str, Any]]:
    """Create taxonomy nodes for every taxonomy group in the project.

    Args:
        client: A KontentDeliveryClient.
        create_node_id: Host function generating a node ID from a seed.
        report: Optional report receiving one outcome per taxonomy.

    Returns:
        Nodes for the taxonomies that could be converted.
    """
    taxonomy_nodes = []
    for taxonomy in client.get_taxonomies():
        try:
            node = create_taxonomy_node(create_node_id, taxonomy)
        except Exception as e:
            logger.error("Could not create taxonomy node: %s", e)
            if report is not None:
                report.record_skipped(taxonomy, None, e)
            continue

        taxonomy_nodes.append(node)
        if report is not None:
            report.record_created(taxonomy)

    return taxonomy_nodes


def _normalize_terms(terms: Any) -> List[Dict[str, Any]]:
    return [
        {
            "name": term["name"],
            "codename": term["codename"],
            "terms": _normalize_terms(term.get("terms") or []),
        }
        for term in terms
    ]


def create_taxonomy_node(create_node_id: Callable[[str], str], taxonomy: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap one taxonomy group as a host node.

    Raises:
        TypeError: If create_node_id is not callable.
        KeyError: If the taxonomy or one of its terms lacks a codename or name.
    """
    if not callable(create_node_id):
        raise TypeError("create_node_id is not a function.")

    codename = taxonomy["system"]["codename"]
    node_id = create_node_id(f"kentico-kontent-taxonomy-{param_case(codename)}")
    record = {
        "system": dict(taxonomy["system"]),
        "terms": _normalize_terms(taxonomy.get("terms") or []),
    }

    return create_kc_artifact_node(node_id, record, "taxonomy", codename)
