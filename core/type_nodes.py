"""
Type Nodes — Fetches content types and turns them into host nodes.

Node IDs are derived from "kentico-cloud-type-{codename}". Each type node
starts with an empty contentItems___NODE relation that the type/item
decorator fills in.
"""

import logging
from typing import Any, Callable, Dict, List

from .normalize import create_kc_artifact_node

logger = logging.getLogger(__name__)


def get(client, create_node_id: Callable[[str], str]) -> List[Dict[str, Any]]:
    """Create content type nodes for every type in the project.

    Args:
        client: A KontentDeliveryClient.
        create_node_id: Host function generating a node ID from a seed.

    Returns:
        The list of type nodes, in API order.
    """
    content_types = client.get_types()
    return [create_type_node(create_node_id, content_type) for content_type in content_types]


def create_type_node(create_node_id: Callable[[str], str], content_type: Dict[str, Any]) -> Dict[str, Any]:
    if not callable(create_node_id):
        raise TypeError("create_node_id is not a function.")

    codename = content_type["system"]["codename"]
    node_id = create_node_id(f"kentico-cloud-type-{codename}")
    record = {
        "system": dict(content_type["system"]),
        "elements": dict(content_type.get("elements") or {}),
    }

    logger.debug("Prepared type node %s (%s)", node_id, codename)
    return create_kc_artifact_node(
        node_id,
        record,
        "type",
        codename,
        {"contentItems___NODE": []},
    )
