"""
Node Emitter — Hands finished nodes to the host framework.

Nodes are registered one batch at a time (types, taxonomies, default
language items, then each other language). Within a batch the first failing
create_node() call stops the batch: the error is logged and the remaining
nodes of that batch are not created. Other batches are unaffected.
"""

import logging
from typing import Any, Callable, Dict, Iterable

logger = logging.getLogger(__name__)


def create_nodes(nodes: Iterable[Dict[str, Any]], create_node: Callable[[Dict[str, Any]], Any]) -> int:
    """Call create_node for every node, stopping at the first failure.

    Args:
        nodes: Host nodes to create.
        create_node: Host API method for node creation.

    Returns:
        The number of nodes created before the batch finished or failed.
    """
    created = 0
    try:
        for node in nodes:
            node_codename = (node.get("system") or {}).get("codename")
            logger.debug("Creating node: %s(%s)", node.get("id"), node_codename)
            create_node(node)
            created += 1
    except Exception as e:
        logger.error("Error when creating nodes. Details: %s", e)
    return created
