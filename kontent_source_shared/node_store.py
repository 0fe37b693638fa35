"""
Node Store — Stand-in for the host framework's node API.

The decoration pipeline only needs two things from the host static-site
framework: a deterministic ``create_node_id(seed)`` and a ``create_node(node)``
registration call. When the connector runs on its own (run.py), NodeStore
provides both and keeps the registered nodes in memory so the orchestrator can
write them out as nodes.json.

Node IDs are UUIDv5 values derived from the seed string, so the same seed
always yields the same ID across runs.
"""

import json
import uuid
from typing import Any, Dict

NODE_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "kontent-source-nodes")


class NodeRegistrationError(ValueError):
    """Raised when a node handed to create_node() is malformed or a duplicate."""


def create_node_id(seed: str) -> str:
    """Generate a deterministic node ID from a seed string."""
    return str(uuid.uuid5(NODE_ID_NAMESPACE, seed))


class NodeStore:
    """In-memory node registry with the host framework's calling convention.

    Attributes:
        nodes: Registered nodes keyed by node ID, in registration order.
    """

    def __init__(self):
        self.nodes: Dict[str, Dict[str, Any]] = {}

    def create_node_id(self, seed: str) -> str:
        return create_node_id(seed)

    def create_node(self, node: Dict[str, Any]) -> None:
        """Register a node.

        Raises:
            NodeRegistrationError: If the node lacks an ``id`` or
                ``internal.type``, or a node with the same ID already exists.
        """
        node_id = node.get("id") if isinstance(node, dict) else None
        if not node_id:
            raise NodeRegistrationError("Node is missing the 'id' field")

        internal = node.get("internal") or {}
        if not internal.get("type"):
            raise NodeRegistrationError(f"Node {node_id} is missing 'internal.type'")

        if node_id in self.nodes:
            raise NodeRegistrationError(f"Node {node_id} was already created")

        self.nodes[node_id] = node

    def dump(self, path: str) -> None:
        """Write every registered node to a JSON file."""
        with open(path, "w") as f:
            json.dump(list(self.nodes.values()), f, indent=2, default=str)

    def __len__(self) -> int:
        return len(self.nodes)
