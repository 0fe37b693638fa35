"""
Normalize — Node record construction shared by the type, item and taxonomy
fetchers, plus the relation-field helpers used by the decorators.

Every node handed to the host carries:
  id          Host-generated node ID
  parent      Always None (nodes are top level)
  children    Always empty
  internal    {type, content, contentDigest}; the host keys its GraphQL type
              off internal.type and its cache off contentDigest

Relation fields follow the host's "___NODE" suffix convention: a field named
"x___NODE" holding node IDs is exposed as "x" resolved to those nodes.
"""

import copy
import hashlib
import json
import re
from typing import Any, Dict, Iterable, List, Optional

NODE_PREFIX = "KenticoCloud"

_WORD_BOUNDARY = re.compile(r'([a-z0-9])([A-Z])')
_NON_ALNUM = re.compile(r'[^A-Za-z0-9]+')


def _words(text: str) -> List[str]:
    spaced = _WORD_BOUNDARY.sub(r'\1 \2', text)
    return [w for w in _NON_ALNUM.split(spaced) if w]


def pascal_case(text: str) -> str:
    """Convert "coffee_beans" to "CoffeeBeans"."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(text))


def param_case(text: str) -> str:
    """Convert "Coffee_Beans" to "coffee-beans"."""
    return "-".join(w.lower() for w in _words(text))


def create_content_digest(content: str) -> str:
    return hashlib.md5(content.encode("utf-8")).hexdigest()


def create_kc_artifact_node(
    node_id: str,
    kc_artifact: Dict[str, Any],
    artifact_kind: str,
    codename: str,
    additional_node_data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Wrap a Kontent record (item, type or taxonomy) as a host node.

    Args:
        node_id: ID from the host's create_node_id().
        kc_artifact: The normalized record. It is copied, not modified.
        artifact_kind: "item", "type" or "taxonomy".
        codename: Codename used for the host type name.
        additional_node_data: Extra top-level fields merged onto the node.

    Returns:
        The node dict.
    """
    node_content = json.dumps(kc_artifact, sort_keys=True, default=str)

    node = copy.deepcopy(kc_artifact)
    if additional_node_data:
        node.update(copy.deepcopy(additional_node_data))

    node.update({
        "id": node_id,
        "parent": None,
        "children": [],
        "internal": {
            "type": f"{NODE_PREFIX}{pascal_case(artifact_kind)}{pascal_case(codename)}",
            "content": node_content,
            "contentDigest": create_content_digest(node_content),
        },
    })
    return node


def get_path(obj: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Read a dotted path ("topic.linked_items___NODE") from nested dicts."""
    current: Any = obj
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def set_path(obj: Dict[str, Any], path: str, value: Any) -> None:
    """Write a dotted path, creating intermediate dicts as needed."""
    keys = path.split(".")
    current = obj
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def add_linked_items_links(
    item_node: Dict[str, Any],
    linked_nodes: Iterable[Dict[str, Any]],
    link_property_path: str,
) -> None:
    """Append the IDs of linked_nodes to a relation field under elements.

    IDs already present in the field are not added again. The field is
    created if missing.
    """
    links = get_path(item_node["elements"], link_property_path)
    if not isinstance(links, list):
        links = []
        set_path(item_node["elements"], link_property_path, links)

    for linked_node in linked_nodes:
        if linked_node["id"] not in links:
            links.append(linked_node["id"])


def index_by_codename(nodes: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Map system.codename to node. The first node wins on duplicates."""
    index: Dict[str, Dict[str, Any]] = {}
    for node in nodes:
        index.setdefault(node["system"]["codename"], node)
    return index


def resolve_codenames(
    codenames: Iterable[str],
    index: Dict[str, Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """Look codenames up in an index, keeping reference order.

    Unknown codenames are dropped and repeated codenames resolve once.
    """
    resolved = []
    seen = set()
    for codename in codenames:
        node = index.get(codename)
        if node is None or codename in seen:
            continue
        seen.add(codename)
        resolved.append(node)
    return resolved
