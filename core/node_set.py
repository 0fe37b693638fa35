"""
Node Set — The snapshot of nodes passed between decoration passes.

A ContentNodeSet holds every node produced by the fetchers, partitioned by
language:

    default_items    items in the default (first configured) language
    language_items   {language_codename: [items]} for every other language,
                     in configured order
    type_nodes       content type nodes
    taxonomy_nodes   taxonomy nodes (never decorated)

Decorators never modify the set they receive. Each one works on copy() and
returns the new set together with a DecorationReport listing one ItemOutcome
per unit it processed, so skipped items are visible to the caller instead of
only appearing in the log.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

CREATED = "created"
DECORATED = "decorated"
SKIPPED = "skipped"


@dataclass(frozen=True)
class ItemOutcome:
    codename: Optional[str]
    language: Optional[str]
    status: str
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "codename": self.codename,
            "language": self.language,
            "status": self.status,
            "reason": self.reason,
        }


def _codename_of(node: Any) -> Optional[str]:
    if isinstance(node, dict) and isinstance(node.get("system"), dict):
        return node["system"].get("codename")
    return None


@dataclass
class DecorationReport:
    """Per-unit outcomes of one decoration pass (or one fetch step)."""

    decorator: str
    outcomes: List[ItemOutcome] = field(default_factory=list)

    def record_created(self, node: Any, language: Optional[str] = None) -> None:
        self.outcomes.append(ItemOutcome(_codename_of(node), language, CREATED))

    def record_decorated(self, node: Any, language: Optional[str] = None) -> None:
        self.outcomes.append(ItemOutcome(_codename_of(node), language, DECORATED))

    def record_skipped(self, node: Any, language: Optional[str], error: Exception) -> None:
        self.outcomes.append(ItemOutcome(_codename_of(node), language, SKIPPED, str(error)))

    @property
    def created(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.status == CREATED]

    @property
    def decorated(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.status == DECORATED]

    @property
    def skipped(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.status == SKIPPED]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decorator": self.decorator,
            "created": len(self.created),
            "decorated": len(self.decorated),
            "skipped": [o.to_dict() for o in self.skipped],
        }


@dataclass(frozen=True)
class ContentNodeSet:
    default_language: str
    default_items: List[Dict[str, Any]]
    language_items: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)
    type_nodes: List[Dict[str, Any]] = field(default_factory=list)
    taxonomy_nodes: List[Dict[str, Any]] = field(default_factory=list)

    def partitions(self) -> Iterator[Tuple[str, List[Dict[str, Any]]]]:
        """Yield (language, items) for the default language, then the others."""
        yield self.default_language, self.default_items
        for language, items in self.language_items.items():
            yield language, items

    def all_items(self) -> List[Dict[str, Any]]:
        items = list(self.default_items)
        for language_nodes in self.language_items.values():
            items.extend(language_nodes)
        return items

    def copy(self) -> "ContentNodeSet":
        """Deep copy, keeping node identity consistent inside the new set."""
        return copy.deepcopy(self)
