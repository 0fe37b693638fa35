"""
Validation — Structural and configuration checks.

Configuration checks run once before any fetch and are fatal. Item structure
checks run inside the decorators and raise ItemStructureError, which the
decorators catch per item.
"""

from typing import Any, Dict, Iterable, List, Tuple

from .exceptions import ConfigurationError, ItemStructureError


def validate_language_codenames(language_codenames: Any) -> List[str]:
    """Check the ordered language list and return it as a list.

    The list must be non-empty and contain unique, non-blank strings. The
    first entry is the default language.

    Raises:
        ConfigurationError: If the list is empty or malformed.
    """
    if isinstance(language_codenames, str) or not isinstance(language_codenames, (list, tuple)):
        raise ConfigurationError(
            f"Language codenames must be a list of strings, got: {language_codenames!r}"
        )
    if not language_codenames:
        raise ConfigurationError("At least one language codename is required")

    seen = set()
    for codename in language_codenames:
        if not isinstance(codename, str) or not codename.strip():
            raise ConfigurationError(f"Invalid language codename: {codename!r}")
        if codename in seen:
            raise ConfigurationError(f"Duplicate language codename: {codename}")
        seen.add(codename)

    return list(language_codenames)


def check_item_structure(item: Any) -> None:
    """Raise ItemStructureError unless item has system.codename and elements."""
    if not isinstance(item, dict):
        raise ItemStructureError(f"Item is not a mapping: {type(item).__name__}")

    system = item.get("system")
    if not isinstance(system, dict) or not system.get("codename"):
        raise ItemStructureError(f"Item {item.get('id', '?')} has no system.codename")

    if not isinstance(item.get("elements"), dict):
        raise ItemStructureError(
            f"Item {system['codename']} has no elements mapping"
        )


def split_valid_items(items: Iterable[Any]) -> Tuple[List[Dict[str, Any]], List[Tuple[Any, ItemStructureError]]]:
    """Separate structurally valid items from malformed ones.

    Used by decorators to validate a same-language collection once, so one
    malformed item is reported on its own instead of failing every lookup
    against the collection.

    Returns:
        (valid_items, [(malformed_item, error), ...]), both in input order.
    """
    valid = []
    malformed = []
    for item in items:
        try:
            check_item_structure(item)
        except ItemStructureError as e:
            malformed.append((item, e))
            continue
        valid.append(item)
    return valid, malformed
