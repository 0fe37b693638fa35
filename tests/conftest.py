"""Shared fixtures: Delivery API fixtures, a fake client and node builders."""

import json
import os

import pytest

from core.normalize import create_kc_artifact_node
from core.node_set import ContentNodeSet

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def load_fixture(name):
    with open(os.path.join(FIXTURES_DIR, name)) as f:
        return json.load(f)


class FakeDeliveryClient:
    """Serves the JSON fixtures through the KontentDeliveryClient interface."""

    project_id = "test-project"

    def __init__(self, items_by_language=None, types=None, taxonomies=None):
        self.items_by_language = items_by_language if items_by_language is not None else {
            "default": load_fixture("items_default_response.json")["items"],
            "cs": load_fixture("items_cs_response.json")["items"],
        }
        self.types = types if types is not None else load_fixture("types_response.json")["types"]
        self.taxonomies = (
            taxonomies if taxonomies is not None
            else load_fixture("taxonomies_response.json")["taxonomies"]
        )
        self.calls = []

    def get_types(self):
        self.calls.append(("types",))
        return json.loads(json.dumps(self.types))

    def get_items(self, language_codename):
        self.calls.append(("items", language_codename))
        return json.loads(json.dumps(self.items_by_language.get(language_codename, [])))

    def get_taxonomies(self):
        self.calls.append(("taxonomies",))
        return json.loads(json.dumps(self.taxonomies))


def fake_node_id(seed):
    return f"id:{seed}"


@pytest.fixture
def fake_client():
    return FakeDeliveryClient()


@pytest.fixture
def create_node_id():
    return fake_node_id


@pytest.fixture
def make_item():
    """Build a minimal item node: make_item("a", {"topic": {...}}, language="en")."""

    def _make_item(codename, elements=None, language="default", type_codename="article"):
        record = {
            "system": {"codename": codename, "language": language, "type": type_codename},
            "elements": elements or {},
        }
        return create_kc_artifact_node(
            fake_node_id(f"{codename}-{language}"),
            record,
            "item",
            type_codename,
            {"otherLanguages___NODE": [], "contentType___NODE": None},
        )

    return _make_item


@pytest.fixture
def make_node_set():
    def _make_node_set(default_items, language_items=None, type_nodes=None, default_language="default"):
        return ContentNodeSet(
            default_language=default_language,
            default_items=default_items,
            language_items=language_items or {},
            type_nodes=type_nodes or [],
        )

    return _make_node_set
