"""Tests for core.taxonomy_nodes."""

import pytest

from core import taxonomy_nodes
from core.node_set import DecorationReport

from conftest import FakeDeliveryClient, load_fixture


def test_taxonomy_nodes(fake_client, create_node_id):
    nodes = taxonomy_nodes.get(fake_client, create_node_id)

    assert [n["id"] for n in nodes] == [
        "id:kentico-kontent-taxonomy-product-status",
        "id:kentico-kontent-taxonomy-coffee-origin",
    ]
    status = nodes[0]
    assert status["internal"]["type"] == "KenticoCloudTaxonomyProductStatus"
    assert status["terms"][1]["terms"][0]["codename"] == "top_10"


def test_broken_taxonomy_is_skipped(create_node_id, caplog):
    taxonomies = load_fixture("taxonomies_response.json")["taxonomies"]
    taxonomies.insert(1, {"system": {"name": "No codename"}, "terms": []})
    client = FakeDeliveryClient(taxonomies=taxonomies)
    report = DecorationReport("taxonomy_nodes")

    nodes = taxonomy_nodes.get(client, create_node_id, report)

    assert len(nodes) == 2
    assert len(report.skipped) == 1
    assert len(report.created) == 2
    assert report.decorated == []
    assert "Could not create taxonomy node" in caplog.text


def test_create_taxonomy_node_requires_callable():
    with pytest.raises(TypeError):
        taxonomy_nodes.create_taxonomy_node(None, {"system": {"codename": "x"}})
