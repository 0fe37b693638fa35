"""Tests for core.type_nodes."""

from core import type_nodes


def test_type_nodes(fake_client, create_node_id):
    nodes = type_nodes.get(fake_client, create_node_id)

    assert [n["system"]["codename"] for n in nodes] == ["article", "author", "tweet", "landing_page"]
    article = nodes[0]
    assert article["id"] == "id:kentico-cloud-type-article"
    assert article["internal"]["type"] == "KenticoCloudTypeArticle"
    assert article["contentItems___NODE"] == []
    assert set(article["elements"]) == {"title", "author", "body"}
