"""Tests for core.decorators.language_variants."""

from core.decorators.language_variants import decorate_items_with_language_variants


def test_variants_linked_both_ways(make_item, make_node_set):
    default = make_item("coffee")
    cs = make_item("coffee", language="cs")
    de = make_item("coffee", language="de")
    node_set = make_node_set([default], {"cs": [cs], "de": [de]})

    result, report = decorate_items_with_language_variants(node_set)

    assert result.default_items[0]["otherLanguages___NODE"] == [cs["id"], de["id"]]
    assert result.language_items["cs"][0]["otherLanguages___NODE"] == [default["id"], de["id"]]
    assert result.language_items["de"][0]["otherLanguages___NODE"] == [default["id"], cs["id"]]
    assert len(report.decorated) == 1


def test_missing_variant_is_not_an_error(make_item, make_node_set):
    default = make_item("coffee")
    other = make_item("tea", language="cs")

    result, report = decorate_items_with_language_variants(make_node_set([default], {"cs": [other]}))

    assert result.default_items[0]["otherLanguages___NODE"] == []
    assert result.language_items["cs"][0]["otherLanguages___NODE"] == []
    assert report.skipped == []


def test_running_twice_does_not_duplicate(make_item, make_node_set):
    default = make_item("coffee")
    cs = make_item("coffee", language="cs")

    once, _ = decorate_items_with_language_variants(make_node_set([default], {"cs": [cs]}))
    twice, _ = decorate_items_with_language_variants(once)

    assert twice.default_items[0]["otherLanguages___NODE"] == [cs["id"]]
    assert twice.language_items["cs"][0]["otherLanguages___NODE"] == [default["id"]]
    assert twice == once


def test_input_items_are_not_modified(make_item, make_node_set):
    default = make_item("coffee")
    cs = make_item("coffee", language="cs")

    decorate_items_with_language_variants(make_node_set([default], {"cs": [cs]}))

    assert default["otherLanguages___NODE"] == []
    assert cs["otherLanguages___NODE"] == []


def test_malformed_nodes_are_skipped_not_fatal(make_item, make_node_set, caplog):
    default = make_item("coffee")
    cs = make_item("coffee", language="cs")
    node_set = make_node_set([default, "not a node"], {"cs": [None, cs]})

    result, report = decorate_items_with_language_variants(node_set)

    assert result.default_items[0]["otherLanguages___NODE"] == [cs["id"]]
    assert result.language_items["cs"][1]["otherLanguages___NODE"] == [default["id"]]
    assert [o.language for o in report.skipped] == ["default", "cs"]
    assert [o.codename for o in report.decorated] == ["coffee"]
    assert "Skipping malformed cs item" in caplog.text
