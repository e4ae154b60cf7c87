"""Tests for Meta back-references."""

import pytest

from picostates import Meta, MissingContextError, SubstateAt, create, lens


def test_meta_of_none_is_missing_context():
    with pytest.raises(MissingContextError, match="None"):
        Meta.get(None)


def test_root_has_no_parent_and_is_its_own_source(dataset):
    meta = Meta.get(dataset)

    assert meta.parent is None
    assert meta.name is None
    assert Meta.source(dataset) is dataset


def test_child_handle_points_at_parent_and_source(dataset):
    records = dataset.records
    meta = Meta.get(records)

    assert meta.parent is dataset
    assert meta.name == "records"
    assert meta.source is lens.view(SubstateAt("records"), dataset)
    assert Meta.get(meta.source).parent is None


def test_nested_handles_chain_back_to_root(dataset):
    content = dataset.records[1].content

    record = Meta.get(content).parent
    records = Meta.get(record).parent

    assert Meta.get(content).name == "content"
    assert Meta.get(record).name == 1
    assert Meta.get(records).parent is dataset


def test_meta_map_returns_relabelled_copy(string_cls):
    node = create(string_cls, "hi")

    relabelled = Meta.map(lambda meta: {"name": "greeting"}, node)

    assert relabelled is not node
    assert Meta.get(relabelled).name == "greeting"
    assert Meta.get(node).name is None
    assert relabelled.state is node.state


def test_setting_same_meta_returns_same_node(string_cls):
    node = create(string_cls, "hi")

    assert lens.set(Meta.lens, Meta.get(node), node) is node


def test_plain_objects_get_empty_meta():
    meta = Meta.get({"not": "a node"})

    assert meta.parent is None
    assert meta.source is None
