"""Tests for filtering and mapping over the children of a node."""

from picostates import (
    ArrayType,
    Filterable,
    Mappable,
    Meta,
    ObjectType,
    create,
    filter_substates,
    map_substates,
)


def test_filter_hands_back_context_free_sources(dataset):
    kept = filter_substates(lambda record: record.content.state != "Sweet", dataset.records)

    assert [record.state for record in kept] == [{"content": "Herro"}, {"content": "Woooo"}]
    assert all(Meta.get(record).parent is None for record in kept)


def test_transition_on_source_stays_standalone(dataset):
    """Callbacks edit a child on its own, not the whole collection."""
    results = map_substates(lambda record: record.content.concat("!"), dataset.records)

    assert [result.state for result in results] == [
        {"content": "Herro!"},
        {"content": "Sweet!"},
        {"content": "Woooo!"},
    ]
    assert dataset.records.state[0] == {"content": "Herro"}


def test_map_accepts_raw_results(dataset):
    assert map_substates(lambda record: record.content.state.upper(), dataset.records) == [
        "HERRO",
        "SWEET",
        "WOOOO",
    ]


def test_operations_on_leaf_nodes_are_empty():
    leaf = create(value="leaf")

    assert filter_substates(lambda _: True, leaf) == []
    assert map_substates(lambda node: node, leaf) == []


def test_collections_satisfy_capability_protocols():
    items = create(ArrayType, [1, 2])

    assert isinstance(items, Filterable)
    assert isinstance(items, Mappable)
    assert not isinstance(create(ObjectType, {}), Filterable)
