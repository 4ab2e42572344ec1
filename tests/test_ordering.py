"""
Tests for the ordering policy shared by ordered collections.
"""

import pytest

from site_cache.dto import ReorderItem
from site_cache.services.ordering import (
    active_only,
    apply_reorder,
    dense_ranking,
    move_item,
    order_map,
    same_sequence,
    sort_by_order,
    sort_like,
)


def ids(entities):
    return [entity["id"] for entity in entities]


@pytest.fixture
def three():
    return [{"id": 1, "order": 0}, {"id": 2, "order": 1}, {"id": 3, "order": 2}]


def test_sort_is_stable_on_ties():
    items = [{"id": 1, "order": 1}, {"id": 2, "order": 0}, {"id": 3, "order": 1}]

    assert ids(sort_by_order(items)) == [2, 1, 3]


def test_missing_order_reads_as_zero():
    items = [{"id": 1, "order": 2}, {"id": 2}]

    assert ids(sort_by_order(items)) == [2, 1]


def test_moved_entity_goes_first_among_equal_orders(three):
    result = apply_reorder(three, [ReorderItem(id=3, order=0)])

    assert ids(result) == [3, 1, 2]
    assert [e["order"] for e in result] == [0, 0, 1]


def test_reorder_accepts_plain_dicts(three):
    assert ids(apply_reorder(three, [{"id": 1, "order": 5}])) == [2, 3, 1]


def test_reorder_keeps_unmentioned_orders_and_identity(three):
    result = apply_reorder(three, [{"id": 3, "order": 0}])

    by_id = {e["id"]: e for e in result}
    assert by_id[1] is three[0]
    assert by_id[2] is three[1]
    assert by_id[3] is not three[2]
    assert three[2]["order"] == 2


def test_reorder_ignores_unknown_ids(three):
    assert apply_reorder(three, [{"id": 99, "order": 0}]) == three


def test_full_reorder_is_idempotent(three):
    pairs = [{"id": 3, "order": 0}, {"id": 1, "order": 1}, {"id": 2, "order": 2}]

    once = apply_reorder(three, pairs)
    twice = apply_reorder(once, pairs)

    assert ids(once) == [3, 1, 2]
    assert twice == once


def test_active_filter_runs_after_sort():
    items = [
        {"id": 1, "order": 2, "isActive": True},
        {"id": 2, "order": 0, "isActive": False},
        {"id": 3, "order": 1, "isActive": True},
        {"id": 4, "order": 3},
    ]

    assert ids(active_only(items)) == [3, 1, 4]


def test_dense_ranking_breaks_ties_into_contiguous_positions():
    items = [{"id": 3, "order": 0}, {"id": 1, "order": 0}, {"id": 2, "order": 5}]

    ranked = dense_ranking(items)

    assert ids(ranked) == [3, 1, 2]
    assert [e["order"] for e in ranked] == [0, 1, 2]
    assert ranked[0] is items[0]


def test_move_item_emits_only_changed_positions():
    items = [{"id": 10, "order": 0}, {"id": 11, "order": 1}, {"id": 12, "order": 2}, {"id": 13, "order": 3}]

    pairs = move_item(items, from_index=3, to_index=1)

    assert [(p.id, p.order) for p in pairs] == [(13, 1), (11, 2), (12, 3)]
    assert ids(apply_reorder(items, pairs)) == [10, 13, 11, 12]


def test_move_item_rejects_out_of_range(three):
    with pytest.raises(IndexError):
        move_item(three, 0, 3)


def test_sequence_and_order_map_comparisons(three):
    renumbered = [{"id": 1, "order": 5}, {"id": 2, "order": 6}, {"id": 3, "order": 7}]

    assert same_sequence(three, renumbered) is True
    assert order_map(three) == {1: 0, 2: 1, 3: 2}
    assert order_map(three) != order_map(renumbered)
    assert same_sequence(three, list(reversed(three))) is False


def test_sort_like_breaks_ties_by_reference_position():
    reference = [{"id": 3, "order": 0}, {"id": 1, "order": 0}, {"id": 2, "order": 1}]
    server = [{"id": 1, "order": 0}, {"id": 4, "order": 0}, {"id": 3, "order": 0}, {"id": 2, "order": 1}]

    assert ids(sort_like(server, reference)) == [3, 1, 4, 2]
