"""Tests for cart item tree construction"""

from storefront_cart.engine import CartItemTreeBuilder
from storefront_cart.models import BundleItem


def ids(tree):
    return (tree.id, [ids(child) for child in tree.children])


def all_ids(trees):
    return sorted(node.id for tree in trees for node in tree.walk())


def test_items_without_parent_are_roots_in_input_order(make_item):
    items = [make_item(id=3), make_item(id=1), make_item(id=2)]

    trees = CartItemTreeBuilder().organize(items)

    assert [tree.id for tree in trees] == [3, 1, 2]
    assert all(not tree.children for tree in trees)


def test_bundle_parent_referencing_itself_is_not_its_own_child(make_item):
    items = [
        make_item(id=2, parent_item_id=2),
        make_item(id=3, parent_item_id=2),
        make_item(id=4, parent_item_id=2),
    ]

    [tree] = CartItemTreeBuilder().organize(items)

    assert ids(tree) == (2, [(3, []), (4, [])])


def test_item_with_missing_parent_becomes_root(make_item):
    items = [make_item(id=1), make_item(id=5, parent_item_id=99)]

    trees = CartItemTreeBuilder().organize(items)

    assert [ids(tree) for tree in trees] == [(1, []), (5, [])]


def test_parent_cycle_terminates_and_keeps_every_item_once(make_item, caplog):
    items = [
        make_item(id=1, parent_item_id=2),
        make_item(id=2, parent_item_id=1),
        make_item(id=3),
    ]

    trees = CartItemTreeBuilder().organize(items)

    assert all_ids(trees) == [1, 2, 3]
    assert [tree.id for tree in trees] == [3, 1]
    assert ids(trees[1]) == (1, [(2, [])])
    assert "parent cycle" in caplog.text


def test_nested_children_are_built_recursively(make_item):
    items = [
        make_item(id=1),
        make_item(id=2, parent_item_id=1),
        make_item(id=3, parent_item_id=2),
    ]

    [tree] = CartItemTreeBuilder().organize(items)

    assert ids(tree) == (1, [(2, [(3, [])])])


def test_three_item_cycle_is_cut_once(make_item):
    items = [
        make_item(id=1, parent_item_id=3),
        make_item(id=2, parent_item_id=1),
        make_item(id=3, parent_item_id=2),
    ]

    [tree] = CartItemTreeBuilder().organize(items)

    assert ids(tree) == (1, [(2, [(3, [])])])


def test_build_single_root_from_candidates(make_item):
    root = make_item(id=10, parent_item_id=10)
    candidates = [
        root,
        make_item(id=11, parent_item_id=10),
        make_item(id=12, parent_item_id=77),
        make_item(id=13, parent_item_id=10),
    ]

    tree = CartItemTreeBuilder().build(root, candidates)

    assert ids(tree) == (10, [(11, []), (13, [])])


def test_bundle_item_flag(make_item):
    items = [
        make_item(id=1, parent_item_id=1),
        make_item(id=2, parent_item_id=1, bundle_item=BundleItem(id=1, bundle_product_id=5)),
    ]

    [tree] = CartItemTreeBuilder().organize(items)

    assert not tree.is_bundle_item
    assert tree.children[0].is_bundle_item
