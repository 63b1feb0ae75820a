import pytest

from ftkit.btree import (
    BTreeNode,
    apply_by_level,
    insert,
    level_count,
    nodes_count,
    search,
    walk_by_level,
    walk_infix,
    walk_prefix,
    walk_suffix,
)


def _cmp(a, b):
    return (a > b) - (a < b)


def _key_cmp(a, b):
    return _cmp(a[0], b[0])


def _build(values, cmp=_cmp):
    root = None
    for value in values:
        root = insert(root, value, cmp)
    return root


VALUES = [5, 3, 8, 1, 4, 9, 7]


def test_insert_into_empty_creates_root():
    root = insert(None, 42, _cmp)
    assert root == BTreeNode(42)
    assert root.left is None and root.right is None


def test_insert_keeps_root():
    root = _build([5])
    assert insert(root, 1, _cmp) is root
    assert root.left.item == 1


def test_infix_is_sorted():
    assert list(walk_infix(_build(VALUES))) == sorted(VALUES)


def test_duplicates_go_right_and_stay_sorted():
    root = _build([2, 2, 1, 2])
    assert root.right.item == 2
    assert list(walk_infix(root)) == sorted([2, 2, 1, 2])


def test_prefix_starts_with_root():
    items = list(walk_prefix(_build(VALUES)))
    assert items[0] == VALUES[0]
    assert sorted(items) == sorted(VALUES)


def test_suffix_ends_with_root():
    items = list(walk_suffix(_build(VALUES)))
    assert items[-1] == VALUES[0]
    assert sorted(items) == sorted(VALUES)


def test_small_tree_orders():
    root = _build([2, 1, 3])
    assert list(walk_prefix(root)) == [2, 1, 3]
    assert list(walk_infix(root)) == [1, 2, 3]
    assert list(walk_suffix(root)) == [1, 3, 2]


def test_walks_of_empty_tree():
    assert list(walk_prefix(None)) == []
    assert list(walk_infix(None)) == []
    assert list(walk_suffix(None)) == []
    assert list(walk_by_level(None)) == []


def test_nodes_count():
    assert nodes_count(None) == 0
    assert nodes_count(_build(VALUES)) == len(VALUES)


def test_level_count():
    assert level_count(None) == 0
    assert level_count(BTreeNode(1)) == 1
    assert level_count(_build([2, 1, 3])) == 2


def test_degenerate_chain_counts():
    values = list(range(3000))
    root = _build(values)
    assert nodes_count(root) == len(values)
    assert level_count(root) == len(values)
    assert list(walk_infix(root)) == values


def test_search_returns_stored_item():
    items = [(5, "e"), (2, "b"), (9, "i")]
    root = _build(items, _key_cmp)
    found = search(root, (2, None), _key_cmp)
    assert found is items[1]


def test_search_missing():
    root = _build(VALUES)
    assert search(root, 100, _cmp) is None
    assert search(None, 5, _cmp) is None


def test_search_none_reference():
    assert search(_build([None]), None, lambda a, b: 0) is None


def test_search_first_match_in_infix_order():
    root = _build([(1, "a"), (1, "b"), (0, "z")], _key_cmp)
    assert search(root, (1, None), _key_cmp) == (1, "a")


def test_walk_by_level_small_tree():
    assert list(walk_by_level(_build([2, 1, 3]))) == [
        (2, 1, True),
        (1, 2, True),
        (3, 2, False),
    ]


def test_walk_by_level_invariants():
    root = _build(VALUES)
    entries = list(walk_by_level(root))
    levels = [level for _, level, _ in entries]
    assert levels == sorted(levels)
    assert max(levels) == level_count(root)
    firsts = [level for _, level, first in entries if first]
    assert firsts == sorted(set(levels))
    assert sorted(item for item, _, _ in entries) == sorted(VALUES)


def test_apply_by_level_matches_walk():
    root = _build(VALUES)
    seen = []
    apply_by_level(root, lambda item, level, first: seen.append((item, level, first)))
    assert seen == list(walk_by_level(root))


@pytest.mark.parametrize("values", [[1], [3, 1], [1, 2, 3, 4], [4, 2, 6, 1, 3, 5, 7]])
def test_counts_agree_with_walks(values):
    root = _build(values)
    assert nodes_count(root) == len(list(walk_suffix(root)))
    assert level_count(root) == max(level for _, level, _ in walk_by_level(root))