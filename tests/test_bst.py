import pytest
from hypothesis import given
from hypothesis import strategies as st

from bintrees.bst import BinarySearchTree, array_to_bst, is_bst, min_node
from bintrees.node import Node
from bintrees.properties import inorder, size

SAMPLE = [98, 402, 12, 46, 128, 256, 512, 50]


def _links_consistent(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _links_consistent(node.left, node) and _links_consistent(node.right, node)


def test_insert_into_empty_makes_root():
    tree = BinarySearchTree()
    node = tree.insert(98)
    assert tree.root is node
    assert node.value == 98
    assert node.parent is None


def test_insert_duplicate_is_refused():
    tree = array_to_bst(SAMPLE)
    assert tree.insert(46) is None
    assert len(tree) == len(SAMPLE)


def test_insert_links_to_parent():
    tree = array_to_bst([98, 12])
    node = tree.insert(46)
    assert node.parent.value == 12
    assert node.parent.right is node


def test_search_found_and_missing():
    tree = array_to_bst(SAMPLE)
    found = tree.search(128)
    assert found.value == 128
    assert tree.search(1000) is None
    assert 256 in tree
    assert 7 not in tree


def test_search_empty_tree():
    assert BinarySearchTree().search(3) is None


def test_is_bst_none_is_false():
    assert is_bst(None) is False


def test_is_bst_rejects_duplicates():
    root = Node(5)
    root.insert_left(5)
    assert is_bst(root) is False


def test_is_bst_rejects_deep_violation():
    root = Node(10)
    left = root.insert_left(5)
    left.insert_right(12)
    assert is_bst(root) is False


def test_min_node():
    tree = array_to_bst(SAMPLE)
    assert min_node(tree.root).value == min(SAMPLE)
    assert min_node(None) is None


def test_remove_root_with_two_children_takes_successor():
    tree = array_to_bst(SAMPLE)
    old_root = tree.root
    assert tree.remove(98) is True
    assert tree.root is old_root
    assert tree.root.value == 128
    assert list(tree) == sorted(v for v in SAMPLE if v != 98)
    assert _links_consistent(tree.root)


def test_remove_missing_value():
    tree = array_to_bst(SAMPLE)
    assert tree.remove(7) is False
    assert list(tree) == sorted(SAMPLE)


def test_remove_last_node_empties_tree():
    tree = array_to_bst([4])
    assert tree.remove(4) is True
    assert tree.root is None
    assert len(tree) == 0


def test_remove_root_with_one_child_promotes_child():
    tree = array_to_bst([1, 2, 3])
    tree.remove(1)
    assert tree.root.value == 2
    assert tree.root.parent is None


@given(st.lists(st.integers(-1000, 1000)))
def test_built_tree_is_sorted_and_valid(values):
    tree = array_to_bst(values)
    assert list(inorder(tree.root)) == sorted(set(values))
    assert size(tree.root) == len(set(values))
    assert is_bst(tree.root) == bool(values)
    assert _links_consistent(tree.root)


@given(st.lists(st.integers(-100, 100), min_size=1), st.data())
def test_remove_keeps_tree_valid(values, data):
    tree = array_to_bst(values)
    victim = data.draw(st.sampled_from(values))
    assert tree.remove(victim) is True
    expected = sorted(set(values) - {victim})
    assert list(tree) == expected
    assert victim not in tree
    assert _links_consistent(tree.root)
    if expected:
        assert is_bst(tree.root)
    else:
        assert tree.root is None


@pytest.mark.parametrize("value", SAMPLE)
def test_every_sample_value_removable(value):
    tree = array_to_bst(SAMPLE)
    tree.remove(value)
    assert list(tree) == sorted(v for v in SAMPLE if v != value)
    assert is_bst(tree.root)