import pytest

from algonotes.tree import TreeNode, build_tree, inorder_values, postorder_values


@pytest.mark.parametrize(
    ("inorder", "postorder"),
    [
        ([9, 3, 15, 20, 7], [9, 15, 7, 20, 3]),
        ([-1], [-1]),
        ([1, 2, 3, 4], [1, 2, 3, 4]),
        ([4, 3, 2, 1], [1, 2, 3, 4]),
    ],
)
def test_build_tree_matches_traversals(inorder, postorder):
    tree = build_tree(inorder, postorder)
    assert inorder_values(tree) == inorder
    assert postorder_values(tree) == postorder


def test_build_tree_shape_of_sample():
    tree = build_tree([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert tree.val == 3
    assert tree.left.val == 9
    assert tree.left.left is None and tree.left.right is None
    assert tree.right.val == 20
    assert tree.right.left.val == 15
    assert tree.right.right.val == 7


def test_build_tree_chain_leans_left():
    tree = build_tree([1, 2, 3, 4], [1, 2, 3, 4])
    assert tree.val == 4
    assert tree.right is None
    assert tree.left.val == 3
    assert tree.left.left.left.val == 1


def test_build_tree_empty_returns_none():
    assert build_tree([], []) is None


def test_build_tree_length_mismatch_returns_none():
    assert build_tree([1, 2], [1]) is None


def test_build_tree_unknown_value_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 5])


def test_traversals_of_empty_tree():
    assert inorder_values(None) == []
    assert postorder_values(None) == []


def test_traversals_of_hand_built_tree():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert inorder_values(root) == [4, 2, 5, 1, 3]
    assert postorder_values(root) == [4, 5, 2, 3, 1]