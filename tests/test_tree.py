import pytest

from katas.tree import TreeNode, min_diff_in_bst, minimum_difference


def first_tree():
    return TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(3)), TreeNode(6))


def second_tree():
    return TreeNode(1, TreeNode(0), TreeNode(48, TreeNode(12), TreeNode(49)))


def test_in_order():
    assert list(first_tree().in_order()) == [1, 2, 3, 4, 6]


def test_in_order_second():
    assert list(second_tree().in_order()) == [0, 1, 12, 48, 49]


@pytest.mark.parametrize("func", [minimum_difference, min_diff_in_bst])
@pytest.mark.parametrize("build", [first_tree, second_tree])
def test_minimum_difference(func, build):
    assert func(build()) == 1


@pytest.mark.parametrize("func", [minimum_difference, min_diff_in_bst])
def test_wider_gap(func):
    root = TreeNode(10, TreeNode(5), TreeNode(20))
    assert func(root) == 5