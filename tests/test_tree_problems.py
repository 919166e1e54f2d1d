import pytest

from dsakit.tree_problems import (
    TreeNode,
    closest_value,
    in_order_values,
    is_balanced,
    kth_smallest,
    max_depth,
    merge_trees,
    min_diff_in_bst,
    range_sum_bst,
)


def _bst(values):
    root = None
    for value in values:
        node = TreeNode(value)
        if root is None:
            root = node
            continue
        cur = root
        while True:
            if value < cur.val:
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
    return root


def _range_tree():
    root = TreeNode(10)
    root.left = TreeNode(5, TreeNode(3), TreeNode(7))
    root.right = TreeNode(15, None, TreeNode(18))
    return root


def test_max_depth_examples():
    root1 = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    root2 = TreeNode(1, None, TreeNode(2, None, TreeNode(3)))
    root3 = TreeNode(
        1, TreeNode(2, TreeNode(4), TreeNode(7, None, TreeNode(9))), TreeNode(3)
    )
    assert max_depth(root1) == 3
    assert max_depth(root2) == 3
    assert max_depth(root3) == 4


def test_max_depth_empty():
    assert max_depth(None) == 0


def test_is_balanced_examples():
    example1 = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    example2 = TreeNode(
        1, TreeNode(2, TreeNode(3, TreeNode(4))), TreeNode(5)
    )
    assert is_balanced(example1) is True
    assert is_balanced(example2) is False


def test_is_balanced_detects_deep_imbalance():
    # Root children have equal depth but a subtree is itself unbalanced.
    left = TreeNode(2, TreeNode(3, TreeNode(4, TreeNode(5))))
    right = TreeNode(6, TreeNode(7, TreeNode(8, TreeNode(9))))
    assert is_balanced(TreeNode(1, left, right)) is False
    assert is_balanced(None) is True


def test_min_diff_examples():
    example1 = TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(3)), TreeNode(6))
    example2 = TreeNode(40, None, TreeNode(70, TreeNode(50), TreeNode(90)))
    assert min_diff_in_bst(example1) == 1
    assert min_diff_in_bst(example2) == 10


def test_min_diff_needs_two_nodes():
    with pytest.raises(ValueError):
        min_diff_in_bst(TreeNode(1))
    with pytest.raises(ValueError):
        min_diff_in_bst(None)


def test_range_sum_example():
    assert range_sum_bst(_range_tree(), 7, 15) == 32


def test_range_sum_whole_range_is_total():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    assert range_sum_bst(_bst(values), min(values), max(values)) == sum(values)
    assert range_sum_bst(None, 0, 100) == 0


def test_kth_smallest_example():
    assert kth_smallest(_range_tree(), 2) == 5


def test_kth_smallest_every_position():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    root = _bst(values)
    assert [kth_smallest(root, k) for k in range(1, len(values) + 1)] == sorted(values)


def test_kth_smallest_out_of_range():
    with pytest.raises(ValueError):
        kth_smallest(_range_tree(), 0)
    with pytest.raises(ValueError):
        kth_smallest(_range_tree(), 7)


def test_closest_value_example():
    root = TreeNode(
        5, TreeNode(3, TreeNode(1), TreeNode(4)), TreeNode(8, TreeNode(6), TreeNode(9))
    )
    assert closest_value(root, 6.4) == 6


def test_closest_value_exact_member():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    root = _bst(values)
    for v in values:
        assert closest_value(root, v) == v


def test_closest_value_empty_raises():
    with pytest.raises(ValueError):
        closest_value(None, 1.0)


def test_merge_trees_example():
    tree1 = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    tree2 = TreeNode(1, TreeNode(2, None, TreeNode(5)), TreeNode(3))
    merged = merge_trees(tree1, tree2)
    assert in_order_values(merged) == [4, 4, 10, 2, 6]


def test_merge_with_empty_returns_other():
    tree = _bst([2, 1, 3])
    assert merge_trees(tree, None) is tree
    assert merge_trees(None, tree) is tree
    assert merge_trees(None, None) is None


def test_merge_root_sum():
    a = _bst([5, 2, 9])
    b = _bst([7, 1])
    merged = merge_trees(a, b)
    assert merged.val == a.val + b.val
    assert merged.left.val == a.left.val + b.left.val


def test_in_order_values_of_bst_sorted():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    assert in_order_values(_bst(values)) == sorted(values)
    assert in_order_values(None) == []