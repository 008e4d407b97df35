from hypothesis import given, strategies as st

from bintrees_kit.node import Node
from bintrees_kit.rotation import rotate_left, rotate_right
from bintrees_kit.traversal import inorder, preorder


def _check_parents(node, parent=None):
    if node is None:
        return
    assert node.parent is parent
    _check_parents(node.left, node)
    _check_parents(node.right, node)


def test_rotate_left_chain():
    root = Node(98)
    root.insert_right(128)
    root.right.insert_right(402)
    root = rotate_left(root)
    assert list(preorder(root)) == [128, 98, 402]
    _check_parents(root)


def test_rotate_left_moves_inner_subtree():
    root = Node(98)
    root.insert_right(128)
    root.right.insert_right(402)
    root = rotate_left(root)
    root.right.insert_right(450)
    root.right.insert_left(420)
    before = list(inorder(root))
    root = rotate_left(root)
    assert root.value == 402
    assert root.left.value == 128
    assert root.left.right.value == 420
    assert root.right.value == 450
    assert list(inorder(root)) == before
    _check_parents(root)


def test_rotate_right_chain():
    root = Node(98)
    root.insert_left(64)
    root.left.insert_left(32)
    root = rotate_right(root)
    assert list(preorder(root)) == [64, 32, 98]
    _check_parents(root)


def test_rotate_right_moves_inner_subtree():
    root = Node(98)
    root.insert_left(64)
    root.left.insert_left(32)
    root = rotate_right(root)
    root.left.insert_left(20)
    root.left.insert_right(56)
    before = list(inorder(root))
    root = rotate_right(root)
    assert root.value == 32
    assert root.left.value == 20
    assert root.right.value == 64
    assert root.right.left.value == 56
    assert list(inorder(root)) == before
    _check_parents(root)


def test_rotation_without_child_returns_same_tree():
    leaf = Node(7)
    assert rotate_left(leaf) is leaf
    assert rotate_right(leaf) is leaf
    assert rotate_left(None) is None
    assert rotate_right(None) is None


def test_rotated_root_keeps_old_parent_link():
    top = Node(1)
    sub = top.insert_left(2)
    sub.insert_right(3)
    new_root = rotate_left(sub)
    assert new_root.parent is top
    assert sub.parent is new_root


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=30, unique=True))
def test_rotations_are_inverse(values):
    root = Node(values[0])
    for value in values[1:]:
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.insert_left(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.insert_right(value)
                    break
                node = node.right
    shape = list(preorder(root))
    order = list(inorder(root))
    if root.right is not None:
        rotated = rotate_left(root)
        assert list(inorder(rotated)) == order
        restored = rotate_right(rotated)
        assert restored is root
        assert list(preorder(restored)) == shape
    else:
        assert rotate_left(root) is root
        assert list(preorder(root)) == shape