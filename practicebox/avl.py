"""Self-balancing (AVL) binary search tree with parent links."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

SENTINEL = -1


@dataclass(eq=False, repr=False)
class AvlNode:
    """A tree node; ``height`` counts nodes on the longest downward path."""

    val: int
    left: Optional["AvlNode"] = None
    right: Optional["AvlNode"] = None
    parent: Optional["AvlNode"] = None
    height: int = 1

    def __repr__(self) -> str:
        return f"AvlNode(val={self.val!r}, height={self.height})"


def node_height(node: Optional[AvlNode]) -> int:
    """Height of ``node``, or 0 for an empty subtree."""
    return 0 if node is None else node.height


def _balance(node: AvlNode) -> int:
    return node_height(node.left) - node_height(node.right)


def _refresh(node: AvlNode) -> None:
    node.height = 1 + max(node_height(node.left), node_height(node.right))


def _rotate_right(a: AvlNode) -> AvlNode:
    b = a.left
    assert b is not None
    a.left = b.right
    if a.left is not None:
        a.left.parent = a
    b.right = a
    b.parent = a.parent
    a.parent = b
    _refresh(a)
    _refresh(b)
    return b


def _rotate_left(a: AvlNode) -> AvlNode:
    b = a.right
    assert b is not None
    a.right = b.left
    if a.right is not None:
        a.right.parent = a
    b.left = a
    b.parent = a.parent
    a.parent = b
    _refresh(a)
    _refresh(b)
    return b


def _rebalance(a: AvlNode) -> AvlNode:
    """Apply the LL, LR, RL or RR rotation that fixes ``a``; return the new subtree root."""
    if _balance(a) > 1:
        if _balance(a.left) < 0:
            a.left = _rotate_left(a.left)
        return _rotate_right(a)
    if _balance(a.right) > 0:
        a.right = _rotate_right(a.right)
    return _rotate_left(a)


def avl_insert(root: Optional[AvlNode], val: int) -> AvlNode:
    """Insert ``val`` and return the (possibly new) root.

    Equal values go to the right subtree.
    """
    node = AvlNode(val)
    if root is None:
        return node

    parent = root
    while True:
        if val < parent.val:
            if parent.left is None:
                parent.left = node
                break
            parent = parent.left
        else:
            if parent.right is None:
                parent.right = node
                break
            parent = parent.right
    node.parent = parent

    current: Optional[AvlNode] = parent
    while current is not None:
        _refresh(current)
        if abs(_balance(current)) > 1:
            above = current.parent
            subtree = _rebalance(current)
            if above is None:
                root = subtree
            elif above.left is current:
                above.left = subtree
            else:
                above.right = subtree
            break
        current = current.parent
    return root


def inorder(root: Optional[AvlNode]) -> Iterator[int]:
    """Yield the tree's values in ascending order."""
    stack: list[AvlNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers until -1 and insert them into a tree."""
    print("输入数据:", end="", flush=True)
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    root: Optional[AvlNode] = None
    for token in tokens:
        try:
            key = int(token)
        except ValueError:
            print(f"invalid integer: {token!r}", file=sys.stderr)
            return 1
        if key == SENTINEL:
            break
        root = avl_insert(root, key)
    return 0


if __name__ == "__main__":
    sys.exit(main())