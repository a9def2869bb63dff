"""An implicit splay tree over a sequence with lazy range reverse, add and assign."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SplayChange:
    """A pending update: optionally reverse, then assign ``to_set`` (if given), then add ``to_add``."""

    reverse: bool = False
    to_add: int = 0
    to_set: Optional[int] = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.reverse or self.has_set() or self.to_add != 0

    def combine(self, other: SplayChange) -> SplayChange:
        """The change equivalent to applying this one followed by ``other``."""
        if other.has_set():
            return SplayChange(self.reverse ^ other.reverse, other.to_add, other.to_set)
        return SplayChange(self.reverse ^ other.reverse, self.to_add + other.to_add, self.to_set)


_IDENTITY = SplayChange()


class LazySplayNode:
    """A node holding one value plus the size, sum and maximum of its subtree."""

    __slots__ = ("parent", "child", "size", "value", "maximum", "sum", "change")

    def __init__(self, value: int) -> None:
        self.parent: Optional[LazySplayNode] = None
        self.child: list[Optional[LazySplayNode]] = [None, None]
        self.size = 1
        self.value = value
        self.maximum = value
        self.sum = value
        self.change = _IDENTITY

    def __repr__(self) -> str:
        return f"LazySplayNode(value={self.value}, size={self.size})"

    def parent_index(self) -> int:
        if self.parent is None:
            return -1
        return int(self is self.parent.child[1])

    def set_child(self, index: int, node: Optional[LazySplayNode]) -> None:
        self.child[index] = node
        if node is not None:
            node.parent = self

    def apply(self, now: SplayChange) -> None:
        """Apply ``now`` to this subtree's aggregates and queue it for the children."""
        if now.reverse:
            self.child[0], self.child[1] = self.child[1], self.child[0]

        if now.to_set is not None:
            self.value = now.to_set
            self.sum = self.size * now.to_set
            self.maximum = now.to_set

        self.value += now.to_add
        self.sum += self.size * now.to_add
        self.maximum += now.to_add
        self.change = self.change.combine(now)

    def push(self) -> None:
        if self.change.has_change():
            for node in self.child:
                if node is not None:
                    node.apply(self.change)
            self.change = _IDENTITY

    def join(self) -> None:
        left, right = self.child
        self.size = subtree_size(left) + subtree_size(right) + 1
        self.sum = self.value + subtree_sum(left) + subtree_sum(right)
        self.maximum = max(self.value, subtree_max(left), subtree_max(right))


def subtree_size(node: Optional[LazySplayNode]) -> int:
    return 0 if node is None else node.size


def subtree_sum(node: Optional[LazySplayNode]) -> int:
    return 0 if node is None else node.sum


def subtree_max(node: Optional[LazySplayNode]):
    return -math.inf if node is None else node.maximum


ShouldJoin = Callable[[Optional[LazySplayNode], bool], bool]


class LazySplayTree:
    """A sequence supporting index-based insert/erase and lazy range updates and queries."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        items = list(values)
        self.root: Optional[LazySplayNode] = None
        self._set_root(self._construct(items, 0, len(items)))

    def _construct(self, items: list[int], start: int, end: int) -> Optional[LazySplayNode]:
        if start >= end:
            return None
        mid = (start + end) // 2
        node = LazySplayNode(items[mid])
        node.set_child(0, self._construct(items, start, mid))
        node.set_child(1, self._construct(items, mid + 1, end))
        node.join()
        return node

    def __len__(self) -> int:
        return subtree_size(self.root)

    def _walk(self, forward: bool) -> Iterator[int]:
        near, far = (0, 1) if forward else (1, 0)
        stack: list[LazySplayNode] = []
        node = self.root

        while stack or node is not None:
            while node is not None:
                node.push()
                stack.append(node)
                node = node.child[near]
            node = stack.pop()
            yield node.value
            node = node.child[far]

    def __iter__(self) -> Iterator[int]:
        return self._walk(True)

    def __reversed__(self) -> Iterator[int]:
        return self._walk(False)

    def __repr__(self) -> str:
        return f"LazySplayTree({list(self)!r})"

    def _set_root(self, node: Optional[LazySplayNode]) -> Optional[LazySplayNode]:
        if node is not None:
            node.parent = None
        self.root = node
        return node

    def _rotate_up(self, x: LazySplayNode, x_join: bool = True) -> None:
        p = x.parent
        gp = p.parent
        index = x.parent_index()

        if gp is None:
            self._set_root(x)
        else:
            gp.set_child(p.parent_index(), x)

        p.set_child(index, x.child[1 - index])
        x.set_child(1 - index, p)
        p.join()

        if x_join:
            x.join()

    def _splay(self, x: LazySplayNode) -> None:
        """Bring ``x`` to the root, pushing it and rejoining every node on its path."""
        x.push()

        while x is not self.root:
            p = x.parent
            if p is not self.root:
                self._rotate_up(p if x.parent_index() == p.parent_index() else x, False)
            self._rotate_up(x, False)

        x.join()

    def node_at_index(self, index: int) -> LazySplayNode:
        """The node at position ``index``, splayed to the root."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")

        current = self.root
        while current is not None:
            current.push()
            left_size = subtree_size(current.child[0])

            if index == left_size:
                self._splay(current)
                return current

            if index < left_size:
                current = current.child[0]
            else:
                current = current.child[1]
                index -= left_size + 1

        raise RuntimeError("tree sizes are inconsistent")

    def insert(self, index: int, value: int) -> LazySplayNode:
        """Insert ``value`` so that it ends up at position ``index``."""
        return self.insert_node(index, LazySplayNode(value))

    def insert_node(self, index: int, node: Optional[LazySplayNode]) -> Optional[LazySplayNode]:
        """Insert a detached node (possibly a whole subtree) starting at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} out of range")

        if node is None:
            return None
        if self.root is None:
            return self._set_root(node)

        current = self.root
        previous = current
        direction = 0

        while current is not None:
            current.push()
            previous = current
            left_size = subtree_size(current.child[0])

            if index <= left_size:
                current = current.child[0]
                direction = 0
            else:
                current = current.child[1]
                direction = 1
                index -= left_size + 1

        previous.set_child(direction, node)
        self._splay(node)
        return node

    def _extreme(self, side: int) -> Optional[LazySplayNode]:
        if self.root is None:
            return None

        x = self.root
        x.push()
        while x.child[side] is not None:
            x = x.child[side]
            x.push()

        self._splay(x)
        return x

    def first(self) -> Optional[LazySplayNode]:
        return self._extreme(0)

    def last(self) -> Optional[LazySplayNode]:
        return self._extreme(1)

    def _neighbor(self, x: Optional[LazySplayNode], side: int) -> Optional[LazySplayNode]:
        if x is None:
            return None

        x.push()
        if x.child[side] is not None:
            x = x.child[side]
            x.push()
            while x.child[1 - side] is not None:
                x = x.child[1 - side]
                x.push()
            return x

        while x.parent_index() == side:
            x = x.parent

        return x.parent

    def successor(self, node: Optional[LazySplayNode]) -> Optional[LazySplayNode]:
        return self._neighbor(node, 1)

    def predecessor(self, node: Optional[LazySplayNode]) -> Optional[LazySplayNode]:
        return self._neighbor(node, 0)

    def clear(self) -> None:
        self._set_root(None)

    def erase(self, node: LazySplayNode) -> None:
        """Remove ``node`` from the sequence."""
        self._splay(node)
        left, right = node.child

        if left is None or right is None:
            self._set_root(right if left is None else left)
        else:
            self._set_root(left)
            self.insert_node(len(self), right)

        node.child = [None, None]
        node.parent = None
        node.change = _IDENTITY
        node.join()

    def detach(self, node: Optional[LazySplayNode]) -> None:
        """Cut ``node`` away from its parent so that its subtree becomes a separate tree."""
        if node is None:
            return

        if node is self.root:
            self._set_root(None)
            return

        parent = node.parent
        parent.set_child(node.parent_index(), None)
        node.parent = None
        self._splay(parent)
        node.push()

    def query_prefix_count(self, count: int) -> Optional[LazySplayNode]:
        """A node whose subtree is exactly the first ``count`` elements, or None."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root

        node = self.node_at_index(count)
        return node.child[0]

    def query_suffix_count(self, count: int) -> Optional[LazySplayNode]:
        """A node whose subtree is exactly the last ``count`` elements, or None."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root

        node = self.node_at_index(len(self) - count - 1)
        return node.child[1]

    def query_range(self, start: int, end: int) -> Optional[LazySplayNode]:
        """A node whose subtree is exactly positions ``[start, end)``, or None."""
        if start >= end:
            return None
        if start <= 0:
            return self.query_prefix_count(end)
        if end >= len(self):
            return self.query_suffix_count(len(self) - start)

        before = self.node_at_index(start - 1)
        after = self.node_at_index(end)
        self._splay(after)
        self._splay(before)

        if after.parent is not before:
            self._rotate_up(after)

        return after.child[0]

    def update(self, node: Optional[LazySplayNode], change: SplayChange) -> None:
        """Apply ``change`` to every element in the subtree of ``node``."""
        if node is None:
            return

        node.apply(change)
        self._splay(node)

    def find_last_subarray(self, should_join: ShouldJoin, first: int = 0) -> int:
        """Grow a range from ``first`` while ``should_join`` accepts; return where it stops.

        ``should_join(node, single)`` is asked about a whole subtree (``single`` false) or
        one node, and must commit to the join when it returns True.
        Returns ``first - 1`` if even the empty range is rejected.
        """
        if not should_join(None, False):
            return first - 1

        current = self.root if first == 0 else self.query_suffix_count(len(self) - first)
        previous = None
        end = first

        while current is not None:
            current.push()
            previous = current

            if not should_join(current.child[0], False):
                current = current.child[0]
            else:
                end += subtree_size(current.child[0])
                if not should_join(current, True):
                    break
                end += 1
                current = current.child[1]

        if previous is not None:
            self._splay(previous)

        return end