"""A splay tree of ordered keys with order statistics and subtree range queries."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

LOG_CONSTANT = 2.0
SPLAY_PROB = 0.25
SIZE_CUTOFF = 400

_rng = random.Random()


class SplayNode:
    """A node holding one key and the size of its subtree."""

    __slots__ = ("parent", "child", "key", "size")

    def __init__(self, key: Any) -> None:
        self.parent: Optional[SplayNode] = None
        self.child: list[Optional[SplayNode]] = [None, None]
        self.key = key
        self.size = 1

    def __repr__(self) -> str:
        return f"SplayNode(key={self.key!r}, size={self.size})"

    def parent_index(self) -> int:
        if self.parent is None:
            return -1
        return int(self is self.parent.child[1])

    def set_child(self, index: int, node: Optional[SplayNode]) -> None:
        self.child[index] = node
        if node is not None:
            node.parent = self

    def join(self) -> None:
        self.size = node_size(self.child[0]) + node_size(self.child[1]) + 1


def node_size(node: Optional[SplayNode]) -> int:
    """The number of nodes in the subtree of ``node`` (0 for None)."""
    return 0 if node is None else node.size


ShouldJoin = Callable[[Optional[SplayNode], bool], bool]


class SplayTree:
    """An ordered multiset of keys that splays deep or randomly chosen nodes to stay balanced."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        items = sorted(keys)
        self.root: Optional[SplayNode] = None
        self._set_root(self._construct(items, 0, len(items)))

    def _construct(self, items: list[Any], start: int, end: int) -> Optional[SplayNode]:
        if start >= end:
            return None
        mid = (start + end) // 2
        node = SplayNode(items[mid])
        node.set_child(0, self._construct(items, start, mid))
        node.set_child(1, self._construct(items, mid + 1, end))
        node.join()
        return node

    def __len__(self) -> int:
        return node_size(self.root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[SplayNode] = []
        node = self.root

        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.child[0]
            node = stack.pop()
            yield node.key
            node = node.child[1]

    def __contains__(self, key: Any) -> bool:
        node = self.lower_bound(key)[0]
        return node is not None and node.key == key

    def __repr__(self) -> str:
        return f"SplayTree({list(self)!r})"

    def _set_root(self, node: Optional[SplayNode]) -> Optional[SplayNode]:
        if node is not None:
            node.parent = None
        self.root = node
        return node

    def _rotate_up(self, x: SplayNode, x_join: bool = True) -> None:
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

    def _splay(self, x: SplayNode) -> None:
        while x is not self.root:
            p = x.parent
            if p is not self.root:
                self._rotate_up(p if x.parent_index() == p.parent_index() else x, False)
            self._rotate_up(x, False)

        x.join()

    def _check_splay(self, x: SplayNode, depth: int) -> None:
        """Splay ``x`` when it is deep, or with some probability when the tree is small."""
        n = len(self)
        log_n = n.bit_length()

        if depth > LOG_CONSTANT * log_n or (n <= SIZE_CUTOFF and _rng.random() < SPLAY_PROB):
            self._splay(x)

    def insert(self, key: Any, require_unique: bool = False) -> tuple[SplayNode, int]:
        """Insert ``key``; return the node and the number of keys strictly less than it."""
        return self.insert_node(SplayNode(key), require_unique)

    def insert_node(self, node: SplayNode, require_unique: bool = False) -> tuple[SplayNode, int]:
        """Insert a detached node by key order.

        With ``require_unique`` an existing equal key is returned instead of inserting.
        """
        if self.root is None:
            return self._set_root(node), 0

        current: Optional[SplayNode] = self.root
        previous = current
        below = 0
        depth = 0

        while current is not None:
            previous = current
            depth += 1

            if current.key < node.key:
                below += node_size(current.child[0]) + 1
                current = current.child[1]
            else:
                if require_unique and not node.key < current.key:
                    below += node_size(current.child[0])
                    self._check_splay(current, depth)
                    return current, below
                current = current.child[0]

        previous.set_child(int(previous.key < node.key), node)
        self._check_splay(node, depth)

        walker: Optional[SplayNode] = node
        while walker is not None:
            walker.join()
            walker = walker.parent

        return node, below

    def _extreme(self, side: int) -> Optional[SplayNode]:
        if self.root is None:
            return None

        x = self.root
        depth = 0
        while x.child[side] is not None:
            x = x.child[side]
            depth += 1

        self._check_splay(x, depth)
        return x

    def first(self) -> Optional[SplayNode]:
        return self._extreme(0)

    def last(self) -> Optional[SplayNode]:
        return self._extreme(1)

    @staticmethod
    def _neighbor(x: Optional[SplayNode], side: int) -> Optional[SplayNode]:
        if x is None:
            return None

        if x.child[side] is not None:
            x = x.child[side]
            while x.child[1 - side] is not None:
                x = x.child[1 - side]
            return x

        while x.parent_index() == side:
            x = x.parent

        return x.parent

    def successor(self, node: Optional[SplayNode]) -> Optional[SplayNode]:
        return self._neighbor(node, 1)

    def predecessor(self, node: Optional[SplayNode]) -> Optional[SplayNode]:
        return self._neighbor(node, 0)

    def clear(self) -> None:
        self._set_root(None)

    def erase_node(self, node: SplayNode) -> None:
        """Remove ``node`` from the tree."""
        x = node

        if x.child[0] is None or x.child[1] is None:
            new_x = x.child[1] if x.child[0] is None else x.child[0]
            fix_node = x.parent
        else:
            after = self.successor(x)
            new_x = after
            fix_node = after if after.parent is x else after.parent

            after.parent.set_child(after.parent_index(), after.child[1])
            after.set_child(0, x.child[0])
            after.set_child(1, x.child[1])

        if x is self.root:
            self._set_root(new_x)
        else:
            x.parent.set_child(x.parent_index(), new_x)

        depth = 0
        walker = fix_node
        while walker is not None:
            walker.join()
            depth += 1
            walker = walker.parent

        if fix_node is not None:
            self._check_splay(fix_node, depth)

        x.parent = None
        x.child = [None, None]
        x.size = 1

    def erase(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return False if it is absent."""
        node = self.lower_bound(key)[0]

        if node is None or node.key != key:
            return False

        self.erase_node(node)
        return True

    def lower_bound(self, key: Any) -> tuple[Optional[SplayNode], int]:
        """The first node with key >= ``key`` (or None) and the number of keys below ``key``."""
        current = self.root
        previous = None
        answer = None
        below = 0
        depth = 0

        while current is not None:
            previous = current
            depth += 1

            if current.key < key:
                below += node_size(current.child[0]) + 1
                current = current.child[1]
            else:
                answer = current
                current = current.child[0]

        if previous is not None:
            self._check_splay(previous, depth)

        return answer, below

    def node_at_index(self, index: int) -> Optional[SplayNode]:
        """The node at sorted position ``index``, or None when out of range."""
        if not 0 <= index < len(self):
            return None

        current = self.root
        depth = 0

        while current is not None:
            left_size = node_size(current.child[0])
            depth += 1

            if index == left_size:
                self._check_splay(current, depth)
                return current

            if index < left_size:
                current = current.child[0]
            else:
                current = current.child[1]
                index -= left_size + 1

        raise RuntimeError("tree sizes are inconsistent")

    def insert_at_index(self, index: int, key: Any) -> SplayNode:
        """Place ``key`` at position ``index``; this may break the key order if misused."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} out of range")

        x = SplayNode(key)
        right = self.node_at_index(index)

        if right is not None:
            self._splay(right)
            left = right.child[0]
            right.set_child(0, None)
            right.join()
        else:
            left = self.root

        x.set_child(0, left)
        x.set_child(1, right)
        x.join()
        self._set_root(x)
        return x

    def query_prefix_key(self, key: Any) -> Optional[SplayNode]:
        """A node whose subtree is exactly the keys less than ``key``, or None."""
        node = self.lower_bound(key)[0]

        if node is None:
            return self.root

        self._splay(node)
        return node.child[0]

    def query_prefix_count(self, count: int) -> Optional[SplayNode]:
        """A node whose subtree is exactly the first ``count`` keys, or None."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root

        node = self.node_at_index(count)
        self._splay(node)
        return node.child[0]

    def query_suffix_key(self, key: Any) -> Optional[SplayNode]:
        """A node whose subtree is exactly the keys >= ``key``, or None."""
        node = self.lower_bound(key)[0]

        if node is None:
            return None

        node = self.predecessor(node)

        if node is None:
            return self.root

        self._splay(node)
        return node.child[1]

    def query_suffix_count(self, count: int) -> Optional[SplayNode]:
        """A node whose subtree is exactly the last ``count`` keys, or None."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root

        node = self.node_at_index(len(self) - count - 1)
        self._splay(node)
        return node.child[1]

    def query_range(self, start: int, end: int) -> Optional[SplayNode]:
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

    def query_range_key(self, lower: Any, upper: Any) -> Optional[SplayNode]:
        """A node whose subtree is exactly the keys in ``[lower, upper)``, or None."""
        return self.query_range(self.lower_bound(lower)[1], self.lower_bound(upper)[1])

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
        depth = 0

        while current is not None:
            previous = current
            depth += 1

            if not should_join(current.child[0], False):
                current = current.child[0]
            else:
                end += node_size(current.child[0])
                if not should_join(current, True):
                    break
                end += 1
                current = current.child[1]

        if previous is not None:
            self._check_splay(previous, depth)

        return end