"""A Fenwick tree (binary indexed tree) over an arbitrary integer range.

Based on:
    Peter M. Fenwick, "A New Data Structure for Cumulative Frequency
    Tables", Software: Practice and Experience 24(3), pages 327–336, 1994.

The tree is implicit: a flat list of partial sums plus an offset. Position
`p` (1-based) holds the sum of the `lsb(p)` values ending at `p`, so
updates climb by adding the lowest set bit and queries descend by clearing
it. Out-of-range indices never raise; writes below the range are ignored,
writes above it touch nothing, and reads are clamped to the range.
"""
from typing import Generator, Iterable, List, Optional, Tuple
from loguru import logger

# Records stay silent unless the application opts in with
# `logger.enable("fenwick")`.
logger.disable("fenwick")

Num = float  # ints are accepted wherever a Num is
IndexValueIterator = Generator[Tuple[int, Num], None, None]


def lsb(p: int) -> int:
    """The value of the lowest set bit of `p` (`p` > 0)."""
    return p & -p


class Tree:
    """A Fenwick tree over the inclusive index range [lb, ub]."""
    def __init__(self, lb: int, ub: int):
        """Creates a tree with every value in [lb, ub] set to zero.

        If `ub < lb - 1`, the range is treated as empty: all queries
        return zero and all updates are no-ops.
        """
        size = ub - lb + 1
        if size < 0:
            logger.debug(f"[fenwick]: inverted range [{lb}, {ub}]; empty tree")
            size = 0
        self.offset = lb
        self.tree: List[Num] = [0] * size

    @classmethod
    def from_values(cls, values: Iterable[Num], lb: int = 0) -> 'Tree':
        """Builds a tree over [lb, lb + len(values) - 1] in O(n) time.

        Each completed block is pushed once to its parent instead of
        running `add` for every value."""
        tree = cls(lb, lb - 1)
        tree.tree = list(values)
        n = len(tree.tree)
        for p in range(1, n + 1):
            parent = p + lsb(p)
            if parent <= n:
                tree.tree[parent - 1] += tree.tree[p - 1]
        return tree

    def add(self, i: int, delta: Num) -> None:
        """Adds `delta` to the value at index `i`."""
        p = i - self.offset + 1
        if p < 1:
            return
        n = len(self.tree)
        while p <= n:
            self.tree[p - 1] += delta
            p += lsb(p)

    def prefix(self, i: int) -> Num:
        """Sums the values at indices [min, i].

        Indices past the upper bound are clamped to it; indices below
        the lower bound sum to zero."""
        p = min(i - self.offset + 1, len(self.tree))
        total = 0
        while p > 0:
            total += self.tree[p - 1]
            p ^= lsb(p)
        return total

    sum = prefix

    def range(self, i: int, k: int) -> Num:
        """Sums the values in the inclusive range [i, k]."""
        return self.prefix(k) - self.prefix(i - 1)

    def value(self, i: int) -> Num:
        """Looks up the value at index `i`."""
        return self.range(i, i)

    def set(self, i: int, v: Num) -> None:
        """Sets the value at index `i` to `v`."""
        current = self.value(i)
        if current != v:
            self.add(i, v - current)

    def min(self) -> int:
        return self.offset

    def max(self) -> int:
        return self.offset + len(self.tree) - 1

    def total(self) -> Num:
        """Sums every value in the tree."""
        return self.prefix(self.max())

    def search(self, target: Num) -> Optional[int]:
        """Finds the smallest index whose prefix sum is at least `target`.

        Only meaningful when all values are non-negative (e.g. frequency
        tables). If the total is less than `target` (or the tree is empty),
        `None` is returned."""
        n = len(self.tree)
        if n == 0 or target > self.total():
            return None
        if target <= 0:
            return self.min()
        # Descend from the largest power of two ≤ n, keeping `pos` as the
        # longest prefix whose sum is still below the target.
        pos = 0
        step = 1 << (n.bit_length() - 1)
        while step:
            nxt = pos + step
            if nxt <= n and self.tree[nxt - 1] < target:
                pos = nxt
                target -= self.tree[nxt - 1]
            step >>= 1
        return pos + self.offset

    def all(self) -> IndexValueIterator:
        """Generates all index-value pairs in ascending index order.

        Decodes the whole table in O(n) time by subtracting each block
        from its parent, highest positions first."""
        values = list(self.tree)
        n = len(values)
        for p in range(n, 0, -1):
            parent = p + lsb(p)
            if parent <= n:
                values[parent - 1] -= values[p - 1]
        for p, val in enumerate(values):
            yield p + self.offset, val

    def __len__(self) -> int:
        return len(self.tree)

    def __repr__(self):
        return (f'Fenwick tree over [{self.min()}, {self.max()}] ' +
                f'(total {self.total()})')
