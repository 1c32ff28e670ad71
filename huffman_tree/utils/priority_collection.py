import heapq
import itertools
from collections import Counter, deque
from enum import IntEnum
from typing import Deque, Dict, Iterable, Iterator, List, Tuple

from .types import Symbol, Leaf, Node


class TieBreak(IntEnum):
    INSERTION = 0
    SYMBOL = 1


def frequency_table(symbols: Iterable[Symbol]) -> Dict[Symbol, int]:
    """
    Counts occurrences of each distinct symbol.

    Parameters:
        symbols (iterable): Input sequence, e.g. a string or a list of symbols.

    Returns:
        Counter: Mapping of symbol to count, in first-occurrence order.
    """
    return Counter(symbols)


class PriorityCollection:
    """
    Min-ordered multiset of tree nodes used while merging.

    Nodes are ordered by frequency. Equal frequencies are resolved by the
    configured TieBreak: INSERTION extracts the earliest pushed node first,
    SYMBOL extracts the node holding the smallest symbol first and falls back
    to insertion order.
    """

    def __init__(self, tie_break: TieBreak = TieBreak.INSERTION):
        self.tie_break: TieBreak = TieBreak(tie_break)
        self._heap: List[Tuple] = []
        self._sequence = itertools.count()
        # (node, smallest symbol) of the last two popped entries, reused when their parent is pushed
        self._popped: Deque[Tuple[Node, Symbol]] = deque(maxlen=2)

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], tie_break: TieBreak = TieBreak.INSERTION) -> 'PriorityCollection':
        collection = cls(tie_break)
        for node in nodes:
            collection.push(node)
        return collection

    def _min_symbol(self, node: Node) -> Symbol:
        if isinstance(node, Leaf):
            return node.symbol
        return min(self._child_min_symbol(node.left), self._child_min_symbol(node.right))

    def _child_min_symbol(self, child: Node) -> Symbol:
        for popped, symbol in self._popped:
            if popped is child:
                return symbol
        return self._subtree_min(child)

    @staticmethod
    def _subtree_min(node: Node) -> Symbol:
        stack = [node]
        symbols = []
        while stack:
            current = stack.pop()
            if isinstance(current, Leaf):
                symbols.append(current.symbol)
            else:
                stack.append(current.right)
                stack.append(current.left)
        return min(symbols)

    def _entry(self, node: Node) -> Tuple:
        sequence = next(self._sequence)
        if self.tie_break == TieBreak.SYMBOL:
            return node.frequency, self._min_symbol(node), sequence, node
        return node.frequency, sequence, node

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, self._entry(node))

    def pop(self) -> Node:
        if not self._heap:
            raise IndexError("pop from an empty priority collection")
        entry = heapq.heappop(self._heap)
        if self.tie_break == TieBreak.SYMBOL:
            self._popped.append((entry[-1], entry[1]))
        return entry[-1]

    def peek(self) -> Node:
        if not self._heap:
            raise IndexError("peek into an empty priority collection")
        return self._heap[0][-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Node]:
        # Non-destructive, in extraction order
        return iter([entry[-1] for entry in sorted(self._heap, key=lambda e: e[:-1])])

    def __repr__(self) -> str:
        return f"PriorityCollection({list(self)!r}, tie_break={self.tie_break.name})"


def count_frequencies(symbols: Iterable[Symbol],
                      tie_break: TieBreak = TieBreak.INSERTION) -> PriorityCollection:
    """
    Seeds a priority collection with one leaf per distinct symbol.

    Parameters:
        symbols (iterable): Input sequence; may be empty.
        tie_break (TieBreak): Ordering among equal frequencies.

    Returns:
        PriorityCollection: Leaves weighted by occurrence count. Empty input gives an empty collection.
    """
    frequencies = frequency_table(symbols)
    return PriorityCollection.from_nodes(
        (Leaf(symbol, count) for symbol, count in frequencies.items()), tie_break
    )
