"""
tree.py

Huffman tree nodes and the greedy tree builder.
"""


import heapq
import itertools
from typing import Any, Iterator, List, Optional, Tuple

from .errors import InvalidInput
from .logger import Logger, MergeProgressStep, TreeConstructionLog
from .models import Alphabet, AlphabetSource, SymbolFrequency


class Node:
    """
    A node of a Huffman tree.

    A leaf holds a SymbolFrequency with a symbol and has no children. An
    internal node holds a SymbolFrequency without a symbol whose weight is
    the sum of its two children. Nodes cannot be changed after creation.
    """
    __slots__ = ("_value", "_left", "_right")

    def __init__(self, value: SymbolFrequency, left: Optional["Node"] = None, right: Optional["Node"] = None) -> None:
        if not isinstance(value, SymbolFrequency):
            raise ValueError("Node value must be of type SymbolFrequency")
        if value.symbol is None:
            if left is None or right is None:
                raise ValueError("An internal node must have two children")
        elif left is not None or right is not None:
            raise ValueError("A leaf node cannot have children")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_left", left)
        object.__setattr__(self, "_right", right)

    @classmethod
    def leaf(cls, symbol: str, weight: float) -> "Node":
        return cls(SymbolFrequency(symbol, weight))

    @classmethod
    def merge(cls, left: "Node", right: "Node") -> "Node":
        """Create the internal parent of left and right."""
        return cls(SymbolFrequency(None, left.weight + right.weight), left, right)

    @property
    def value(self) -> SymbolFrequency:
        return self._value

    @property
    def symbol(self) -> Optional[str]:
        return self._value.symbol

    @property
    def weight(self) -> float:
        return self._value.weight

    @property
    def left(self) -> Optional["Node"]:
        return self._left

    @property
    def right(self) -> Optional["Node"]:
        return self._right

    def is_leaf(self) -> bool:
        return self._value.symbol is not None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Node is immutable")

    def iter_nodes(self) -> Iterator[Tuple["Node", int]]:
        """
        Iterate over this node and its descendants in pre-order, left
        before right.

        Yields:
            Tuple[Node, int]: Each node with its depth relative to this node.
        """
        # Explicit stack: zero weights can make trees as deep as the alphabet is long.
        stack: List[Tuple[Node, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if not node.is_leaf():
                stack.append((node._right, depth + 1))
                stack.append((node._left, depth + 1))

    def iter_leaves(self) -> Iterator[Tuple["Node", int]]:
        """Iterate over the leaves below this node, left to right, with their depths."""
        for node, depth in self.iter_nodes():
            if node.is_leaf():
                yield node, depth

    def count_leaves(self) -> int:
        return sum(1 for _ in self.iter_leaves())

    def count_internal(self) -> int:
        return sum(1 for node, _ in self.iter_nodes() if not node.is_leaf())

    def get_height(self) -> int:
        """Length of the longest path from this node down to a leaf."""
        return max(depth for _, depth in self.iter_leaves())

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"Node({self.symbol!r}, {self.weight!r})"
        return f"Node(None, {self.weight!r}, leaves={self.count_leaves()})"


def build_tree(alphabet: AlphabetSource, logger: Optional[Logger] = None) -> Node:
    """
    Build the Huffman tree of an alphabet by greedily merging the two
    lightest nodes until one remains.

    The first node taken from the heap becomes the right child and the
    second the left child. Nodes of equal weight leave the heap in the
    order they entered it (leaves in alphabet order, then merged nodes in
    creation order), so the same input always yields the same tree.

    Args:
        alphabet: An Alphabet, a {symbol: weight} mapping or a sequence of
            (symbol, weight) pairs. Symbols must be unique.
        logger (Optional[Logger]): Receives one MergeProgressStep per merge
            and a TreeConstructionLog at the end.

    Returns:
        Node: The root of the tree. A single-symbol alphabet yields a leaf.

    Raises:
        InvalidInput: If the alphabet is empty or has duplicate or invalid entries.
    """
    alphabet = Alphabet.coerce(alphabet)
    size = alphabet.get_size()
    if size == 0:
        raise InvalidInput("Cannot build a Huffman tree from an empty alphabet")

    sequence = itertools.count()
    heap: List[Tuple[float, int, Node]] = [
        (entry.weight, next(sequence), Node(entry)) for entry in alphabet
    ]
    heapq.heapify(heap)

    for _ in range(size - 1):
        _, _, right = heapq.heappop(heap)
        _, _, left = heapq.heappop(heap)
        merged = Node.merge(left, right)
        heapq.heappush(heap, (merged.weight, next(sequence), merged))
        if logger is not None:
            logger.log(MergeProgressStep("Merging nodes", size - 1))

    _, _, root = heap[0]
    if logger is not None:
        logger.log(TreeConstructionLog(size, root.weight, root.get_height()))
    return root
