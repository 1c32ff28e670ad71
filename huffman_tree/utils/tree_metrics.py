from typing import Dict, Generator, List, Mapping
import numpy as np
from .types import Symbol, Leaf, Internal, Node


def iter_nodes(root: Node) -> Generator[Node, None, None]:
    # Pre-order: node, left subtree, right subtree
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Internal):
            stack.append(node.right)
            stack.append(node.left)


def leaves(root: Node) -> List[Leaf]:
    return [node for node in iter_nodes(root) if isinstance(node, Leaf)]


def code_lengths(root: Node) -> Dict[Symbol, int]:
    """
    Depth of every leaf, i.e. the bit length of the code its symbol would get.
    A single-leaf tree gives its symbol length 0.
    """
    lengths: Dict[Symbol, int] = {}
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Leaf):
            lengths[node.symbol] = level
        else:
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))
    return lengths


def depth(root: Node) -> int:
    return max(code_lengths(root).values())


def weighted_path_length(root: Node) -> int:
    lengths = code_lengths(root)
    return sum(leaf.frequency * lengths[leaf.symbol] for leaf in leaves(root))


def average_code_length(root: Node) -> float:
    if root.frequency == 0:
        return 0.0
    return weighted_path_length(root) / root.frequency


def calculate_entropy(frequencies: Mapping[Symbol, int]) -> float:
    counts = np.array([f for f in frequencies.values() if f > 0], dtype=np.float64)
    if counts.size < 2:
        return 0.0
    probabilities = counts / counts.sum()
    return float(-np.sum(probabilities * np.log2(probabilities)))
