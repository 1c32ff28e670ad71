from typing import Iterable
from ..builder import TreeBuilder
from ...utils.types import Symbol, Node, Internal, EmptyInputError
from ...utils.priority_collection import PriorityCollection, TieBreak, count_frequencies
from ...utils.tree_metrics import leaves, depth, average_code_length, calculate_entropy


class GreedyTreeBuilder(TreeBuilder):
    def __init__(self, verbose=False):
        self.verbose = verbose

    def build(self, collection: PriorityCollection) -> Node:
        """
        Builds a Huffman code tree by repeatedly merging the two lowest-frequency nodes.

        The first node extracted in a step becomes the left child and the second
        one the right child. The collection is drained by the build.

        Parameters:
            collection (PriorityCollection): Seeded nodes, e.g. from count_frequencies.

        Returns:
            Node: Root of the tree. A single node in the collection is returned as is.

        Raises:
            EmptyInputError: The collection holds no nodes.
        """
        if not collection:
            raise EmptyInputError()

        merges = 0
        while len(collection) > 1:
            left = collection.pop()
            right = collection.pop()
            collection.push(Internal.merge(left, right))
            merges += 1
        root = collection.pop()

        if self.verbose:
            tree_leaves = leaves(root)
            print("GreedyTreeBuilder verbose statistics:")
            print(f"- Leaves: {len(tree_leaves)}")
            print(f"- Merges: {merges}")
            print(f"- Root frequency: {root.frequency}")
            print(f"- Tree depth: {depth(root)}")
            print(f"- Symbols entropy: {calculate_entropy({leaf.symbol: leaf.frequency for leaf in tree_leaves}):.3f}")
            print(f"- Average code bit length: {average_code_length(root):.3f}")

        return root


def build_tree(collection: PriorityCollection) -> Node:
    return GreedyTreeBuilder().build(collection)


def build_tree_from_symbols(symbols: Iterable[Symbol], tie_break: TieBreak = TieBreak.INSERTION) -> Node:
    # Count frequencies
    collection = count_frequencies(symbols, tie_break)

    # Build Huffman Tree
    return build_tree(collection)
