from .builder import TreeBuilder
from .implementation.greedy import GreedyTreeBuilder, build_tree, build_tree_from_symbols
