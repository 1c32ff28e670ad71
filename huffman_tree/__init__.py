from .utils.types import Symbol, Leaf, Internal, Node, EmptyInputError
from .utils.priority_collection import TieBreak, PriorityCollection, frequency_table, count_frequencies
from .builder import TreeBuilder, GreedyTreeBuilder, build_tree, build_tree_from_symbols
