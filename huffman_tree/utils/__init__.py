from .types import Symbol, Leaf, Internal, Node, EmptyInputError
from .priority_collection import TieBreak, PriorityCollection, frequency_table, count_frequencies
from .tree_metrics import iter_nodes, leaves, depth, code_lengths, weighted_path_length, average_code_length, \
    calculate_entropy
