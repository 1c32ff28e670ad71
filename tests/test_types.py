import dataclasses

import pytest

from huffman_tree import Leaf, Internal, EmptyInputError


def test_leaf_holds_symbol_and_frequency():
    leaf = Leaf("a", 4)
    assert leaf.symbol == "a"
    assert leaf.frequency == 4
    assert leaf.is_leaf


def test_leaf_rejects_negative_frequency():
    with pytest.raises(ValueError):
        Leaf("a", -1)


def test_leaf_rejects_non_integer_frequency():
    with pytest.raises(TypeError):
        Leaf("a", 1.5)


def test_merge_sums_children_frequencies():
    node = Internal.merge(Leaf("d", 1), Leaf("c", 2))
    assert node.frequency == 3
    assert not node.is_leaf
    assert node.left == Leaf("d", 1)
    assert node.right == Leaf("c", 2)


def test_internal_rejects_wrong_frequency():
    with pytest.raises(ValueError):
        Internal(Leaf("d", 1), Leaf("c", 2), 4)


def test_nodes_are_immutable():
    node = Internal.merge(Leaf("d", 1), Leaf("c", 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.frequency = 10
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.left.symbol = "x"


def test_structural_equality():
    assert Internal.merge(Leaf("a", 1), Leaf("b", 1)) == Internal.merge(Leaf("a", 1), Leaf("b", 1))
    assert Internal.merge(Leaf("a", 1), Leaf("b", 1)) != Internal.merge(Leaf("b", 1), Leaf("a", 1))


def test_empty_input_error_is_value_error():
    error = EmptyInputError()
    assert isinstance(error, ValueError)
    assert str(error) == "cannot construct a code tree with no symbols"


def test_leaf_rejects_bool_frequency():
    with pytest.raises(TypeError):
        Leaf("a", True)


def test_internal_rejects_non_integer_frequency():
    with pytest.raises(TypeError):
        Internal(Leaf("a", 1), Leaf("b", 2), 3.0)


def test_merged_frequency_is_integer():
    assert type(Internal.merge(Leaf("a", 1), Leaf("b", 2)).frequency) is int
