from dataclasses import dataclass
from typing import Hashable, Union, TypeAlias

Symbol: TypeAlias = Hashable


class EmptyInputError(ValueError):
    def __init__(self, message: str = "cannot construct a code tree with no symbols"):
        super().__init__(message)


def _check_frequency(frequency) -> None:
    if not isinstance(frequency, int) or isinstance(frequency, bool):
        raise TypeError("Node frequency must be an integer.")
    if frequency < 0:
        raise ValueError("Node frequency cannot be negative.")


@dataclass(frozen=True)
class Leaf:
    symbol: Symbol
    frequency: int = 0

    def __post_init__(self):
        _check_frequency(self.frequency)

    @property
    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class Internal:
    left: 'Node'
    right: 'Node'
    frequency: int

    def __post_init__(self):
        _check_frequency(self.frequency)
        expected = self.left.frequency + self.right.frequency
        if self.frequency != expected:
            raise ValueError(
                f"Internal frequency {self.frequency} does not match children sum {expected}."
            )

    @property
    def is_leaf(self) -> bool:
        return False

    # Merge two subtrees into a new parent owning both
    @classmethod
    def merge(cls, left: 'Node', right: 'Node') -> 'Internal':
        return cls(left, right, left.frequency + right.frequency)


Node: TypeAlias = Union[Leaf, Internal]
