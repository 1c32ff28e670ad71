from abc import ABC, abstractmethod
from ..utils.types import Node
from ..utils.priority_collection import PriorityCollection


class TreeBuilder(ABC):
    @abstractmethod
    def build(self, collection: PriorityCollection) -> Node:
        ...
