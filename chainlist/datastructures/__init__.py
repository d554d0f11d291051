from .linked_list import LinkedList, LinkedListIter, Node

__all__ = [
    "LinkedList",
    "LinkedListIter",
    "Node",
]
