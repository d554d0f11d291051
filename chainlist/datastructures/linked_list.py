from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A single element of the chain.

    A node holds its value and owns the slot (a :class:`LinkedList`) that
    carries the rest of the chain.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional["LinkedList[T]"] = None) -> None:
        self.value = value
        self.next: LinkedList[T] = LinkedList() if next is None else next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self.value!r})"


class LinkedList(Generic[T]):
    """Singly-linked list in which the list itself is the link slot.

    A ``LinkedList`` is either empty or holds exactly one :class:`Node`,
    whose ``next`` is again a ``LinkedList``. Every slot is the sole owner
    of the chain reachable from it.

    Implementation notes
    --------------------
    • Nodes are only ever moved with :meth:`_take`, which leaves the source
      slot empty, so no node is reachable from two slots at once.
    • ``push_front``/``pop_front`` are O(1); everything that has to walk the
      chain (``push_back``, ``pop_back``, ``get``, ``insert``, ``remove``,
      ``len``) is O(n).
    • Out-of-range ``insert`` appends at the tail; out-of-range ``remove``
      returns ``None``.
    """

    __slots__ = ("_node",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._node: Optional[Node[T]] = None

        # Reuse push_back so the chain is built in iteration order.
        if it is not None:
            for v in it:
                self.push_back(v)

    # ------------------------------ construction ------------------------------

    @classmethod
    def new(cls) -> LinkedList[T]:
        """Return an empty list."""
        return cls()

    @classmethod
    def from_value(cls, value: T) -> LinkedList[T]:
        """Return a one-element list holding *value*."""
        lst: LinkedList[T] = cls()
        lst._node = Node(value)
        return lst

    @classmethod
    def from_iterable(cls, it: Iterable[T]) -> LinkedList[T]:
        """Build a list from any finite iterable, preserving order. O(n^2)."""
        return cls(it)

    # ------------------------------- internals --------------------------------

    def _take(self) -> LinkedList[T]:
        """Detach this slot's chain and return it, leaving this slot empty."""
        taken: LinkedList[T] = LinkedList()
        taken._node, self._node = self._node, None
        return taken

    def _assign(self, other: LinkedList[T]) -> None:
        """Move *other*'s chain into this slot. *other* is left empty.

        Whatever this slot held before is dropped.
        """
        self._node, other._node = other._node, None

    def _extract_value(self) -> T:
        """Consume the head node and return its value.

        The caller must already have detached any suffix it wants to keep.
        """
        node = self._node
        if node is None:
            raise RuntimeError("Attempt to extract value from Empty Node.")
        self._node = None
        return node.value

    def _slot_at(self, index: int) -> LinkedList[T]:
        """Return the slot at position *index*.

        Stops at the empty terminal slot when the chain is shorter.
        """
        slot = self
        while index > 0 and slot._node is not None:
            slot = slot._node.next
            index -= 1
        return slot

    def _tail(self) -> LinkedList[T]:
        """Return the empty slot that terminates the chain."""
        slot = self
        while slot._node is not None:
            slot = slot._node.next
        return slot

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise ValueError("index must be non-negative")

    # ---------------------------------- API -----------------------------------

    @property
    def node(self) -> Node[T]:
        """The head node. Raises RuntimeError on an empty list."""
        if self._node is None:
            raise RuntimeError("Attempt to dereference an empty list.")
        return self._node

    def is_empty(self) -> bool:
        return self._node is None

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """Return the value at 0-based *index*, or *default* if absent. O(n)."""
        if index >= 0:
            for i, value in enumerate(self):
                if i == index:
                    return value
        return default

    def get_mut(self, index: int) -> Optional[Node[T]]:
        """Return the node at *index* so its ``value`` can be rewritten.

        Returns ``None`` when there is no element at *index*. Index 0 is the
        head, exactly as with :meth:`get`.
        """
        if index < 0:
            return None
        return self._slot_at(index)._node

    def push_front(self, value: T) -> None:
        """Push *value* at the front of the list. O(1)."""
        self._node = Node(value, self._take())

    def push_back(self, value: T) -> None:
        """Append *value* at the end of the list. O(n)."""
        self._tail()._assign(LinkedList.from_value(value))

    def pop_front(self) -> Optional[T]:
        """Remove and return the head value, or ``None`` if empty. O(1)."""
        if self._node is None:
            return None
        head = self._take()
        self._assign(head.node.next._take())
        return head._extract_value()

    def pop_back(self) -> Optional[T]:
        """Remove and return the last value, or ``None`` if empty. O(n)."""
        if self._node is None:
            return None
        slot = self
        while not slot.node.next.is_empty():
            slot = slot.node.next
        return slot._take()._extract_value()

    def insert(self, index: int, value: T) -> None:
        """Insert *value* so that it ends up at position *index*.

        If *index* is past the end, *value* is appended. O(n).

        Raises:
            ValueError: if *index* is negative.
        """
        self._check_index(index)
        self._slot_at(index).push_front(value)

    def remove(self, index: int) -> Optional[T]:
        """Remove and return the value at *index*. O(n).

        Returns ``None`` if the list is empty or *index* is past the end.

        Raises:
            ValueError: if *index* is negative.
        """
        self._check_index(index)
        return self._slot_at(index).pop_front()

    def clear(self) -> None:
        """Drop every node, unlinking one node per step."""
        rest = self._take()
        while rest._node is not None:
            rest = rest._node.next._take()

    def to_py(self) -> list[object]:
        """Convert to a plain Python ``list``.

        Elements implementing ``to_py()`` are converted with it.
        """
        out: list[object] = []
        for v in self:
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                out.append(v.to_py())  # type: ignore[attr-defined]
            else:
                out.append(v)
        return out

    # ----------------------------- Python protocol ----------------------------

    def __iter__(self) -> LinkedListIter[T]:
        return LinkedListIter(self)

    def __getitem__(self, index: int) -> T:
        node = self.get_mut(index)
        if node is None:
            raise IndexError(f"Index value {index} out of range.")
        return node.value

    def __setitem__(self, index: int, value: T) -> None:
        node = self.get_mut(index)
        if node is None:
            raise IndexError(f"Index value {index} out of range.")
        node.value = value

    def __len__(self) -> int:
        """Number of elements. O(n), the chain is walked every time."""
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._node is not None

    def __contains__(self, value: object) -> bool:
        """Return True if *value* is present (linear scan)."""
        for v in self:
            if v == value:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        a: Optional[Node[T]] = self._node
        b = other._node
        while a is not None and b is not None:
            if a.value != b.value:
                return False
            a, b = a.next._node, b.next._node
        return a is None and b is None

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LinkedList({self.to_py()!r})"


class LinkedListIter(Generic[T]):
    """Read-only cursor over a :class:`LinkedList`.

    Holds the remaining list from the current position. Single pass: once
    exhausted it stays exhausted, so iterate the list again for a new one.
    """

    __slots__ = ("_rest",)

    def __init__(self, lst: LinkedList[T]) -> None:
        self._rest = lst

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        node = self._rest._node
        if node is None:
            raise StopIteration
        self._rest = node.next
        return node.value
