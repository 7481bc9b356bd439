"""Stack: a last-in-first-out container.

INVARIANT: ``size() == 0`` iff every pushed item has been popped or cleared.
Reading from an empty stack raises :class:`EmptyStackError`; there is no
sentinel default.
"""

from __future__ import annotations

from collections.abc import Iterator


class EmptyStackError(IndexError):
    """Raised by ``pop`` or ``peek`` on a stack with no items."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} from an empty stack")
        self.operation = operation


class Stack[T]:
    """Generic LIFO stack owned by a single caller.

    Examples:
        >>> s = Stack[int]()
        >>> s.push(1)
        >>> s.push(2)
        >>> s.pop()
        2
        >>> s.size()
        1
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError("peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom without consuming items."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
