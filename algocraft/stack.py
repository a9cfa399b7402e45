"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when the top of an empty stack is requested."""

    def __init__(self) -> None:
        super().__init__("stack is empty")


class Stack:
    """A last-in first-out stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._elements: list[Any] = []

    def __len__(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._elements

    def push(self, value: Any) -> None:
        """Push ``value``; raises OverflowError when the stack is full."""
        if len(self._elements) == self.capacity:
            raise OverflowError("stack is full")
        self._elements.append(value)

    def pop(self) -> Any:
        """Remove and return the top element; an empty stack yields None."""
        if not self._elements:
            return None
        return self._elements.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._elements:
            raise StackEmptyError()
        return self._elements[-1]

    def __getitem__(self, idx: int) -> Any:
        """Return the element ``idx`` places below the top."""
        if not 0 <= idx < len(self._elements):
            raise IndexError("Index out of bound.")
        return self._elements[-1 - idx]