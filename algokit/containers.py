"""A stack built from a queue and a queue built from two stacks."""

from __future__ import annotations

from collections import deque


class QueueBackedStack:
    """A LIFO stack that only uses FIFO queue operations on its storage."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def _bring_last_to_front(self) -> None:
        if not self._queue:
            raise IndexError("stack is empty")
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)

    def pop(self) -> int:
        """Remove and return the top element."""
        self._bring_last_to_front()
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        self._bring_last_to_front()
        value = self._queue.popleft()
        self._queue.append(value)
        return value

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue


class StackBackedQueue:
    """A FIFO queue that only uses LIFO stack operations on its storage."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front element."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front element without removing it."""
        self._refill()
        return self._outbox[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._inbox and not self._outbox