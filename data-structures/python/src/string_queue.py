"""Singly linked queue of strings.

Supports insertion at both ends, removal from the head, in-place reversal
and an in-place natural-order merge sort. The module-level q_* functions
accept None in place of a queue and degrade to a no-op or False.
"""

import logging
from typing import Optional

from natural_compare import strnatcasecmp, strnatcmp

logger = logging.getLogger(__name__)


class StringQueue:
    class Node:
        def __init__(self, value: str) -> None:
            self.value: Optional[str] = value
            self.next: Optional["StringQueue.Node"] = None

    def __init__(self) -> None:
        self._head: Optional[StringQueue.Node] = None
        self._tail: Optional[StringQueue.Node] = None
        self._size = 0

    def insert_head(self, value: str) -> bool:
        node = self._new_node(value)
        if node is None:
            return False
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return True

    def insert_tail(self, value: str) -> bool:
        node = self._new_node(value)
        if node is None:
            return False
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1
        return True

    def remove_head(self, buffer=None, bufsize: int = 0) -> bool:
        """Remove the head element, optionally copying it into buffer.

        At most bufsize - 1 bytes of the UTF-8 encoded value are written to
        buffer, followed by a zero terminator. Longer values are truncated.
        Returns False if the queue is empty.
        """
        if not isinstance(bufsize, int):
            raise TypeError("bufsize must be an integer")
        if self._head is None:
            return False

        node = self._head
        if buffer is not None and bufsize > 0:
            # lone surrogates are valid str values and must still be copied
            data = node.value.encode("utf-8", "surrogatepass")
            copy_size = min(len(data), bufsize - 1)
            with memoryview(buffer) as raw, raw.cast("B") as view:
                if view.readonly:
                    raise TypeError("buffer must be writable")
                if len(view) < bufsize:
                    raise ValueError("buffer is smaller than bufsize")
                view[:copy_size] = data[:copy_size]
                view[copy_size] = 0

        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.value = None
        node.next = None
        return True

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def reverse(self) -> None:
        if self._size <= 1:
            return
        previous = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head, self._tail = self._tail, self._head

    def sort(self, fold_case: bool = False) -> None:
        """Sort ascending in natural order by relinking the existing nodes.

        Equal elements keep their relative order.
        """
        if self._size <= 1:
            return
        compare = strnatcasecmp if fold_case else strnatcmp
        self._head = self._merge_sort(self._head, self._size, compare)

        # the merge does not track the last node, so walk to it
        current = self._head
        for _ in range(self._size - 1):
            current = current.next
        self._tail = current

    def free(self) -> None:
        """Release every node, head to tail, and leave the queue empty."""
        released = 0
        current = self._head
        while current is not None:
            following = current.next
            current.value = None
            current.next = None
            current = following
            released += 1
        self._head = None
        self._tail = None
        self._size = 0
        logger.debug("released %d nodes", released)

    def _new_node(self, value: str) -> Optional["StringQueue.Node"]:
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        try:
            return self.Node(value)
        except MemoryError:
            logger.warning("could not allocate node for a value of length %d", len(value))
            return None

    @classmethod
    def _merge_sort(cls, start, length, compare):
        if length <= 1:
            return start

        left_length = (length + 1) // 2
        right_length = length // 2

        last_left = start
        for _ in range(left_length - 1):
            last_left = last_left.next
        right = last_left.next
        last_left.next = None

        left = cls._merge_sort(start, left_length, compare)
        right = cls._merge_sort(right, right_length, compare)
        return cls._merge(left, right, compare)

    @staticmethod
    def _merge(left, right, compare):
        head = None
        last = None
        while left is not None or right is not None:
            if right is None or (left is not None and compare(left.value, right.value) <= 0):
                taken = left
                left = left.next
            else:
                taken = right
                right = right.next
            if last is None:
                head = taken
            else:
                last.next = taken
            last = taken
        return head

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"StringQueue(size={self._size})"


def q_new() -> Optional[StringQueue]:
    try:
        return StringQueue()
    except MemoryError:
        logger.warning("could not allocate queue")
        return None


def q_free(q: Optional[StringQueue]) -> None:
    if q is None:
        return
    q.free()


def q_insert_head(q: Optional[StringQueue], s: str) -> bool:
    if q is None:
        logger.debug("insert_head on a missing queue")
        return False
    return q.insert_head(s)


def q_insert_tail(q: Optional[StringQueue], s: str) -> bool:
    if q is None:
        logger.debug("insert_tail on a missing queue")
        return False
    return q.insert_tail(s)


def q_remove_head(q: Optional[StringQueue], sp=None, bufsize: int = 0) -> bool:
    if q is None:
        logger.debug("remove_head on a missing queue")
        return False
    return q.remove_head(sp, bufsize)


def q_size(q: Optional[StringQueue]) -> int:
    if q is None:
        return 0
    return q.size()


def q_reverse(q: Optional[StringQueue]) -> None:
    if q is None:
        return
    q.reverse()


def q_sort(q: Optional[StringQueue], fold_case: bool = False) -> None:
    if q is None:
        return
    q.sort(fold_case)
