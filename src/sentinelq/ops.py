"""Functional interface that accepts an absent (None) queue handle.

Every function here turns a missing queue into a harmless result (False, None,
0 or nothing) instead of raising, and otherwise delegates to StringQueue.
"""

import logging

from sentinelq.core import StringQueue
from sentinelq.element import Element, release_element

logger = logging.getLogger(__name__)

__all__ = [
    "new_queue",
    "free_queue",
    "insert_head",
    "insert_tail",
    "remove_head",
    "remove_tail",
    "release_element",
    "size",
    "delete_middle",
    "delete_duplicates",
    "swap_pairs",
    "reverse",
    "sort",
]


def new_queue(*, encoding: str = "utf-8") -> StringQueue | None:
    """Create an empty queue, or return None if it could not be allocated."""
    try:
        return StringQueue(encoding=encoding)
    except MemoryError:
        logger.warning("Could not allocate queue")
        return None


def free_queue(queue: StringQueue | None) -> None:
    """Release every element of ``queue`` and the queue itself."""
    if queue is None:
        return
    queue.destroy()


def insert_head(queue: StringQueue | None, value: str) -> bool:
    """Insert ``value`` at the head; False if the queue is absent."""
    if queue is None:
        return False
    return queue.insert_head(value)


def insert_tail(queue: StringQueue | None, value: str) -> bool:
    """Insert ``value`` at the tail; False if the queue is absent."""
    if queue is None:
        return False
    return queue.insert_tail(value)


def remove_head(
    queue: StringQueue | None,
    buffer: bytearray | None = None,
    bufsize: int | None = None,
) -> Element | None:
    """Unlink and return the first element; None if the queue is absent or empty."""
    if queue is None:
        return None
    return queue.remove_head(buffer, bufsize)


def remove_tail(
    queue: StringQueue | None,
    buffer: bytearray | None = None,
    bufsize: int | None = None,
) -> Element | None:
    """Unlink and return the last element; None if the queue is absent or empty."""
    if queue is None:
        return None
    return queue.remove_tail(buffer, bufsize)


def size(queue: StringQueue | None) -> int:
    """Return the element count, 0 for an absent queue."""
    if queue is None:
        return 0
    return queue.size()


def delete_middle(queue: StringQueue | None) -> bool:
    """Delete the middle element; False if the queue is absent or empty."""
    if queue is None:
        return False
    return queue.delete_middle()


def delete_duplicates(queue: StringQueue | None) -> bool:
    """Delete every duplicated value of a sorted queue; False if absent or empty."""
    if queue is None:
        return False
    return queue.delete_duplicates()


def swap_pairs(queue: StringQueue | None) -> None:
    """Swap adjacent pairs of elements."""
    if queue is not None:
        queue.swap_pairs()


def reverse(queue: StringQueue | None) -> None:
    """Reverse the queue in place."""
    if queue is not None:
        queue.reverse()


def sort(queue: StringQueue | None) -> None:
    """Sort the queue in non-decreasing order."""
    if queue is not None:
        queue.sort()
