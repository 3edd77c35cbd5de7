"""Main StringQueue implementation."""

import codecs
import logging
from collections.abc import Iterator

from sentinelq.element import Element
from sentinelq.errors import QueueDestroyedError
from sentinelq.linkedlist import (
    Link,
    check_ring,
    count_links,
    insert_after,
    insert_before,
    is_empty,
    iter_links,
    owner_of,
    reverse_ring,
    swap_adjacent,
    unlink,
)
from sentinelq.mergesort import sort_ring
from sentinelq.types import End

logger = logging.getLogger(__name__)


def _sort_key(link: Link[Element]) -> str:
    return owner_of(link).value


class StringQueue:
    """
    Sentinel-based circular doubly-linked queue of strings.

    The sentinel is a bare link that never carries a payload; the queue is
    empty when it links only to itself. No size is cached, so ``size()`` and
    ``len()`` walk the ring.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """
        Initialize an empty queue.

        Args:
            encoding: Codec used when copying payloads into caller buffers
                on remove_head()/remove_tail().
        """
        # Fail here rather than halfway through a remove
        codecs.lookup(encoding)
        self._head: Link[Element] = Link()
        self._encoding = encoding
        self._destroyed = False

    def _check_alive(self) -> None:
        if self._destroyed:
            raise QueueDestroyedError("Queue has been destroyed")

    def destroy(self) -> None:
        """Release every element, then retire the sentinel. Safe to call twice."""
        if self._destroyed:
            return
        released = 0
        for link in iter_links(self._head):
            unlink(link)
            owner_of(link).release()
            released += 1
        self._destroyed = True
        logger.debug("Destroyed queue, released %d elements", released)

    @property
    def destroyed(self) -> bool:
        """True once destroy() has run."""
        return self._destroyed

    def __enter__(self) -> "StringQueue":
        """Context manager entry."""
        self._check_alive()
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.destroy()

    def insert_head(self, value: str) -> bool:
        """
        Insert a copy of ``value`` at the head of the queue.

        Returns:
            True on success, False if the element could not be allocated

        Raises:
            TypeError: If value is not a str
            QueueDestroyedError: If the queue was destroyed
        """
        return self._insert(value, "head")

    def insert_tail(self, value: str) -> bool:
        """Insert a copy of ``value`` at the tail of the queue. See insert_head()."""
        return self._insert(value, "tail")

    def _insert(self, value: str, end: End) -> bool:
        self._check_alive()
        try:
            element = Element(value)
        except MemoryError:
            # Nothing was linked yet, so the queue is unchanged
            logger.warning("Could not allocate element for %s insert", end)
            return False
        if end == "head":
            insert_after(element.link, self._head)
        else:
            insert_before(element.link, self._head)
        return True

    def remove_head(
        self,
        buffer: bytearray | None = None,
        bufsize: int | None = None,
    ) -> Element | None:
        """
        Unlink the first element and hand it to the caller.

        The element is not released; the caller owns it and must call
        ``release()`` on it exactly once.

        Args:
            buffer: Optional destination for a NUL-terminated copy of the payload
            bufsize: Capacity of ``buffer`` (defaults to its length); at most
                ``bufsize - 1`` payload bytes are copied

        Returns:
            The removed element, or None if the queue is empty

        Raises:
            QueueDestroyedError: If the queue was destroyed
        """
        return self._remove("head", buffer, bufsize)

    def remove_tail(
        self,
        buffer: bytearray | None = None,
        bufsize: int | None = None,
    ) -> Element | None:
        """Unlink the last element and hand it to the caller. See remove_head()."""
        return self._remove("tail", buffer, bufsize)

    def _remove(
        self,
        end: End,
        buffer: bytearray | None,
        bufsize: int | None,
    ) -> Element | None:
        self._check_alive()
        if is_empty(self._head):
            return None
        link = self._head.next if end == "head" else self._head.prev
        element = owner_of(link)
        # Copy while still linked so a failed copy leaves the element in the queue
        if buffer is not None:
            element.copy_into(buffer, bufsize, encoding=self._encoding)
        unlink(link)
        return element

    def size(self) -> int:
        """Return the number of elements by walking the ring. O(n)."""
        self._check_alive()
        return count_links(self._head)

    def __len__(self) -> int:
        """Return the number of elements. O(n)."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the queue is non-empty. O(1)."""
        self._check_alive()
        return not is_empty(self._head)

    def __iter__(self) -> Iterator[str]:
        """Iterate payloads from head to tail."""
        self._check_alive()
        for link in iter_links(self._head):
            yield owner_of(link).value

    def values(self) -> list[str]:
        """Return the payloads from head to tail."""
        return list(self)

    def _discard(self, link: Link[Element]) -> None:
        """Unlink and release in one step."""
        unlink(link)
        owner_of(link).release()

    def delete_middle(self) -> bool:
        """
        Delete the element at index ``n // 2`` (0-based) of an ``n``-element queue.

        For six elements the one at index 3 goes; a single element empties the
        queue.

        Returns:
            True if an element was deleted, False if the queue is empty
        """
        self._check_alive()
        if is_empty(self._head):
            return False
        slow = fast = self._head.next
        # fast moves two links per step and stops on or just before the sentinel
        while fast is not self._head and fast.next is not self._head:
            slow = slow.next
            fast = fast.next.next
        self._discard(slow)
        return True

    def delete_duplicates(self) -> bool:
        """
        Delete every element whose value equals a neighbour's value.

        The queue must already be sorted ascending. Every member of a run of
        two or more equal values is deleted; values that occur once are kept.

        Returns:
            True unless the queue is empty
        """
        self._check_alive()
        if is_empty(self._head):
            return False
        deleted = 0
        link = self._head.next
        while link is not self._head:
            value = owner_of(link).value
            run_end = link.next
            while run_end is not self._head and owner_of(run_end).value == value:
                run_end = run_end.next
            if run_end is link.next:
                link = run_end
                continue
            while link is not run_end:
                following = link.next
                self._discard(link)
                deleted += 1
                link = following
        logger.debug("Deleted %d duplicate elements", deleted)
        return True

    def swap_pairs(self) -> None:
        """Swap the positions of elements (0, 1), (2, 3), ... An odd last element stays put."""
        self._check_alive()
        first = self._head.next
        while first is not self._head and first.next is not self._head:
            swap_adjacent(first, first.next)
            # first now sits second in its pair; its successor opens the next pair
            first = first.next

    def reverse(self) -> None:
        """Reverse the queue in place by relinking; no element is created or released."""
        self._check_alive()
        if is_empty(self._head):
            return
        reverse_ring(self._head)

    def sort(self) -> None:
        """Sort the queue in non-decreasing order using merge sort."""
        self._check_alive()
        if is_empty(self._head) or self._head.next.next is self._head:
            return
        sort_ring(self._head, _sort_key)
        logger.debug("Sorted queue of %d elements", count_links(self._head))

    def check_invariant(self) -> int:
        """
        Verify forward/backward consistency of the whole ring.

        Returns:
            The number of elements

        Raises:
            ListInvariantError: If any link is inconsistent
        """
        self._check_alive()
        return check_ring(self._head)

    def __repr__(self) -> str:
        if self._destroyed:
            return "StringQueue(<destroyed>)"
        return f"StringQueue({self.values()!r})"
