"""Intrusive circular doubly-linked list primitives around a sentinel link.

Every function here leaves the ring consistent when it returns: for each link
``L`` reachable from the sentinel, ``L.next.prev is L`` and ``L.prev.next is L``.
The queue engine composes these instead of rewriting pointers inline.
"""

from collections.abc import Iterator
from typing import Generic

from sentinelq.errors import ListInvariantError
from sentinelq.types import T


class Link(Generic[T]):
    """A forward/backward link pair, optionally embedded in an owning object."""

    __slots__ = ("owner", "prev", "next")

    def __init__(self, owner: T | None = None) -> None:
        # A fresh link is a valid one-node ring: an empty list when used as a sentinel
        self.owner = owner
        self.prev: Link[T] = self
        self.next: Link[T] = self

    def is_linked(self) -> bool:
        """Return True if the link currently has neighbours."""
        return self.next is not self

    def __repr__(self) -> str:
        kind = "sentinel" if self.owner is None else repr(self.owner)
        return f"<Link {kind}>"


def insert_between(link: Link[T], prev: Link[T], next: Link[T]) -> None:
    """Link ``link`` between two adjacent links. O(1)."""
    link.prev = prev
    link.next = next
    prev.next = link
    next.prev = link


def insert_after(link: Link[T], at: Link[T]) -> None:
    """Link ``link`` immediately after ``at``. O(1)."""
    insert_between(link, at, at.next)


def insert_before(link: Link[T], at: Link[T]) -> None:
    """Link ``link`` immediately before ``at``. O(1)."""
    insert_between(link, at.prev, at)


def unlink(link: Link[T]) -> None:
    """Remove ``link`` from its ring and leave it self-linked. O(1)."""
    link.prev.next = link.next
    link.next.prev = link.prev
    link.prev = link
    link.next = link


def swap_adjacent(first: Link[T], second: Link[T]) -> None:
    """Exchange the positions of ``first`` and its successor ``second``. O(1)."""
    before = first.prev
    after = second.next
    before.next = second
    second.prev = before
    second.next = first
    first.prev = second
    first.next = after
    after.prev = first


def reverse_ring(sentinel: Link[T]) -> None:
    """Swap the direction of every link in the ring, the sentinel included. O(n)."""
    link = sentinel
    while True:
        link.prev, link.next = link.next, link.prev
        # The old forward neighbour is now reachable through prev
        link = link.prev
        if link is sentinel:
            break


def is_empty(sentinel: Link[T]) -> bool:
    """Return True if the sentinel links only to itself."""
    return sentinel.next is sentinel


def iter_links(sentinel: Link[T]) -> Iterator[Link[T]]:
    """Iterate the links after ``sentinel`` in forward order.

    The successor is read before each link is yielded, so the caller may unlink
    (and release) the current link while iterating.
    """
    link = sentinel.next
    while link is not sentinel:
        following = link.next
        yield link
        link = following


def count_links(sentinel: Link[T]) -> int:
    """Count the links in the ring, excluding the sentinel. O(n)."""
    length = 0
    link = sentinel.next
    while link is not sentinel:
        length += 1
        link = link.next
    return length


def owner_of(link: Link[T]) -> T:
    """Resolve the object that embeds ``link``."""
    if link.owner is None:
        raise ListInvariantError("Sentinel link has no owning element")
    return link.owner


def check_ring(sentinel: Link[T]) -> int:
    """
    Verify the ring rooted at ``sentinel`` and return its element count.

    Raises:
        ListInvariantError: If any link disagrees with a neighbour, or the
            forward walk does not come back to the sentinel.
    """
    seen: set[int] = {id(sentinel)}
    length = 0
    link = sentinel
    while True:
        if link.next.prev is not link:
            raise ListInvariantError(f"{link!r}.next.prev does not point back")
        if link.prev.next is not link:
            raise ListInvariantError(f"{link!r}.prev.next does not point back")
        link = link.next
        if link is sentinel:
            return length
        if id(link) in seen:
            raise ListInvariantError("Forward walk cycles without reaching the sentinel")
        seen.add(id(link))
        length += 1
