"""Merge sort over a forward-only chain detached from a ring.

While sorting, elements live in a :class:`Chain` of cells rather than in the
ring's own link fields. The ring is reset to empty on detach and rebuilt in a
single forward pass on relink.
"""

from collections.abc import Callable, Iterator
from typing import Generic

from sentinelq.linkedlist import Link, insert_before
from sentinelq.types import T


class Chain(Generic[T]):
    """One cell of a singly-linked, non-circular chain of links."""

    __slots__ = ("link", "next")

    def __init__(self, link: Link[T], next: "Chain[T] | None" = None) -> None:
        self.link = link
        self.next = next

    def __iter__(self) -> Iterator[Link[T]]:
        cell: Chain[T] | None = self
        while cell is not None:
            yield cell.link
            cell = cell.next


def detach_chain(sentinel: Link[T]) -> Chain[T] | None:
    """Move every link of the ring into a chain, leaving the sentinel empty."""
    head: Chain[T] | None = None
    link = sentinel.prev
    # Build back to front so each new cell becomes the chain head
    while link is not sentinel:
        previous = link.prev
        head = Chain(link, head)
        link.prev = link
        link.next = link
        link = previous
    sentinel.prev = sentinel
    sentinel.next = sentinel
    return head


def relink_chain(sentinel: Link[T], chain: Chain[T] | None) -> None:
    """Append every link of ``chain`` to the ring, rebuilding backward links."""
    for link in chain or ():
        insert_before(link, sentinel)


def split(chain: Chain[T]) -> tuple[Chain[T], Chain[T] | None]:
    """Cut ``chain`` at its midpoint using slow/fast pointers."""
    slow = chain
    fast = chain.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    rest = slow.next
    slow.next = None
    return chain, rest


def merge(
    left: Chain[T] | None,
    right: Chain[T] | None,
    key: Callable[[Link[T]], str],
) -> Chain[T] | None:
    """Merge two sorted chains. Ties are taken from ``left``."""
    if left is None:
        return right
    if right is None:
        return left

    if key(left.link) <= key(right.link):
        head, left = left, left.next
    else:
        head, right = right, right.next
    tail = head

    while left is not None and right is not None:
        if key(left.link) <= key(right.link):
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next

    tail.next = left if left is not None else right
    return head


def merge_sort(
    chain: Chain[T] | None,
    key: Callable[[Link[T]], str],
) -> Chain[T] | None:
    """Sort ``chain`` in non-decreasing ``key`` order."""
    if chain is None or chain.next is None:
        return chain
    left, right = split(chain)
    return merge(merge_sort(left, key), merge_sort(right, key), key)


def sort_ring(sentinel: Link[T], key: Callable[[Link[T]], str]) -> None:
    """Sort the ring rooted at ``sentinel`` in place."""
    if sentinel.next is sentinel or sentinel.next.next is sentinel:
        return
    relink_chain(sentinel, merge_sort(detach_chain(sentinel), key))
