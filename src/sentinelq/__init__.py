"""sentinelq - Sentinel-based circular doubly-linked queue of strings."""

from sentinelq.core import StringQueue
from sentinelq.element import Element, read_cstring, release_element
from sentinelq.errors import (
    ElementLinkedError,
    ElementReleasedError,
    ListInvariantError,
    QueueDestroyedError,
    SentinelQError,
)
from sentinelq.types import End

__version__ = "0.0.1"

__all__ = [
    "StringQueue",
    "Element",
    "read_cstring",
    "release_element",
    "SentinelQError",
    "QueueDestroyedError",
    "ElementReleasedError",
    "ElementLinkedError",
    "ListInvariantError",
    "End",
]
