"""Exception classes for sentinelq."""


class SentinelQError(Exception):
    """Base exception for all sentinelq errors."""


class QueueDestroyedError(SentinelQError):
    """Raised when operations are attempted on a destroyed queue."""


class ElementReleasedError(SentinelQError):
    """Raised when an element is used or released after it was already released."""


class ElementLinkedError(SentinelQError):
    """Raised when releasing an element that is still linked into a queue."""


class ListInvariantError(SentinelQError):
    """Raised when a ring fails its forward/backward consistency check."""
