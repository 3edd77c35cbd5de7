"""Queue elements: one owned string payload plus one embedded link."""

from sentinelq.errors import ElementLinkedError, ElementReleasedError
from sentinelq.linkedlist import Link


class Element:
    """
    A payload-bearing list node.

    The queue owns every element reachable from its sentinel. An element handed
    back by a remove operation belongs to the caller, who must release it
    exactly once.
    """

    __slots__ = ("_value", "link", "_released")

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Element value must be str, not {type(value).__name__}")
        self._value: str | None = value
        self.link: Link[Element] = Link(self)
        self._released = False

    @property
    def value(self) -> str:
        """The string payload."""
        if self._value is None:
            raise ElementReleasedError("Element was already released")
        return self._value

    @property
    def released(self) -> bool:
        """True once release() has run."""
        return self._released

    def release(self) -> None:
        """
        Drop the payload and retire the element.

        Raises:
            ElementReleasedError: If the element was already released
            ElementLinkedError: If the element is still linked into a queue
        """
        if self._released:
            raise ElementReleasedError("Element was already released")
        if self.link.is_linked():
            raise ElementLinkedError("Cannot release an element that is still in a queue")
        self._value = None
        self._released = True

    def copy_into(
        self,
        buffer: bytearray,
        bufsize: int | None = None,
        *,
        encoding: str = "utf-8",
    ) -> int:
        """
        Copy the payload into ``buffer`` as a NUL-terminated byte string.

        At most ``bufsize - 1`` encoded bytes are written, followed by NUL
        padding up to ``bufsize``. Longer payloads are truncated silently.
        Nothing at or past index ``bufsize`` is touched.

        Args:
            buffer: Caller-owned destination
            bufsize: Usable capacity (defaults to ``len(buffer)``)
            encoding: Codec used to turn the payload into bytes

        Returns:
            Number of payload bytes copied (excluding the terminator)

        Raises:
            ValueError: If bufsize exceeds the buffer length
        """
        if bufsize is None:
            bufsize = len(buffer)
        if bufsize > len(buffer):
            raise ValueError(f"bufsize {bufsize} exceeds buffer length {len(buffer)}")
        if bufsize <= 0:
            return 0
        data = self.value.encode(encoding)[: bufsize - 1]
        buffer[:bufsize] = data.ljust(bufsize, b"\0")
        return len(data)

    def __repr__(self) -> str:
        if self._released:
            return "<Element released>"
        return f"<Element {self._value!r}>"


def release_element(element: Element) -> None:
    """Release an element previously obtained from a remove operation."""
    element.release()


def read_cstring(buffer: bytes | bytearray, *, encoding: str = "utf-8") -> str:
    """Decode ``buffer`` up to its first NUL byte."""
    end = buffer.find(b"\0")
    if end == -1:
        end = len(buffer)
    return bytes(buffer[:end]).decode(encoding, errors="replace")
