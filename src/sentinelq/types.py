"""Type definitions for sentinelq."""

from typing import Literal, TypeAlias, TypeVar

# Type of the object that embeds a link
T = TypeVar("T")

# Which end of the queue an insert or remove works on
End: TypeAlias = Literal["head", "tail"]
