"""Raw tuple data as stored by a table."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Tuple"]


@dataclass(frozen=True)
class Tuple:
    """An immutable payload of serialized tuple bytes."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def tuple_size(self) -> int:
        """Number of bytes in the tuple's data."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)