"""Column definitions within a schema."""

from __future__ import annotations

from dataclasses import dataclass

from pedadb.types import Type

__all__ = ["Column"]


@dataclass(frozen=True)
class Column:
    """A named, typed column."""

    name: str
    field_type: Type

    def size(self) -> int | None:
        """Fixed byte size of this column's data, or None for variable-length data."""
        if self.field_type is Type.VARCHAR:
            return None
        return self.field_type.size()

    def __str__(self) -> str:
        size = self.size()
        length = "VARIABLE" if size is None else str(size)
        return f"Column[ {self.name}, {self.field_type}, Length: {length} bytes ]"