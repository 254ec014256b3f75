"""Schemas describing the columns of a tuple."""

from __future__ import annotations

from collections.abc import Iterable

from pedadb.column import Column
from pedadb.errors import OutOfBounds

__all__ = ["Schema"]


class Schema:
    """The ordered column definitions of a tuple.

    ``size`` is the fixed-length byte size of the tuple: the sum of the sizes
    of the fixed-size columns. Variable-length columns do not contribute.
    """

    __slots__ = ("columns", "size")

    def __init__(self, columns: Iterable[Column] = ()) -> None:
        self.columns: list[Column] = list(columns)
        self.size: int = sum(
            size for size in (column.size() for column in self.columns) if size is not None
        )

    def append(self, other: Schema) -> None:
        """Add all columns of ``other`` to the end of this schema."""
        self.size += other.size
        self.columns.extend(other.columns)

    def column_at(self, index: int) -> Column:
        """The column at ``index``; raises OutOfBounds if there is none."""
        if not 0 <= index < len(self.columns):
            raise OutOfBounds()
        return self.columns[index]

    def column_index_of(self, name: str) -> int | None:
        """Index of the first column called ``name``, or None if there is none."""
        return next(
            (index for index, column in enumerate(self.columns) if column.name == name),
            None,
        )

    def num_columns(self) -> int:
        """Number of columns in the schema."""
        return len(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.columns == other.columns and self.size == other.size

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Schema({self.columns!r})"

    def __str__(self) -> str:
        columns = ",".join(str(column) for column in self.columns)
        return (
            f"Schema[ NumColumns: {self.num_columns()}, FixedSize: {self.size} ]"
            f" :: ( {columns} )"
        )