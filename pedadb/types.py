"""Data types that a field value can have."""

from __future__ import annotations

from enum import Enum

__all__ = ["Type"]

# Variable-length values are addressed by an offset stored as a 64-bit unsigned integer.
_OFFSET_SIZE = 8


class Type(Enum):
    """Every data type a :class:`pedadb.field.Field` can hold."""

    NULL = "Null"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOAT = "Float"
    VARCHAR = "Varchar"

    def size(self) -> int:
        """Byte size of a value of this type.

        For variable-length types this is the size of the value's offset into
        the tuple payload rather than the size of the value itself.
        """
        return _SIZES[self]

    def __str__(self) -> str:
        return self.value


_SIZES = {
    Type.NULL: 0,
    Type.BOOLEAN: 1,
    Type.INTEGER: 4,
    Type.FLOAT: 8,
    Type.VARCHAR: _OFFSET_SIZE,
}