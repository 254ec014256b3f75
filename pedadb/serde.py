"""Conversion between rows of fields and their serialized byte form.

A row is laid out as a fixed-size section followed by the payload of its
variable-length fields. Fixed-size fields are written in place; each
variable-length field is represented in the fixed section by its byte offset
into the whole payload, stored as a little-endian unsigned 64-bit integer.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable

from pedadb.errors import InvalidData
from pedadb.field import Field
from pedadb.schema import Schema
from pedadb.types import Type

__all__ = ["serialize", "deserialize"]

_OFFSET = struct.Struct("<Q")


def serialize(row: Iterable[Field]) -> bytes:
    """Encode a row of fields into bytes."""
    row = list(row)
    fixed_size = sum(field.field_type.size() for field in row)
    fixed = bytearray()
    variable = bytearray()
    for field in row:
        if field.field_type is Type.VARCHAR:
            fixed += _OFFSET.pack(fixed_size + len(variable))
            variable += field.to_bytes()
        else:
            fixed += field.to_bytes()
    return bytes(fixed + variable)


def deserialize(data: bytes, schema: Schema) -> list[Field]:
    """Decode bytes produced by :func:`serialize` according to ``schema``."""
    data = bytes(data)
    fields: list[Field] = []
    varchar_slots: list[tuple[int, int]] = []
    position = 0

    for column in schema.columns:
        field_type = column.field_type
        if field_type is Type.VARCHAR:
            chunk = data[position : position + _OFFSET.size]
            if len(chunk) != _OFFSET.size:
                raise InvalidData("payload ends inside a variable-length offset")
            (offset,) = _OFFSET.unpack(chunk)
            varchar_slots.append((len(fields), offset))
            fields.append(Field(Type.VARCHAR, ""))
            position += _OFFSET.size
        else:
            size = field_type.size()
            fields.append(Field.from_bytes(data[position : position + size], field_type))
            position += size

    ends = [offset for _, offset in varchar_slots[1:]] + [len(data)]
    for (index, start), end in zip(varchar_slots, ends):
        if not start <= end <= len(data):
            raise InvalidData(f"invalid variable-length field bounds {start}..{end}")
        fields[index] = Field.from_bytes(data[start:end], Type.VARCHAR)

    return fields