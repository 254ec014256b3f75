import math

import pytest

from pedadb.column import Column
from pedadb.errors import InvalidData
from pedadb.field import Field
from pedadb.schema import Schema
from pedadb.serde import deserialize, serialize
from pedadb.types import Type


def columns_from(types):
    return [Column(str(i), ty) for i, ty in enumerate(types)]


def test_serde():
    schema = Schema(
        columns_from([Type.INTEGER, Type.NULL, Type.BOOLEAN, Type.VARCHAR, Type.FLOAT])
    )
    row = [
        Field.of(-34),
        Field.null(),
        Field.of(False),
        Field.of("hello"),
        Field.of(-math.inf),
    ]
    assert deserialize(serialize(row), schema) == row


def test_worked_layout():
    row = [Field.of(1), Field.of("hello"), Field.of(3)]
    expected = (
        bytes([1, 0, 0, 0])
        + bytes([16, 0, 0, 0, 0, 0, 0, 0])
        + bytes([3, 0, 0, 0])
        + b"hello"
    )
    assert serialize(row) == expected


def test_multiple_varchars_round_trip():
    schema = Schema(
        columns_from([Type.VARCHAR, Type.INTEGER, Type.VARCHAR, Type.VARCHAR])
    )
    row = [Field.of("All love 🛸💕🕺"), Field.of(7), Field.of(""), Field.of("1 of 1")]
    assert deserialize(serialize(row), schema) == row


def test_empty_row():
    assert serialize([]) == b""
    assert deserialize(b"", Schema()) == []


def test_nan_round_trip():
    schema = Schema(columns_from([Type.FLOAT]))
    row = [Field.of(math.nan)]
    assert deserialize(serialize(row), schema) == row


def test_truncated_fixed_field():
    schema = Schema(columns_from([Type.INTEGER, Type.FLOAT]))
    data = serialize([Field.of(1), Field.of(2.0)])
    with pytest.raises(InvalidData):
        deserialize(data[:-1], schema)


def test_truncated_offset():
    schema = Schema(columns_from([Type.VARCHAR]))
    data = serialize([Field.of("hello")])
    with pytest.raises(InvalidData):
        deserialize(data[:4], schema)


def test_offset_past_end():
    schema = Schema(columns_from([Type.VARCHAR]))
    data = bytes([200, 0, 0, 0, 0, 0, 0, 0])
    with pytest.raises(InvalidData):
        deserialize(data, schema)