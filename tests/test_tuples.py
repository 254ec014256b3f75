from pedadb.column import Column
from pedadb.field import Field
from pedadb.schema import Schema
from pedadb.serde import deserialize, serialize
from pedadb.tuples import Tuple
from pedadb.types import Type


def test_tuple_size_matches_data():
    payload = b"hello world"
    tup = Tuple(payload)
    assert tup.tuple_size() == len(payload)
    assert len(tup) == len(payload)


def test_empty_tuple():
    assert Tuple(b"").tuple_size() == 0


def test_data_is_copied_to_bytes():
    buffer = bytearray(b"ab")
    tup = Tuple(buffer)
    buffer[0] = ord("z")
    assert tup.data == b"ab"


def test_serialized_row_round_trip():
    schema = Schema([Column("id", Type.INTEGER), Column("name", Type.VARCHAR)])
    row = [Field.of(5), Field.of("hello")]
    tup = Tuple(serialize(row))
    assert tup.tuple_size() == schema.size + Type.VARCHAR.size() + len("hello")
    assert deserialize(tup.data, schema) == row


def test_equality_by_data():
    assert Tuple(b"abc") == Tuple(bytearray(b"abc"))
    assert Tuple(b"abc") != Tuple(b"abd")