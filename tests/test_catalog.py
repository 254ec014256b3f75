import pytest

from pedadb.catalog import Catalog, StorageApi, TableInfo
from pedadb.column import Column
from pedadb.errors import InvalidInput, OutOfBounds
from pedadb.field import Field
from pedadb.schema import Schema
from pedadb.serde import deserialize, serialize
from pedadb.tuples import Tuple
from pedadb.types import Type


class MemoryStorage(StorageApi):
    def __init__(self):
        self.tables = {}

    def create_table(self, table_id, name):
        self.tables[table_id] = {}
        return TableInfo(table_id, name, Schema())

    def _table(self, table_id):
        if table_id not in self.tables:
            raise InvalidInput(f"no table {table_id}")
        return self.tables[table_id]

    def get_tuple(self, table_id, rid):
        try:
            return self._table(table_id)[rid]
        except KeyError:
            raise OutOfBounds() from None

    def delete_tuple(self, table_id, rid):
        self._table(table_id).pop(rid)

    def insert_tuple(self, table_id, tuple_):
        table = self._table(table_id)
        rid = len(table)
        table[rid] = tuple_
        return rid

    def scan(self, table_id):
        return iter(list(self._table(table_id).items()))


def make_schema():
    return Schema([Column("id", Type.INTEGER), Column("name", Type.VARCHAR)])


def test_create_table_assigns_sequential_ids():
    catalog = Catalog(MemoryStorage())
    first = catalog.create_table("a", make_schema())
    second = catalog.create_table("b", make_schema())
    assert first.id == 0
    assert second.id == first.id + 1
    assert first.name == "a"
    assert first.schema == make_schema()


def test_duplicate_table_name_rejected():
    catalog = Catalog(MemoryStorage())
    catalog.create_table("a", make_schema())
    with pytest.raises(InvalidInput):
        catalog.create_table("a", Schema())


def test_lookup_by_id_and_name():
    catalog = Catalog(MemoryStorage())
    info = catalog.create_table("users", make_schema())
    assert catalog.table_with_id(info.id) is info
    assert catalog.table_with_name("users") is info
    assert catalog.table_with_id(info.id + 1) is None
    assert catalog.table_with_name("missing") is None


def test_table_iter_scans_storage():
    storage = MemoryStorage()
    catalog = Catalog(storage)
    schema = make_schema()
    info = catalog.create_table("users", schema)
    storage.create_table(info.id, info.name)

    rows = [[Field.of(1), Field.of("hello")], [Field.of(2), Field.of("world")]]
    rids = [storage.insert_tuple(info.id, Tuple(serialize(row))) for row in rows]

    scanned = list(catalog.table_iter(info.id))
    assert [rid for rid, _ in scanned] == rids
    assert [deserialize(t.data, schema) for _, t in scanned] == rows


def test_table_iter_missing_table_returns_none():
    catalog = Catalog(MemoryStorage())
    assert catalog.table_iter(42) is None


def test_storage_api_is_abstract():
    with pytest.raises(TypeError):
        StorageApi()