"""The system catalog: table metadata and access to table storage."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from pedadb.errors import DatabaseError, InvalidInput
from pedadb.schema import Schema
from pedadb.tuples import Tuple

__all__ = ["TableInfo", "StorageApi", "Catalog"]


@dataclass
class TableInfo:
    """Metadata about a table."""

    id: int
    name: str
    schema: Schema


class StorageApi(ABC):
    """Interface a storage engine offers to the catalog and executors.

    Methods raise :class:`pedadb.errors.DatabaseError` subclasses on failure.
    """

    @abstractmethod
    def create_table(self, table_id: int, name: str) -> TableInfo:
        """Create a table with the given id and name."""

    @abstractmethod
    def get_tuple(self, table_id: int, rid: int) -> Tuple:
        """Fetch the tuple with record id ``rid`` from a table."""

    @abstractmethod
    def delete_tuple(self, table_id: int, rid: int) -> None:
        """Delete the tuple with record id ``rid`` from a table."""

    @abstractmethod
    def insert_tuple(self, table_id: int, tuple_: Tuple) -> int:
        """Insert a tuple into a table and return its new record id."""

    @abstractmethod
    def scan(self, table_id: int) -> Iterator[tuple[int, Tuple]]:
        """Iterate over ``(record id, tuple)`` pairs of a table in sequence."""


class Catalog:
    """Central registry for creating and looking up tables."""

    def __init__(self, storage: StorageApi) -> None:
        self.storage = storage
        self._tables: dict[int, TableInfo] = {}
        self._table_names: dict[str, int] = {}
        self._next_table_id = itertools.count()

    def create_table(self, name: str, schema: Schema) -> TableInfo:
        """Register a new table; table names must be unique."""
        if name in self._table_names:
            raise InvalidInput(f"Table names must be unique: {name!r} already exists")
        table_id = next(self._next_table_id)
        info = TableInfo(table_id, name, schema)
        self._table_names[name] = table_id
        self._tables[table_id] = info
        return info

    def table_with_id(self, table_id: int) -> TableInfo | None:
        """Metadata of the table with the given id, if any."""
        return self._tables.get(table_id)

    def table_with_name(self, name: str) -> TableInfo | None:
        """Metadata of the table with the given name, if any."""
        table_id = self._table_names.get(name)
        return None if table_id is None else self._tables.get(table_id)

    def table_iter(self, table_id: int) -> Iterator[tuple[int, Tuple]] | None:
        """A sequential scan over the table, or None if the storage cannot scan it."""
        try:
            return self.storage.scan(table_id)
        except DatabaseError:
            return None