# pedadb

The catalog layer of a small database engine built for teaching. It provides
column types, typed field values, schemas, a compact row serialization format
and a system catalog of tables.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

- `pedadb.types.Type` is an enum of the data types `NULL`, `BOOLEAN`,
  `INTEGER`, `FLOAT` and `VARCHAR`. `Type.size()` returns the byte size of
  a value of that type: 0, 1, 4 and 8 for the fixed-size types. For
  `VARCHAR` it returns 8, the size of the value's offset within a
  serialized row.
- `pedadb.column.Column` is a frozen dataclass with a `name` and a
  `field_type`. `Column.size()` returns `None` for `VARCHAR` columns.
- `pedadb.field.Field` holds one SQL value together with its `field_type`.
  - Build one with `Field.of(value)`, which accepts `None`, `bool`, `int`,
    `float` or `str`, or with `Field.null()`. Integers must fit in 32 bits.
  - Equality works by type and value. Two NaN floats are equal.
  - Ordering puts NULL before everything and puts NaN before every other
    float. Ordering two non-NULL fields of different types raises
    `TypeError`.
  - `+`, `-`, `*`, `/` and `%` between numeric fields give a `Field`.
    Integer operations truncate toward zero, and they give NULL on
    overflow or division by zero. Mixing an integer with a float gives a
    float. Any non-numeric operand gives NULL.
  - `to_bytes()` and `Field.from_bytes(data, field_type)` use
    little-endian encodings and UTF-8 for strings. `from_bytes` raises
    `InvalidData` when a fixed-size type gets the wrong number of bytes or
    a string is not valid UTF-8.
  - `str(field)` renders `NULL`, `TRUE`/`FALSE`, numbers, and strings with
    escapes for non-printable and non-ASCII characters.
- `pedadb.schema.Schema` is an ordered list of columns. Its `size`
  attribute is the byte width of the fixed-size columns. It provides
  `column_at()`, which raises `OutOfBounds`, `column_index_of()`, which
  gives the first match or `None`, `num_columns()` and `append()`. It also
  supports `len()` and iteration.
- `pedadb.serde` provides two functions:
  - `serialize(row)` packs a list of fields into bytes. Fixed-size values
    and 8-byte little-endian offsets for varchars come first, and the
    varchar payloads follow.
  - `deserialize(data, schema)` reads those bytes back into a list of
    fields. It raises `InvalidData` on truncated or inconsistent input.
- `pedadb.tuples.Tuple` is an immutable wrapper around raw row bytes, with
  `tuple_size()`.
- `pedadb.catalog` has three parts:
  - `Catalog` registers tables as `TableInfo(id, name, schema)` entries.
    Ids are assigned from 0 upward, and lookup works by id or by name.
  - `create_table` raises `InvalidInput` for a duplicate name.
  - `table_iter(table_id)` returns the storage engine's scan, or `None` if
    the scan raised a `DatabaseError`.
  - `StorageApi` is the abstract interface that a storage engine
    implements.
- `pedadb.errors` defines `DatabaseError` and its subclasses:
  `InvalidData`, `InvalidInput`, `StorageIOError`, `ArithmeticOverflow`,
  `OutOfBounds`, `BufferPoolError` and `PagePinned`.

## Example

```python
from pedadb.column import Column
from pedadb.field import Field
from pedadb.schema import Schema
from pedadb.serde import deserialize, serialize
from pedadb.types import Type

schema = Schema([Column("id", Type.INTEGER), Column("name", Type.VARCHAR)])
row = [Field.of(1), Field.of("hello")]

data = serialize(row)
assert deserialize(data, schema) == row
```

## What this package does not do

The package contains no storage engine. `StorageApi` is only an interface,
and nothing in the package stores tuples on disk or in memory. It has no
query parser, no executor and no command-line program or server. It is a
library of building blocks for those parts.