"""Types, fields, schemas, row serialization and a table catalog for a teaching database."""

__version__ = "0.1.0"