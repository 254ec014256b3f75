"""Exceptions raised for recoverable database errors."""

from __future__ import annotations

__all__ = [
    "DatabaseError",
    "InvalidData",
    "InvalidInput",
    "StorageIOError",
    "ArithmeticOverflow",
    "OutOfBounds",
    "BufferPoolError",
    "PagePinned",
]


class DatabaseError(Exception):
    """Base class for all recoverable database errors.

    Two errors compare equal when they are of the same class and carry the same
    arguments.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatabaseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class _MessageError(DatabaseError):
    """An error that carries a free-form message after a fixed prefix."""

    prefix = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class InvalidData(_MessageError, ValueError):
    """Invalid data, such as a decoding error or an unexpected internal value."""

    prefix = "Invalid data"


class InvalidInput(_MessageError, ValueError):
    """Invalid user input, such as a parser or query error."""

    prefix = "Invalid input"


class StorageIOError(_MessageError):
    """An I/O error reported by the storage layer."""

    prefix = "IO error"


class BufferPoolError(_MessageError):
    """An error raised by the buffer pool."""

    prefix = "Buffer error"


class ArithmeticOverflow(DatabaseError, OverflowError):
    """A numerical error such as an integer overflow."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Arithmetic overflow"


class OutOfBounds(DatabaseError, IndexError):
    """An out-of-bounds access."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Out of bounds"


class PagePinned(DatabaseError):
    """A page cannot be deleted because it is still pinned."""

    def __init__(self, page_id: int) -> None:
        super().__init__(page_id)
        self.page_id = page_id

    def __str__(self) -> str:
        return f"Cannot delete page {self.page_id}: Page is still pinned"