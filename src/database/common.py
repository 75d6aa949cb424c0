"""
Common database constants and utilities

File: database/common.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import sqlite3
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Generic, Optional, TypeVar, Union

import aiosqlite

from ..errors import StorageConnectionError, StorageError

log = logging.getLogger(__name__)

DATA_DIR = Path("data")
LOCAL_DB_PATH = DATA_DIR / "address_book.sqlite"

DbPath = Union[str, Path]
T = TypeVar("T")


@dataclass
class StorageResult(Generic[T]):
    """
    Outcome of one storage operation.

    A failed result means the operation did not happen; `error` says why.
    A successful result with an empty value means there was nothing to do.
    """

    operation: str
    value: Optional[T] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def failure(cls, operation: str, error: StorageError) -> "StorageResult[T]":
        log.error(f"{operation} failed: {error}")
        return cls(operation=operation, error=error)


@asynccontextmanager
async def connect(db_path: DbPath, operation: str) -> AsyncIterator[aiosqlite.Connection]:
    """
    Open a connection scoped to one operation and close it on every exit path.

    Raises:
        StorageConnectionError: If the database file cannot be opened
    """
    try:
        conn = await aiosqlite.connect(db_path)
    except (sqlite3.Error, OSError) as e:
        raise StorageConnectionError(str(db_path), operation, str(e)) from e

    try:
        yield conn
    finally:
        await conn.close()


__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "StorageResult",
    "connect",
]
