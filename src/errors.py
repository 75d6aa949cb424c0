"""
Exceptions raised by the address book pipeline.

File: errors.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Any, Dict, Optional


class AddressBookError(Exception):
    """Base exception for all address book errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ParseError(AddressBookError):
    """The input document is missing, unreadable or not well-formed XML."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not parse '{path}': {reason}", {"path": path})


class StorageError(AddressBookError):
    """Base exception for database operations."""

    pass


class StorageConnectionError(StorageError):
    """The database file could not be opened."""

    def __init__(self, db_path: str, operation: str, reason: str) -> None:
        super().__init__(
            f"{operation}: could not connect to '{db_path}': {reason}",
            {"db_path": db_path, "operation": operation},
        )
        self.operation = operation


class SchemaError(StorageError):
    """The database rejected a statement (duplicate column, bad type, missing table)."""

    pass


__all__ = [
    "AddressBookError",
    "ParseError",
    "StorageError",
    "StorageConnectionError",
    "SchemaError",
]
