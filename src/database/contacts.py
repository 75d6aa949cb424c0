"""
Read and write Contact rows.

File: database/contacts.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import sqlite3
from typing import Iterable, List

from pydantic import ValidationError

from ..errors import SchemaError, StorageConnectionError
from ..models import CONTACT_FIELDS, CONTACT_TABLE, Contact
from .common import LOCAL_DB_PATH, DbPath, StorageResult, connect

log = logging.getLogger(__name__)

_COLUMNS = ", ".join(f.column for f in CONTACT_FIELDS)
_PLACEHOLDERS = ", ".join("?" * len(CONTACT_FIELDS))
UPSERT_SQL = f"INSERT OR REPLACE INTO {CONTACT_TABLE} ({_COLUMNS}) VALUES ({_PLACEHOLDERS})"


async def upsert_contact(contact: Contact, db_path: DbPath = LOCAL_DB_PATH) -> StorageResult[int]:
    """
    Insert a contact, replacing any existing row with the same CustomerID.

    Every column is overwritten; nothing from the old row survives.

    Args:
        contact: Contact to write
        db_path: SQLite database file

    Returns:
        StorageResult holding 1 on success, failed if the database could not be opened

    Raises:
        SchemaError: If the engine rejects the write (e.g. the table is missing)
    """
    return await upsert_contacts([contact], db_path, operation="upsert_contact")


async def upsert_contacts(
    contacts: Iterable[Contact],
    db_path: DbPath = LOCAL_DB_PATH,
    operation: str = "upsert_contacts",
) -> StorageResult[int]:
    """
    Replace-write several contacts in one transaction.

    Either all rows are written or none are.

    Args:
        contacts: Contacts to write, in order (a later duplicate id wins)
        db_path: SQLite database file

    Returns:
        StorageResult holding the number of contacts written
    """
    rows = [c.to_db_row() for c in contacts]
    if not rows:
        return StorageResult(operation=operation, value=0)

    try:
        async with connect(db_path, operation) as conn:
            await conn.executemany(UPSERT_SQL, rows)
            await conn.commit()
    except StorageConnectionError as e:
        return StorageResult.failure(operation, e)
    except sqlite3.Error as e:
        raise SchemaError(f"{operation}: {e}", {"db_path": str(db_path), "rows": len(rows)}) from e

    log.debug(f"Upserted {len(rows)} contacts into {db_path}")
    return StorageResult(operation=operation, value=len(rows))


async def get_all_contacts(db_path: DbPath = LOCAL_DB_PATH) -> StorageResult[List[Contact]]:
    """
    Fetch every stored contact.

    Rows come back in whatever order SQLite returns them. Columns added with
    add_column_to_contact_table are ignored.

    Args:
        db_path: SQLite database file

    Returns:
        StorageResult holding a list of Contact objects

    Raises:
        SchemaError: If the table is missing or a row has no CustomerID
    """
    operation = "get_all_contacts"
    contacts: List[Contact] = []
    try:
        async with connect(db_path, operation) as conn:
            async with conn.execute(f"SELECT * FROM {CONTACT_TABLE}") as cursor:
                columns = [description[0] for description in cursor.description]
                async for row in cursor:
                    row_dict = dict(zip(columns, row))
                    try:
                        contacts.append(Contact.from_db_dict(row_dict))
                    except ValidationError as e:
                        raise SchemaError(
                            f"{operation}: row cannot be read as a Contact: {e}",
                            {"db_path": str(db_path), "row": row_dict},
                        ) from e
    except StorageConnectionError as e:
        return StorageResult.failure(operation, e)
    except sqlite3.Error as e:
        raise SchemaError(f"{operation}: {e}", {"db_path": str(db_path)}) from e

    return StorageResult(operation=operation, value=contacts)


async def count_contacts(db_path: DbPath = LOCAL_DB_PATH) -> StorageResult[int]:
    """Number of rows in the Contact table."""
    operation = "count_contacts"
    try:
        async with connect(db_path, operation) as conn:
            async with conn.execute(f"SELECT COUNT(*) FROM {CONTACT_TABLE}") as cursor:
                row = await cursor.fetchone()
    except StorageConnectionError as e:
        return StorageResult.failure(operation, e)
    except sqlite3.Error as e:
        raise SchemaError(f"{operation}: {e}", {"db_path": str(db_path)}) from e

    return StorageResult(operation=operation, value=row[0] if row else 0)
