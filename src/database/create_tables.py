"""
Schema creation and widening for the Contact table.

File: database/create_tables.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import sqlite3

from ..errors import SchemaError, StorageConnectionError
from ..models import CONTACT_FIELDS, CONTACT_TABLE, PRIMARY_KEY_COLUMN
from .common import LOCAL_DB_PATH, DbPath, StorageResult, connect

log = logging.getLogger(__name__)


def _contact_table_ddl() -> str:
    columns = ",\n".join(
        f"    {f.column} VARCHAR(255){' PRIMARY KEY' if f.column == PRIMARY_KEY_COLUMN else ''}"
        for f in CONTACT_FIELDS
    )
    return f"CREATE TABLE IF NOT EXISTS {CONTACT_TABLE} (\n{columns}\n)"


async def init_contacts_table(db_path: DbPath = LOCAL_DB_PATH) -> StorageResult[None]:
    """
    Create the Contact table if it does not exist.

    Safe to call repeatedly; existing rows are untouched.

    Args:
        db_path: SQLite database file

    Returns:
        StorageResult, failed if the database could not be opened

    Raises:
        SchemaError: If the engine rejects the statement
    """
    operation = "init_contacts_table"
    try:
        async with connect(db_path, operation) as conn:
            await conn.execute(_contact_table_ddl())
            await conn.commit()
    except StorageConnectionError as e:
        return StorageResult.failure(operation, e)
    except sqlite3.Error as e:
        raise SchemaError(f"{operation}: {e}", {"db_path": str(db_path)}) from e

    log.info(f"Contact table ready at {db_path}")
    return StorageResult(operation=operation)


async def add_column_to_contact_table(
    column_name: str,
    column_type: str,
    db_path: DbPath = LOCAL_DB_PATH,
) -> StorageResult[None]:
    """
    Add one column to the Contact table.

    Both arguments go into the statement as-is. Only pass operator-controlled
    values here, never user input.

    Args:
        column_name: Name of the new column
        column_type: SQL type declaration, e.g. "TEXT" or "VARCHAR(64)"
        db_path: SQLite database file

    Returns:
        StorageResult, failed if the database could not be opened

    Raises:
        SchemaError: If the column already exists or the declaration is invalid
    """
    operation = "add_column_to_contact_table"
    try:
        async with connect(db_path, operation) as conn:
            await conn.execute(f"ALTER TABLE {CONTACT_TABLE} ADD COLUMN {column_name} {column_type}")
            await conn.commit()
    except StorageConnectionError as e:
        return StorageResult.failure(operation, e)
    except sqlite3.Error as e:
        raise SchemaError(
            f"{operation}: {e}",
            {"column_name": column_name, "column_type": column_type},
        ) from e

    log.info(f"Added column {column_name} {column_type} to {CONTACT_TABLE}")
    return StorageResult(operation=operation)
