"""
File: database/__init__.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .common import DATA_DIR, LOCAL_DB_PATH, StorageResult
from .create_tables import init_contacts_table, add_column_to_contact_table
from .contacts import (
    upsert_contact,
    upsert_contacts,
    get_all_contacts,
    count_contacts,
)

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "StorageResult",
    "init_contacts_table",
    "add_column_to_contact_table",
    "upsert_contact",
    "upsert_contacts",
    "get_all_contacts",
    "count_contacts",
]
