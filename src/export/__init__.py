"""
JSON export for address books.

File: export/__init__.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .json_export import JSON_INDENT, contacts_to_json, write_json

__all__ = [
    "JSON_INDENT",
    "contacts_to_json",
    "write_json",
]
