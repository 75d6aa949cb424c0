"""
Shared data models for the address book pipeline.
"""

from .contact import (
    CONTACT_FIELDS,
    CONTACT_TABLE,
    PRIMARY_KEY_COLUMN,
    AddressBook,
    Contact,
    ContactField,
)

__all__ = [
    "CONTACT_FIELDS",
    "CONTACT_TABLE",
    "PRIMARY_KEY_COLUMN",
    "AddressBook",
    "Contact",
    "ContactField",
]
