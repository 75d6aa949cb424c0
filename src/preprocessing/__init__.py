"""
Preprocessing: load the address book XML and map it into models.

File: preprocessing/__init__.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .load_xml import load_xml
from .make_address_book import CONTACT_TAG, contact_from_element, make_address_book

__all__ = [
    "CONTACT_TAG",
    "load_xml",
    "contact_from_element",
    "make_address_book",
]
