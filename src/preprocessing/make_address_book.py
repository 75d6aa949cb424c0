"""
Map a parsed XML document into an AddressBook.

File: preprocessing/make_address_book.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import xml.etree.ElementTree as ET
from collections import Counter
from typing import Dict, List, Optional, Union

from ..models import CONTACT_FIELDS, AddressBook, Contact

log = logging.getLogger(__name__)

CONTACT_TAG = "Contact"


def _direct_child_text(element: ET.Element, tag: str) -> Optional[str]:
    """
    Text content of the first direct child tagged `tag`.

    Text content includes every descendant's text, so
    <Address>1 <b>Main</b> St</Address> gives "1 Main St".
    Returns None when no direct child has that tag.
    """
    for child in element:
        if child.tag == tag:
            return "".join(child.itertext())
    return None


def contact_from_element(element: ET.Element) -> Contact:
    """
    Build a Contact from one <Contact> element.

    Only direct children are looked at. Missing fields take the default from
    CONTACT_FIELDS: empty string for most, None for Region, PostalCode and Fax.

    Args:
        element: A <Contact> element

    Returns:
        Contact with every field populated or defaulted
    """
    values: Dict[str, Optional[str]] = {}
    for field in CONTACT_FIELDS:
        text = _direct_child_text(element, field.column)
        values[field.attribute] = text if text is not None else field.default
    return Contact(**values)


def make_address_book(document: Union[ET.ElementTree, ET.Element]) -> AddressBook:
    """
    Extract every <Contact> element in the document, in document order.

    Contact elements are matched at any depth (including the root itself);
    their fields are matched among direct children only.

    Args:
        document: Parsed document or element to search

    Returns:
        AddressBook holding one Contact per <Contact> element
    """
    contacts: List[Contact] = [contact_from_element(el) for el in document.iter(CONTACT_TAG)]

    root = document.getroot() if isinstance(document, ET.ElementTree) else document
    if root.tag.startswith("{"):
        # Tags under a default namespace read as {uri}Contact
        log.warning(f"Root element {root.tag} is namespaced; namespaced <Contact> elements are not read")

    # Empty and repeated ids collide on upsert; they are kept but reported.
    missing = sum(1 for c in contacts if not c.id)
    if missing:
        log.warning(f"{missing} contact(s) have no CustomerID")
    for contact_id, count in Counter(c.id for c in contacts if c.id).items():
        if count > 1:
            log.warning(f"CustomerID {contact_id!r} appears {count} times; later entries replace earlier ones in the database")

    log.info(f"Mapped {len(contacts)} contacts")
    return AddressBook(contacts=tuple(contacts))
