"""
Serialize an AddressBook to JSON.

File: export/json_export.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..models import AddressBook

log = logging.getLogger(__name__)

JSON_INDENT = 4


def contacts_to_json(address_book: AddressBook) -> Dict[str, List[Dict[str, Any]]]:
    """
    Build the JSON document for an address book.

    Shape: {"contacts": [{"id": ..., "companyName": ..., ..., "fax": ...}, ...]}
    with keys in canonical field order and None kept as null.

    Args:
        address_book: Contacts to serialize

    Returns:
        Dictionary ready for json.dump
    """
    return {"contacts": [contact.to_json_dict() for contact in address_book.contacts]}


def write_json(document: Dict[str, Any], output_path: Union[str, Path]) -> int:
    """
    Write a JSON document, replacing whatever is at `output_path`.

    Args:
        document: Output of contacts_to_json
        output_path: Path to output file

    Returns:
        Number of contacts written
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=JSON_INDENT, ensure_ascii=False)

    count = len(document.get("contacts", []))
    log.info(f"Exported {count} contacts to {path}")
    return count
