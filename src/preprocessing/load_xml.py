"""
Load an address book XML document from disk.

File: preprocessing/load_xml.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from ..errors import ParseError

log = logging.getLogger(__name__)


def load_xml(filepath: Union[str, Path]) -> ET.ElementTree:
    """
    Parse the whole document at `filepath` into an element tree.

    Args:
        filepath: Path to the XML document

    Returns:
        Parsed ElementTree

    Raises:
        ParseError: If the file is missing, unreadable or not well-formed
    """
    path = Path(filepath)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ParseError(str(path), e.strerror or str(e)) from e

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise ParseError(str(path), str(e)) from e

    log.debug(f"Parsed {len(data)} bytes from {path}")
    log.info(f"Loaded XML document {path} (root <{root.tag}>)")
    return ET.ElementTree(root)
