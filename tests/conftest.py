"""
Shared fixtures for the address book tests.
"""

from pathlib import Path

import pytest

from src.database import init_contacts_table
from src.models import Contact


SAMPLE_XML = """<?xml version="1.0" encoding="utf-8"?>
<AddressBook>
  <Contact>
    <CustomerID>ALFKI</CustomerID>
    <CompanyName>Alfreds Futterkiste</CompanyName>
    <ContactName>Maria Anders</ContactName>
    <ContactTitle>Sales Representative</ContactTitle>
    <Address>Obere Str. 57</Address>
    <City>Berlin</City>
    <Email>maria.anders@alfreds.example</Email>
    <PostalCode>12209</PostalCode>
    <Country>Germany</Country>
    <Phone>030-0074321</Phone>
    <Fax>030-0076545</Fax>
  </Contact>
  <Contact>
    <CustomerID>GREAL</CustomerID>
    <CompanyName>Great Lakes Food Market</CompanyName>
    <ContactName>Howard Snyder</ContactName>
    <ContactTitle>Marketing Manager</ContactTitle>
    <Address>2732 Baker Blvd.</Address>
    <City>Eugene</City>
    <Email>howard.snyder@greatlakes.example</Email>
    <Region>OR</Region>
    <PostalCode>97403</PostalCode>
    <Country>USA</Country>
    <Phone>(503) 555-7555</Phone>
  </Contact>
</AddressBook>
"""


@pytest.fixture
def sample_xml_path(tmp_path) -> Path:
    """Write a two-contact address book to a temporary file."""
    path = tmp_path / "ab.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def sample_contact() -> Contact:
    return Contact(
        id="1",
        company_name="Test Co.",
        name="John Doe",
        title="Employee",
        address="123 Test St",
        city="Test City",
        email="johndoe@test.com",
        zip="12345",
        country="US",
        phone="1234567890",
        fax=None,
        region=None,
    )


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Path for a database file that does not exist yet."""
    return tmp_path / "test.sqlite"


@pytest.fixture
async def initialized_db(db_path) -> Path:
    """Database with an empty Contact table."""
    result = await init_contacts_table(db_path)
    assert result.ok
    return db_path
