"""
Contact and address book models.

File: models/contact.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ContactField(NamedTuple):
    """How one contact attribute is named in each representation."""

    attribute: str
    json_key: str
    column: str  # Also the XML tag
    default: Optional[str]


# Canonical order; JSON keys and table columns follow it.
# Fields defaulting to None are the ones the source schema treats as optional.
CONTACT_FIELDS: Tuple[ContactField, ...] = (
    ContactField("id", "id", "CustomerID", ""),
    ContactField("company_name", "companyName", "CompanyName", ""),
    ContactField("name", "name", "ContactName", ""),
    ContactField("title", "title", "ContactTitle", ""),
    ContactField("address", "address", "Address", ""),
    ContactField("city", "city", "City", ""),
    ContactField("email", "email", "Email", ""),
    ContactField("region", "region", "Region", None),
    ContactField("zip", "zip", "PostalCode", None),
    ContactField("country", "country", "Country", ""),
    ContactField("phone", "phone", "Phone", ""),
    ContactField("fax", "fax", "Fax", None),
)

CONTACT_TABLE = "Contact"
PRIMARY_KEY_COLUMN = "CustomerID"


class Contact(BaseModel):
    """A single address book entry, keyed by its customer id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., description="Customer id, primary key in the Contact table")
    company_name: Optional[str] = Field("", alias="companyName", description="Company name")
    name: Optional[str] = Field("", description="Contact person name")
    title: Optional[str] = Field("", description="Contact person job title")
    address: Optional[str] = Field("", description="Street address")
    city: Optional[str] = Field("", description="City")
    email: Optional[str] = Field("", description="Email address (not validated)")
    region: Optional[str] = Field(None, description="Region or state, absent for many countries")
    zip: Optional[str] = Field(None, description="Postal code")
    country: Optional[str] = Field("", description="Country")
    phone: Optional[str] = Field("", description="Phone number (not normalized)")
    fax: Optional[str] = Field(None, description="Fax number")

    def to_db_row(self) -> Tuple[Optional[str], ...]:
        """Values in CONTACT_FIELDS order, for parameterized inserts."""
        return tuple(getattr(self, f.attribute) for f in CONTACT_FIELDS)

    @classmethod
    def from_db_dict(cls, data: Dict[str, Any]) -> "Contact":
        """Create a Contact from a row dict keyed by column name; extra columns are ignored."""
        return cls(**{f.attribute: data.get(f.column) for f in CONTACT_FIELDS})

    def to_json_dict(self) -> Dict[str, Optional[str]]:
        return self.model_dump(by_alias=True)


class AddressBook(BaseModel):
    """All contacts read from one document, in document order."""

    model_config = ConfigDict(frozen=True)

    contacts: Tuple[Contact, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.contacts)

    def ids(self) -> List[str]:
        return [c.id for c in self.contacts]
