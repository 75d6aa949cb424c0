"""
Tests for the Contact table storage functions.
"""

import sqlite3

import pytest

from src.database import (
    StorageResult,
    add_column_to_contact_table,
    count_contacts,
    get_all_contacts,
    init_contacts_table,
    upsert_contact,
    upsert_contacts,
)
from src.errors import SchemaError, StorageConnectionError
from src.models import Contact


@pytest.fixture
def unreachable_db(tmp_path):
    """A database path whose parent directory does not exist."""
    return tmp_path / "missing" / "dir" / "test.sqlite"


class TestInitContactsTable:
    """Test schema creation."""

    @pytest.mark.asyncio
    async def test_creates_table(self, db_path):
        result = await init_contacts_table(db_path)

        assert result.ok
        assert result.operation == "init_contacts_table"
        with sqlite3.connect(db_path) as conn:
            columns = [row[1] for row in conn.execute("PRAGMA table_info(Contact)")]
            pk = [row[1] for row in conn.execute("PRAGMA table_info(Contact)") if row[5]]
        assert columns == [
            "CustomerID", "CompanyName", "ContactName", "ContactTitle", "Address",
            "City", "Email", "Region", "PostalCode", "Country", "Phone", "Fax",
        ]
        assert pk == ["CustomerID"]

    @pytest.mark.asyncio
    async def test_is_idempotent(self, initialized_db, sample_contact):
        await upsert_contact(sample_contact, initialized_db)

        again = await init_contacts_table(initialized_db)

        assert again.ok
        contacts = (await get_all_contacts(initialized_db)).unwrap()
        assert contacts == [sample_contact]

    @pytest.mark.asyncio
    async def test_connection_failure_is_reported(self, unreachable_db):
        result = await init_contacts_table(unreachable_db)

        assert not result.ok
        assert isinstance(result.error, StorageConnectionError)
        assert result.error.operation == "init_contacts_table"
        assert not unreachable_db.exists()


class TestUpsert:
    """Test insert-or-replace writes."""

    @pytest.mark.asyncio
    async def test_round_trip(self, initialized_db, sample_contact):
        result = await upsert_contact(sample_contact, initialized_db)

        assert result.ok
        assert result.value == 1
        contacts = (await get_all_contacts(initialized_db)).unwrap()
        assert len(contacts) == 1
        assert contacts[0] == sample_contact

    @pytest.mark.asyncio
    async def test_replace_overwrites_every_field(self, initialized_db, sample_contact):
        await upsert_contact(sample_contact, initialized_db)
        replacement = Contact(id="1", name="Jane Roe", region="North")

        await upsert_contact(replacement, initialized_db)

        contacts = (await get_all_contacts(initialized_db)).unwrap()
        assert contacts == [replacement]
        assert contacts[0].company_name == ""
        assert contacts[0].zip is None

    @pytest.mark.asyncio
    async def test_batch_upsert(self, initialized_db):
        contacts = [Contact(id="a", name="A"), Contact(id="b", name="B"), Contact(id="a", name="A2")]

        result = await upsert_contacts(contacts, initialized_db)

        assert result.value == 3
        assert (await count_contacts(initialized_db)).value == 2
        stored = {c.id: c for c in (await get_all_contacts(initialized_db)).unwrap()}
        assert stored["a"].name == "A2"

    @pytest.mark.asyncio
    async def test_batch_upsert_empty(self, db_path):
        result = await upsert_contacts([], db_path)

        assert result.ok
        assert result.value == 0
        assert not db_path.exists()

    @pytest.mark.asyncio
    async def test_missing_table_raises_schema_error(self, db_path, sample_contact):
        with pytest.raises(SchemaError):
            await upsert_contact(sample_contact, db_path)

    @pytest.mark.asyncio
    async def test_connection_failure_is_reported(self, unreachable_db, sample_contact):
        result = await upsert_contact(sample_contact, unreachable_db)

        assert not result.ok
        assert result.operation == "upsert_contact"
        with pytest.raises(StorageConnectionError):
            result.unwrap()


class TestGetAllContacts:
    """Test reading contacts back."""

    @pytest.mark.asyncio
    async def test_empty_table(self, initialized_db):
        result = await get_all_contacts(initialized_db)

        assert result.ok
        assert result.value == []

    @pytest.mark.asyncio
    async def test_null_columns_read_back_as_none(self, initialized_db):
        with sqlite3.connect(initialized_db) as conn:
            conn.execute("INSERT INTO Contact (CustomerID) VALUES ('raw')")

        contacts = (await get_all_contacts(initialized_db)).unwrap()

        assert contacts[0].id == "raw"
        assert contacts[0].company_name is None

    @pytest.mark.asyncio
    async def test_row_without_id_raises_schema_error(self, initialized_db):
        with sqlite3.connect(initialized_db) as conn:
            conn.execute("INSERT INTO Contact (CompanyName) VALUES ('x')")

        with pytest.raises(SchemaError) as exc_info:
            await get_all_contacts(initialized_db)

        assert exc_info.value.details["row"]["CustomerID"] is None
        assert exc_info.value.details["row"]["CompanyName"] == "x"

    @pytest.mark.asyncio
    async def test_connection_failure_is_reported(self, unreachable_db):
        result = await get_all_contacts(unreachable_db)

        assert not result.ok
        assert result.value is None


class TestAddColumn:
    """Test schema widening."""

    @pytest.mark.asyncio
    async def test_adds_column_and_keeps_reads_working(self, initialized_db, sample_contact):
        await upsert_contact(sample_contact, initialized_db)

        result = await add_column_to_contact_table("Nickname", "VARCHAR(255)", initialized_db)

        assert result.ok
        with sqlite3.connect(initialized_db) as conn:
            columns = [row[1] for row in conn.execute("PRAGMA table_info(Contact)")]
        assert columns[-1] == "Nickname"
        assert (await get_all_contacts(initialized_db)).unwrap() == [sample_contact]

    @pytest.mark.asyncio
    async def test_duplicate_column_raises_schema_error(self, initialized_db):
        with pytest.raises(SchemaError) as exc_info:
            await add_column_to_contact_table("City", "TEXT", initialized_db)

        assert exc_info.value.details["column_name"] == "City"

    @pytest.mark.asyncio
    async def test_invalid_declaration_raises_schema_error(self, initialized_db):
        with pytest.raises(SchemaError):
            await add_column_to_contact_table("Broken", "TEXT )", initialized_db)


class TestStorageResult:
    """Test the result wrapper."""

    def test_ok_and_unwrap(self):
        result = StorageResult(operation="op", value=5)

        assert result.ok
        assert result.unwrap() == 5

    def test_failure(self):
        error = StorageConnectionError("x.sqlite", "op", "boom")
        result = StorageResult.failure("op", error)

        assert not result.ok
        assert result.error is error


class TestDefaults:
    """Test default locations."""

    def test_default_database_is_relative_to_working_directory(self):
        from src.database import LOCAL_DB_PATH

        assert not LOCAL_DB_PATH.is_absolute()
        assert LOCAL_DB_PATH.parts == ("data", "address_book.sqlite")
