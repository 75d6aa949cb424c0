"""
Main entry point for the address book pipeline.

Reads an address book XML document, stores every contact in a fresh SQLite
database and writes the same contacts to a JSON file.

Usage:
    python main.py [input.xml] [--output-dir DIR] [--db-dir DIR]

File: main.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from src.config import RunConfig
from src.database import (
    StorageResult,
    count_contacts,
    get_all_contacts,
    init_contacts_table,
    upsert_contacts,
)
from src.errors import AddressBookError, ParseError
from src.export import contacts_to_json, write_json
from src.models import Contact
from src.preprocessing import load_xml, make_address_book

console = Console()

log = logging.getLogger(__name__)

LOG_DIR = Path("logs")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_STORAGE_FAILED = 2


def setup_logging(level: str = "INFO") -> None:
    """Log to a dated file under logs/ and to stderr."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        handlers=[
            logging.FileHandler(LOG_DIR / f"address_book_{datetime.now().strftime('%Y-%m-%d')}.log"),
            logging.StreamHandler()
        ]
    )


def contacts_table(contacts: Sequence[Contact]) -> Table:
    """Render stored contacts for the confirmation listing."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Company", style="white")
    table.add_column("Name", style="white")
    table.add_column("City", style="dim")
    table.add_column("Country", style="dim")
    table.add_column("Phone", style="dim")
    table.add_column("Email", style="dim")

    for c in contacts:
        table.add_row(c.id, c.company_name or "", c.name or "", c.city or "", c.country or "", c.phone or "", c.email or "")

    return table


async def run_pipeline(config: RunConfig) -> int:
    """
    Run load -> map -> store -> export once.

    Storage failures are reported but do not stop the JSON export.

    Args:
        config: Input and output locations for this run

    Returns:
        Process exit code

    Raises:
        ParseError: If the input document cannot be parsed
    """
    config.db_dir.mkdir(parents=True, exist_ok=True)
    config.output_dir.mkdir(parents=True, exist_ok=True)
    config.json_path.touch()

    failures: List[StorageResult] = []

    console.print("[dim]Initializing database...[/]")
    schema = await init_contacts_table(config.db_path)
    if not schema.ok:
        failures.append(schema)

    console.print(f"[dim]Loading {config.input_path}...[/]")
    document = load_xml(config.input_path)
    address_book = make_address_book(document)
    console.print(f"  Found {len(address_book):,} contacts")

    if schema.ok:
        console.print("[dim]Storing to database...[/]")
        stored = await upsert_contacts(address_book.contacts, config.db_path)
        if not stored.ok:
            failures.append(stored)
        else:
            counted = await count_contacts(config.db_path)
            if counted.ok:
                console.print(f"  Stored {counted.value:,} contacts")
            else:
                failures.append(counted)

    console.print("[dim]Exporting to JSON...[/]")
    write_json(contacts_to_json(address_book), config.json_path)

    if schema.ok:
        listing = await get_all_contacts(config.db_path)
        if listing.ok:
            console.print(contacts_table(listing.value or []))
        else:
            failures.append(listing)

    for failed in failures:
        console.print(f"[red]Storage step '{failed.operation}' failed:[/] {failed.error}")

    console.print("Assessment complete.")
    console.print(f"JSON output located at {config.json_path.resolve()}")
    console.print(f"DB output located at {config.db_path.resolve()}")

    return EXIT_STORAGE_FAILED if failures else EXIT_OK


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load an address book XML into SQLite and JSON")
    parser.add_argument(
        "input",
        nargs="?",
        help="Address book XML file (default: $ADDRESS_BOOK_INPUT or data/ab.xml)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory for the JSON file (default: $ADDRESS_BOOK_OUTPUT_DIR or home)"
    )
    parser.add_argument(
        "--db-dir",
        help="Directory for the SQLite file (default: $ADDRESS_BOOK_DB_DIR or cwd)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = RunConfig.from_env(args.input, args.output_dir, args.db_dir)
    setup_logging(config.log_level)

    console.print(
        Panel.fit(
            "[bold cyan]Address Book[/] - XML to SQLite and JSON",
            border_style="cyan",
        )
    )

    try:
        return asyncio.run(run_pipeline(config))
    except ParseError as e:
        log.error(str(e))
        console.print(f"[red]Cannot read input:[/] {e.message}")
        return EXIT_FATAL
    except AddressBookError as e:
        log.error(str(e))
        console.print(f"[red]Run failed:[/] {e}")
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
