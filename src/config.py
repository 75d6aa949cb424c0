"""
Run configuration for the address book pipeline.

Paths come from (highest first) CLI arguments, environment variables / .env,
then defaults.

File: config.py
Author: Aidan Allchin
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_INPUT_PATH = Path("data/ab.xml")
JSON_FILE_PREFIX = "address_book"
DB_FILE_PREFIX = "db"


def format_run_timestamp(moment: datetime) -> str:
    """
    Filename-safe timestamp, e.g. 2026-10-18_14;05;09.

    Spaces become underscores and colons become semicolons.
    """
    return moment.strftime("%Y-%m-%d %H:%M:%S").replace(" ", "_").replace(":", ";")


@dataclass
class RunConfig:
    """Where one pipeline run reads from and writes to."""

    input_path: Path = field(default_factory=lambda: DEFAULT_INPUT_PATH)
    output_dir: Path = field(default_factory=Path.home)
    db_dir: Path = field(default_factory=Path.cwd)
    log_level: str = "INFO"
    started_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.input_path, str):
            self.input_path = Path(self.input_path)
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        if isinstance(self.db_dir, str):
            self.db_dir = Path(self.db_dir)
        self.log_level = self.log_level.upper()

    @property
    def timestamp(self) -> str:
        return format_run_timestamp(self.started_at)

    @property
    def json_path(self) -> Path:
        return self.output_dir / f"{JSON_FILE_PREFIX}-{self.timestamp}.json"

    @property
    def db_path(self) -> Path:
        return self.db_dir / f"{DB_FILE_PREFIX}-{self.timestamp}.sqlite"

    @classmethod
    def from_env(
        cls,
        input_path: Optional[str] = None,
        output_dir: Optional[str] = None,
        db_dir: Optional[str] = None,
    ) -> "RunConfig":
        """
        Build a config from arguments, falling back to the environment.

        Environment variables:
            ADDRESS_BOOK_INPUT: input XML path
            ADDRESS_BOOK_OUTPUT_DIR: directory for the JSON file (default: home)
            ADDRESS_BOOK_DB_DIR: directory for the SQLite file (default: cwd)
            ADDRESS_BOOK_LOG_LEVEL: logging level name (default: INFO)
        """
        load_dotenv()

        return cls(
            input_path=Path(input_path or os.getenv("ADDRESS_BOOK_INPUT") or DEFAULT_INPUT_PATH),
            output_dir=Path(output_dir or os.getenv("ADDRESS_BOOK_OUTPUT_DIR") or Path.home()),
            db_dir=Path(db_dir or os.getenv("ADDRESS_BOOK_DB_DIR") or Path.cwd()),
            log_level=os.getenv("ADDRESS_BOOK_LOG_LEVEL", "INFO"),
        )
