"""Configuration for the forum admin tool."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(__file__).parent / 'forum.db'}",
)
SQL_ECHO = _parse_bool(os.getenv("SQL_ECHO", ""))

# Terminal output
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
NO_COLOR = bool(os.getenv("NO_COLOR", ""))

# Password hashing work factor (bcrypt cost, 2**10 iterations)
BCRYPT_ROUNDS = 10


@dataclass(frozen=True)
class StoreConfig:
    """Connection settings handed to forumadmin.models.connect()."""

    database_url: str
    echo: bool = False

    @classmethod
    def from_env(cls, database_url: str | None = None) -> StoreConfig:
        """Build from the environment. An explicit URL wins over DATABASE_URL."""
        return cls(database_url=database_url or DATABASE_URL, echo=SQL_ECHO)
