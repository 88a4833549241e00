"""SQLite connection handling and schema for the library database."""

from __future__ import annotations

import sqlite3
from pathlib import Path

DATABASE_FILENAME = "Ktp_Otomasyon.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kitap (
    kitap_no INTEGER PRIMARY KEY AUTOINCREMENT,
    kitap_ad TEXT NOT NULL,
    kitap_sayisi INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS "üye" (
    uye_no INTEGER PRIMARY KEY AUTOINCREMENT,
    uye_ad TEXT NOT NULL,
    uye_soyad TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS odunc_alinan (
    uye_no INTEGER NOT NULL,
    kitap_no INTEGER NOT NULL,
    odunc_alma_tarihi TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS odunc_teslim_edilen (
    uye_no INTEGER NOT NULL,
    kitap_no INTEGER NOT NULL,
    alma_tarihi TEXT,
    verme_tarihi TEXT,
    borc INTEGER DEFAULT 0
);
"""


class LibraryError(Exception):
    """Base class for every error the library operations raise."""


class ValidationError(LibraryError):
    """Required input is missing or invalid."""


class ConflictError(LibraryError):
    """The operation conflicts with data already in the database."""


def default_database_path() -> Path:
    """Return the database file used when no path is given."""
    return Path.cwd() / DATABASE_FILENAME


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the library tables if they do not exist yet."""
    with conn:
        conn.executescript(_SCHEMA)


def connect(path: str | Path | None = None) -> sqlite3.Connection:
    """Open the library database at *path*, creating its tables when needed."""
    target = default_database_path() if path is None else path
    try:
        conn = sqlite3.connect(str(target))
        init_schema(conn)
    except sqlite3.Error as exc:
        raise LibraryError(f"Veritabanına bağlanılamadı: {exc}") from exc
    return conn