"""Book records: listing, adding, updating, deleting and loan history."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Any

from .db import ConflictError, LibraryError, ValidationError

_SELECT_BOOKS = "SELECT kitap_no, kitap_ad, kitap_sayisi FROM kitap"


@dataclass(frozen=True)
class Book:
    """A book title and the number of copies the library owns."""

    number: int
    name: str
    stock: int


@dataclass
class BookHistory:
    """Active and finished loans of one book, as column-name mappings."""

    book_no: int | str
    active_loans: list[dict[str, Any]] = field(default_factory=list)
    returned: list[dict[str, Any]] = field(default_factory=list)


def _is_blank(value: object) -> bool:
    return value is None or str(value) == ""


def _rows(cursor: sqlite3.Cursor) -> list[dict[str, Any]]:
    columns = [column[0] for column in cursor.description]
    return [dict(zip(columns, row)) for row in cursor]


def list_books(conn: sqlite3.Connection) -> list[Book]:
    """Return every book, ordered by number."""
    rows = conn.execute(f"{_SELECT_BOOKS} ORDER BY kitap_no")
    return [Book(*row) for row in rows]


def get_book(conn: sqlite3.Connection, book_no: int | str) -> Book:
    """Return one book; raise LookupError when it does not exist."""
    row = conn.execute(f"{_SELECT_BOOKS} WHERE kitap_no = ?", (book_no,)).fetchone()
    if row is None:
        raise LookupError(f"Kitap bulunamadı: {book_no}")
    return Book(*row)


def add_book(conn: sqlite3.Connection, name: str, stock: int) -> int:
    """Insert a new book and return its number."""
    if not name or stock == 0:
        raise ValidationError("Gerekli alanları doldurunuz!")
    try:
        (count,) = conn.execute(
            "SELECT COUNT(*) FROM kitap WHERE kitap_ad = ?", (name,)
        ).fetchone()
    except sqlite3.Error as exc:
        raise LibraryError(f"Veritabanı hatası: {exc}") from exc
    if count > 0:
        raise ConflictError("Aynı isimde kitap girdisi bulunmaktadır")
    try:
        with conn:
            cursor = conn.execute(
                "INSERT INTO kitap (kitap_ad, kitap_sayisi) VALUES (?, ?)",
                (name, stock),
            )
    except sqlite3.Error as exc:
        raise LibraryError("Yeni kayıt eklenemedi!") from exc
    return cursor.lastrowid


def update_book(
    conn: sqlite3.Connection, book_no: int | str, name: str, stock: int
) -> None:
    """Change the name and stock of a book."""
    if _is_blank(book_no) or not name or stock == 0:
        raise ValidationError("Gerekli alanları doldurunuz!")
    try:
        with conn:
            conn.execute(
                "UPDATE kitap SET kitap_ad = ?, kitap_sayisi = ? WHERE kitap_no = ?",
                (name, stock, book_no),
            )
    except sqlite3.Error as exc:
        raise LibraryError("Kitap güncellenemedi!") from exc


def delete_book(conn: sqlite3.Connection, book_no: int | str) -> None:
    """Delete a book unless a copy of it is currently on loan."""
    if _is_blank(book_no):
        raise ValidationError("Silinecek kitabı seçiniz!")
    (on_loan,) = conn.execute(
        "SELECT COUNT(*) FROM odunc_alinan WHERE kitap_no = ?", (book_no,)
    ).fetchone()
    if on_loan > 0:
        raise ConflictError(
            "Bu kitap silinemez! Bu kitap bir üyeye ödünç verilmiştir."
        )
    try:
        with conn:
            conn.execute("DELETE FROM kitap WHERE kitap_no = ?", (book_no,))
    except sqlite3.Error as exc:
        raise LibraryError("Kitap silinemedi!") from exc


def book_history(conn: sqlite3.Connection, book_no: int | str) -> BookHistory:
    """Return the current and past loans of a book."""
    active = _rows(
        conn.execute(
            "SELECT * FROM odunc_alinan WHERE kitap_no = ? ORDER BY rowid", (book_no,)
        )
    )
    returned = _rows(
        conn.execute(
            "SELECT * FROM odunc_teslim_edilen WHERE kitap_no = ? ORDER BY rowid",
            (book_no,),
        )
    )
    return BookHistory(book_no=book_no, active_loans=active, returned=returned)