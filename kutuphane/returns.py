"""Taking borrowed books back and charging late fines."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date

from .db import LibraryError, ValidationError
from .loans import format_date, parse_date

GRACE_DAYS = 15
FINE_PER_DAY = 2


@dataclass(frozen=True)
class ReturnRecord:
    """A finished loan with its dates and the fine charged."""

    member_no: int
    book_no: int
    borrowed: str | None
    returned: str | None
    fine: int


def _as_date(value: date | str | None) -> date | None:
    if isinstance(value, date):
        return value
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError:
        return None


def compute_fine(borrowed: date | str, returned: date | str) -> int:
    """Fine for a loan: a fixed amount per day kept beyond the grace period.

    Dates that cannot be read count as no delay.
    """
    start, end = _as_date(borrowed), _as_date(returned)
    if start is None or end is None:
        return 0
    days = (end - start).days
    return (days - GRACE_DAYS) * FINE_PER_DAY if days > GRACE_DAYS else 0


def list_returns(conn: sqlite3.Connection) -> list[ReturnRecord]:
    """Return every finished loan in the order it was returned."""
    rows = conn.execute(
        "SELECT uye_no, kitap_no, alma_tarihi, verme_tarihi, borc "
        "FROM odunc_teslim_edilen ORDER BY rowid"
    )
    return [
        ReturnRecord(member, book, borrowed, returned, fine or 0)
        for member, book, borrowed, returned, fine in rows
    ]


def return_book(
    conn: sqlite3.Connection,
    member_no: int | str,
    book_no: int | str,
    return_date: date | None = None,
) -> ReturnRecord:
    """Take a book back from a member and record the return with its fine.

    Every active loan of the member is closed, as the desk does.
    """
    if member_no is None or str(member_no) == "":
        raise ValidationError("Lütfen seçim yapınız!")
    if return_date is None:
        return_date = date.today()

    row = conn.execute(
        "SELECT odunc_alma_tarihi FROM odunc_alinan "
        "WHERE uye_no = ? AND kitap_no = ? ORDER BY rowid",
        (member_no, book_no),
    ).fetchone()
    if row is None:
        raise LookupError(f"Ödünç kaydı bulunamadı: üye {member_no}, kitap {book_no}")

    borrowed = row[0]
    returned = format_date(return_date)
    fine = compute_fine(borrowed, return_date)
    try:
        with conn:
            conn.execute("DELETE FROM odunc_alinan WHERE uye_no = ?", (member_no,))
            conn.execute(
                "INSERT INTO odunc_teslim_edilen "
                "(uye_no, kitap_no, alma_tarihi, verme_tarihi, borc) "
                "VALUES (?, ?, ?, ?, ?)",
                (member_no, book_no, borrowed, returned, fine),
            )
    except sqlite3.Error as exc:
        raise LibraryError(
            f"Ödünç alma işlemi gerçekleştirilemedi: {exc}"
        ) from exc
    return ReturnRecord(int(member_no), int(book_no), borrowed, returned, fine)