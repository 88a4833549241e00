"""Lending books to members."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass
from datetime import date

from .db import ConflictError, LibraryError, ValidationError

DATE_FORMAT = "dd/MM/yyyy"

_DATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")


@dataclass(frozen=True)
class Loan:
    """A book currently lent to a member; the date is kept as stored."""

    member_no: int
    book_no: int
    borrowed: str

    @property
    def borrowed_date(self) -> date | None:
        """The loan date, or None when the stored text is not a valid date."""
        try:
            return parse_date(self.borrowed)
        except ValueError:
            return None


def _is_blank(value: object) -> bool:
    return value is None or str(value) == ""


def format_date(value: date) -> str:
    """Render a date as day/month/year with zero padding."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_date(text: str) -> date:
    """Parse a day/month/year date; raise ValueError when it is not one."""
    match = _DATE_PATTERN.fullmatch(str(text).strip())
    if match is None:
        raise ValueError(f"invalid date, expected {DATE_FORMAT}: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return date(year, month, day)


def list_loans(conn: sqlite3.Connection) -> list[Loan]:
    """Return every active loan in the order it was made."""
    rows = conn.execute(
        "SELECT uye_no, kitap_no, odunc_alma_tarihi FROM odunc_alinan ORDER BY rowid"
    )
    return [Loan(*row) for row in rows]


def borrow_book(
    conn: sqlite3.Connection,
    member_no: int | str,
    book_no: int | str,
    borrow_date: date,
    today: date | None = None,
) -> Loan:
    """Lend a copy of a book to a member and return the new loan."""
    if today is None:
        today = date.today()
    if borrow_date > today:
        raise ValidationError("İleri tarih için işlem yapılamaz!")
    if _is_blank(member_no) or _is_blank(book_no):
        raise ValidationError("Gerekli alanları doldurunuz!")

    existing = conn.execute(
        "SELECT 1 FROM odunc_alinan WHERE uye_no = ? AND kitap_no = ?",
        (member_no, book_no),
    ).fetchone()
    if existing is not None:
        raise ConflictError(
            "Bu üye bu kitabın bir tanesini şu an ödünç almış tekrar ödünç verilemez!"
        )

    try:
        (on_loan,) = conn.execute(
            "SELECT COUNT(*) FROM odunc_alinan WHERE kitap_no = ?", (book_no,)
        ).fetchone()
        stock_row = conn.execute(
            "SELECT kitap_sayisi FROM kitap WHERE kitap_no = ?", (book_no,)
        ).fetchone()
    except sqlite3.Error as exc:
        raise LibraryError("Veritabanı hatası!") from exc

    stock = int(stock_row[0] or 0) if stock_row is not None else 0
    if on_loan >= stock:
        raise ConflictError("Seçilen kitap stokta bulunmamaktadır!")

    borrowed = format_date(borrow_date)
    try:
        with conn:
            conn.execute(
                "INSERT INTO odunc_alinan (uye_no, kitap_no, odunc_alma_tarihi) "
                "VALUES (?, ?, ?)",
                (member_no, book_no, borrowed),
            )
    except sqlite3.Error as exc:
        raise LibraryError("Yeni kayıt eklenemedi!") from exc
    return Loan(int(member_no), int(book_no), borrowed)