"""Member records: listing, adding, updating and deleting."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .db import ConflictError, LibraryError, ValidationError

_SELECT_MEMBERS = 'SELECT uye_no, uye_ad, uye_soyad FROM "üye"'


@dataclass(frozen=True)
class Member:
    """A registered library member."""

    number: int
    first_name: str
    last_name: str


def _is_blank(value: object) -> bool:
    return value is None or str(value) == ""


def list_members(conn: sqlite3.Connection) -> list[Member]:
    """Return every member, ordered by number."""
    rows = conn.execute(f"{_SELECT_MEMBERS} ORDER BY uye_no")
    return [Member(*row) for row in rows]


def get_member(conn: sqlite3.Connection, member_no: int | str) -> Member:
    """Return one member; raise LookupError when it does not exist."""
    row = conn.execute(
        f"{_SELECT_MEMBERS} WHERE uye_no = ?", (member_no,)
    ).fetchone()
    if row is None:
        raise LookupError(f"Üye bulunamadı: {member_no}")
    return Member(*row)


def add_member(conn: sqlite3.Connection, first_name: str, last_name: str) -> int:
    """Register a new member and return their number."""
    if not first_name or not last_name:
        raise ValidationError("Gerekli alanları doldurunuz!")
    try:
        with conn:
            cursor = conn.execute(
                'INSERT INTO "üye" (uye_ad, uye_soyad) VALUES (?, ?)',
                (first_name, last_name),
            )
    except sqlite3.Error as exc:
        raise LibraryError("Yeni kayıt eklenemedi!") from exc
    return cursor.lastrowid


def update_member(
    conn: sqlite3.Connection, member_no: int | str, first_name: str, last_name: str
) -> None:
    """Change a member's name."""
    if _is_blank(member_no) or not first_name or not last_name:
        raise ValidationError("Gerekli alanları doldurunuz!")
    try:
        with conn:
            conn.execute(
                'UPDATE "üye" SET uye_ad = ?, uye_soyad = ? WHERE uye_no = ?',
                (first_name, last_name, member_no),
            )
    except sqlite3.Error as exc:
        raise LibraryError("Üye güncellenemedi!") from exc


def delete_member(conn: sqlite3.Connection, member_no: int | str) -> None:
    """Delete a member unless they still hold borrowed books."""
    if _is_blank(member_no):
        raise ValidationError("Silinecek üyeyi seçiniz!")
    (outstanding,) = conn.execute(
        "SELECT COUNT(*) FROM odunc_alinan WHERE uye_no = ?", (member_no,)
    ).fetchone()
    if outstanding > 0:
        raise ConflictError(
            "Bu üye silinemez. Üyenin henüz teslim etmediği kitaplar vardır."
        )
    try:
        with conn:
            conn.execute('DELETE FROM "üye" WHERE uye_no = ?', (member_no,))
    except sqlite3.Error as exc:
        raise LibraryError("Üye silinemedi!") from exc