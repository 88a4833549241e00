"""Command-line front end for the library desk."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import date

from .books import (
    add_book,
    book_history,
    delete_book,
    get_book,
    list_books,
    update_book,
)
from .db import LibraryError, connect
from .loans import borrow_book, list_loans, parse_date
from .members import add_member, delete_member, list_members, update_member
from .returns import list_returns, return_book


def _date(text: str) -> date:
    return parse_date(text)


_date.__name__ = "date"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every desk operation."""
    parser = argparse.ArgumentParser(prog="kutuphane", description="Kütüphane otomasyonu")
    parser.add_argument("--db", help="veritabanı dosyası")
    groups = parser.add_subparsers(dest="group", required=True)

    books = groups.add_parser("books", help="kitap işlemleri")
    book_actions = books.add_subparsers(dest="action", required=True)
    book_actions.add_parser("list")
    add = book_actions.add_parser("add")
    add.add_argument("name")
    add.add_argument("stock", type=int)
    upd = book_actions.add_parser("update")
    upd.add_argument("number")
    upd.add_argument("name")
    upd.add_argument("stock", type=int)
    rem = book_actions.add_parser("delete")
    rem.add_argument("number")
    show = book_actions.add_parser("show")
    show.add_argument("number")

    members = groups.add_parser("members", help="üye işlemleri")
    member_actions = members.add_subparsers(dest="action", required=True)
    member_actions.add_parser("list")
    add = member_actions.add_parser("add")
    add.add_argument("first_name")
    add.add_argument("last_name")
    upd = member_actions.add_parser("update")
    upd.add_argument("number")
    upd.add_argument("first_name")
    upd.add_argument("last_name")
    rem = member_actions.add_parser("delete")
    rem.add_argument("number")

    loans = groups.add_parser("loans", help="ödünç alma işlemleri")
    loan_actions = loans.add_subparsers(dest="action", required=True)
    loan_actions.add_parser("list")
    borrow = loan_actions.add_parser("borrow")
    borrow.add_argument("member")
    borrow.add_argument("book")
    borrow.add_argument("--date", type=_date, help="gg/aa/yyyy")

    returns = groups.add_parser("returns", help="ödünç teslim işlemleri")
    return_actions = returns.add_subparsers(dest="action", required=True)
    return_actions.add_parser("list")
    give_back = return_actions.add_parser("return")
    give_back.add_argument("member")
    give_back.add_argument("book")
    give_back.add_argument("--date", type=_date, help="gg/aa/yyyy")
    return parser


def _books(conn, args) -> str | None:
    if args.action == "list":
        for book in list_books(conn):
            print(f"{book.number}\t{book.name}\t{book.stock}")
    elif args.action == "add":
        add_book(conn, args.name, args.stock)
        return "Yeni kayıt eklendi!"
    elif args.action == "update":
        update_book(conn, args.number, args.name, args.stock)
        return "Kitap bilgileri güncellendi!"
    elif args.action == "delete":
        delete_book(conn, args.number)
        return "Kitap silindi!"
    elif args.action == "show":
        book = get_book(conn, args.number)
        print(f"{book.number}\t{book.name}\t{book.stock}")
        history = book_history(conn, args.number)
        print("Ödünç alınan:")
        for row in history.active_loans:
            print("\t".join(str(value) for value in row.values()))
        print("Teslim edilen:")
        for row in history.returned:
            print("\t".join(str(value) for value in row.values()))
    return None


def _members(conn, args) -> str | None:
    if args.action == "list":
        for member in list_members(conn):
            print(f"{member.number}\t{member.first_name}\t{member.last_name}")
    elif args.action == "add":
        add_member(conn, args.first_name, args.last_name)
        return "Yeni kayıt eklendi!"
    elif args.action == "update":
        update_member(conn, args.number, args.first_name, args.last_name)
        return "Üye bilgileri güncellendi!"
    elif args.action == "delete":
        delete_member(conn, args.number)
        return "Üye silindi!"
    return None


def _loans(conn, args) -> str | None:
    if args.action == "list":
        for loan in list_loans(conn):
            print(f"{loan.member_no}\t{loan.book_no}\t{loan.borrowed}")
        return None
    today = date.today()
    borrow_book(conn, args.member, args.book, args.date or today, today)
    return "Yeni kayıt eklendi!"


def _returns(conn, args) -> str | None:
    if args.action == "list":
        for record in list_returns(conn):
            print(
                f"{record.member_no}\t{record.book_no}\t{record.borrowed}\t"
                f"{record.returned}\t{record.fine}"
            )
        return None
    return_book(conn, args.member, args.book, args.date)
    return "Ödünç alma işlemi başarıyla gerçekleştirildi!"


_HANDLERS = {
    "books": _books,
    "members": _members,
    "loans": _loans,
    "returns": _returns,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one desk operation and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        conn = connect(args.db)
    except LibraryError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        message = _HANDLERS[args.group](conn, args)
    except (LibraryError, LookupError) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1
    finally:
        conn.close()
    if message:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())