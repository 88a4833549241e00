# kutuphane

A small management system for a lending library. It keeps books, members,
current loans and returned loans in one SQLite database and enforces the
lending rules:

- a book needs a name and a stock count other than zero, and a new book may
  not share its name with an existing one;
- a member needs a first and a last name;
- a book that is currently lent out cannot be deleted, and neither can a member
  who still holds a book;
- a member cannot borrow a second copy of a book they already hold;
- a book cannot be lent once every copy in stock is out;
- a loan cannot be dated later than today;
- returning a book more than 15 days after borrowing it costs 2 units for each
  day beyond the fifteenth.

Dates are stored as text in `dd/MM/yyyy` form, for example `05/03/2024`.
Messages are in Turkish.

## Installing

```
pip install .
```

Python 3.10 or newer is required; nothing outside the standard library is used.

## Command line

Installing the package provides the `kutuphane` command. Each call runs one
operation. The database is `Ktp_Otomasyon.db` in the current directory unless
`--db FILE` is given before the command; it is created with its tables when
missing.

```
kutuphane books list
kutuphane books add "Tutunamayanlar" 2
kutuphane books update 1 "Tutunamayanlar" 3
kutuphane books show 1
kutuphane books delete 1

kutuphane members list
kutuphane members add Ayşe Yılmaz
kutuphane members update 1 Ayşe Demir
kutuphane members delete 1

kutuphane loans list
kutuphane loans borrow 1 1 --date 01/03/2024

kutuphane returns list
kutuphane returns return 1 1 --date 25/03/2024

kutuphane --db library.db books list
```

Lists print tab-separated rows. `books show` prints the book followed by its
current loans and its returned loans. `--date` takes `dd/mm/yyyy` and defaults
to today. A refused operation prints `Hata: ...` on standard error and exits
with status 1.

## Using it from Python

```python
from datetime import date

from kutuphane.db import connect, ConflictError, ValidationError
from kutuphane.books import add_book, list_books, book_history
from kutuphane.members import add_member, list_members
from kutuphane.loans import borrow_book, list_loans
from kutuphane.returns import return_book, list_returns, compute_fine

conn = connect("library.db")

book_no = add_book(conn, "Tutunamayanlar", 2)
member_no = add_member(conn, "Ayşe", "Yılmaz")

borrow_book(conn, member_no, book_no, date(2024, 3, 1), date(2024, 3, 1))
print(list_loans(conn))

record = return_book(conn, member_no, book_no, date(2024, 3, 25))
print(record.fine)                                         # 18
print(list_returns(conn))

print(compute_fine(date(2024, 3, 1), date(2024, 3, 25)))   # 9 days late -> 18
```

### Modules

- `kutuphane.db`: `connect(path=None)` opens (and if needed creates) the
  database and its tables; `default_database_path()` is the file used when no
  path is given; `init_schema(conn)` creates the tables on an existing
  connection.
- `kutuphane.books`: `Book(number, name, stock)`; `list_books`, `get_book`,
  `add_book` (returns the new number), `update_book`, `delete_book`, and
  `book_history(conn, book_no)`, which returns a `BookHistory` with
  `active_loans` and `returned` as lists of column-name dictionaries.
- `kutuphane.members`: `Member(number, first_name, last_name)`;
  `list_members`, `get_member`, `add_member` (returns the new number),
  `update_member`, `delete_member`.
- `kutuphane.loans`: `Loan(member_no, book_no, borrowed)` with a
  `borrowed_date` property; `list_loans`; `borrow_book(conn, member_no,
  book_no, borrow_date, today=None)`; `format_date` and `parse_date` for the
  `dd/MM/yyyy` text form (`parse_date` raises `ValueError` on bad input).
- `kutuphane.returns`: `ReturnRecord(member_no, book_no, borrowed, returned,
  fine)`; `list_returns`; `return_book(conn, member_no, book_no,
  return_date=None)`; `compute_fine(borrowed, returned)`, which accepts dates
  or `dd/MM/yyyy` strings and treats unreadable dates as no delay.

`return_book` records the return of the given book with its fine and closes
every active loan held by that member.

### Errors

Refused operations raise a subclass of `LibraryError`:

- `ValidationError` for missing or invalid input, such as an empty name, a zero
  stock count or a loan dated in the future;
- `ConflictError` when the data forbids the change, such as a duplicate book
  name, a book that is out of stock, or deleting a book or member with an open
  loan.

`get_book`, `get_member` and `return_book` raise `LookupError` when the record
or loan does not exist.

```python
try:
    borrow_book(conn, member_no, book_no, date(2024, 3, 1), date(2024, 3, 1))
except ConflictError as exc:
    print("refused:", exc)
```

## What it does not do

There are no windows or forms: the package is operated through the
`kutuphane` command or from Python. It has no user accounts or access control,
and it does not search records by name.

## Running the tests

```
pip install .[test]
pytest
```